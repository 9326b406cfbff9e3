"""
Template consistency validation and resource normalization.

Layers (leaves first):
- utils: unit conversion and binary asset codec
- services: base-document resolution (network)
- checks: font consistency and plugin coverage
- validation: constraint-evaluation engine and the public façade
"""
