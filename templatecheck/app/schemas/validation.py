"""
Result types of the constraint-evaluation engine.

The engine reports invalid payloads as values, never as exceptions.
Raising is left to the façade boundary.
"""

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field


class Violation(BaseModel):
    """A single violated constraint, located by a dotted field path."""

    path: str = Field(
        ...,
        description="Dotted location of the offending value (e.g. 'template.basePdf')",
    )

    message: str = Field(
        ...,
        description="Human-readable description of the violated constraint",
    )

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )


class ValidationResult(BaseModel):
    """
    Outcome of evaluating a payload against a named shape.

    Exactly one of the following holds:
    - valid is True and value carries the validated payload
    - valid is False and violations lists every violated constraint
    """

    valid: bool

    value: Any = Field(
        None,
        description="Validated (typed) payload when valid",
    )

    violations: List[Violation] = Field(
        default_factory=list,
        description="Every violation found, in evaluation order",
    )

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )
