"""Payload contracts (pydantic models) and validation result types."""
