"""
Constraint-evaluation engine.

Evaluates an untyped, tree-shaped payload against one of the named
payload shapes and reports the outcome as a ValidationResult value.
The shapes themselves (types, optionality, nesting, refinements) are
declared as pydantic models in templatecheck.app.schemas.

Evaluation is exhaustive: every violation is collected, not only the
first one. This module never raises for invalid payloads.
"""

from __future__ import annotations

from enum import Enum
from functools import lru_cache
from typing import Any, Dict, Sequence, Union

from pydantic import TypeAdapter, ValidationError

from templatecheck.app.schemas.props import (
    DesignerRequest,
    GenerateRequest,
    PreviewRequest,
    UIOptions,
    UIRequest,
)
from templatecheck.app.schemas.template import Inputs, Template
from templatecheck.app.schemas.validation import ValidationResult, Violation


ROOT_PATH = "(root)"


class PayloadKind(str, Enum):
    """Named payload shapes accepted by the façade."""

    INPUTS = "inputs"
    UI_OPTIONS = "ui_options"
    TEMPLATE = "template"
    UI_PROPS = "ui_props"
    PREVIEW_PROPS = "preview_props"
    DESIGNER_PROPS = "designer_props"
    GENERATE_PROPS = "generate_props"


_SHAPES: Dict[PayloadKind, Any] = {
    PayloadKind.INPUTS: Inputs,
    PayloadKind.UI_OPTIONS: UIOptions,
    PayloadKind.TEMPLATE: Template,
    PayloadKind.UI_PROPS: UIRequest,
    PayloadKind.PREVIEW_PROPS: PreviewRequest,
    PayloadKind.DESIGNER_PROPS: DesignerRequest,
    PayloadKind.GENERATE_PROPS: GenerateRequest,
}


@lru_cache(maxsize=None)
def _adapter(kind: PayloadKind) -> TypeAdapter:
    return TypeAdapter(_SHAPES[kind])


def _render_path(loc: Sequence[Union[int, str]]) -> str:
    return ".".join(str(part) for part in loc) or ROOT_PATH


def evaluate(kind: Union[PayloadKind, str], data: Any) -> ValidationResult:
    """
    Evaluate ``data`` against the shape named by ``kind``.

    Returns:
        A valid result carrying the typed value, or an invalid result
        listing every violation with its dotted path.

    Raises:
        ValueError: ``kind`` does not name a known shape.
    """
    kind = PayloadKind(kind)

    try:
        value = _adapter(kind).validate_python(data)
    except ValidationError as exc:
        return ValidationResult(
            valid=False,
            violations=[
                Violation(path=_render_path(error["loc"]), message=error["msg"])
                for error in exc.errors()
            ],
        )

    return ValidationResult(valid=True, value=value)
