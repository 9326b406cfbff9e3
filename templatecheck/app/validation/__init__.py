from .engine import PayloadKind, evaluate
from .facade import (
    check,
    check_designer_props,
    check_generate_props,
    check_inputs,
    check_preview_props,
    check_template,
    check_ui_options,
    check_ui_props,
)

__all__ = [
    "PayloadKind",
    "evaluate",
    "check",
    "check_inputs",
    "check_ui_options",
    "check_template",
    "check_ui_props",
    "check_preview_props",
    "check_designer_props",
    "check_generate_props",
]
