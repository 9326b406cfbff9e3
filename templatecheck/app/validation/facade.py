"""
Schema validation façade.

Public entry points used by the generator, designer and preview
collaborators before they touch a payload. Each call:

1. evaluates the payload against its named shape; any violation raises
   one SchemaValidationError listing all of them
2. for requests binding a template, runs the font check when a font set
   is supplied and the plugin check when a registry is supplied

Cross-entity checks only run on structurally valid payloads. Their
failures propagate unchanged.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Union

from templatecheck.app.checks.font_consistency import check_font
from templatecheck.app.checks.plugin_coverage import check_plugins
from templatecheck.app.errors import SchemaValidationError
from templatecheck.app.schemas.props import (
    DesignerRequest,
    GenerateRequest,
    PreviewRequest,
    TemplateBoundRequest,
    UIOptions,
    UIRequest,
)
from templatecheck.app.schemas.template import Template
from templatecheck.app.validation.engine import PayloadKind, evaluate

logger = logging.getLogger(__name__)


def check(kind: Union[PayloadKind, str], data: Any) -> Any:
    """
    Validate ``data`` as ``kind`` and return the typed value.

    Raises:
        SchemaValidationError: structural violations (all of them).
        FontConsistencyError: font set inconsistent with the template.
        MissingPluginForType: template types without a plugin.
    """
    result = evaluate(kind, data)

    if not result.valid:
        logger.debug(
            "Payload of kind %s rejected with %d violation(s)",
            PayloadKind(kind).value,
            len(result.violations),
        )
        raise SchemaValidationError(result.violations)

    if isinstance(result.value, TemplateBoundRequest):
        _check_template_bindings(result.value)

    return result.value


def _check_template_bindings(request: TemplateBoundRequest) -> None:
    if request.font is not None:
        check_font(request.font, request.template)

    if request.plugins is not None:
        check_plugins(request.plugins, request.template)


# ---------------------------------------------------------------------------
# Named entry points
# ---------------------------------------------------------------------------


def check_inputs(data: Any) -> List[Dict[str, str]]:
    return check(PayloadKind.INPUTS, data)


def check_ui_options(data: Any) -> UIOptions:
    return check(PayloadKind.UI_OPTIONS, data)


def check_template(data: Any) -> Template:
    return check(PayloadKind.TEMPLATE, data)


def check_ui_props(data: Any) -> UIRequest:
    return check(PayloadKind.UI_PROPS, data)


def check_preview_props(data: Any) -> PreviewRequest:
    return check(PayloadKind.PREVIEW_PROPS, data)


def check_designer_props(data: Any) -> DesignerRequest:
    return check(PayloadKind.DESIGNER_PROPS, data)


def check_generate_props(data: Any) -> GenerateRequest:
    return check(PayloadKind.GENERATE_PROPS, data)
