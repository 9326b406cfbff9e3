"""
templatecheck: consistency validation for document templates.

Guarantees that a template, its embedded font set and its plugin
registry agree with each other before the template is rendered or
edited, and provides the unit and binary-asset conversions the
rendering and designer collaborators share.
"""

from templatecheck.app.checks.font_consistency import (
    check_font,
    get_fallback_font_name,
    get_font_names_in_schemas,
)
from templatecheck.app.checks.plugin_coverage import check_plugins, get_schema_types
from templatecheck.app.errors import (
    BasePdfError,
    FontConsistencyError,
    MissingFontReference,
    MissingPluginForType,
    MultipleFallbackFonts,
    NetworkFetchError,
    NoFallbackFont,
    NotAPdfError,
    SchemaValidationError,
    TemplateCheckError,
)
from templatecheck.app.fonts import DEFAULT_FONT_NAME, get_default_font
from templatecheck.app.schemas.props import (
    DesignerRequest,
    GenerateRequest,
    PreviewRequest,
    UIRequest,
)
from templatecheck.app.schemas.template import (
    BUILTIN_SCHEMA_TYPES,
    FontResource,
    Plugin,
    SchemaField,
    Template,
)
from templatecheck.app.services.base_pdf import needs_network_fetch, resolve_base_pdf
from templatecheck.app.utils.codec import (
    BytesBlob,
    FileBlob,
    base64_to_bytes,
    blob_to_base64_pdf,
)
from templatecheck.app.utils.units import mm2pt, pt2mm, pt2px
from templatecheck.app.validation import (
    PayloadKind,
    check,
    check_designer_props,
    check_generate_props,
    check_inputs,
    check_preview_props,
    check_template,
    check_ui_options,
    check_ui_props,
    evaluate,
)

__version__ = "0.1.0"

__all__ = [
    # validation façade
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
    # checks
    "check_font",
    "check_plugins",
    "get_fallback_font_name",
    "get_font_names_in_schemas",
    "get_schema_types",
    "get_default_font",
    "DEFAULT_FONT_NAME",
    # conversions
    "mm2pt",
    "pt2mm",
    "pt2px",
    "base64_to_bytes",
    "blob_to_base64_pdf",
    "BytesBlob",
    "FileBlob",
    "needs_network_fetch",
    "resolve_base_pdf",
    # contracts
    "BUILTIN_SCHEMA_TYPES",
    "Template",
    "SchemaField",
    "FontResource",
    "Plugin",
    "GenerateRequest",
    "UIRequest",
    "PreviewRequest",
    "DesignerRequest",
    # errors
    "TemplateCheckError",
    "SchemaValidationError",
    "FontConsistencyError",
    "NoFallbackFont",
    "MultipleFallbackFonts",
    "MissingFontReference",
    "MissingPluginForType",
    "BasePdfError",
    "NotAPdfError",
    "NetworkFetchError",
]
