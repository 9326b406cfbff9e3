"""
Plugin coverage checks.

Every schema type used by a template must be renderable: either it is a
builtin type (text, image) or the plugin registry has an entry for it.
All uncovered types are reported together. The template may be a model
or a plain mapping in wire form; only the registry keys are read.
"""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Sequence

from templatecheck.app.errors import MissingPluginForType
from templatecheck.app.schemas.template import (
    BUILTIN_SCHEMA_TYPES,
    SchemaPage,
    Template,
    as_schema_pages,
    as_template,
)

logger = logging.getLogger(__name__)


def get_schema_types(schemas: Sequence[SchemaPage]) -> List[str]:
    """Distinct schema type tags across all pages, in first-seen order."""
    types = (
        field.type for page in as_schema_pages(schemas) for field in page.values()
    )
    return list(dict.fromkeys(types))


def check_plugins(plugins: Mapping[str, Any], template: Template) -> None:
    """
    Verify that ``plugins`` covers every non-builtin type of ``template``.

    Raises:
        MissingPluginForType: one or more types have no registered plugin.
    """
    template = as_template(template)

    missing = [
        schema_type
        for schema_type in get_schema_types(template.schemas)
        if schema_type not in BUILTIN_SCHEMA_TYPES and schema_type not in plugins
    ]
    if missing:
        logger.debug("Template uses unregistered schema types: %s", missing)
        raise MissingPluginForType(missing)
