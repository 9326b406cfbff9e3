"""
Font consistency checks.

A font set is consistent with a template when:

1. exactly one resource is flagged as the fallback font, and
2. every fontName referenced by the template's schema pages names a
   resource of the font set.

Rule 1 is evaluated first. A fallback-count failure short-circuits the
reference check, so the two failure families never mix within one call.
Missing references are always reported together, never one at a time.

Fonts and templates may be given as models or as plain mappings in wire
form. Pure and deterministic: no I/O, no mutation of the inputs.
"""

from __future__ import annotations

import logging
from typing import List, Mapping, Sequence

from templatecheck.app.errors import (
    MissingFontReference,
    MultipleFallbackFonts,
    NoFallbackFont,
)
from templatecheck.app.schemas.template import (
    FontResource,
    SchemaPage,
    Template,
    as_font,
    as_schema_pages,
    as_template,
)

logger = logging.getLogger(__name__)


def get_font_names_in_schemas(schemas: Sequence[SchemaPage]) -> List[str]:
    """
    Distinct, non-empty fontName values across all pages.

    Names are returned in first-seen order.
    """
    names = (
        field.font_name
        for page in as_schema_pages(schemas)
        for field in page.values()
        if field.font_name
    )
    return list(dict.fromkeys(names))


def get_fallback_font_name(font: Mapping[str, FontResource]) -> str:
    """
    Return the name of the fallback font resource.

    Only the first flagged resource is considered; use ``check_font`` to
    also reject font sets with several fallbacks.

    Raises:
        NoFallbackFont: no resource is flagged as fallback.
    """
    for name, resource in as_font(font).items():
        if resource.fallback:
            return name
    raise NoFallbackFont()


def check_font(font: Mapping[str, FontResource], template: Template) -> None:
    """
    Verify ``font`` against itself and against ``template``.

    Raises:
        NoFallbackFont: no resource is flagged as fallback.
        MultipleFallbackFonts: more than one resource is flagged.
        MissingFontReference: template pages reference unknown font names.
        pydantic.ValidationError: ``font`` or ``template`` is malformed.
    """
    font = as_font(font)
    template = as_template(template)

    fallback_count = sum(1 for resource in font.values() if resource.fallback)
    if fallback_count == 0:
        raise NoFallbackFont()
    if fallback_count > 1:
        raise MultipleFallbackFonts(fallback_count)

    missing = [
        name
        for name in get_font_names_in_schemas(template.schemas)
        if name not in font
    ]
    if missing:
        logger.debug("Template references unknown fonts: %s", missing)
        raise MissingFontReference(missing)
