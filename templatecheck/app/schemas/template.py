"""
Template, font and plugin contracts.

These models describe the in-memory shapes exchanged with the rendering
and designer collaborators:

- Template: a base document plus an ordered list of schema pages
- Font: named embedded font resources, exactly one flagged as fallback
- Plugins: renderer bundles keyed by schema type tag

Models are frozen. The engine reads them and never mutates them.
Field names are snake_case; the camelCase wire names (basePdf, fontName,
propPanel) are accepted as aliases and used in error locations.
"""

from typing import Annotated, Any, Dict, FrozenSet, List, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PlainValidator,
    StrictBool,
    TypeAdapter,
)


# ---------------------------------------------------------------------------
# Binary-or-text payloads
# ---------------------------------------------------------------------------


def _binary_or_text(value: Any, *, what: str) -> Union[str, bytes]:
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise ValueError(f"{what} must be a string or binary content")


def _validate_base_pdf(value: Any) -> Union[str, bytes]:
    return _binary_or_text(
        value,
        what="basePdf (URL, base64 data URI or PDF bytes)",
    )


def _validate_font_data(value: Any) -> Union[str, bytes]:
    return _binary_or_text(value, what="font data")


# A URL, a literal "data:application/pdf;base64,..." URI, or raw PDF bytes.
BasePdf = Annotated[Union[str, bytes], PlainValidator(_validate_base_pdf)]

FontData = Annotated[Union[str, bytes], PlainValidator(_validate_font_data)]


# ---------------------------------------------------------------------------
# Schema pages
# ---------------------------------------------------------------------------


# Handled natively by every renderer; never require a registered plugin.
BUILTIN_SCHEMA_TYPES: FrozenSet[str] = frozenset({"text", "image"})


class Position(BaseModel):
    x: float
    y: float

    model_config = ConfigDict(frozen=True)


class SchemaField(BaseModel):
    """
    Field descriptor within a schema page.

    Only the attributes the engine reasons about are typed. Any other
    rendering attribute (alignment, colors, barcode options, ...) is kept
    as an extra field.
    """

    type: str = Field(..., description="Schema type tag (e.g. 'text')")
    position: Position
    width: float
    height: float
    rotate: Optional[float] = None
    opacity: Optional[float] = None

    font_name: Optional[str] = Field(
        None,
        alias="fontName",
        description="Name of the font resource used to render this field",
    )

    model_config = ConfigDict(
        frozen=True,
        extra="allow",
        populate_by_name=True,
    )


SchemaPage = Dict[str, SchemaField]


class Template(BaseModel):
    """A base document plus the ordered schema pages laid over it."""

    schemas: List[SchemaPage]

    base_pdf: BasePdf = Field(..., alias="basePdf")

    sampledata: Optional[List[Dict[str, str]]] = Field(
        None,
        min_length=1,
        max_length=1,
        description="A single row of sample inputs used by the designer",
    )

    columns: Optional[List[str]] = Field(
        None,
        description="Field names in designer column order",
    )

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
    )


# ---------------------------------------------------------------------------
# Fonts
# ---------------------------------------------------------------------------


class FontResource(BaseModel):
    """One embedded font. Exactly one resource of a Font must be the fallback."""

    data: FontData

    fallback: StrictBool = False

    subset: Optional[StrictBool] = Field(
        None,
        description="Embed only the glyphs actually used (renderer hint)",
    )

    model_config = ConfigDict(frozen=True)


Font = Dict[str, FontResource]


# ---------------------------------------------------------------------------
# Plugins
# ---------------------------------------------------------------------------


class Plugin(BaseModel):
    """
    Renderer bundle registered under a schema type tag.

    The members are opaque to the engine; only the registry keys matter.
    """

    pdf: Any = None
    ui: Any = None
    prop_panel: Any = Field(None, alias="propPanel")

    model_config = ConfigDict(
        frozen=True,
        extra="allow",
        populate_by_name=True,
        from_attributes=True,
    )


Plugins = Dict[str, Plugin]


# ---------------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------------


# One mapping of field name -> value per generated document.
Inputs = Annotated[List[Dict[str, str]], Field(min_length=1)]


# ---------------------------------------------------------------------------
# Coercion of caller-supplied values
# ---------------------------------------------------------------------------

# Models pass through unchanged; plain mappings are validated into models.
_SCHEMA_PAGES: TypeAdapter[List[SchemaPage]] = TypeAdapter(List[SchemaPage])
_FONT: TypeAdapter[Font] = TypeAdapter(Font)


def as_schema_pages(schemas: Any) -> List[SchemaPage]:
    return _SCHEMA_PAGES.validate_python(schemas)


def as_font(font: Any) -> Font:
    return _FONT.validate_python(font)


def as_template(template: Any) -> Template:
    return Template.model_validate(template)
