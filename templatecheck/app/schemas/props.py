"""
Option and request contracts for each public entry point.

Each entry point validates into an explicit request type. A request
that binds a template (TemplateBoundRequest) exposes its font set and
plugin registry as named fields, so cross-entity checks never need to
inspect the raw payload for keys.

Closed request types (extra="forbid") reject unknown top-level keys.
"""

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from templatecheck.app.schemas.template import Font, Inputs, Plugins, Template


Lang = Literal["en", "ja", "ar", "th", "pl", "it", "de", "es", "fr"]


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------


class CommonOptions(BaseModel):
    """Options shared by every entry point. Unknown options pass through."""

    font: Optional[Font] = None

    model_config = ConfigDict(
        frozen=True,
        extra="allow",
    )


class GeneratorOptions(CommonOptions):
    """Options of PDF generation: document information metadata."""

    title: Optional[str] = None
    author: Optional[str] = None
    subject: Optional[str] = None
    keywords: Optional[List[str]] = None
    creator: Optional[str] = None
    producer: Optional[str] = None
    language: Optional[str] = None


class UIOptions(CommonOptions):
    """Options of the designer and preview surfaces."""

    lang: Optional[Lang] = None
    theme: Optional[Dict[str, Any]] = None


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------


class TemplateBoundRequest(BaseModel):
    """
    Any request carrying a template.

    The façade runs the font check when ``font`` is present and the
    plugin check when ``plugins`` is present.
    """

    template: Template
    options: Optional[CommonOptions] = None
    plugins: Optional[Plugins] = None

    @property
    def font(self) -> Optional[Font]:
        if self.options is None:
            return None
        return self.options.font

    model_config = ConfigDict(
        frozen=True,
    )


class GenerateRequest(TemplateBoundRequest):
    inputs: Inputs
    options: Optional[GeneratorOptions] = None

    model_config = ConfigDict(extra="forbid")


class UIRequest(TemplateBoundRequest):
    """Request of an interactive surface mounted into a host container."""

    dom_container: Any = Field(
        ...,
        alias="domContainer",
        description="Host element the UI is mounted into",
    )
    options: Optional[UIOptions] = None

    @field_validator("dom_container")
    @classmethod
    def container_must_exist(cls, v: Any) -> Any:
        if v is None:
            raise ValueError("domContainer must be a host container element")
        return v

    model_config = ConfigDict(populate_by_name=True)


class PreviewRequest(UIRequest):
    inputs: Inputs

    model_config = ConfigDict(extra="forbid")


class DesignerRequest(UIRequest):
    model_config = ConfigDict(extra="forbid")
