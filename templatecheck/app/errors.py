"""
Error taxonomy.

Every failure surfaced by templatecheck derives from TemplateCheckError.
Failures that can have several simultaneous causes (schema violations,
missing font names, missing plugin types) carry all of them and render
them in a single message.

Logic errors (TypeError, AttributeError, ...) are never wrapped into
this hierarchy.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from templatecheck.app.schemas.validation import Violation


_SEPARATOR = "--------------------------"


def format_violations(violations: Sequence[Violation]) -> str:
    """
    Render violations as one human-readable, multi-line block.

    Example::

        Invalid argument:
        --------------------------
        ERROR POSITION: template.basePdf
        ERROR MESSAGE: Field required
        --------------------------
    """
    blocks = [
        f"ERROR POSITION: {v.path}\nERROR MESSAGE: {v.message}\n{_SEPARATOR}"
        for v in violations
    ]
    return "Invalid argument:\n" + _SEPARATOR + "\n" + "\n".join(blocks)


class TemplateCheckError(Exception):
    """Base class for all templatecheck failures."""


# ---------------------------------------------------------------------------
# Structural validation
# ---------------------------------------------------------------------------


class SchemaValidationError(TemplateCheckError):
    """Raised by the façade when a payload violates its declared shape."""

    def __init__(self, violations: Iterable[Violation]):
        self.violations = tuple(violations)
        super().__init__(format_violations(self.violations))


# ---------------------------------------------------------------------------
# Font consistency
# ---------------------------------------------------------------------------


class FontConsistencyError(TemplateCheckError):
    """A font set is inconsistent with itself or with a template."""


class NoFallbackFont(FontConsistencyError):
    def __init__(self) -> None:
        super().__init__(
            "fallback flag is not found in font. "
            "true fallback flag must be only one."
        )


class MultipleFallbackFonts(FontConsistencyError):
    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(
            f"{count} fallback flags found in font. "
            "true fallback flag must be only one."
        )


class MissingFontReference(FontConsistencyError):
    def __init__(self, names: Sequence[str]) -> None:
        self.names = tuple(names)
        super().__init__(
            f"{','.join(self.names)} of template.schemas is not found in font."
        )


# ---------------------------------------------------------------------------
# Plugin coverage
# ---------------------------------------------------------------------------


class MissingPluginForType(TemplateCheckError):
    def __init__(self, types: Sequence[str]) -> None:
        self.types = tuple(types)
        super().__init__(
            f"{','.join(self.types)} of template.schemas is not found in plugins."
        )


# ---------------------------------------------------------------------------
# Base document resolution
# ---------------------------------------------------------------------------


class BasePdfError(TemplateCheckError):
    """The base document could not be turned into a PDF data URI."""


class NotAPdfError(BasePdfError):
    def __init__(self, media_type: str) -> None:
        self.media_type = media_type
        super().__init__(
            "template.basePdf must be pdf data "
            f"(got media type {media_type or 'unknown'!r})."
        )


class NetworkFetchError(BasePdfError):
    def __init__(
        self,
        url: str,
        reason: str,
        status_code: Optional[int] = None,
    ) -> None:
        self.url = url
        self.status_code = status_code
        detail = f"HTTP {status_code}: {reason}" if status_code else reason
        super().__init__(f"Failed to fetch template.basePdf from {url}: {detail}")
