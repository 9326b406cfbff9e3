"""
Bundled default font.

Ships Lato Regular (SIL Open Font License 1.1, see OFL.txt) for use
when the caller supplies no font set of its own.
"""

from functools import lru_cache
from importlib.resources import files

from templatecheck.app.schemas.template import Font, FontResource


DEFAULT_FONT_NAME = "Lato"
DEFAULT_FONT_FILE = "Lato-Regular.ttf"


@lru_cache(maxsize=1)
def _default_font_bytes() -> bytes:
    return files(__name__).joinpath(DEFAULT_FONT_FILE).read_bytes()


def get_default_font() -> Font:
    """
    Return a font set holding only the bundled font, flagged as fallback.

    The font file is read once per process; each call returns a new
    mapping.
    """
    return {
        DEFAULT_FONT_NAME: FontResource(data=_default_font_bytes(), fallback=True),
    }


__all__ = [
    "DEFAULT_FONT_NAME",
    "get_default_font",
]
