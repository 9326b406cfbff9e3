"""
Binary asset codec.

Converts between binary assets and their transport encoding:

- base64 text (raw or data URI) -> bytes
- data URI -> in-memory blob
- blob -> base64 PDF data URI

Decoding is deliberately lenient, matching how browsers and Node decode
base64: whitespace and characters outside the alphabet are skipped,
URL-safe characters are accepted, and missing padding is tolerated.
"""

from __future__ import annotations

import base64
import logging
import mimetypes
import re
from pathlib import Path
from typing import Optional, Protocol, Union
from urllib.parse import unquote_to_bytes

import anyio
from pydantic import BaseModel, ConfigDict

from templatecheck.app.errors import NotAPdfError

logger = logging.getLogger(__name__)


DATA_URI_SCHEME = "data:"
BASE64_MARKER = ";base64,"
_BASE64_PARAM = ";base64"
PDF_DATA_URI_PREFIX = "data:application/pdf;"
DEFAULT_MEDIA_TYPE = "application/octet-stream"

_NON_ALPHABET = re.compile(r"[^A-Za-z0-9+/]")
_URL_SAFE = str.maketrans("-_", "+/")


# ---------------------------------------------------------------------------
# base64 <-> bytes
# ---------------------------------------------------------------------------


def base64_to_bytes(value: str) -> bytes:
    """
    Decode base64 text, raw or wrapped in a data URI, to bytes.

    When ``value`` contains ``;base64,``, only the text after it is
    decoded, so a data URI and its bare payload decode to identical bytes
    (an empty payload decodes to ``b""``).
    """
    _, marker, payload = value.partition(BASE64_MARKER)
    data = payload if marker else value

    data = _NON_ALPHABET.sub("", data.translate(_URL_SAFE))

    # A lone trailing character carries fewer than 8 bits.
    if len(data) % 4 == 1:
        data = data[:-1]
    data += "=" * (-len(data) % 4)

    return base64.b64decode(data)


def to_data_uri(data: bytes, media_type: str) -> str:
    """
    Encode ``data`` as a base64 data URI.

    An empty media type is reported as application/octet-stream.
    """
    normalized = ";".join(
        part.strip() for part in media_type.strip().lower().split(";")
    )
    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{normalized or DEFAULT_MEDIA_TYPE};base64,{encoded}"


# ---------------------------------------------------------------------------
# Blobs
# ---------------------------------------------------------------------------


class Blob(Protocol):
    """
    Binary content with a declared media type, read asynchronously.

    ``read`` completes exactly once with the full content; there is no
    streaming or partial result.
    """

    @property
    def media_type(self) -> str:
        ...

    async def read(self) -> bytes:
        ...


class BytesBlob(BaseModel):
    """In-memory blob."""

    data: bytes
    media_type: str = ""

    model_config = ConfigDict(frozen=True)

    async def read(self) -> bytes:
        return self.data


def data_uri_to_blob(value: str) -> BytesBlob:
    """
    Parse a ``data:`` URI into an in-memory blob.

    The media type comes from the URI header. Base64 payloads are decoded
    with ``base64_to_bytes``; other payloads are percent-decoded.
    """
    header, _, payload = value[len(DATA_URI_SCHEME):].partition(",")

    if header.lower().endswith(_BASE64_PARAM):
        return BytesBlob(
            data=base64_to_bytes(payload),
            media_type=header[: -len(_BASE64_PARAM)],
        )
    return BytesBlob(data=unquote_to_bytes(payload), media_type=header)


class FileBlob:
    """
    Blob backed by a file on disk.

    The media type is guessed from the file name unless given.
    """

    def __init__(
        self,
        path: Union[str, Path],
        media_type: Optional[str] = None,
    ) -> None:
        self.path = Path(path)
        if media_type is None:
            media_type = mimetypes.guess_type(self.path.name)[0] or ""
        self._media_type = media_type

    @property
    def media_type(self) -> str:
        return self._media_type

    async def read(self) -> bytes:
        return await anyio.Path(self.path).read_bytes()


async def blob_to_base64_pdf(blob: Blob) -> str:
    """
    Read ``blob`` and return it as a ``data:application/pdf;base64,...`` URI.

    Raises:
        NotAPdfError: the blob's media type is not application/pdf.
    """
    data = await blob.read()
    data_uri = to_data_uri(data, blob.media_type)

    if not data_uri.startswith(PDF_DATA_URI_PREFIX):
        logger.debug(
            "Rejected blob with media type %r (%d bytes)",
            blob.media_type,
            len(data),
        )
        raise NotAPdfError(blob.media_type)

    return data_uri
