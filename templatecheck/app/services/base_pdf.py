"""
Base-document resolution.

Turns a template's basePdf reference into a usable form:

- a URL is downloaded and converted to a base64 PDF data URI
- any other data URI is decoded locally and re-encoded as a PDF data URI
  (non-PDF content is rejected)
- a literal PDF data URI is returned unchanged
- raw binary content is returned unchanged

This is the only network-dependent operation of the engine. It is safe
to call repeatedly; nothing is cached and every call re-fetches.
Failures are surfaced directly. There are no retries.
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from templatecheck.app.config import Settings, get_settings
from templatecheck.app.errors import NetworkFetchError
from templatecheck.app.schemas.template import BasePdf
from templatecheck.app.utils.codec import (
    DATA_URI_SCHEME,
    PDF_DATA_URI_PREFIX,
    blob_to_base64_pdf,
    data_uri_to_blob,
)

logger = logging.getLogger(__name__)


class ResponseBlob:
    """Blob view of an HTTP response; media type from Content-Type."""

    def __init__(self, response: httpx.Response) -> None:
        self._response = response

    @property
    def media_type(self) -> str:
        return self._response.headers.get("content-type", "")

    async def read(self) -> bytes:
        return await self._response.aread()


def needs_network_fetch(base_pdf: BasePdf) -> bool:
    """True when ``base_pdf`` is a reference rather than encoded PDF data."""
    return isinstance(base_pdf, str) and not base_pdf.startswith(
        PDF_DATA_URI_PREFIX
    )


async def resolve_base_pdf(
    base_pdf: BasePdf,
    *,
    client: Optional[httpx.AsyncClient] = None,
    settings: Optional[Settings] = None,
) -> BasePdf:
    """
    Resolve ``base_pdf`` to a base64 PDF data URI when it is a URL.

    Args:
        base_pdf:
            URL, ``data:application/pdf;base64,...`` URI, or PDF bytes.
        client:
            Optional caller-owned HTTP client. When omitted a short-lived
            client is built from settings and closed before returning.
        settings:
            Optional settings; defaults to ``get_settings()``.

    Returns:
        The data URI of the downloaded document, or ``base_pdf`` itself
        when no download is needed or network fetching is disabled.

    Raises:
        NetworkFetchError: the download failed (transport, HTTP status,
            malformed URL).
        NotAPdfError: the downloaded or inlined content is not declared
            as a PDF.
    """
    settings = settings or get_settings()

    if not needs_network_fetch(base_pdf):
        return base_pdf

    if not settings.enable_network_fetch:
        logger.debug("Network fetch disabled; basePdf %s left unresolved", base_pdf)
        return base_pdf

    if base_pdf[:len(DATA_URI_SCHEME)].lower() == DATA_URI_SCHEME:
        return await blob_to_base64_pdf(data_uri_to_blob(base_pdf))

    if client is not None:
        return await _fetch_base_pdf(client, base_pdf)

    async with httpx.AsyncClient(
        timeout=settings.fetch_timeout_seconds,
        follow_redirects=settings.fetch_follow_redirects,
        headers={"User-Agent": settings.user_agent},
    ) as owned_client:
        return await _fetch_base_pdf(owned_client, base_pdf)


async def _fetch_base_pdf(client: httpx.AsyncClient, url: str) -> str:
    logger.info("Fetching base PDF from %s", url)

    try:
        response = await client.get(url)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        logger.warning(
            "Base PDF request to %s failed with HTTP %d",
            url,
            exc.response.status_code,
        )
        raise NetworkFetchError(
            url,
            reason=exc.response.reason_phrase,
            status_code=exc.response.status_code,
        ) from exc
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        logger.warning("Base PDF request to %s failed: %s", url, exc)
        raise NetworkFetchError(url, reason=str(exc)) from exc

    return await blob_to_base64_pdf(ResponseBlob(response))
