"""
Tests for the binary asset codec.

Coverage:
  base64_to_bytes    raw / data URI / lenient decoding / round trip
  to_data_uri        media type normalization
  blob_to_base64_pdf in-memory and file blobs, PDF and non-PDF
"""

import base64

import pytest

from templatecheck.app.errors import NotAPdfError
from templatecheck.app.utils.codec import (
    BytesBlob,
    FileBlob,
    base64_to_bytes,
    blob_to_base64_pdf,
    data_uri_to_blob,
    to_data_uri,
)
from templatecheck.tests.fixtures.pdf_factory import minimal_valid_pdf, pdf_data_uri


ALL_BYTES = bytes(range(256))
ALL_BYTES_B64 = base64.b64encode(ALL_BYTES).decode("ascii")


# ---------------------------------------------------------------------------
# base64_to_bytes
# ---------------------------------------------------------------------------

def test_decodes_raw_base64():
    assert base64_to_bytes(ALL_BYTES_B64) == ALL_BYTES


def test_pdf_data_uri_prefix_is_stripped():
    prefixed = "data:application/pdf;base64," + ALL_BYTES_B64

    assert base64_to_bytes(prefixed) == base64_to_bytes(ALL_BYTES_B64)


def test_any_media_type_prefix_is_stripped():
    assert base64_to_bytes("data:font/ttf;base64,aGVsbG8=") == b"hello"


def test_decoded_bytes_reencode_to_the_original_text():
    pdf_b64 = pdf_data_uri().split(";base64,")[1]

    decoded = base64_to_bytes(pdf_b64)

    assert base64.b64encode(decoded).decode("ascii") == pdf_b64
    assert decoded.startswith(b"%PDF-")


def test_tolerates_missing_padding():
    assert base64_to_bytes("aGVsbG8") == b"hello"


def test_skips_whitespace():
    assert base64_to_bytes("aGVs\nbG8=\n") == b"hello"


def test_accepts_url_safe_alphabet():
    encoded = base64.urlsafe_b64encode(b"\xfb\xff\xfe").decode("ascii")

    assert base64_to_bytes(encoded) == b"\xfb\xff\xfe"


def test_empty_input_decodes_to_empty_bytes():
    assert base64_to_bytes("") == b""


def test_empty_data_uri_payload_decodes_to_empty_bytes():
    assert base64_to_bytes("data:application/pdf;base64,") == b""
    assert base64_to_bytes("data:application/pdf;base64,") == base64_to_bytes("")


# ---------------------------------------------------------------------------
# to_data_uri
# ---------------------------------------------------------------------------

def test_data_uri_normalizes_media_type():
    assert (
        to_data_uri(b"x", "Application/PDF; charset=binary")
        == "data:application/pdf;charset=binary;base64,eA=="
    )


def test_data_uri_defaults_to_octet_stream():
    assert to_data_uri(b"x", "") == "data:application/octet-stream;base64,eA=="


# ---------------------------------------------------------------------------
# data_uri_to_blob
# ---------------------------------------------------------------------------

def test_base64_data_uri_becomes_blob():
    blob = data_uri_to_blob("data:image/png;base64,aGVsbG8=")

    assert blob.media_type == "image/png"
    assert blob.data == b"hello"


def test_percent_encoded_data_uri_becomes_blob():
    blob = data_uri_to_blob("data:text/plain,a%20b")

    assert blob.media_type == "text/plain"
    assert blob.data == b"a b"


def test_data_uri_without_media_type():
    blob = data_uri_to_blob("data:,x")

    assert blob.media_type == ""
    assert blob.data == b"x"


# ---------------------------------------------------------------------------
# blob_to_base64_pdf
# ---------------------------------------------------------------------------

@pytest.mark.anyio
async def test_pdf_blob_becomes_pdf_data_uri():
    pdf = minimal_valid_pdf()

    data_uri = await blob_to_base64_pdf(
        BytesBlob(data=pdf, media_type="application/pdf")
    )

    assert data_uri == pdf_data_uri(pdf)
    assert base64_to_bytes(data_uri) == pdf


@pytest.mark.anyio
async def test_non_pdf_blob_is_rejected():
    blob = BytesBlob(data=b"<html></html>", media_type="text/html")

    with pytest.raises(NotAPdfError) as exc_info:
        await blob_to_base64_pdf(blob)

    assert exc_info.value.media_type == "text/html"


@pytest.mark.anyio
async def test_pdf_bytes_without_declared_media_type_are_rejected():
    """The declared media type decides, not the content."""
    blob = BytesBlob(data=minimal_valid_pdf())

    with pytest.raises(NotAPdfError):
        await blob_to_base64_pdf(blob)


@pytest.mark.anyio
async def test_file_blob_media_type_is_guessed_from_name(tmp_path):
    path = tmp_path / "base.pdf"
    path.write_bytes(minimal_valid_pdf())

    blob = FileBlob(path)
    data_uri = await blob_to_base64_pdf(blob)

    assert blob.media_type == "application/pdf"
    assert base64_to_bytes(data_uri) == path.read_bytes()


@pytest.mark.anyio
async def test_file_blob_with_non_pdf_name_is_rejected(tmp_path):
    path = tmp_path / "notes.txt"
    path.write_bytes(b"not a pdf")

    with pytest.raises(NotAPdfError):
        await blob_to_base64_pdf(FileBlob(path))


@pytest.mark.anyio
async def test_file_blob_explicit_media_type_wins(tmp_path):
    path = tmp_path / "download.bin"
    path.write_bytes(minimal_valid_pdf())

    data_uri = await blob_to_base64_pdf(FileBlob(path, media_type="application/pdf"))

    assert data_uri.startswith("data:application/pdf;base64,")
