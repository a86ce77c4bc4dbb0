import base64

import pytest

from services.errors import ValidationError
from utils.encoding import decode_file, encode_file, ensure_pdf
from conftest import PDF_BYTES


def test_data_url_prefix_is_stripped():
    data_url = "data:application/pdf;base64," + encode_file(PDF_BYTES)
    assert decode_file(data_url) == PDF_BYTES


def test_plain_base64_with_line_breaks():
    wrapped = base64.encodebytes(PDF_BYTES).decode("ascii")
    assert "\n" in wrapped
    assert decode_file(wrapped) == PDF_BYTES


def test_encode_has_no_prefix():
    assert encode_file(b"%PDF-1.4") == "JVBERi0xLjQ="


@pytest.mark.parametrize("bad", ["", None, "not base64!!", "JVBERi0xLjQ"])
def test_decode_rejects_malformed(bad):
    with pytest.raises(ValidationError):
        decode_file(bad)


def test_ensure_pdf():
    assert ensure_pdf(PDF_BYTES) == PDF_BYTES

    with pytest.raises(ValidationError):
        ensure_pdf(b"")
    with pytest.raises(ValidationError, match="must be a PDF"):
        ensure_pdf(b"PK\x03\x04 zip archive")
