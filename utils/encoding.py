# utils/encoding.py
from typing import Optional
import base64
import binascii
import re

from services.errors import ValidationError

# FileReader.readAsDataURL output, e.g. "data:application/pdf;base64,JVBERi0x..."
DATA_URL_PREFIX = re.compile(r"^data:[\w.+/-]*;base64,", re.IGNORECASE)
PDF_MAGIC = b"%PDF-"


def encode_file(content: bytes) -> str:
    return base64.b64encode(content).decode("ascii")


def decode_file(text: Optional[str], field: str = "file") -> bytes:
    """
    Decodes base64 file content sent by a client. A leading data URL prefix
    and embedded whitespace are tolerated; anything else that is not valid
    base64 is rejected.
    """
    if not text:
        raise ValidationError(f"{field} is required")

    payload = DATA_URL_PREFIX.sub("", text.strip())
    payload = re.sub(r"\s+", "", payload)

    try:
        return base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError):
        raise ValidationError(f"{field} is not valid base64")


def ensure_pdf(content: Optional[bytes], field: str = "file") -> bytes:
    if not content:
        raise ValidationError(f"{field} is required")
    if not content.startswith(PDF_MAGIC):
        raise ValidationError(f"{field} must be a PDF document")
    return content
