# utils/sanitization.py
from typing import Optional
import re

from services.errors import ValidationError

CONTROL_CHARS = r"[\x00-\x08\x0b-\x0c\x0e-\x1f\x7f-\x9f]"

# Column widths of the String columns these values are stored in
NAME_MAX_LENGTH = 255
ARTICLE_NAME_MAX_LENGTH = 512
EMAIL_MAX_LENGTH = 255


def clean_text(value: Optional[str]) -> str:
    if value is None:
        return ""

    text = re.sub(CONTROL_CHARS, "", value)
    return text.strip()


def require_text(value: Optional[str], field: str, max_length: Optional[int] = None) -> str:
    """
    Returns the cleaned value, or raises ValidationError when blank or
    longer than max_length characters.
    """
    text = clean_text(value)
    if not text:
        raise ValidationError(f"{field} is required")
    if max_length is not None and len(text) > max_length:
        raise ValidationError(f"{field} must be at most {max_length} characters")
    return text
