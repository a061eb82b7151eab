"""Phone number normalization and display formatting."""

import re
from typing import Optional

from ..config import COUNTRY_CODE, PHONE_DIGITS

_NON_DIGIT_RE = re.compile(r"[^0-9]")


def normalize_number(raw: Optional[str]) -> str:
    """Strip every non-digit character."""
    return _NON_DIGIT_RE.sub("", raw or "")


def strip_country_code(digits: str) -> str:
    """Drop a leading ``1`` from an 11-digit North American number."""
    if len(digits) == PHONE_DIGITS + 1 and digits.startswith(COUNTRY_CODE):
        return digits[1:]
    return digits


def format_digits(digits: str) -> str:
    """Render 10 digits as ``(AAA) BBB-CCCC``; anything else is returned as is."""
    if len(digits) != PHONE_DIGITS:
        return digits
    return f"({digits[:3]}) {digits[3:6]}-{digits[6:]}"
