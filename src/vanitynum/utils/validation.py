"""Validation utilities."""

import re
from pathlib import Path

from ..config import PHONE_DIGITS
from ..exceptions import ValidationError

_WORD_RE = re.compile(r"^[A-Za-z]+$")
_ASCII_DIGITS = frozenset("0123456789")


def validate_count(count: int) -> int:
    """Validate the number of vanity results requested."""
    if count < 1:
        raise ValidationError("Result count must be at least 1")
    return count


def validate_phone(phone: str) -> str:
    """Validate that a phone number argument carries at least one digit."""
    if not phone or not any(ch in _ASCII_DIGITS for ch in phone):
        raise ValidationError(f"Phone number has no digits: {phone!r}")
    return phone


def validate_digits(digits: str) -> str:
    """Validate normalized digits: present and no longer than a number with country code."""
    if not digits:
        raise ValidationError("Number has no digits")
    if len(digits) > PHONE_DIGITS + 1:
        raise ValidationError(
            f"Number has {len(digits)} digits, at most {PHONE_DIGITS + 1} allowed"
        )
    return digits


def validate_word(word: str) -> str:
    """Validate a word for keypad conversion."""
    if not _WORD_RE.fullmatch(word or ""):
        raise ValidationError(f"Words may only contain letters A-Z: {word!r}")
    return word.upper()


def validate_wordlist_path(path: str) -> Path:
    """Validate and normalize a word list path."""
    wordlist_path = Path(path)
    if not wordlist_path.is_file():
        raise ValidationError(f"Word list not found: {wordlist_path}")
    return wordlist_path
