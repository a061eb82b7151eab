"""Utility modules."""

from .logging import setup_logging, get_logger
from .validation import (
    validate_count,
    validate_phone,
    validate_digits,
    validate_word,
    validate_wordlist_path,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "validate_count",
    "validate_phone",
    "validate_digits",
    "validate_word",
    "validate_wordlist_path",
]
