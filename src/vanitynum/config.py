"""Configuration settings for vanitynum."""

import os
from pathlib import Path
from typing import Optional

from .exceptions import ConfigError

# Results (can be overridden via environment variables)
DEFAULT_RESULT_COUNT = int(os.getenv("VANITYNUM_DEFAULT_COUNT", "5"))

# Phone numbers
PHONE_DIGITS = 10
COUNTRY_CODE = "1"

# Word runs
MIN_WORD_LENGTH = 3
MAX_WORD_LENGTH = 12  # longest run the enumerator tries
FALLBACK_WORD_LENGTHS = (3, 7)  # run lengths scanned by the overlay fallback
PREFERRED_WORD_START = 3  # right after the area code

# Fallback match pool, as a multiple of the requested count
MATCH_POOL_FACTOR = 5

# Scoring weights
class Weights:
    WHOLE_WORD = 500
    LETTER = 10
    VOWEL = 5
    PUNCTUATION = -1
    START_AFTER_AREA_CODE = 80
    START_EARLY = 30
    START_LATE = 10
    TRAILING_FOUR_DIGITS = 20

VOWELS = frozenset("AEIOU")

# Contact handler
MESSAGE_TOP_COUNT = 3


def validate_config() -> None:
    """Validate configuration values."""
    if DEFAULT_RESULT_COUNT < 1:
        raise ConfigError("Default result count must be positive")

    low, high = FALLBACK_WORD_LENGTHS
    if not (MIN_WORD_LENGTH <= low <= high <= MAX_WORD_LENGTH):
        raise ConfigError("Invalid fallback word length range")

    if MATCH_POOL_FACTOR < 1:
        raise ConfigError("Match pool factor must be positive")


def get_wordlist_path() -> Optional[Path]:
    """Get word list path from environment, if one is configured."""
    wordlist = os.getenv("VANITYNUM_WORDLIST")
    if wordlist:
        return Path(wordlist)
    return None


# Validate config on import
validate_config()
