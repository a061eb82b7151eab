"""Strict ``digits WORD digits`` shape detection."""

import re
from dataclasses import dataclass
from typing import Optional

from ..config import MIN_WORD_LENGTH, PHONE_DIGITS
from .word_index import WordIndex

_WORD_RUN_RE = re.compile(r"[A-Z]{%d,}" % MIN_WORD_LENGTH)
_DIGITS_RE = re.compile(r"^[0-9]*$")


@dataclass(frozen=True)
class WordRun:
    """Location of the single dictionary word inside a candidate."""

    start: int
    end: int
    word: str


def find_word_run(text: str, index: WordIndex) -> Optional[WordRun]:
    """Locate the word of a strict candidate.

    A strict candidate is 10 characters long and holds exactly one run of
    three or more letters; that run is a known word and everything around it
    is digits.
    """
    matches = list(_WORD_RUN_RE.finditer(text))
    if len(matches) != 1:
        return None

    match = matches[0]
    word = match.group(0)
    if word not in index:
        return None

    prefix = text[:match.start()]
    suffix = text[match.end():]
    if not _DIGITS_RE.match(prefix) or not _DIGITS_RE.match(suffix):
        return None
    if len(text) != PHONE_DIGITS:
        return None
    return WordRun(start=match.start(), end=match.end(), word=word)


def is_word_only_candidate(text: str, index: WordIndex) -> bool:
    return find_word_run(text, index) is not None
