"""Memorability scoring and ranking of vanity candidates."""

import re
from typing import Iterable, List

from ..config import PREFERRED_WORD_START, VOWELS, Weights
from .word_index import WordIndex

_ALL_LETTERS_RE = re.compile(r"^[A-Z]+$")
_LETTER_RE = re.compile(r"[A-Z]")
_OTHER_RE = re.compile(r"[^0-9A-Z]")
_TRAILING_FOUR_RE = re.compile(r"[0-9]{4}$")


def first_letter_index(text: str) -> int:
    """Index of the first uppercase letter, or -1."""
    match = _LETTER_RE.search(text)
    return match.start() if match else -1


def score_candidate(text: str, index: WordIndex) -> int:
    score = 0

    if _ALL_LETTERS_RE.match(text) and text in index:
        score += Weights.WHOLE_WORD

    letters = _LETTER_RE.findall(text)
    score += Weights.LETTER * len(letters)
    score += Weights.VOWEL * sum(1 for ch in letters if ch in VOWELS)
    score += Weights.PUNCTUATION * len(_OTHER_RE.findall(text))

    # Best shape is NPA followed by the word: letters start at index 3
    start = first_letter_index(text)
    if start == PREFERRED_WORD_START:
        score += Weights.START_AFTER_AREA_CODE
    elif 0 <= start < PREFERRED_WORD_START:
        score += Weights.START_EARLY
    elif start > PREFERRED_WORD_START:
        score += Weights.START_LATE

    if _TRAILING_FOUR_RE.search(text):
        score += Weights.TRAILING_FOUR_DIGITS

    return score


def sort_by_score(texts: Iterable[str], index: WordIndex) -> List[str]:
    """Highest score first; equal scores in ascending string order."""
    scored = [(score_candidate(text, index), text) for text in texts]
    scored.sort(key=lambda item: (-item[0], item[1]))
    return [text for _, text in scored]


def pick_top_n(candidates: Iterable[str], index: WordIndex, n: int = 5) -> List[str]:
    """The ``n`` best distinct candidates in rank order."""
    unique: List[str] = []
    seen = set()
    for text in sort_by_score(candidates, index):
        if text not in seen:
            seen.add(text)
            unique.append(text)
        if len(unique) >= n:
            break
    return unique
