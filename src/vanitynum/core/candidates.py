"""Exhaustive enumeration of word/digit tilings of a phone number."""

from typing import List, Set

from ..config import MAX_WORD_LENGTH, MIN_WORD_LENGTH
from .word_index import WordIndex


def generate_all_candidates(digits: str, index: WordIndex) -> Set[str]:
    """Every way to tile ``digits`` with dictionary words and literal digits.

    Words cover runs of 3 to 12 digits. A literal digit can always be kept,
    so the all-digits string is part of the result.
    """
    results: Set[str] = set()
    n = len(digits)

    def backtrack(pos: int, path: List[str]) -> None:
        if pos >= n:
            results.add("".join(path))
            return

        for length in range(MIN_WORD_LENGTH, min(MAX_WORD_LENGTH, n - pos) + 1):
            for word in index.words_for(digits[pos:pos + length]):
                backtrack(pos + length, path + [word])

        backtrack(pos + 1, path + [digits[pos]])

    backtrack(0, [])
    return results
