"""Fallback expansion used when too few strict candidates exist.

The stages run in order and each one only tries to fill what is still
missing:

1. single-word overlays of dictionary matches found in the digits
2. two-word overlays built from pairs of those matches
3. words related to the best result's word that fit the same digits
4. themed words from the whole corpus sharing letters with that word

Stage 4 ignores the keypad and is only used to pad the list; its results
always rank below everything else.
"""

from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional, Sequence, Set

from ..config import (
    FALLBACK_WORD_LENGTHS,
    MATCH_POOL_FACTOR,
    MIN_WORD_LENGTH,
    PREFERRED_WORD_START,
)
from ..utils.logging import get_logger
from .scoring import pick_top_n, sort_by_score
from .word_index import WordIndex
from .word_run import WordRun, find_word_run

logger = get_logger(__name__)


@dataclass(frozen=True)
class WordMatch:
    """A dictionary word spelled by ``digits[start:start + length]``."""

    start: int
    length: int
    word: str

    @property
    def end(self) -> int:
        return self.start + self.length


@dataclass
class FallbackContext:
    digits: str
    index: WordIndex
    n: int
    results: List[str]
    _matches: Optional[List[WordMatch]] = field(default=None, repr=False)

    @property
    def deficit(self) -> int:
        return self.n - len(self.results)

    @property
    def matches(self) -> List[WordMatch]:
        """Ranked single-word matches, collected on first use."""
        if self._matches is None:
            self._matches = rank_matches(
                collect_matches(
                    self.digits, self.index, self.n * MATCH_POOL_FACTOR - len(self.results)
                )
            )
        return self._matches

    def anchor(self) -> Optional[WordRun]:
        """Word run of the current best result."""
        if not self.results:
            return None
        return find_word_run(self.results[0], self.index)


Stage = Callable[[FallbackContext], List[str]]


def overlay(digits: str, start: int, word: str, length: Optional[int] = None) -> str:
    """Replace ``length`` digits (default ``len(word)``) at ``start`` with ``word``."""
    if length is None:
        length = len(word)
    return digits[:start] + word + digits[start + length:]


def collect_matches(digits: str, index: WordIndex, limit: int) -> List[WordMatch]:
    """Dictionary matches for runs of 3-7 keypad digits, longest first per start.

    Segments containing 0 or 1 have no letters and are skipped. Once
    ``limit`` matches are collected each further start contributes at most
    one match.
    """
    low, high = FALLBACK_WORD_LENGTHS
    matches: List[WordMatch] = []
    for start in range(len(digits)):
        for length in range(high, low - 1, -1):
            if start + length > len(digits):
                continue
            segment = digits[start:start + length]
            if "0" in segment or "1" in segment:
                continue
            words = index.words_for(segment)
            if not words:
                continue
            for word in words:
                matches.append(WordMatch(start, length, word))
                if len(matches) >= limit:
                    break
            if len(matches) >= limit:
                break
    return matches


def rank_matches(matches: Iterable[WordMatch]) -> List[WordMatch]:
    """Starts at the area-code boundary first, then nearest to it, then longer, then A-Z."""

    def key(m: WordMatch):
        distance = 0 if m.start == PREFERRED_WORD_START else abs(m.start - PREFERRED_WORD_START) + 1
        return (distance, -m.length, m.word)

    return sorted(matches, key=key)


def seeds_for(word: str, include_word: bool = False) -> Set[str]:
    """Two- and three-letter substrings of ``word``."""
    seeds = {word} if include_word and word else set()
    seeds.update(word[i:i + 2] for i in range(len(word) - 1))
    seeds.update(word[i:i + 3] for i in range(len(word) - 2))
    return seeds


def shares_seed(word: str, seeds: Iterable[str]) -> bool:
    return any(seed and seed in word for seed in seeds)


def _take_strict(ctx: FallbackContext, candidates: Iterable[str]) -> List[str]:
    """New strict candidates, stopping once the deficit is covered."""
    taken: List[str] = []
    if ctx.deficit <= 0:
        return taken
    seen = set(ctx.results)
    for text in candidates:
        if text not in seen and find_word_run(text, ctx.index) is not None:
            seen.add(text)
            taken.append(text)
            if len(taken) >= ctx.deficit:
                break
    return taken


def _merge(ctx: FallbackContext, extra: Sequence[str]) -> List[str]:
    if not extra:
        return ctx.results
    return pick_top_n(list(ctx.results) + list(extra), ctx.index, ctx.n)


def single_word_overlay(ctx: FallbackContext) -> List[str]:
    extra = _take_strict(
        ctx, (overlay(ctx.digits, m.start, m.word, m.length) for m in ctx.matches)
    )
    logger.debug(f"Single-word overlays added {len(extra)}")
    return _merge(ctx, extra)


def _pair_overlays(digits: str, matches: Sequence[WordMatch]) -> Iterable[str]:
    for i, first in enumerate(matches):
        for second in matches[i + 1:]:
            if second.start < first.end:
                continue
            yield (
                digits[:first.start]
                + first.word
                + digits[first.end:second.start]
                + second.word
                + digits[second.end:]
            )


def two_word_overlay(ctx: FallbackContext) -> List[str]:
    extra = _take_strict(ctx, _pair_overlays(ctx.digits, ctx.matches))
    logger.debug(f"Two-word overlays added {len(extra)}")
    return _merge(ctx, extra)


def anchored_overlay(ctx: FallbackContext) -> List[str]:
    anchor = ctx.anchor()
    if anchor is None:
        return ctx.results

    segment = ctx.digits[anchor.start:anchor.end]
    seeds = seeds_for(anchor.word, include_word=True)
    related = [w for w in ctx.index.words_for(segment) if shares_seed(w, seeds)]

    extra = _take_strict(ctx, (overlay(ctx.digits, anchor.start, w) for w in related))
    logger.debug(f"Related words for {anchor.word} added {len(extra)}")
    return _merge(ctx, extra)


def themed_overlay(ctx: FallbackContext) -> List[str]:
    anchor = ctx.anchor()
    if anchor is None:
        return ctx.results

    seeds = seeds_for(anchor.word)
    themed_words = (
        w
        for w in ctx.index.words
        if len(w) >= MIN_WORD_LENGTH
        and shares_seed(w, seeds)
        and anchor.start + len(w) <= len(ctx.digits)
    )
    themed = _take_strict(ctx, (overlay(ctx.digits, anchor.start, w) for w in themed_words))
    logger.debug(f"Themed words for {anchor.word} added {len(themed)}")
    if not themed:
        return ctx.results

    combined: List[str] = []
    for text in sort_by_score(ctx.results, ctx.index) + sort_by_score(themed, ctx.index):
        if text not in combined:
            combined.append(text)
        if len(combined) >= ctx.n:
            break
    return combined


FALLBACK_STAGES: Sequence[Stage] = (
    single_word_overlay,
    two_word_overlay,
    anchored_overlay,
    themed_overlay,
)


def expand_results(
    digits: str,
    index: WordIndex,
    results: Sequence[str],
    n: int,
    stages: Sequence[Stage] = FALLBACK_STAGES,
) -> List[str]:
    """Run the fallback stages until ``n`` results exist or the stages run out."""
    ctx = FallbackContext(digits=digits, index=index, n=n, results=list(results))
    for stage in stages:
        if ctx.deficit <= 0:
            break
        ctx.results = stage(ctx)
        logger.debug(f"{stage.__name__}: {len(ctx.results)}/{n} results")
    return ctx.results
