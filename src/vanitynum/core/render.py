"""Display rendering of ranked candidates."""

from typing import Iterable, List

from .word_index import WordIndex
from .word_run import find_word_run


def render_dashed(text: str, index: WordIndex) -> str:
    """``2157499266`` overlaid with PIZZA renders as ``215-PIZZA-66``."""
    run = find_word_run(text, index)
    if run is None:
        return text
    parts = [text[:run.start], run.word, text[run.end:]]
    return "-".join(part for part in parts if part)


def render_all(texts: Iterable[str], index: WordIndex) -> List[str]:
    return [render_dashed(text, index) for text in texts]
