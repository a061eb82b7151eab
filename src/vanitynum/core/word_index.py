"""Word corpus loading and the word <-> keypad-digit index.

The index is built once from a word list and never mutated afterwards, so a
single instance can be shared by every lookup in the process.
"""

import re
from dataclasses import dataclass
from functools import lru_cache
from importlib import resources
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from ..config import get_wordlist_path
from ..exceptions import WordListError
from ..utils.logging import get_logger
from .keypad import digits_for_word

logger = get_logger(__name__)

_VALID_WORD_RE = re.compile(r"^[A-Z]+$")

BUNDLED_WORDLIST = "wordlist.txt"


@dataclass(frozen=True)
class WordIndex:
    """Read-only lookup tables between words and their keypad digits."""

    words: Tuple[str, ...]
    word_to_digits: Mapping[str, str]
    digits_to_words: Mapping[str, Tuple[str, ...]]

    def __contains__(self, word: object) -> bool:
        return word in self.word_to_digits

    def __len__(self) -> int:
        return len(self.words)

    def words_for(self, digits: str) -> Tuple[str, ...]:
        """Words spelled by exactly ``digits`` (empty tuple when none)."""
        return self.digits_to_words.get(digits, ())


def clean_words(words: Iterable[str]) -> List[str]:
    """Upper-case, strip and keep only purely alphabetic entries, first occurrence wins."""
    seen = set()
    cleaned = []
    for raw in words:
        word = str(raw).strip().upper()
        if not _VALID_WORD_RE.match(word) or word in seen:
            continue
        seen.add(word)
        cleaned.append(word)
    return cleaned


def build_word_index(words: Optional[Iterable[str]]) -> WordIndex:
    """Build a :class:`WordIndex` from a word corpus.

    Raises:
        WordListError: If the corpus is missing or holds no usable word.
    """
    if words is None:
        raise WordListError("Word list missing")

    cleaned = clean_words(words)
    if not cleaned:
        raise WordListError("Word list is empty")

    word_to_digits: Dict[str, str] = {w: digits_for_word(w) for w in cleaned}

    grouped: Dict[str, List[str]] = {}
    for word, digits in word_to_digits.items():
        grouped.setdefault(digits, []).append(word)

    return WordIndex(
        words=tuple(cleaned),
        word_to_digits=MappingProxyType(word_to_digits),
        digits_to_words=MappingProxyType(
            {digits: tuple(ws) for digits, ws in grouped.items()}
        ),
    )


def parse_word_list(text: str) -> List[str]:
    """Split word list text into entries, skipping blank lines and ``#`` comments."""
    entries = []
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        entries.append(line)
    return entries


def load_word_list(path: Path) -> List[str]:
    """Read a one-word-per-line file."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise WordListError(f"Cannot read word list {path}: {e}")
    return parse_word_list(text)


def load_bundled_word_list() -> List[str]:
    """Read the word list shipped with the package."""
    resource = resources.files("vanitynum").joinpath("data").joinpath(BUNDLED_WORDLIST)
    try:
        text = resource.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise WordListError(f"Bundled word list unavailable: {e}")
    return parse_word_list(text)


def load_word_index(path: Optional[Path] = None) -> WordIndex:
    """Load a word list (``path`` or the bundled one) and index it."""
    if path is not None:
        words = load_word_list(path)
        source = str(path)
    else:
        words = load_bundled_word_list()
        source = "bundled word list"

    index = build_word_index(words)
    logger.info(f"Loaded {len(index)} words from {source}")
    return index


@lru_cache(maxsize=1)
def get_default_index() -> WordIndex:
    """Process-wide index, built on first use from ``VANITYNUM_WORDLIST`` or the bundled list."""
    return load_word_index(get_wordlist_path())
