"""vanitynum - turn phone numbers into memorable vanity words."""

__version__ = "1.0.0"

from .core.generator import get_vanity_numbers
from .core.word_index import WordIndex, build_word_index, get_default_index

__all__ = [
    "__version__",
    "get_vanity_numbers",
    "WordIndex",
    "build_word_index",
    "get_default_index",
]
