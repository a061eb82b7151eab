"""Test configuration and fixtures.

Provides reusable fixtures for:
- Small hand-made word indexes
- Temporary word list and event files
"""

import tempfile
from pathlib import Path

import pytest

from vanitynum.core.word_index import build_word_index, get_default_index


# =============================================================================
# Basic Fixtures
# =============================================================================


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def fresh_default_index():
    """Rebuild the process-wide index around the test."""
    get_default_index.cache_clear()
    yield
    get_default_index.cache_clear()


# =============================================================================
# Word Index Fixtures
# =============================================================================


@pytest.fixture
def pizza_index():
    """PIZZA spells 74992, DOG and FOG both spell 364."""
    return build_word_index(["PIZZA", "DOG", "FOG"])


@pytest.fixture
def cat_index():
    """CAT, ACT and BAT all spell 228."""
    return build_word_index(["CAT", "ACT", "BAT"])


@pytest.fixture
def wordlist_file(temp_dir):
    """Word list file with comments, blank lines and junk entries."""
    path = temp_dir / "words.txt"
    path.write_text(
        "# test words\n"
        "pizza\n"
        "\n"
        "DOG\n"
        "FOG\n"
        "go\n"
        "dog\n"
        "o'neil\n",
        encoding="utf-8",
    )
    return path
