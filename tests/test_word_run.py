"""Test strict candidate detection and dashed rendering."""

import pytest

from vanitynum.core.render import render_all, render_dashed
from vanitynum.core.word_run import WordRun, find_word_run, is_word_only_candidate


def test_word_between_digits(pizza_index):
    assert find_word_run("215PIZZA66", pizza_index) == WordRun(3, 8, "PIZZA")


@pytest.mark.parametrize("text", ["PIZZA12345", "12345PIZZA", "1234567DOG"])
def test_word_at_either_end(pizza_index, text):
    assert is_word_only_candidate(text, pizza_index)


@pytest.mark.parametrize(
    "text",
    [
        "DOG12FOG12",  # two words
        "DOG1AB5678",  # stray letters after the word
        "12AB567890",  # run too short
        "2157499266",  # no letters
        "215PIZZB66",  # not a word
        "215PIZZA6",  # too short
        "215PIZZA666",  # too long
        "215-DOG-66",  # punctuation
        "２１５PIZZA66",  # full-width digits
    ],
)
def test_rejected(pizza_index, text):
    assert find_word_run(text, pizza_index) is None
    assert not is_word_only_candidate(text, pizza_index)


class TestRenderDashed:
    """Test display rendering."""

    def test_prefix_and_suffix(self, pizza_index):
        assert render_dashed("215PIZZA66", pizza_index) == "215-PIZZA-66"

    def test_no_prefix(self, pizza_index):
        assert render_dashed("PIZZA12345", pizza_index) == "PIZZA-12345"

    def test_no_suffix(self, pizza_index):
        assert render_dashed("12345PIZZA", pizza_index) == "12345-PIZZA"

    def test_non_strict_text_unchanged(self, pizza_index):
        assert render_dashed("DOG12FOG12", pizza_index) == "DOG12FOG12"

    def test_render_all_keeps_order(self, pizza_index):
        assert render_all(["12345PIZZA", "215PIZZA66"], pizza_index) == [
            "12345-PIZZA",
            "215-PIZZA-66",
        ]
