"""End-to-end tests for get_vanity_numbers."""

import logging

import pytest

from vanitynum.core.generator import get_vanity_numbers
from vanitynum.core.word_index import build_word_index
from vanitynum.exceptions import ValidationError


def test_word_overlaid_on_number(pizza_index):
    assert get_vanity_numbers("2157499266", index=pizza_index) == ["215-PIZZA-66"]


def test_formatted_input_with_country_code(pizza_index):
    assert get_vanity_numbers("+1 (215) 749-9266", index=pizza_index) == [
        "215-PIZZA-66"
    ]


def test_no_words_returns_formatted_number(pizza_index):
    assert get_vanity_numbers("4155552671", index=pizza_index) == ["(415) 555-2671"]


@pytest.mark.parametrize(
    "phone, expected",
    [
        ("2255366", "2255366"),
        ("800-CALL-NOW", "800"),
        ("+44 20 7946 0958", "442079460958"),
    ],
)
def test_not_ten_digits_returns_digits(pizza_index, phone, expected):
    assert get_vanity_numbers(phone, index=pizza_index) == [expected]


def test_strict_results_ranked(cat_index):
    assert get_vanity_numbers("5552285555", index=cat_index) == [
        "555-ACT-5555",
        "555-BAT-5555",
        "555-CAT-5555",
    ]


def test_count_limits_results(cat_index):
    assert get_vanity_numbers("5552285555", n=1, index=cat_index) == ["555-ACT-5555"]


def test_themed_words_pad_results():
    index = build_word_index(["CAT", "EDUCATE"])
    assert get_vanity_numbers("5552285555", index=index) == [
        "555-CAT-5555",
        "555-EDUCATE",
    ]


def test_repeated_calls_match(cat_index):
    first = get_vanity_numbers("(555) 228-5555", index=cat_index)
    assert get_vanity_numbers("(555) 228-5555", index=cat_index) == first


def test_count_must_be_positive(pizza_index):
    with pytest.raises(ValidationError):
        get_vanity_numbers("2157499266", n=0, index=pizza_index)


def test_bundled_word_list(fresh_default_index, monkeypatch):
    monkeypatch.delenv("VANITYNUM_WORDLIST", raising=False)
    assert get_vanity_numbers("2157499266") == [
        "215-PIZZA-66",
        "215-PIE-9266",
        "215-PIG-9266",
        "215-EPIC-266",
        "215-JAZZ-266",
    ]


def test_logs_fallback_to_formatted_number(pizza_index, caplog):
    caplog.set_level(logging.INFO, logger="vanitynum")
    get_vanity_numbers("4155552671", index=pizza_index)
    assert "No good candidates found" in caplog.text


def test_full_width_digits_are_not_phone_digits(pizza_index):
    assert get_vanity_numbers("２１５７４９９２６６", index=pizza_index) == [""]


def test_existing_results_do_not_fill_the_count(fresh_default_index, monkeypatch):
    # re-finding a result already in the list does not count toward n
    monkeypatch.delenv("VANITYNUM_WORDLIST", raising=False)
    assert get_vanity_numbers("7468327939", n=2) == ["746-TEA-7939", "7468-EAR-939"]
