import string

import pytest

from vanitynum.core.keypad import KEYPAD, LETTER_TO_DIGIT, digit_for_letter, digits_for_word
from vanitynum.core.word_index import load_bundled_word_list


def test_digits_for_word():
    assert digits_for_word("DOG") == "364"
    assert digits_for_word("FLOWER") == "356937"
    assert digits_for_word("PIZZA") == "74992"


def test_digits_for_word_lowercase():
    assert digits_for_word("call") == "2255"


def test_characters_without_a_key_are_dropped():
    assert digits_for_word("A-B") == "22"
    assert digits_for_word("") == ""
    assert digit_for_letter("1") == ""


def test_every_letter_maps_to_one_digit():
    assert set(LETTER_TO_DIGIT) == set(string.ascii_uppercase)
    letters = "".join(KEYPAD.values())
    assert len(letters) == 26
    assert len(set(letters)) == 26
    assert set(LETTER_TO_DIGIT.values()) == set("23456789")


@pytest.mark.parametrize("digit", ["0", "1"])
def test_zero_and_one_have_no_letters(digit):
    assert digit not in KEYPAD


def test_bundled_words_map_to_keypad_digits():
    for word in load_bundled_word_list():
        digits = digits_for_word(word)
        assert len(digits) == len(word)
        assert set(digits) <= set("23456789")
