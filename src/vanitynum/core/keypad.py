"""Telephone keypad (T9) letter groups and word-to-digit conversion."""

from typing import Dict

KEYPAD: Dict[str, str] = {
    "2": "ABC",
    "3": "DEF",
    "4": "GHI",
    "5": "JKL",
    "6": "MNO",
    "7": "PQRS",
    "8": "TUV",
    "9": "WXYZ",
}

LETTER_TO_DIGIT: Dict[str, str] = {
    letter: digit for digit, letters in KEYPAD.items() for letter in letters
}


def digit_for_letter(letter: str) -> str:
    """Keypad digit for a letter, or "" when the character has none."""
    return LETTER_TO_DIGIT.get(letter.upper(), "")


def digits_for_word(word: str) -> str:
    """Digits dialed to spell ``word``, e.g. ``DOG`` -> ``364``."""
    return "".join(digit_for_letter(ch) for ch in word)
