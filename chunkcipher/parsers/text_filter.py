"""
Text Pre-filter
================

Reduces raw input to the ciphers' working alphabet:

    - ASCII letters are upper-cased;
    - digits are spelled out in English (``7`` -> ``SEVEN``);
    - every other character, whitespace included, is dropped.
"""

from __future__ import annotations

_DIGIT_WORDS: dict[str, str] = {
    "0": "ZERO",
    "1": "ONE",
    "2": "TWO",
    "3": "THREE",
    "4": "FOUR",
    "5": "FIVE",
    "6": "SIX",
    "7": "SEVEN",
    "8": "EIGHT",
    "9": "NINE",
}


def transform_char(ch: str) -> str:
    """Return the working-alphabet replacement for a single character."""
    if ch.isascii() and ch.isalpha():
        return ch.upper()
    return _DIGIT_WORDS.get(ch, "")


def filter_text(text: str) -> str:
    """Apply :func:`transform_char` to every character of *text*."""
    return "".join(transform_char(ch) for ch in text)
