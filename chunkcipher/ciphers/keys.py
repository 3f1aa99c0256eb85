"""
Key Validation
==============

Per-family acceptance predicates and normalisation rules for raw key
strings. Every validator either returns the normalised key or raises
:class:`~chunkcipher.core.exceptions.InvalidKey` with the reason; no
normalisation beyond the rules documented here is applied.

Rules:
    - Caesar:   optionally signed base-10 integer (surrounding whitespace
                ignored), reduced into ``[0, 26)``.
    - Vigenere: non-empty, ASCII letters only, upper-cased.
    - Playfair: non-empty, ASCII letters only, upper-cased, ``J`` folded
                into ``I``, repeated letters dropped after their first
                occurrence, then completed to a 25-letter key square.
"""

from __future__ import annotations

import re
import string
from typing import Any

from chunkcipher.core.exceptions import InvalidKey

ALPHABET: str = string.ascii_uppercase
ALPHABET_SIZE: int = len(ALPHABET)

# Playfair squares have 25 cells, so J shares a cell with I.
PLAYFAIR_ALPHABET: str = ALPHABET.replace("J", "")

_CAESAR_KEY_PATTERN = re.compile(r"[+-]?[0-9]+")


def _require_text(family: str, key: Any) -> str:
    if not isinstance(key, str):
        raise InvalidKey(family, f"key must be a string, got {type(key).__name__}")
    if not key:
        raise InvalidKey(family, "key must not be empty")
    return key


def validate_caesar_key(key: Any) -> int:
    """Return the Caesar shift in ``[0, 26)`` encoded by *key*."""
    raw = _require_text("caesar", key).strip()
    if not _CAESAR_KEY_PATTERN.fullmatch(raw):
        raise InvalidKey("caesar", f"'{key}' is not an integer shift")
    return int(raw) % ALPHABET_SIZE


def validate_alpha_key(family: str, key: Any) -> str:
    """Return *key* upper-cased after checking it is purely alphabetic."""
    raw = _require_text(family, key)
    if not (raw.isascii() and raw.isalpha()):
        raise InvalidKey(family, f"'{key}' must contain only letters A-Z")
    return raw.upper()


def validate_vigenere_key(key: Any) -> str:
    return validate_alpha_key("vigenere", key)


def playfair_key_square(key: Any) -> str:
    """Return the 25 letters of the Playfair square, row-major.

    The normalised key letters come first, followed by the unused
    letters of :data:`PLAYFAIR_ALPHABET` in alphabetical order.
    """
    letters = validate_alpha_key("playfair", key).replace("J", "I")
    # dict preserves first-occurrence order
    square = dict.fromkeys(letters + PLAYFAIR_ALPHABET)
    return "".join(square)
