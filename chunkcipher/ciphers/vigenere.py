"""
Vigenere Cipher
===============

Polyalphabetic cipher where the letter at position ``i`` is shifted by
the key letter ``key[i % len(key)]``. Characters outside ``A``-``Z``
pass through unchanged but still consume a key position, so the key
letter for any character depends only on its offset in the text. Chunk
boundaries therefore have to fall on multiples of the key length.
"""

from __future__ import annotations

from chunkcipher.ciphers.base import Cipher
from chunkcipher.ciphers.keys import ALPHABET, ALPHABET_SIZE, validate_vigenere_key
from chunkcipher.core.exceptions import InvalidKey
from chunkcipher.core.models import CipherFamily, CipherMode

_INDEX = {letter: idx for idx, letter in enumerate(ALPHABET)}


class VigenereCipher(Cipher):
    """Repeating-key Vigenere cipher."""

    __slots__ = ("_normalized", "_shifts")

    family = CipherFamily.VIGENERE

    def __init__(self, key: str) -> None:
        super().__init__(key)
        self._normalized = validate_vigenere_key(key)
        self._shifts = tuple(_INDEX[letter] for letter in self._normalized)

    @property
    def normalized_key(self) -> str:
        return self._normalized

    @property
    def chunk_alignment(self) -> int:
        return len(self._shifts)

    def apply_cipher(self, text: str, mode: CipherMode) -> str:
        if not self._shifts:
            raise InvalidKey("vigenere", "key has no usable letters")
        sign = 1 if CipherMode(mode) is CipherMode.ENCRYPT else -1
        period = len(self._shifts)

        out = []
        for pos, ch in enumerate(text):
            idx = _INDEX.get(ch)
            if idx is None:
                out.append(ch)
                continue
            shift = sign * self._shifts[pos % period]
            out.append(ALPHABET[(idx + shift) % ALPHABET_SIZE])
        return "".join(out)
