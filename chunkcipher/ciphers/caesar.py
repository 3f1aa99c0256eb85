"""
Caesar Cipher
=============

Monoalphabetic shift over ``A``-``Z``. Characters outside the alphabet
(including lower-case letters) pass through unchanged, so every chunk
boundary is safe.
"""

from __future__ import annotations

from chunkcipher.ciphers.base import Cipher
from chunkcipher.ciphers.keys import ALPHABET, validate_caesar_key
from chunkcipher.core.models import CipherFamily, CipherMode


class CaesarCipher(Cipher):
    """Caesar shift cipher.

    Usage::

        cipher = CaesarCipher("3")
        cipher.apply_cipher("ABCXYZ", CipherMode.ENCRYPT)  # "DEFABC"
    """

    __slots__ = ("_shift", "_tables")

    family = CipherFamily.CAESAR

    def __init__(self, key: str) -> None:
        super().__init__(key)
        self._shift = validate_caesar_key(key)
        shifted = ALPHABET[self._shift:] + ALPHABET[:self._shift]
        self._tables = {
            CipherMode.ENCRYPT: str.maketrans(ALPHABET, shifted),
            CipherMode.DECRYPT: str.maketrans(shifted, ALPHABET),
        }

    @property
    def shift(self) -> int:
        return self._shift

    def apply_cipher(self, text: str, mode: CipherMode) -> str:
        return text.translate(self._tables[CipherMode(mode)])
