"""
Playfair Cipher
===============

Digraph substitution over a 5x5 key square (``J`` shares the ``I``
cell). Substitution rules for a digraph ``(a, b)``:

    - same row:     each letter is replaced by its right neighbour
                    (left neighbour when decrypting), wrapping around;
    - same column:  each letter is replaced by the letter below
                    (above when decrypting), wrapping around;
    - otherwise:    the letters swap columns (rectangle rule).

Text handling is a fixed rule rather than a pass-through: non-letters
are dropped, letters are upper-cased and ``J`` becomes ``I``. When
encrypting, a digraph of two identical letters is split by inserting
``X`` (``Q`` when the letter is ``X`` itself) and an odd final letter is
padded with ``Z`` (``X`` when that letter is ``Z``). Prepared text is a
fixed point of this preparation, so once the whole text is prepared it
can be cut at any even offset.

Reference:
    - Kahn, D. (1967). The Codebreakers. Macmillan.
"""

from __future__ import annotations

from chunkcipher.ciphers.base import Cipher
from chunkcipher.ciphers.keys import ALPHABET, playfair_key_square
from chunkcipher.core.exceptions import InvalidKey
from chunkcipher.core.models import CipherFamily, CipherMode

_SIZE = 5


class PlayfairCipher(Cipher):
    """Playfair digraph cipher."""

    __slots__ = ("_square", "_coords")

    family = CipherFamily.PLAYFAIR

    def __init__(self, key: str) -> None:
        super().__init__(key)
        self._square = playfair_key_square(key)
        self._coords = {
            letter: divmod(pos, _SIZE) for pos, letter in enumerate(self._square)
        }

    @property
    def square(self) -> tuple[str, ...]:
        """The key square as five row strings."""
        return tuple(
            self._square[row * _SIZE:(row + 1) * _SIZE] for row in range(_SIZE)
        )

    @property
    def chunk_alignment(self) -> int:
        return 2

    def prepare(self, text: str, mode: CipherMode) -> str:
        letters = [
            "I" if upper == "J" else upper
            for upper in (ch.upper() for ch in text if ch.isascii())
            if upper in ALPHABET
        ]
        if CipherMode(mode) is CipherMode.DECRYPT:
            return "".join(letters)

        out: list[str] = []
        pos = 0
        while pos < len(letters):
            first = letters[pos]
            second = letters[pos + 1] if pos + 1 < len(letters) else None
            if second is None:
                out += [first, "X" if first == "Z" else "Z"]
                pos += 1
            elif first == second:
                out += [first, "Q" if first == "X" else "X"]
                pos += 1
            else:
                out += [first, second]
                pos += 2
        return "".join(out)

    def apply_cipher(self, text: str, mode: CipherMode) -> str:
        mode = CipherMode(mode)
        if len(self._coords) != _SIZE * _SIZE:
            raise InvalidKey("playfair", "key square is incomplete")
        step = 1 if mode is CipherMode.ENCRYPT else -1
        prepared = self.prepare(text, mode)

        out: list[str] = []
        for pos in range(0, len(prepared) - 1, 2):
            out.append(self._substitute(prepared[pos], prepared[pos + 1], step))
        if len(prepared) % 2:
            # Lone trailing letter of a ciphertext: no digraph to substitute.
            out.append(prepared[-1])
        return "".join(out)

    def _substitute(self, first: str, second: str, step: int) -> str:
        row1, col1 = self._coords[first]
        row2, col2 = self._coords[second]
        if row1 == row2:
            col1, col2 = (col1 + step) % _SIZE, (col2 + step) % _SIZE
        elif col1 == col2:
            row1, row2 = (row1 + step) % _SIZE, (row2 + step) % _SIZE
        else:
            col1, col2 = col2, col1
        return self._letter(row1, col1) + self._letter(row2, col2)

    def _letter(self, row: int, col: int) -> str:
        return self._square[row * _SIZE + col]
