"""
Cipher Contract
===============

Abstract base class every cipher family implements. An instance owns its
validated key for its whole lifetime and exposes no mutators, so a single
instance can be shared read-only by every worker of a run.
"""

from __future__ import annotations

import abc
from typing import ClassVar

from chunkcipher.core.models import CipherFamily, CipherMode


class Cipher(abc.ABC):
    """A classical cipher bound to one immutable key.

    Subclasses validate the raw key in ``__init__`` (raising
    :class:`~chunkcipher.core.exceptions.InvalidKey`) and implement
    :meth:`apply_cipher` as a pure function of the text, the mode and
    the key.

    Two hooks let the chunked runner split work without changing the
    result:

    * :meth:`prepare` normalises the whole text once before it is split.
    * :attr:`chunk_alignment` is the granularity chunk boundaries must
      respect for per-chunk application to equal whole-text application.
    """

    __slots__ = ("_key",)

    family: ClassVar[CipherFamily]

    def __init__(self, key: str) -> None:
        self._key = key

    @property
    def key(self) -> str:
        """The raw key this cipher was built from."""
        return self._key

    @property
    def chunk_alignment(self) -> int:
        return 1

    def prepare(self, text: str, mode: CipherMode) -> str:
        """Normalise the full input before it is split into chunks."""
        return text

    @abc.abstractmethod
    def apply_cipher(self, text: str, mode: CipherMode) -> str:
        """Encrypt or decrypt *text* according to *mode*.

        Raises:
            InvalidKey: If the key is unusable at apply time.
        """

    def encrypt(self, text: str) -> str:
        return self.apply_cipher(text, CipherMode.ENCRYPT)

    def decrypt(self, text: str) -> str:
        return self.apply_cipher(text, CipherMode.DECRYPT)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key={self._key!r})"
