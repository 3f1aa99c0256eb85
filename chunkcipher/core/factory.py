"""
Cipher Factory
==============

Resolves a cipher family tag and a raw key into a ready-to-use
:class:`~chunkcipher.ciphers.base.Cipher`. Keys are validated at build
time, so a cipher that comes out of the factory is always usable; any
failure surfaces as :class:`ConstructionError` and nothing is returned.
"""

from __future__ import annotations

from typing import ClassVar

from chunkcipher.ciphers.base import Cipher
from chunkcipher.ciphers.caesar import CaesarCipher
from chunkcipher.ciphers.playfair import PlayfairCipher
from chunkcipher.ciphers.vigenere import VigenereCipher
from chunkcipher.core.exceptions import ConstructionError, InvalidKey
from chunkcipher.core.models import CipherFamily


class CipherFactory:
    """Builds cipher instances from ``(family, key)`` pairs.

    Usage::

        cipher = CipherFactory().build(CipherFamily.VIGENERE, "lemon")
        cipher = CipherFactory().build("caesar", "3")
    """

    _registry: ClassVar[dict[CipherFamily, type[Cipher]]] = {
        CipherFamily.CAESAR: CaesarCipher,
        CipherFamily.PLAYFAIR: PlayfairCipher,
        CipherFamily.VIGENERE: VigenereCipher,
    }

    @classmethod
    def families(cls) -> list[CipherFamily]:
        """Families this factory can build, in declaration order."""
        return [family for family in CipherFamily if family in cls._registry]

    def build(self, family: CipherFamily | str, key: str) -> Cipher:
        """Construct the cipher for *family* keyed with *key*.

        Raises:
            ConstructionError: If the family is unknown or the key is
                rejected by the family's validator.
        """
        resolved = CipherFamily.parse(family)
        cipher_cls = self._registry.get(resolved)
        if cipher_cls is None:
            raise ConstructionError(
                f"no cipher registered for family '{resolved.value}'",
                {"family": resolved.value},
            )

        try:
            return cipher_cls(key)
        except InvalidKey as exc:
            raise ConstructionError(
                f"problem constructing requested {resolved.value} cipher: {exc.message}",
                {"family": resolved.value, "reason": exc.reason},
            ) from exc


def build_cipher(family: CipherFamily | str, key: str) -> Cipher:
    """Module-level convenience wrapper around :meth:`CipherFactory.build`."""
    return CipherFactory().build(family, key)
