"""
Cipher Families
================

The cipher contract and its Caesar, Playfair and Vigenere
implementations. Each family validates its key on construction.
"""

from chunkcipher.ciphers.base import Cipher
from chunkcipher.ciphers.caesar import CaesarCipher
from chunkcipher.ciphers.playfair import PlayfairCipher
from chunkcipher.ciphers.vigenere import VigenereCipher

__all__ = [
    "Cipher",
    "CaesarCipher",
    "PlayfairCipher",
    "VigenereCipher",
]
