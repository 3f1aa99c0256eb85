"""
ChunkCipher Parsers
====================

Input pre-filtering that reduces raw text to the ciphers' working
alphabet before it reaches the core.
"""

from chunkcipher.parsers.text_filter import filter_text, transform_char

__all__ = [
    "filter_text",
    "transform_char",
]
