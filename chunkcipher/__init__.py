"""
ChunkCipher -- Parallel Classical Cipher Toolkit
=================================================

Encrypts and decrypts alphanumeric text with classical substitution
ciphers (Caesar, Playfair, Vigenere), splitting the text into chunks
that are processed concurrently and reassembled in order.

Modules:
    - chunkcipher.ciphers: Cipher contract, key validation and families
    - chunkcipher.core.factory: Family + key -> cipher construction
    - chunkcipher.core.runner: Chunked concurrent application
    - chunkcipher.core.engine: Core-facing facade
    - chunkcipher.parsers: Input pre-filtering
    - chunkcipher.output: Console and report output
    - chunkcipher.cli: Click-based command-line interface
"""

__version__ = "0.5.0"
__tool_name__ = "chunkcipher"
