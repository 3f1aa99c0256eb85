"""
ChunkCipher Entry Point
========================

Allows running the CLI via: python -m chunkcipher
"""

from chunkcipher.cli import main

if __name__ == "__main__":
    main()
