"""
ChunkCipher Core Module
========================

Data models, exceptions, the cipher factory, the chunked runner and the
engine facade. Only the leaf modules are re-exported here; import the
factory, runner and engine from their own modules.
"""

from chunkcipher.core.exceptions import (
    ChunkCipherError,
    ChunkProcessingError,
    ConstructionError,
    InputReadError,
    InvalidKey,
    OutputWriteError,
)
from chunkcipher.core.models import (
    Chunk,
    ChunkResult,
    CipherFamily,
    CipherMode,
    RunReport,
)

__all__ = [
    "Chunk",
    "ChunkCipherError",
    "ChunkProcessingError",
    "ChunkResult",
    "CipherFamily",
    "CipherMode",
    "ConstructionError",
    "InputReadError",
    "InvalidKey",
    "OutputWriteError",
    "RunReport",
]
