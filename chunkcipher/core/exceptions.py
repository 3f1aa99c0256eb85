"""
ChunkCipher Exceptions
=======================

Every failure the pipeline can surface is a :class:`ChunkCipherError`
carrying a human-readable ``message`` and a ``details`` dict suitable for
structured logging and the JSON run report.
"""

from __future__ import annotations

from typing import Any


class ChunkCipherError(Exception):
    """Base exception for all ChunkCipher errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InvalidKey(ChunkCipherError):
    """Raised when a key violates its cipher family's rules."""

    def __init__(self, family: str, reason: str):
        super().__init__(
            f"invalid {family} key: {reason}",
            {"family": family, "reason": reason},
        )
        self.family = family
        self.reason = reason


class ConstructionError(ChunkCipherError):
    """Raised when the factory cannot build the requested cipher.

    Either the family is unrecognised or the key failed validation; in the
    latter case the originating :class:`InvalidKey` is the ``__cause__``.
    """


class ChunkProcessingError(ChunkCipherError):
    """Raised when a worker fails while transforming its chunk."""

    def __init__(self, index: int, error: BaseException):
        super().__init__(
            f"chunk {index} failed: {type(error).__name__}: {error}",
            {"chunk_index": index, "error_type": type(error).__name__},
        )
        self.index = index


class InputReadError(ChunkCipherError):
    """Raised when the input file or stream cannot be read."""


class OutputWriteError(ChunkCipherError):
    """Raised when the output file cannot be written."""
