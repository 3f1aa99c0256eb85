"""
ChunkCipher Core Data Models
=============================

Pydantic models for the chunked cipher pipeline: the family and mode
tags, the chunks a run is partitioned into, the per-chunk results and
the :class:`RunReport` that summarises a finished run.

All models are serialisable to JSON and designed for consumption by both
the CLI output layer and the JSON report writer.
"""

from __future__ import annotations

import datetime as _dt
import enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from chunkcipher.core.exceptions import ConstructionError


# ===================================================================== #
#  Enumerations
# ===================================================================== #


class CipherFamily(str, enum.Enum):
    """Supported classical substitution cipher families."""

    CAESAR = "caesar"
    PLAYFAIR = "playfair"
    VIGENERE = "vigenere"

    @classmethod
    def parse(cls, value: CipherFamily | str) -> CipherFamily:
        """Resolve a member or a case-insensitive family name.

        Raises:
            ConstructionError: If *value* names no supported family.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            supported = ", ".join(member.value for member in cls)
            raise ConstructionError(
                f"unknown cipher family '{value}' (expected one of: {supported})",
                {"family": str(value)},
            ) from None


class CipherMode(str, enum.Enum):
    """Direction of a cipher transformation."""

    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"


# ===================================================================== #
#  Chunk Models
# ===================================================================== #


class Chunk(BaseModel):
    """A contiguous, position-indexed slice of the run's input text.

    Attributes:
        index: Sequence position of the chunk; assembly order.
        start: Offset of the first character within the input text.
        text: The characters covered by this chunk.
    """

    model_config = ConfigDict(frozen=True)

    index: int = Field(..., ge=0)
    start: int = Field(..., ge=0)
    text: str

    @property
    def end(self) -> int:
        """Offset one past the last character of the chunk."""
        return self.start + len(self.text)


class ChunkResult(BaseModel):
    """Transformed text produced by one worker for one chunk."""

    model_config = ConfigDict(frozen=True)

    index: int = Field(..., ge=0)
    text: str


# ===================================================================== #
#  Run Report
# ===================================================================== #


class RunReport(BaseModel):
    """Summary of one completed pipeline run.

    Attributes:
        family: Cipher family applied.
        mode: Encrypt or decrypt.
        worker_count: Number of workers the text was split across.
        chunk_length: Length of each chunk (the last may be shorter).
        chunk_count: Number of non-empty chunks actually dispatched.
        input_length: Length of the text handed to the runner.
        output_length: Length of the assembled output.
        elapsed_seconds: Wall-clock time spent in the runner.
        output: The assembled output text.
        start_time: UTC timestamp when the run started.
        end_time: UTC timestamp when the run ended.
    """

    family: CipherFamily
    mode: CipherMode
    worker_count: int = Field(..., ge=1)
    chunk_length: int = 0
    chunk_count: int = 0
    input_length: int = 0
    output_length: int = 0
    elapsed_seconds: float = 0.0
    output: str = ""
    start_time: _dt.datetime = Field(
        default_factory=lambda: _dt.datetime.now(_dt.timezone.utc)
    )
    end_time: Optional[_dt.datetime] = None

    @property
    def duration_seconds(self) -> float | None:
        """Elapsed time between start and end, or ``None`` if unfinished."""
        if self.end_time is None:
            return None
        return (self.end_time - self.start_time).total_seconds()
