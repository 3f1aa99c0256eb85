"""
ChunkCipher Engine
===================

Central orchestrator for the ChunkCipher pipeline. :class:`CipherEngine`
exposes the single core-facing operation: take a family, a key, a mode,
a text and a worker count, and return either a :class:`RunReport` with
the transformed text or a typed failure.

Architecture follows the Facade pattern (Gamma et al., 1994), providing
a simplified interface over the factory and the chunked runner.

References:
    - Gamma, E., Helm, R., Johnson, R., & Vlissides, J. (1994).
      Design Patterns: Elements of Reusable Object-Oriented Software.
      Addison-Wesley.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from common.config import ToolkitConfig
from common.logger import ToolkitLogger

from chunkcipher.core.exceptions import ChunkCipherError
from chunkcipher.core.factory import CipherFactory
from chunkcipher.core.models import CipherFamily, CipherMode, RunReport
from chunkcipher.core.runner import ChunkedCipherRunner, ProgressCallback, run_blocking


class CipherEngine:
    """Builds ciphers and runs them through the chunked runner.

    Usage::

        engine = CipherEngine()
        report = await engine.process("vigenere", "LEMON", "encrypt", "ATTACKATDAWN")
        print(report.output)

    Attributes:
        config: Toolkit configuration instance.
        logger: Logger for the engine.
    """

    def __init__(self, config: Optional[ToolkitConfig] = None) -> None:
        self.config = config or ToolkitConfig()
        self.logger = ToolkitLogger("engine")
        self._factory = CipherFactory()
        self._runner = ChunkedCipherRunner(
            poll_interval=self.config.runner.poll_interval,
        )

    async def process(
        self,
        family: CipherFamily | str,
        key: str,
        mode: CipherMode | str,
        text: str,
        worker_count: Optional[int] = None,
        progress: Optional[ProgressCallback] = None,
    ) -> RunReport:
        """Encrypt or decrypt *text* with the requested cipher.

        Args:
            family: Cipher family tag or name.
            key: Raw key string, validated by the family's rules.
            mode: Encrypt or decrypt.
            text: Input text, already pre-filtered by the caller.
            worker_count: Number of workers; defaults to the configured
                ``runner.worker_count``.
            progress: Optional ``(completed, total)`` callback.

        Returns:
            RunReport with the assembled output and run statistics.

        Raises:
            ConstructionError: Unknown family or rejected key.
            InvalidKey: Key became unusable while workers were running.
            ChunkProcessingError: A worker failed.
        """
        workers = worker_count if worker_count is not None else self.config.runner.worker_count
        if workers < 1:
            raise ValueError(f"worker_count must be >= 1, got {workers}")
        mode = CipherMode(mode)
        cipher = self._factory.build(family, key)

        report = RunReport(family=cipher.family, mode=mode, worker_count=workers)
        label = f"{cipher.family.value}:{mode.value}"

        with self.logger.operation(label), self.logger.timed(f"{label} run") as watch:
            chunks = self._runner.plan(cipher, text, mode, workers)
            report.input_length = sum(len(chunk.text) for chunk in chunks)
            report.chunk_count = len(chunks)
            report.chunk_length = self._runner.chunk_length(
                report.input_length, workers, cipher.chunk_alignment
            )
            self.logger.info(
                "Starting %s run: %d chars across %d chunks",
                mode.value, report.input_length, report.chunk_count,
            )

            try:
                report.output = await self._runner.dispatch(
                    cipher, chunks, mode, workers, progress
                )
            except ChunkCipherError as exc:
                self.logger.error("Run failed: %s", exc.message, **exc.details)
                raise

            report.output_length = len(report.output)

        report.elapsed_seconds = watch.elapsed
        report.end_time = datetime.now(timezone.utc)
        return report

    def process_sync(
        self,
        family: CipherFamily | str,
        key: str,
        mode: CipherMode | str,
        text: str,
        worker_count: Optional[int] = None,
        progress: Optional[ProgressCallback] = None,
    ) -> RunReport:
        """Blocking variant of :meth:`process`."""
        return run_blocking(
            self.process(family, key, mode, text, worker_count, progress)
        )
