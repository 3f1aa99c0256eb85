"""
Chunked Cipher Runner
======================

Splits a text into contiguous chunks, applies a cipher to every chunk on
a pool of worker threads and reassembles the results in chunk order.

Partitioning:

    1. ``text = cipher.prepare(text, mode)``
    2. ``L = len(text) // worker_count + 1``, rounded up to a multiple of
       ``cipher.chunk_alignment``
    3. chunk ``t`` covers ``[t * L, t * L + L)`` for
       ``t = 0 .. worker_count - 1``; empty chunks are not dispatched.

Because ``worker_count * L > len(text)``, the chunks always cover the
whole text; no tail is left unprocessed.

Waiting uses ``asyncio.wait`` with a timeout of ``poll_interval``; each
timeout without progress is logged as ``waiting...`` and reported to the
optional progress callback. The first failing chunk cancels every chunk
that has not started yet and the error propagates: a run returns either
the complete output or nothing.
"""

from __future__ import annotations

import asyncio
import concurrent.futures
from typing import Any, Callable, Coroutine, Optional, Sequence, TypeVar

from common.logger import ToolkitLogger

from chunkcipher.ciphers.base import Cipher
from chunkcipher.core.exceptions import ChunkProcessingError, InvalidKey
from chunkcipher.core.models import Chunk, ChunkResult, CipherMode

T = TypeVar("T")

ProgressCallback = Callable[[int, int], None]
"""Called with ``(completed_chunks, total_chunks)``."""


def run_blocking(coro: Coroutine[Any, Any, T]) -> T:
    """Run an async coroutine from synchronous code.

    When called from inside a running event loop the coroutine is run on
    a fresh loop in a helper thread instead.
    """
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        loop = None

    if loop and loop.is_running():
        with concurrent.futures.ThreadPoolExecutor(max_workers=1) as pool:
            return pool.submit(asyncio.run, coro).result()
    return asyncio.run(coro)


class ChunkedCipherRunner:
    """Applies a cipher to a text in parallel, order-preserving chunks.

    Usage::

        runner = ChunkedCipherRunner(poll_interval=1.0)
        output = await runner.run(cipher, text, CipherMode.ENCRYPT, 10)
        output = runner.run_sync(cipher, text, CipherMode.DECRYPT, 10)

    Args:
        poll_interval: Seconds between ``waiting...`` notifications while
            workers are busy.
    """

    def __init__(self, poll_interval: float = 1.0) -> None:
        if poll_interval <= 0:
            raise ValueError(f"poll_interval must be > 0, got {poll_interval}")
        self.poll_interval = poll_interval
        self.logger = ToolkitLogger("runner")

    # ------------------------------------------------------------------ #
    #  Partitioning
    # ------------------------------------------------------------------ #

    @staticmethod
    def chunk_length(text_length: int, worker_count: int, alignment: int = 1) -> int:
        """Length of every chunk but the last for a text of *text_length*."""
        if worker_count < 1:
            raise ValueError(f"worker_count must be >= 1, got {worker_count}")
        if alignment < 1:
            raise ValueError(f"alignment must be >= 1, got {alignment}")
        base = text_length // worker_count + 1
        return -(-base // alignment) * alignment

    @classmethod
    def partition(
        cls, text: str, worker_count: int, alignment: int = 1
    ) -> list[Chunk]:
        """Split *text* into at most *worker_count* contiguous chunks."""
        length = cls.chunk_length(len(text), worker_count, alignment)
        chunks: list[Chunk] = []
        for index in range(worker_count):
            start = index * length
            if start >= len(text):
                break
            chunks.append(
                Chunk(index=index, start=start, text=text[start:start + length])
            )
        return chunks

    def plan(
        self, cipher: Cipher, text: str, mode: CipherMode, worker_count: int
    ) -> list[Chunk]:
        """Prepare *text* for *cipher* and partition it for *worker_count* workers."""
        prepared = cipher.prepare(text, CipherMode(mode))
        return self.partition(prepared, worker_count, cipher.chunk_alignment)

    # ------------------------------------------------------------------ #
    #  Execution
    # ------------------------------------------------------------------ #

    async def run(
        self,
        cipher: Cipher,
        text: str,
        mode: CipherMode,
        worker_count: int,
        progress: Optional[ProgressCallback] = None,
    ) -> str:
        """Transform *text* with *cipher* using *worker_count* workers.

        Raises:
            InvalidKey: If a worker finds the cipher's key unusable.
            ChunkProcessingError: If a worker fails for any other reason.
            ValueError: If *worker_count* is less than 1.
        """
        chunks = self.plan(cipher, text, mode, worker_count)
        return await self.dispatch(cipher, chunks, mode, worker_count, progress)

    def run_sync(
        self,
        cipher: Cipher,
        text: str,
        mode: CipherMode,
        worker_count: int,
        progress: Optional[ProgressCallback] = None,
    ) -> str:
        """Blocking variant of :meth:`run`."""
        return run_blocking(self.run(cipher, text, mode, worker_count, progress))

    async def dispatch(
        self,
        cipher: Cipher,
        chunks: Sequence[Chunk],
        mode: CipherMode,
        worker_count: int,
        progress: Optional[ProgressCallback] = None,
    ) -> str:
        """Run *cipher* over already-planned *chunks* and join the results."""
        mode = CipherMode(mode)
        total = len(chunks)
        if total == 0:
            return ""

        loop = asyncio.get_running_loop()
        executor = concurrent.futures.ThreadPoolExecutor(
            max_workers=worker_count,
            thread_name_prefix="chunkcipher-worker",
        )
        futures = [
            loop.run_in_executor(executor, self._apply_chunk, cipher, chunk, mode)
            for chunk in chunks
        ]
        self.logger.debug(
            "Dispatched %d chunks to %d workers", total, worker_count,
            chunk_length=len(chunks[0].text),
        )

        completed = 0
        pending: set[asyncio.Future[ChunkResult]] = set(futures)
        try:
            while pending:
                done, pending = await asyncio.wait(
                    pending,
                    timeout=self.poll_interval,
                    return_when=asyncio.FIRST_EXCEPTION,
                )
                if not done:
                    self.logger.info(
                        "waiting... (%d/%d chunks complete)", completed, total
                    )
                    self._notify(progress, completed, total)
                    continue
                for future in done:
                    future.result()
                completed += len(done)
                self._notify(progress, completed, total)
        except BaseException:
            self._abandon(futures)
            raise
        finally:
            executor.shutdown(wait=False, cancel_futures=True)

        results = sorted((future.result() for future in futures), key=lambda r: r.index)
        return "".join(result.text for result in results)

    # ------------------------------------------------------------------ #
    #  Internal helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _apply_chunk(cipher: Cipher, chunk: Chunk, mode: CipherMode) -> ChunkResult:
        try:
            text = cipher.apply_cipher(chunk.text, mode)
        except InvalidKey:
            raise
        except Exception as exc:
            raise ChunkProcessingError(chunk.index, exc) from exc
        return ChunkResult(index=chunk.index, text=text)

    def _abandon(self, futures: Sequence[asyncio.Future[ChunkResult]]) -> None:
        """Cancel unstarted chunks and consume sibling failures."""
        cancelled = 0
        for future in futures:
            if not future.done():
                future.cancel()
                cancelled += 1
            elif not future.cancelled():
                # Mark secondary failures as retrieved; the first one is re-raised.
                future.exception()
        self.logger.warning(
            "Run aborted; discarded %d unfinished chunks", cancelled
        )

    def _notify(
        self, progress: Optional[ProgressCallback], completed: int, total: int
    ) -> None:
        if progress is not None:
            progress(completed, total)
