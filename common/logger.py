"""
ChunkCipher Structured Logger
==============================

Logging for every ChunkCipher component goes through the ``chunkcipher``
logger hierarchy:

    - a Rich handler renders records on stderr, keeping stdout free for
      cipher output;
    - an optional rotating file handler writes plain lines or JSON lines.

Components log through :class:`ToolkitLogger`, which tags records with
the component name, the current operation and any structured fields.

References:
    - Python logging cookbook. https://docs.python.org/3/howto/logging-cookbook.html
    - Rich logging handler. https://rich.readthedocs.io/en/stable/logging.html
"""

from __future__ import annotations

import json
import logging
import time
from contextlib import contextmanager
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Iterator

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

_ROOT_NAME = "chunkcipher"

_LEVEL_STYLES = Theme(
    {
        "logging.level.debug": "dim cyan",
        "logging.level.info": "bright_blue",
        "logging.level.warning": "bold yellow",
        "logging.level.error": "bold red",
        "logging.level.critical": "bold white on red",
    }
)

_PLAIN_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Attributes ToolkitLogger attaches to records, in JSON output order.
_CONTEXT_FIELDS = ("component", "operation")


# ========================== Formatters =====================================


class _JSONFormatter(logging.Formatter):
    """One JSON object per record.

    Example line::

        {"timestamp": "2024-05-01T10:00:00+00:00", "level": "INFO",
         "logger": "chunkcipher.runner", "message": "Dispatched 10 chunks",
         "component": "runner", "operation": "vigenere:encrypt",
         "extra": {"chunk_length": 42}}
    """

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        entry: dict[str, Any] = {
            "timestamp": created.isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(
            (name, getattr(record, name))
            for name in _CONTEXT_FIELDS
            if getattr(record, name, None) is not None
        )
        if getattr(record, "chunk_extra", None):
            entry["extra"] = record.chunk_extra
        if record.exc_info and record.exc_info[0] is not None:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


# ========================== Handlers =======================================


def _console_handler(level: int) -> RichHandler:
    return RichHandler(
        console=Console(theme=_LEVEL_STYLES, stderr=True),
        level=level,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )


def _file_handler(
    path: Path, level: int, json_logs: bool, max_bytes: int, backup_count: int
) -> RotatingFileHandler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
    )
    handler.setLevel(level)
    handler.setFormatter(_JSONFormatter() if json_logs else logging.Formatter(_PLAIN_FORMAT))
    return handler


def configure_logging(
    *,
    log_level: str = "WARNING",
    log_file: str | Path | None = None,
    json_logs: bool = False,
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 5,
    console_output: bool = True,
) -> logging.Logger:
    """(Re)configure the handlers of the ``chunkcipher`` logger.

    Handlers from a previous call are closed and replaced, so the CLI can
    call this once per invocation.

    Args:
        log_level: Level name; unknown names fall back to WARNING.
        log_file: Rotating log file, or ``None`` for console only.
        json_logs: Write JSON lines instead of plain text to *log_file*.
        max_bytes: Rotation threshold for *log_file*.
        backup_count: Rotated files kept next to *log_file*.
        console_output: Attach the Rich stderr handler.
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.WARNING

    root = logging.getLogger(_ROOT_NAME)
    root.setLevel(level)
    root.propagate = False
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()

    if console_output:
        root.addHandler(_console_handler(level))
    if log_file is not None:
        root.addHandler(
            _file_handler(Path(log_file), level, json_logs, max_bytes, backup_count)
        )
    return root


# ========================== ToolkitLogger ==================================


class Stopwatch:
    """Elapsed-time reading handed out by :meth:`ToolkitLogger.timed`."""

    __slots__ = ("_start", "_stop")

    def __init__(self) -> None:
        self._start = time.perf_counter()
        self._stop: float | None = None

    def stop(self) -> None:
        self._stop = time.perf_counter()

    @property
    def elapsed(self) -> float:
        """Seconds since start, frozen once the watch is stopped."""
        end = self._stop if self._stop is not None else time.perf_counter()
        return end - self._start


class ToolkitLogger(logging.LoggerAdapter):
    """Adapter binding log records to one ChunkCipher component.

    Records carry the ``component`` name and the current ``operation``
    (set with :meth:`operation`). Keyword arguments that are not standard
    ``logging`` arguments end up in the ``extra`` field of JSON log lines.

    Usage::

        log = ToolkitLogger("runner")
        with log.operation("encrypt"):
            log.info("Dispatching %d chunks", 10, chunk_length=42)
        with log.timed("vigenere run") as watch:
            ...
        watch.elapsed
    """

    _STANDARD_KWARGS = frozenset({"exc_info", "stack_info", "stacklevel", "extra"})

    def __init__(self, component: str) -> None:
        super().__init__(logging.getLogger(f"{_ROOT_NAME}.{component}"), {})
        self._component = component
        self._operation: str | None = None

    @property
    def component(self) -> str:
        return self._component

    def process(self, msg: Any, kwargs: Any) -> tuple[Any, Any]:
        fields = {
            key: kwargs.pop(key)
            for key in list(kwargs)
            if key not in self._STANDARD_KWARGS
        }
        extra = dict(kwargs.get("extra") or {})
        extra["component"] = self._component
        extra["operation"] = self._operation
        if fields:
            extra["chunk_extra"] = fields
        kwargs["extra"] = extra
        return msg, kwargs

    @contextmanager
    def operation(self, name: str) -> Iterator[ToolkitLogger]:
        """Tag every record logged inside the block with *name*."""
        previous, self._operation = self._operation, name
        try:
            yield self
        finally:
            self._operation = previous

    @contextmanager
    def timed(self, label: str) -> Iterator[Stopwatch]:
        """Log the start and successful completion of *label* with its duration."""
        self.debug("Started: %s", label)
        watch = Stopwatch()
        yield watch
        watch.stop()
        self.info("Completed: %s (%.3f sec)", label, watch.elapsed)
