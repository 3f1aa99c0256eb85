"""
ChunkCipher Configuration Management
=====================================

Centralized configuration for the ChunkCipher toolkit using Python
dataclasses and TOML-based persistence.

Architecture follows the Twelve-Factor App methodology for configuration
management (Wiggins, 2011), separating config from code.

Example ``chunkcipher.toml``::

    [global]
    log_level = "DEBUG"

    [runner]
    worker_count = 4
    poll_interval = 0.5
    default_family = "vigenere"

References:
    - Wiggins, A. (2011). The Twelve-Factor App. https://12factor.net/
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
"""

from __future__ import annotations

import sys
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


# ---------------------------------------------------------------------------
# Default configuration file path relative to the project root
# ---------------------------------------------------------------------------
_DEFAULT_CONFIG_PATH: Path = (
    Path(__file__).resolve().parent.parent / "chunkcipher.toml"
)


# ========================== Section Configs ================================


@dataclass(slots=True)
class RunnerConfig:
    """Configuration for the chunked cipher runner.

    ``worker_count`` is the number of chunks (and pool threads) a run is
    split into; ``poll_interval`` is the cadence, in seconds, of the
    "waiting..." progress notifications while workers are busy.

    Raises:
        ValueError: On construction, if a value is of the wrong type or
            out of range.
    """

    worker_count: int = 10
    poll_interval: float = 1.0
    default_family: str = "caesar"

    def __post_init__(self) -> None:
        if isinstance(self.worker_count, bool) or not isinstance(self.worker_count, int):
            raise ValueError(
                f"runner.worker_count must be an integer, got {self.worker_count!r}"
            )
        if self.worker_count < 1:
            raise ValueError(
                f"runner.worker_count must be >= 1, got {self.worker_count}"
            )
        if not isinstance(self.poll_interval, (int, float)) or self.poll_interval <= 0:
            raise ValueError(
                f"runner.poll_interval must be a number > 0, got {self.poll_interval!r}"
            )


@dataclass(slots=True)
class GlobalConfig:
    """Settings shared by every ChunkCipher component.

    ``debug`` forces DEBUG logging unless ``--log-level`` is given.
    """

    log_level: str = "WARNING"
    log_file: str | None = None
    log_json: bool = False
    debug: bool = False


def _section(cls: type, data: dict[str, Any]) -> Any:
    # Keys the dataclass does not declare are ignored.
    known = {f.name for f in fields(cls)}
    return cls(**{key: value for key, value in data.items() if key in known})


# =========================== Master Config =================================


@dataclass(slots=True)
class ToolkitConfig:
    """Configuration tree for the toolkit: ``[global]`` and ``[runner]``.

    Usage:
        >>> ToolkitConfig.load().runner.worker_count       # default path
        10
        >>> config = ToolkitConfig.load("custom.toml")      # explicit path
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    runner: RunnerConfig = field(default_factory=RunnerConfig)

    @classmethod
    def load(cls, path: str | Path | None = None) -> ToolkitConfig:
        """Read a TOML file into a :class:`ToolkitConfig`.

        Without *path*, ``chunkcipher.toml`` in the project root is used
        when it exists and the built-in defaults otherwise.

        Raises:
            FileNotFoundError: If an explicit *path* does not exist.
            ValueError: If a runner setting is invalid.
        """
        if path is None:
            if not _DEFAULT_CONFIG_PATH.is_file():
                return cls()
            config_path = _DEFAULT_CONFIG_PATH
        else:
            config_path = Path(path)
            if not config_path.is_file():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")

        raw = tomllib.loads(config_path.read_text(encoding="utf-8"))
        return cls(
            global_settings=_section(GlobalConfig, raw.get("global", {})),
            runner=_section(RunnerConfig, raw.get("runner", {})),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

