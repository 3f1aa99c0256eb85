"""
ChunkCipher Report Generator
=============================

Writes a machine-readable JSON record of a pipeline run, suitable for
CI pipelines and other tooling.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from chunkcipher import __version__
from chunkcipher.core.exceptions import OutputWriteError
from chunkcipher.core.models import RunReport


class RunReportWriter:
    """Serialises :class:`RunReport` objects to JSON files."""

    def build(self, report: RunReport, *, include_output: bool = True) -> dict[str, Any]:
        """Return the JSON-ready report dictionary."""
        data: dict[str, Any] = {
            "report_metadata": {
                "generated_at": datetime.now(timezone.utc).isoformat(),
                "tool": "chunkcipher",
                "version": __version__,
            },
            "run": report.model_dump(mode="json", exclude={"output"}),
        }
        data["run"]["duration_seconds"] = report.duration_seconds
        if include_output:
            data["output"] = report.output
        return data

    def generate_json(
        self,
        report: RunReport,
        output_path: Path,
        *,
        include_output: bool = True,
    ) -> Path:
        """Write the report to *output_path* and return the path.

        Raises:
            OutputWriteError: If the file cannot be written.
        """
        payload = self.build(report, include_output=include_output)
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(
                json.dumps(payload, indent=2, ensure_ascii=False, default=str),
                encoding="utf-8",
            )
        except OSError as exc:
            raise OutputWriteError(
                f"failed to write report file '{output_path}': {exc.strerror or exc}",
                {"path": str(output_path)},
            ) from exc
        return output_path
