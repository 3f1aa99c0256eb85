"""
ChunkCipher Console Output
===========================

Rich-based console output for pipeline runs: a run summary panel and
the table of supported cipher families.

Uses the shared :class:`~common.console.ToolkitConsole` infrastructure
for consistent styling.
"""

from __future__ import annotations

from typing import Optional

from rich.panel import Panel
from rich.text import Text

from common.console import ToolkitConsole
from chunkcipher.core.models import CipherFamily, RunReport

_FAMILY_COLOURS: dict[str, str] = {
    "caesar": "bright_green",
    "playfair": "bright_magenta",
    "vigenere": "bright_cyan",
}

_KEY_RULES: dict[CipherFamily, tuple[str, str]] = {
    CipherFamily.CAESAR: (
        "integer shift, e.g. 3 or -5 (reduced mod 26)",
        "1",
    ),
    CipherFamily.PLAYFAIR: (
        "letters only; J folded into I, repeats dropped",
        "2",
    ),
    CipherFamily.VIGENERE: (
        "letters only, case-insensitive",
        "key length",
    ),
}

_PREVIEW_LENGTH = 60


class CipherConsoleOutput:
    """Console formatters for ChunkCipher results.

    Usage::

        console = ToolkitConsole()
        output = CipherConsoleOutput(console)
        output.display_report(report)
        output.display_families([CipherFamily.CAESAR])
    """

    def __init__(self, console: Optional[ToolkitConsole] = None) -> None:
        self.console = console or ToolkitConsole()

    def display_report(self, report: RunReport) -> None:
        """Display a run summary with chunking statistics and an output preview."""
        self.console.section("Run Summary")
        colour = _FAMILY_COLOURS.get(report.family.value, "white")

        summary = Text()
        summary.append("Cipher: ", style="bold")
        summary.append(f"{report.family.value}\n", style=colour)
        summary.append("Mode: ", style="bold")
        summary.append(f"{report.mode.value}\n")
        summary.append("Workers: ", style="bold")
        summary.append(f"{report.worker_count}\n")
        summary.append("Chunks: ", style="bold")
        summary.append(f"{report.chunk_count} x {report.chunk_length} chars\n")
        summary.append("Characters: ", style="bold")
        summary.append(f"{report.input_length:,} in / {report.output_length:,} out\n")
        summary.append("Elapsed: ", style="bold")
        summary.append(f"{report.elapsed_seconds:.3f} s\n")

        preview = report.output[:_PREVIEW_LENGTH]
        if len(report.output) > _PREVIEW_LENGTH:
            preview += "..."
        summary.append("Output: ", style="bold")
        summary.append(preview or "(empty)", style="chunk.dim")

        self.console.print(Panel(summary, border_style=colour, padding=(0, 2)))

    def display_families(self, families: list[CipherFamily]) -> None:
        """Render the supported families with their key rules."""
        rows = []
        for family in families:
            rule, alignment = _KEY_RULES[family]
            colour = _FAMILY_COLOURS.get(family.value, "white")
            rows.append((f"[{colour}]{family.value}[/{colour}]", rule, alignment))

        self.console.table(
            "Supported Cipher Families",
            ["Family", "Key Rule", "Chunk Alignment"],
            rows,
        )
