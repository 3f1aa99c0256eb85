"""
ChunkCipher Console Interface
==============================

Rich-powered console abstraction providing a unified presentation layer
for the ChunkCipher CLI: banner, section headers, status lines,
progress bars and tables.

Everything is written to stderr; stdout is reserved for cipher output
so that ``chunkcipher run`` can be used in a shell pipeline.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterable, Iterator, Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

_TOOLKIT_THEME = Theme(
    {
        "chunk.section": "bold bright_magenta",
        "chunk.success": "bold green",
        "chunk.error": "bold red",
        "chunk.info": "bold bright_blue",
        "chunk.dim": "dim white",
        "chunk.highlight": "bold bright_white",
    }
)

_BANNER_ART = r"""[bright_cyan]
   ___ _              _      ___ _      _
  / __| |_ _  _ _ _  | |__  / __(_)_ __| |_  ___ _ _
 | (__| ' \ || | ' \ | / / | (__| | '_ \ ' \/ -_) '_|
  \___|_||_\_,_|_||_||_\_\  \___|_| .__/_||_\___|_|
                                  |_|
[/bright_cyan]"""

_TAGLINE = "Classical ciphers, applied in parallel chunks"


class ToolkitConsole:
    """Presentation layer for the ChunkCipher CLI.

    In *quiet* mode only errors and explicit :meth:`print` calls reach
    the terminal.

    Usage::

        con = ToolkitConsole()
        con.banner(version="0.5.0")
        con.section("Run Summary")
        con.success("JSON report saved")
    """

    _STATUS_PREFIXES = {
        "success": ("[✔] ", "chunk.success"),
        "error": ("[error] ", "chunk.error"),
    }

    def __init__(self, *, quiet: bool = False) -> None:
        self._quiet = quiet
        self._console = Console(theme=_TOOLKIT_THEME, stderr=True, highlight=False)

    @property
    def quiet(self) -> bool:
        return self._quiet

    # ------------------------------------------------------------------ #
    #  Decoration
    # ------------------------------------------------------------------ #

    def banner(self, version: str) -> None:
        """Show the ASCII-art banner, tagline and version."""
        if self._quiet:
            return
        body = Text.from_markup(_BANNER_ART)
        body.append(f"\n{_TAGLINE}\n", style="chunk.highlight")
        body.append(f"Version: {version}", style="chunk.dim")
        self._console.print(
            Panel(Align.center(body), border_style="bright_cyan", padding=(0, 2))
        )

    def section(self, title: str) -> None:
        if not self._quiet:
            self._console.rule(f"  {title}  ", style="chunk.section", characters="─")

    # ------------------------------------------------------------------ #
    #  Status lines
    # ------------------------------------------------------------------ #

    def _status(self, kind: str, message: str) -> None:
        # Keys and file names are user input; never interpret them as markup.
        prefix, style = self._STATUS_PREFIXES[kind]
        line = Text(prefix, style=style)
        line.append(message)
        self._console.print(line, soft_wrap=True)

    def success(self, message: str) -> None:
        if not self._quiet:
            self._status("success", message)

    def error(self, message: str) -> None:
        self._status("error", message)

    # ------------------------------------------------------------------ #
    #  Progress and tables
    # ------------------------------------------------------------------ #

    @contextmanager
    def progress(self, description: str) -> Iterator[tuple[Progress, TaskID]]:
        """Transient progress bar; yields ``(progress, task_id)``.

        The task starts with an unknown total; set it together with the
        completed count through ``progress.update``.
        """
        bar = Progress(
            SpinnerColumn("dots", style="bright_cyan"),
            TextColumn("[chunk.info]{task.description}"),
            BarColumn(bar_width=40, style="bright_cyan", complete_style="bright_green"),
            MofNCompleteColumn(),
            TimeElapsedColumn(),
            console=self._console,
            transient=True,
        )
        with bar:
            yield bar, bar.add_task(description, total=None)

    def table(
        self,
        title: str,
        columns: Sequence[str],
        rows: Iterable[Sequence[Any]],
    ) -> None:
        """Render *rows* under *columns*; cells may carry Rich markup."""
        grid = Table(
            title=title,
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
        )
        for name in columns:
            grid.add_column(name)
        for row in rows:
            grid.add_row(*(str(cell) for cell in row))
        self._console.print(grid)

    def print(self, *renderables: Any, **kwargs: Any) -> None:
        self._console.print(*renderables, **kwargs)
