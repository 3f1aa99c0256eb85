"""
ChunkCipher CLI
================

Click-based command-line interface. Reads text from a file or stdin,
reduces it to the working alphabet, applies the requested cipher across
parallel chunks and writes the result to a file or stdout.

Usage::

    python -m chunkcipher run -c caesar -k 3 -i plain.txt
    python -m chunkcipher run -c vigenere -k LEMON --decrypt -i secret.txt -o out.txt
    echo "attack at dawn" | python -m chunkcipher run -c playfair -k playfairexample
    python -m chunkcipher families

References:
    - Click Documentation. https://click.palletsprojects.com/
"""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Generator, Optional

import click

from common.config import ToolkitConfig
from common.console import ToolkitConsole
from common.logger import configure_logging

from chunkcipher import __version__
from chunkcipher.core.engine import CipherEngine
from chunkcipher.core.exceptions import (
    ChunkCipherError,
    InputReadError,
    OutputWriteError,
)
from chunkcipher.core.factory import CipherFactory
from chunkcipher.core.models import CipherFamily, CipherMode
from chunkcipher.core.runner import ProgressCallback, run_blocking
from chunkcipher.output.console import CipherConsoleOutput
from chunkcipher.output.report import RunReportWriter
from chunkcipher.parsers.text_filter import filter_text

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


# ===================================================================== #
#  CLI Group
# ===================================================================== #

@click.group()
@click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to a ChunkCipher configuration file (TOML).",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Suppress banner, progress and summary output.",
)
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Override the configured log level.",
)
@click.version_option(__version__, prog_name="chunkcipher", message="%(version)s")
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[str],
    quiet: bool,
    log_level: Optional[str],
) -> None:
    """ChunkCipher -- encrypt/decrypt alphanumeric text with classical ciphers.

    Text is split into chunks that are processed by parallel workers and
    reassembled in order.
    """
    ctx.ensure_object(dict)

    try:
        toolkit_config = ToolkitConfig.load(config)
    except ValueError as exc:
        raise click.ClickException(f"invalid configuration: {exc}") from exc

    settings = toolkit_config.global_settings
    configure_logging(
        log_level=log_level or ("DEBUG" if settings.debug else settings.log_level),
        log_file=settings.log_file,
        json_logs=settings.log_json,
    )

    console = ToolkitConsole(quiet=quiet)
    ctx.obj["config"] = toolkit_config
    ctx.obj["quiet"] = quiet
    ctx.obj["console"] = console
    ctx.obj["engine"] = CipherEngine(toolkit_config)
    ctx.obj["display"] = CipherConsoleOutput(console)
    ctx.obj["reporter"] = RunReportWriter()


# ===================================================================== #
#  I/O helpers
# ===================================================================== #

def _read_input(input_file: Optional[str]) -> str:
    if input_file is None:
        with click.open_file("-", encoding="utf-8") as stream:
            return stream.read()
    try:
        return Path(input_file).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InputReadError(
            f"failed to read input file '{input_file}'",
            {"path": input_file},
        ) from exc


def _write_output(output_file: Optional[str], text: str) -> None:
    if output_file is None:
        click.echo(text)
        return
    try:
        Path(output_file).write_text(text + "\n", encoding="utf-8")
    except OSError as exc:
        raise OutputWriteError(
            f"failed to write output file '{output_file}'",
            {"path": output_file},
        ) from exc


@contextmanager
def _progress_reporter(
    console: ToolkitConsole,
) -> Generator[Optional[ProgressCallback], None, None]:
    """Yield a runner progress callback bound to a Rich progress bar."""
    if console.quiet:
        yield None
        return

    with console.progress("Applying cipher") as (bar, task_id):
        def on_progress(completed: int, total: int) -> None:
            bar.update(task_id, completed=completed, total=total)

        yield on_progress


# ===================================================================== #
#  Subcommands
# ===================================================================== #

@cli.command()
@click.option(
    "-i", "--input", "input_file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Read text to be processed from FILE (stdin if omitted).",
)
@click.option(
    "-o", "--output", "output_file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write processed text to FILE (stdout if omitted).",
)
@click.option(
    "-c", "--cipher", "family",
    type=click.Choice([family.value for family in CipherFamily], case_sensitive=False),
    default=None,
    help="Cipher family (default from configuration: caesar).",
)
@click.option(
    "-k", "--key",
    required=True,
    help="Cipher key; rules depend on the family (see `families`).",
)
@click.option(
    "--encrypt/--decrypt",
    default=True,
    help="Encrypt (default) or decrypt the input text.",
)
@click.option(
    "-w", "--workers",
    type=click.IntRange(min=1),
    default=None,
    help="Number of parallel workers (default from configuration: 10).",
)
@click.option(
    "--report", "report_file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Also write a JSON run report to FILE.",
)
@click.pass_context
def run(
    ctx: click.Context,
    input_file: Optional[str],
    output_file: Optional[str],
    family: Optional[str],
    key: str,
    encrypt: bool,
    workers: Optional[int],
    report_file: Optional[str],
) -> None:
    """Encrypt or decrypt text with the chosen cipher."""
    config: ToolkitConfig = ctx.obj["config"]
    console: ToolkitConsole = ctx.obj["console"]
    engine: CipherEngine = ctx.obj["engine"]
    display: CipherConsoleOutput = ctx.obj["display"]
    reporter: RunReportWriter = ctx.obj["reporter"]

    console.banner(version=__version__)
    mode = CipherMode.ENCRYPT if encrypt else CipherMode.DECRYPT
    family = family or config.runner.default_family

    try:
        text = filter_text(_read_input(input_file))
        with _progress_reporter(console) as on_progress:
            report = run_blocking(
                engine.process(family, key, mode, text, workers, on_progress)
            )
        _write_output(output_file, report.output)
        if report_file:
            path = reporter.generate_json(report, Path(report_file))
            console.success(f"JSON report saved to: {path}")
    except ChunkCipherError as exc:
        console.error(exc.message)
        ctx.exit(1)

    if not console.quiet:
        display.display_report(report)


@cli.command()
@click.pass_context
def families(ctx: click.Context) -> None:
    """List supported cipher families and their key rules."""
    display: CipherConsoleOutput = ctx.obj["display"]
    display.display_families(CipherFactory.families())


# ===================================================================== #
#  Entry Point
# ===================================================================== #

def main() -> None:
    """Main entry point for the ChunkCipher CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
