#!/usr/bin/env python3
"""Line Filter CLI - Entry point for sorting lines into category files.

Usage:
    # Sort lines of two files into ./integers.txt, ./floats.txt, ./strings.txt
    python main.py in1.txt in2.txt

    # Write to ./out with a prefix, appending to existing files, print counts
    python main.py in1.txt -o ./out -p sample- -a -s

    # Print the full statistics breakdown
    python main.py in1.txt -f
"""

import sys
import logging
from pathlib import Path
from typing import Optional, Tuple

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from contracts import FilterJob
from errors import LineFilterError
from router import LineRouter
from aggregator import StatisticsAggregator
from config import settings


err_console = Console(stderr=True)


def configure_logging(verbose: bool = False) -> None:
    """Send log records to stderr through rich.

    Args:
        verbose: Log routing details at DEBUG instead of warnings only
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def build_job(
    input_files: Tuple[Path, ...],
    output_dir: Optional[str],
    prefix: Optional[str],
    append: Optional[bool],
    input_dir: Optional[str],
) -> FilterJob:
    """Merge command-line options over the global settings."""
    return FilterJob(
        input_files=list(input_files),
        output_dir=Path(output_dir) if output_dir else settings.get_output_path(),
        prefix=prefix if prefix is not None else settings.prefix,
        append=append if append is not None else settings.append,
        input_dir=Path(input_dir) if input_dir else settings.get_input_path(),
        encoding=settings.encoding,
    )


@click.command(name="line-filter")
@click.argument(
    "input_files",
    nargs=-1,
    type=click.Path(path_type=Path),
)
@click.option(
    "--output", "-o", "output_dir",
    default=None,
    help=f"Output directory (default: {settings.output_dir})"
)
@click.option(
    "--prefix", "-p",
    default=None,
    help="Prefix for output file names"
)
@click.option(
    "--append/--no-append", "-a",
    default=lambda: settings.append,
    help="Append to existing output files instead of overwriting them (default: from settings)"
)
@click.option(
    "--short", "-s", "show_short",
    is_flag=True,
    help="Show short statistics (counts only)"
)
@click.option(
    "--full", "-f", "show_full",
    is_flag=True,
    help="Show full statistics (wins over --short)"
)
@click.option(
    "--input-dir", "-i", "input_dir",
    default=None,
    help="Base directory for relative input paths (default: current directory)"
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Verbose output"
)
def main(
    input_files: Tuple[Path, ...],
    output_dir: Optional[str],
    prefix: Optional[str],
    append: Optional[bool],
    show_short: bool,
    show_full: bool,
    input_dir: Optional[str],
    verbose: bool,
):
    """Line Filter: sort lines into integers, floats and strings.

    Every line of INPUT_FILES is written to integers.txt, floats.txt or
    strings.txt in the output directory, optionally followed by statistics.
    """
    configure_logging(verbose)

    # Both flags given: fall through to the full report
    if show_short and show_full:
        show_short = False

    job = build_job(input_files, output_dir, prefix, append, input_dir)

    try:
        LineRouter(job).route()

        report = None
        if show_full:
            report = StatisticsAggregator(job).full_statistics()
        elif show_short:
            report = StatisticsAggregator(job).short_statistics()
    except LineFilterError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        sys.exit(1)

    if report is not None:
        click.echo(report)


if __name__ == "__main__":
    main()
