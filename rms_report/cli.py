"""Command-line interface for rms-report."""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from rms_report.config import ACCEPTED_EXTENSIONS, DEFAULT_CHANNEL_INDEX
from rms_report.core.models import AnalysisResult, ReportConfig
from rms_report.core.processor import BatchProcessor
from rms_report.errors import DecodeError, RMSReportError
from rms_report.utils.logger import setup_logging

app = typer.Typer(
    name="rms-report",
    help="RMS loudness report for a folder of WAV samples",
    add_completion=False,
)
console = Console()


def printable(value: object) -> str:
    """Escape text for the console.

    File names that are not valid UTF-8 carry surrogates after decoding;
    those are shown as backslash escapes. Rich markup is escaped too.
    """
    text = str(value).encode("utf-8", "backslashreplace").decode("utf-8")
    return escape(text)


def narrate_result(result: AnalysisResult) -> None:
    """Print one file's measurement as soon as it is available."""
    console.print(f"File: {printable(result.path)}", highlight=False, soft_wrap=True)
    console.print(f"RMS: {result.raw_rms}")
    console.print(f"RMS dBFS: {result.rms_dbfs}\n")


def narrate_skip(path: Path, error: DecodeError) -> None:
    console.print(f"[yellow]Skipped {printable(path)}: {printable(error)}[/yellow]")


def display_rms_table(
    results: list[AnalysisResult],
    title: str = "RMS Analysis",
) -> None:
    """Display RMS measurements in a table.

    Args:
        results: Measurements in processing order
        title: Table title
    """
    table = Table(title=title)
    table.add_column("File", style="cyan", no_wrap=True)
    table.add_column("Raw RMS", justify="right")
    table.add_column("RMS dBFS", justify="right")

    for result in results:
        table.add_row(
            printable(result.file_name),
            f"{result.raw_rms:.6f}",
            f"{result.rms_dbfs:.2f} dBFS",
        )

    console.print(table)


@app.command()
def report(
    path: Annotated[
        Path,
        typer.Option("--path", help="Directory of samples to scan (searched recursively)"),
    ],
    output: Annotated[
        Path,
        typer.Option("--output", help="Report file to write (replaced if it exists)"),
    ],
    extensions: Annotated[
        Optional[list[str]],
        typer.Option("-e", "--ext", help="Accepted file extension (repeatable)"),
    ] = None,
    ignore_case: Annotated[
        bool,
        typer.Option("--ignore-case", help="Match extensions regardless of case"),
    ] = False,
    channel: Annotated[
        int,
        typer.Option("-c", "--channel", min=0, help="Channel to measure in every file"),
    ] = DEFAULT_CHANNEL_INDEX,
    sort: Annotated[
        bool,
        typer.Option("--sort", help="Process files sorted by path"),
    ] = False,
    keep_going: Annotated[
        bool,
        typer.Option("--keep-going", help="Skip files that fail to decode instead of aborting"),
    ] = False,
    csv_suffix: Annotated[
        bool,
        typer.Option("--csv-suffix", help="Append .csv to the output name if missing"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("-v", "--verbose", help="Show debug logging"),
    ] = False,
) -> None:
    """Measure the RMS of every WAV file under --path and write a CSV report.

    Each file is reported as raw linear RMS and RMS in dBFS, computed
    over the whole file for a single channel.
    """
    setup_logging(logging.DEBUG if verbose else logging.INFO)

    config = ReportConfig(
        input_directory=path,
        output_path=output,
        channel_index=channel,
        extensions=tuple(extensions) if extensions else ACCEPTED_EXTENSIONS,
        case_sensitive=not ignore_case,
        sort_files=sort,
        keep_going=keep_going,
        force_csv_suffix=csv_suffix,
    )

    processor = BatchProcessor()

    try:
        summary = processor.run(
            config,
            on_result=narrate_result,
            on_skip=narrate_skip,
        )
    except RMSReportError as e:
        console.print(f"[red]Error: {printable(e)}[/red]")
        raise typer.Exit(1)

    if summary.results:
        display_rms_table(summary.results)
    else:
        console.print("[yellow]No sample files found.[/yellow]")

    if summary.skipped:
        console.print(f"[yellow]Skipped {len(summary.skipped)} file(s).[/yellow]")

    console.print(f"[green]Saved report to {printable(summary.report_path)}[/green]")


if __name__ == "__main__":
    app()
