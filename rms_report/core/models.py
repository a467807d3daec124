"""Data models for run configuration and per-file RMS measurements."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from rms_report.config import (
    ACCEPTED_EXTENSIONS,
    CSV_SUFFIX,
    DEFAULT_CHANNEL_INDEX,
)
from rms_report.errors import RMSReportError


@dataclass(frozen=True)
class AnalysisResult:
    """RMS measurement of a single sample file."""

    path: Path
    """Path the file was read from."""

    raw_rms: float
    """Linear RMS of the analyzed channel (NaN when the file has no frames)."""

    rms_dbfs: float
    """RMS in dBFS, 20 * log10(|raw_rms|)."""

    @property
    def file_name(self) -> str:
        """Get just the filename."""
        return self.path.name

    def to_csv_row(self) -> str:
        return f"{self.file_name},{self.raw_rms},{self.rms_dbfs}"

    def __str__(self) -> str:
        return f"RMS: {self.raw_rms} | RMS dBFS: {self.rms_dbfs}"


@dataclass
class ReportConfig:
    """Configuration for a single report run."""

    input_directory: Path
    """Directory scanned for sample files (``~`` is expanded)."""

    output_path: Path
    """Where the report is written, relative to the working directory or absolute."""

    channel_index: int = DEFAULT_CHANNEL_INDEX
    """Channel analyzed in every file."""

    extensions: tuple[str, ...] = ACCEPTED_EXTENSIONS
    """Accepted file extensions, without the leading dot."""

    case_sensitive: bool = True
    """Whether extensions must match exactly."""

    sort_files: bool = False
    """Sort discovered files by path instead of using enumeration order."""

    keep_going: bool = False
    """Skip files that fail to decode instead of aborting the run."""

    force_csv_suffix: bool = False
    """Append ``.csv`` to the output path when it has no such suffix."""

    def __post_init__(self):
        self.input_directory = Path(self.input_directory).expanduser()
        self.output_path = Path(self.output_path)
        self.extensions = tuple(ext.lstrip(".") for ext in self.extensions)

        if self.channel_index < 0:
            raise ValueError("Channel index must be zero or greater")
        if not self.extensions or not all(self.extensions):
            raise ValueError("At least one non-empty extension is required")

        if self.force_csv_suffix and self.output_path.suffix.lower() != CSV_SUFFIX:
            self.output_path = self.output_path.with_name(self.output_path.name + CSV_SUFFIX)


@dataclass
class BatchSummary:
    """Outcome of a report run."""

    results: list[AnalysisResult] = field(default_factory=list)
    """Measurements in processing order."""

    skipped: list[tuple[Path, RMSReportError]] = field(default_factory=list)
    """Files left out of the report together with the error that caused it."""

    report_path: Optional[Path] = None
    """Path of the written report."""
