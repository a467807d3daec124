"""CSV report rendering and writing."""

import csv
from pathlib import Path

from rms_report.config import CSV_HEADER
from rms_report.core.models import AnalysisResult
from rms_report.errors import WriteError
from rms_report.utils.logger import get_logger

logger = get_logger(__name__)


def render_report(results: list[AnalysisResult]) -> str:
    """Render results as report text.

    The header comes first, then one row per result in the given order.
    Every line ends with a newline. Fields are not quoted, so a file name
    containing a comma produces an extra column.

    Args:
        results: Measurements in processing order

    Returns:
        Report text
    """
    lines = [CSV_HEADER]
    lines.extend(result.to_csv_row() for result in results)
    return "".join(f"{line}\n" for line in lines)


def read_report(path: Path) -> list[tuple[str, float, float]]:
    """Parse a report back into (file name, raw RMS, RMS dBFS) rows.

    Args:
        path: Path to a report written by ReportWriter

    Returns:
        Rows in file order, header excluded
    """
    rows = []
    with open(path, newline="", encoding="utf-8") as f:
        reader = csv.reader(f)
        header = next(reader, None)
        if header != CSV_HEADER.split(","):
            raise ValueError(f"Not an RMS report: unexpected header {header}")
        for file_name, raw_rms, rms_dbfs in reader:
            rows.append((file_name, float(raw_rms), float(rms_dbfs)))
    return rows


class ReportWriter:
    """Write RMS reports to disk."""

    def write(self, results: list[AnalysisResult], output_path: Path) -> Path:
        """Replace the file at output_path with a freshly rendered report.

        Args:
            results: Measurements in processing order
            output_path: Destination path

        Returns:
            Path to the written report

        Raises:
            WriteError: If the old file cannot be removed, or the new
                content cannot be encoded or written
        """
        content = render_report(results)

        try:
            data = content.encode("utf-8")
        except UnicodeEncodeError as e:
            raise WriteError(f"Failed to encode report content as UTF-8: {e}") from e

        try:
            if output_path.exists():
                logger.debug(f"Removing existing file {output_path}")
                output_path.unlink()
            output_path.write_bytes(data)
        except OSError as e:
            raise WriteError(
                f"Failed to write content to a .csv file at {output_path}: {e}"
            ) from e

        logger.debug(f"Wrote {len(results)} row(s) to {output_path}")
        return output_path
