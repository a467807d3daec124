"""Batch processing: discover, analyze and report."""

from pathlib import Path
from typing import Callable, Optional

from rms_report.core.discovery import discover_files
from rms_report.core.models import AnalysisResult, BatchSummary, ReportConfig
from rms_report.core.report import ReportWriter
from rms_report.core.rms import RMSAnalyzer
from rms_report.errors import DecodeError
from rms_report.utils.logger import get_logger

logger = get_logger(__name__)


class BatchProcessor:
    """Run the full report pipeline for one configuration."""

    def __init__(
        self,
        analyzer: Optional[RMSAnalyzer] = None,
        writer: Optional[ReportWriter] = None,
    ):
        self.analyzer = analyzer or RMSAnalyzer()
        self.writer = writer or ReportWriter()

    def run(
        self,
        config: ReportConfig,
        on_result: Optional[Callable[[AnalysisResult], None]] = None,
        on_skip: Optional[Callable[[Path, DecodeError], None]] = None,
    ) -> BatchSummary:
        """Analyze every discovered file and write the report.

        Processing order:
        1. Discover files under config.input_directory
        2. Measure each file, in discovery order
        3. Write the report to config.output_path

        Args:
            config: Run configuration
            on_result: Optional callback invoked after each file is measured
            on_skip: Optional callback invoked for each skipped file
                (only with config.keep_going)

        Returns:
            BatchSummary with the results, skipped files and report path

        Raises:
            DiscoveryError: If the input directory cannot be enumerated
            DecodeError: If a file fails to decode and keep_going is off;
                no report is written in that case
            WriteError: If the report cannot be written
        """
        files = discover_files(
            config.input_directory,
            extensions=config.extensions,
            case_sensitive=config.case_sensitive,
            sort=config.sort_files,
        )
        logger.info(f"Found {len(files)} sample file(s) in {config.input_directory}")

        summary = BatchSummary()

        for file_path in files:
            try:
                result = self.analyzer.analyze_file(file_path, config.channel_index)
            except DecodeError as e:
                if not config.keep_going:
                    raise
                logger.error(f"Skipping {file_path}: {e}")
                summary.skipped.append((file_path, e))
                if on_skip:
                    on_skip(file_path, e)
                continue

            summary.results.append(result)
            if on_result:
                on_result(result)

        summary.report_path = self.writer.write(summary.results, config.output_path)
        return summary
