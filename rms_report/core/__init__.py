"""Core analysis modules."""

from rms_report.core.models import AnalysisResult, BatchSummary, ReportConfig
from rms_report.core.decoder import SampleDecoder
from rms_report.core.discovery import discover_files
from rms_report.core.rms import RMSAnalyzer, calculate_rms
from rms_report.core.report import ReportWriter, read_report, render_report
from rms_report.core.processor import BatchProcessor

__all__ = [
    "AnalysisResult",
    "BatchSummary",
    "ReportConfig",
    "SampleDecoder",
    "discover_files",
    "RMSAnalyzer",
    "calculate_rms",
    "ReportWriter",
    "read_report",
    "render_report",
    "BatchProcessor",
]
