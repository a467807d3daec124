"""Utility modules."""

from rms_report.utils.conversion import linear_to_dbfs
from rms_report.utils.logger import get_logger, setup_logging

__all__ = [
    "linear_to_dbfs",
    "get_logger",
    "setup_logging",
]
