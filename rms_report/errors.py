"""
Exception classes for rms-report.
"""


class RMSReportError(Exception):
    """Base exception for all rms-report errors."""
    pass


class DiscoveryError(RMSReportError):
    """Raised when the input directory cannot be enumerated."""
    pass


class DecodeError(RMSReportError):
    """Raised when a sample file cannot be opened or decoded."""
    pass


class WriteError(RMSReportError):
    """Raised when the report cannot be written."""
    pass


__all__ = ["RMSReportError", "DiscoveryError", "DecodeError", "WriteError"]
