"""Batch RMS loudness report for folders of WAV samples."""

__version__ = "0.1.0"
