"""RMS loudness measurement."""

import math
from pathlib import Path
from typing import Optional

import numpy as np

from rms_report.config import DEFAULT_CHANNEL_INDEX
from rms_report.core.decoder import SampleDecoder
from rms_report.core.models import AnalysisResult
from rms_report.utils.conversion import linear_to_dbfs
from rms_report.utils.logger import get_logger

logger = get_logger(__name__)


def calculate_rms(samples: np.ndarray) -> float:
    """Root mean square of a flat sequence of samples.

    Squares are accumulated in float64 so long float32 buffers keep
    their precision.

    Args:
        samples: Sample values

    Returns:
        RMS value (>= 0), or NaN when there are no samples
    """
    samples = np.asarray(samples)
    if samples.size == 0:
        return math.nan
    squares = np.square(samples, dtype=np.float64)
    return float(np.sqrt(np.mean(squares)))


class RMSAnalyzer:
    """Measure the RMS of sample files."""

    def __init__(self, decoder: Optional[SampleDecoder] = None):
        self.decoder = decoder or SampleDecoder()

    def analyze_samples(self, path: Path, samples: np.ndarray) -> AnalysisResult:
        """Build the result for samples already decoded from ``path``."""
        raw_rms = calculate_rms(samples)
        if math.isnan(raw_rms):
            logger.warning(f"{path.name} contains no frames, RMS is undefined")
        return AnalysisResult(
            path=path,
            raw_rms=raw_rms,
            rms_dbfs=linear_to_dbfs(raw_rms),
        )

    def analyze_file(
        self,
        path: Path,
        channel_index: int = DEFAULT_CHANNEL_INDEX,
    ) -> AnalysisResult:
        """Decode a file and measure its RMS.

        Args:
            path: Path to the audio file
            channel_index: Channel to measure

        Returns:
            AnalysisResult for the file

        Raises:
            DecodeError: If the file cannot be decoded
        """
        samples = self.decoder.read_channel(path, channel_index)
        return self.analyze_samples(path, samples)
