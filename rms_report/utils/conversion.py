"""Linear amplitude to dBFS conversion."""

import math


def linear_to_dbfs(linear: float) -> float:
    """Convert a linear amplitude to dBFS (decibels relative to full scale).

    0 dBFS = 1.0 (full scale), negative values are quieter. The sign of
    the input is ignored.

    Args:
        linear: Linear amplitude value

    Returns:
        Value in dBFS. Silence (0.0) maps to -inf and NaN stays NaN.
    """
    magnitude = abs(linear)
    if math.isnan(magnitude):
        return math.nan
    if magnitude == 0:
        return float("-inf")
    return 20 * math.log10(magnitude)
