"""Shared fixtures: write small WAV files with known sample values."""
from pathlib import Path

import numpy as np
import pytest
import soundfile as sf


@pytest.fixture
def write_wav():
    """Return a helper that writes float32 samples to a WAV file."""

    def _write(path: Path, samples, sample_rate: int = 44100, subtype: str = "FLOAT") -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        data = np.asarray(samples, dtype=np.float32)
        sf.write(str(path), data, sample_rate, subtype=subtype)
        return path

    return _write


@pytest.fixture
def sample_dir(tmp_path, write_wav):
    """A directory with two samples, one of them in a subfolder."""
    root = tmp_path / "samples"
    write_wav(root / "square.wav", [1.0, -1.0, 1.0, -1.0])
    write_wav(root / "half" / "half.wav", [0.5, 0.5])
    return root
