"""Recursive discovery of sample files."""

import os
from pathlib import Path

from rms_report.config import ACCEPTED_EXTENSIONS
from rms_report.errors import DiscoveryError
from rms_report.utils.logger import get_logger

logger = get_logger(__name__)


def _raise_discovery_error(error: OSError) -> None:
    raise DiscoveryError(f"Failed to load path {error.filename}: {error.strerror}") from error


def discover_files(
    directory: Path,
    extensions: tuple[str, ...] = ACCEPTED_EXTENSIONS,
    case_sensitive: bool = True,
    sort: bool = False,
) -> list[Path]:
    """Collect every sample file below a directory.

    Args:
        directory: Directory to walk (all subdirectories, any depth)
        extensions: Accepted extensions without the leading dot
        case_sensitive: Match extensions exactly; otherwise ignore case
        sort: Sort by path instead of keeping filesystem enumeration order

    Returns:
        List of matching file paths

    Raises:
        DiscoveryError: If the directory or any subdirectory cannot be opened
    """
    if case_sensitive:
        accepted = set(extensions)
    else:
        accepted = {ext.lower() for ext in extensions}

    audio_files = []

    for root, _, filenames in os.walk(directory, onerror=_raise_discovery_error):
        for name in filenames:
            ext = os.path.splitext(name)[1].lstrip(".")
            if not case_sensitive:
                ext = ext.lower()
            if ext in accepted:
                audio_files.append(Path(root) / name)

    logger.debug(f"Found {len(audio_files)} file(s) under {directory}")

    if sort:
        return sorted(audio_files)
    return audio_files
