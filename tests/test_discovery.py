"""
Tests for recursive sample discovery.
"""
import pytest

from rms_report.core.discovery import discover_files
from rms_report.errors import DiscoveryError


def _touch(path):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"")
    return path


def test_finds_wav_files_at_any_depth(tmp_path):
    expected = {
        _touch(tmp_path / "a.wav"),
        _touch(tmp_path / "one" / "b.wav"),
        _touch(tmp_path / "one" / "two" / "three" / "c.wav"),
    }
    _touch(tmp_path / "notes.txt")
    _touch(tmp_path / "one" / "d.flac")

    assert set(discover_files(tmp_path)) == expected


def test_extension_match_is_case_sensitive(tmp_path):
    lower = _touch(tmp_path / "lower.wav")
    _touch(tmp_path / "upper.WAV")

    assert discover_files(tmp_path) == [lower]


def test_ignore_case(tmp_path):
    _touch(tmp_path / "lower.wav")
    _touch(tmp_path / "upper.WAV")

    found = discover_files(tmp_path, case_sensitive=False)

    assert sorted(p.name for p in found) == ["lower.wav", "upper.WAV"]


def test_custom_extensions(tmp_path):
    _touch(tmp_path / "a.wav")
    aif = _touch(tmp_path / "b.aif")

    assert discover_files(tmp_path, extensions=("aif",)) == [aif]


def test_name_without_extension_is_ignored(tmp_path):
    _touch(tmp_path / "wav")
    _touch(tmp_path / "archive.wav.bak")

    assert discover_files(tmp_path) == []


def test_sorted_order(tmp_path):
    for name in ["c.wav", "a.wav", "sub/b.wav"]:
        _touch(tmp_path / name)

    found = discover_files(tmp_path, sort=True)

    assert found == sorted(found)
    assert len(found) == 3


def test_empty_directory(tmp_path):
    assert discover_files(tmp_path) == []


def test_missing_directory_raises(tmp_path):
    with pytest.raises(DiscoveryError):
        discover_files(tmp_path / "does-not-exist")
