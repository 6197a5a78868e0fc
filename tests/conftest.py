"""
Pytest configuration and fixtures for filesense tests.
"""

import os
from pathlib import Path

import pytest

from filesense.core.types import FileRecord
from filesense.shared.file_utils import file_extension


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    """Keep FILESENSE_* variables and stray .env files out of the tests."""
    for name in list(os.environ):
        if name.startswith("FILESENSE_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


def make_file(path: Path, size: int = 16) -> Path:
    """Create a file of the given size filled with recognizable bytes."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(path.name.encode("utf-8").ljust(size, b".")[:size])
    return path


@pytest.fixture
def downloads(tmp_path) -> Path:
    """A folder holding report.pdf (500000 bytes) and photo.jpg (200000 bytes)."""
    folder = tmp_path / "Downloads"
    folder.mkdir()
    make_file(folder / "report.pdf", 500000)
    make_file(folder / "photo.jpg", 200000)
    return folder


@pytest.fixture
def mixed_folder(tmp_path) -> Path:
    """A folder with files of several categories plus a subdirectory."""
    folder = tmp_path / "mixed"
    folder.mkdir()
    for name in [
        "notes.txt",
        "song.MP3",
        "clip.mkv",
        "backup.tar.gz",
        "script.py",
        "installer.dmg",
        "README",
        ".bashrc",
        "data.unknownext",
    ]:
        make_file(folder / name)
    make_file(folder / "nested" / "inner.pdf")
    return folder


def record_for(path: Path) -> FileRecord:
    """Build a FileRecord for an existing file."""
    return FileRecord(
        name=path.name,
        path=path,
        size=path.stat().st_size,
        extension=file_extension(path.name),
    )
