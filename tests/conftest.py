"""Pytest configuration and shared fixtures."""

import os
from pathlib import Path
from typing import Callable, Dict, Optional

import pytest
from PIL import Image as PILImage


@pytest.fixture
def make_image() -> Callable[..., Path]:
    """
    Factory that writes a small image, optionally with base-IFD EXIF tags.

    Tags are given as {tag_id: value}, e.g. {271: "Canon"} for Make.
    """
    def _make_image(path: Path, tags: Optional[Dict[int, str]] = None) -> Path:
        img = PILImage.new("RGB", (16, 16), color="red")
        if tags:
            exif = PILImage.Exif()
            for tag_id, value in tags.items():
                exif[tag_id] = value
            img.save(path, exif=exif)
        else:
            img.save(path)
        return path

    return _make_image


@pytest.fixture
def sample_directory(tmp_path: Path, make_image) -> Path:
    """
    Create a directory with a mix of entries:
    - photo.jpg with Make=Canon
    - notes.txt
    - a sub-directory (with a file inside)
    - a symlink to notes.txt
    """
    make_image(tmp_path / "photo.jpg", {271: "Canon"})
    (tmp_path / "notes.txt").write_text("some notes")
    (tmp_path / "albums").mkdir()
    (tmp_path / "albums" / "nested.jpg").write_bytes(b"nested")
    (tmp_path / "link.txt").symlink_to(tmp_path / "notes.txt")
    return tmp_path


@pytest.fixture
def non_utf8_name(tmp_path: Path) -> str:
    """
    Create a regular file whose name is not valid UTF-8 (b"caf\\xe9.txt").

    Skipped where the filesystem or platform refuses such names.
    """
    name = os.fsdecode(b"caf\xe9.txt")
    try:
        (tmp_path / name).write_text("menu")
    except (OSError, UnicodeError):
        pytest.skip("filesystem does not accept non-UTF-8 file names")
    return name
