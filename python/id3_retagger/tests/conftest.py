"""Shared test fixtures for id3_retagger tests."""

import sys
from pathlib import Path

import pytest
from mutagen.id3 import ID3, TPE1, TIT2, TRCK

# Add the python/ directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

# One silent MPEG-1 Layer III frame header followed by padding
AUDIO_BYTES = b"\xff\xfb\x90\x64" + b"\x00" * 413


@pytest.fixture
def untagged_mp3(tmp_path):
    """An MP3 file without any ID3 tag."""
    path = tmp_path / "song.mp3"
    path.write_bytes(AUDIO_BYTES)
    return path


@pytest.fixture
def tagged_mp3(tmp_path):
    """An MP3 file with an ID3v2.3 tag carrying artist, title and track number."""
    path = tmp_path / "tagged.mp3"
    path.write_bytes(AUDIO_BYTES)

    tags = ID3()
    tags.add(TPE1(encoding=3, text="Old Artist"))
    tags.add(TIT2(encoding=3, text="Old Title"))
    tags.add(TRCK(encoding=3, text="7/12"))
    tags.save(str(path), v2_version=3)
    return path


@pytest.fixture
def malformed_mp3(tmp_path):
    """An MP3 file whose ID3 header claims an unknown major version."""
    path = tmp_path / "broken.mp3"
    path.write_bytes(b"ID3\x09\x00\x00\x00\x00\x00\x00" + AUDIO_BYTES)
    return path


@pytest.fixture
def export_dir(tmp_path):
    """A not yet existing export folder."""
    return tmp_path / "out"
