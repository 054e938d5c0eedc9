"""Tests for models.py data classes."""

import sys
from pathlib import Path

import pytest
from mutagen import MutagenError
from mutagen.id3 import ID3, TPE1

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from id3_retagger.models import TagReadResult, TagReadStatus, TrackMetadata


class TestTagReadResult:
    """Tests for TagReadResult."""

    def test_parsed_returns_loaded_tag(self):
        """Should build on the parsed tag itself."""
        tags = ID3()
        tags.add(TPE1(encoding=3, text="Artist"))
        result = TagReadResult(status=TagReadStatus.PARSED, tags=tags)
        assert result.base_tags() is tags
        assert result.is_malformed is False

    def test_absent_returns_empty_tag(self):
        """Should start from an empty tag when none was present."""
        base = TagReadResult(status=TagReadStatus.ABSENT).base_tags()
        assert isinstance(base, ID3)
        assert len(base.keys()) == 0

    def test_malformed_has_no_base(self):
        """Should refuse to build on a tag that failed to parse."""
        result = TagReadResult(status=TagReadStatus.MALFORMED,
                               error=MutagenError("bad header"))
        assert result.is_malformed is True
        with pytest.raises(ValueError, match="bad header"):
            result.base_tags()


class TestTrackMetadata:
    """Tests for TrackMetadata."""

    def test_defaults_to_empty(self):
        """Should have every field unset by default."""
        meta = TrackMetadata()
        assert meta.artist is None
        assert meta.title is None
        assert meta.album is None
        assert meta.track_number is None

    def test_matches(self):
        """Should compare only artist, title and album."""
        meta = TrackMetadata(artist="A", title="T", album="B", track_number="3")
        assert meta.matches("A", "T", "B") is True
        assert meta.matches("A", "T", "Other") is False

    def test_matches_unset_as_empty(self):
        """Should treat an unset field as an empty value."""
        meta = TrackMetadata(artist="A", title="T")
        assert meta.matches("A", "T", "") is True
        assert meta.matches("A", "T", "B") is False
