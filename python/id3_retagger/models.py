"""Data models for ID3 Retagger."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from mutagen.id3 import ID3


class TagReadStatus(Enum):
    """Outcome of reading the ID3 tag of a source file."""
    ABSENT = "absent"
    PARSED = "parsed"
    MALFORMED = "malformed"


@dataclass
class TagReadResult:
    """Result of reading a tag: the parsed tag, nothing, or the parse error."""
    status: TagReadStatus
    tags: Optional[ID3] = None
    error: Optional[Exception] = None

    @property
    def is_malformed(self) -> bool:
        return self.status == TagReadStatus.MALFORMED

    def base_tags(self) -> ID3:
        """Tag to build on: the parsed tag, or an empty one when none was present."""
        if self.status == TagReadStatus.PARSED:
            return self.tags
        if self.status == TagReadStatus.ABSENT:
            return ID3()
        raise ValueError(f"No usable tag: {self.error}")


@dataclass
class TrackMetadata:
    """Fields of a track's tag, as shown to the user."""
    artist: Optional[str] = None
    title: Optional[str] = None
    album: Optional[str] = None
    track_number: Optional[str] = None

    def matches(self, artist: str, title: str, album: str) -> bool:
        """Check if the three editable fields hold the given values (unset reads as "")."""
        return (self.artist or "", self.title or "", self.album or "") == (artist, title, album)
