"""ID3 tag handler using mutagen."""

from pathlib import Path
from typing import Optional

from mutagen import MutagenError
from mutagen.id3 import ID3, ID3NoHeaderError, TIT2, TPE1, TALB

from id3_retagger.models import TagReadResult, TagReadStatus, TrackMetadata


class ID3Handler:
    """Handles reading and writing ID3 tags using mutagen."""

    # Tags are always written as ID3v2.4, whatever the source carried
    TAG_VERSION = 4

    def load_tag(self, file_path: str) -> TagReadResult:
        """
        Read the ID3 tag embedded in a file.

        Args:
            file_path: Path to audio file

        Returns:
            TagReadResult: PARSED with the tag, ABSENT when the file has no
            tag, MALFORMED with the error when a tag could not be parsed
        """
        try:
            tags = ID3(file_path)
        except ID3NoHeaderError:
            return TagReadResult(status=TagReadStatus.ABSENT)
        except (MutagenError, OSError) as e:
            return TagReadResult(status=TagReadStatus.MALFORMED, error=e)
        return TagReadResult(status=TagReadStatus.PARSED, tags=tags)

    def set_fields(self, tags: ID3, artist: str, title: str, album: str) -> ID3:
        """
        Overwrite artist, title and album; every other frame is kept.

        Returns:
            The same tag object, for chaining
        """
        tags.add(TPE1(encoding=3, text=artist))
        tags.add(TIT2(encoding=3, text=title))
        tags.add(TALB(encoding=3, text=album))
        return tags

    def save_tag(self, tags: ID3, file_path: str) -> None:
        """
        Write a tag into an existing file, replacing the tag it carries.

        Raises:
            MutagenError: If the tag could not be written
        """
        tags.save(str(file_path), v2_version=self.TAG_VERSION)

    def read_tags(self, file_path: str) -> TrackMetadata:
        """
        Read the editable fields of a file's tag.

        Args:
            file_path: Path to audio file

        Returns:
            TrackMetadata with current tags (empty if the file has no tag)
        """
        result = self.load_tag(file_path)
        if result.status != TagReadStatus.PARSED:
            return TrackMetadata()

        tags = result.tags
        return TrackMetadata(
            artist=self._get_tag_str(tags, "TPE1"),
            title=self._get_tag_str(tags, "TIT2"),
            album=self._get_tag_str(tags, "TALB"),
            track_number=self._get_tag_str(tags, "TRCK"),
        )

    @staticmethod
    def tag_version(file_path: str) -> Optional[tuple]:
        """Return the ID3 version tuple of a file's tag, e.g. (2, 4, 0)."""
        if not Path(file_path).is_file():
            return None
        try:
            return ID3(file_path).version
        except MutagenError:
            return None

    def _get_tag_str(self, tags: ID3, key: str) -> Optional[str]:
        """Get string value from ID3 tag."""
        tag = tags.get(key)
        if tag:
            value = str(tag[0]) if hasattr(tag, "__getitem__") else str(tag)
            return value if value else None
        return None
