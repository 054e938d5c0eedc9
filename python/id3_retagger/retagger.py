"""Rewrite the artist/title/album of an MP3 into a renamed, retagged copy."""

import shutil
from pathlib import Path
from typing import Optional

from mutagen import MutagenError

from id3_retagger.id3_handler import ID3Handler


class RetagError(Exception):
    """Base class for failures while producing a retagged copy."""


class SourceNotFoundError(RetagError):
    """The source path does not reference an existing file."""


class TagReadError(RetagError):
    """The source carries a tag that could not be parsed."""


class DirectoryCreateError(RetagError):
    """The export directory could not be created."""


class CopyError(RetagError):
    """The source bytes could not be copied to the destination."""


class TagWriteError(RetagError):
    """The updated tag could not be written into the destination."""


def build_filename(artist: str, title: str) -> str:
    """Name of the exported file: "<artist> - <title>.mp3"."""
    return f"{artist} - {title}.mp3"


def retag_file(source_path: str, export_dir: str, artist: str, title: str,
               album: str, handler: Optional[ID3Handler] = None) -> Path:
    """
    Copy an MP3 into export_dir under its new name and retag the copy.

    Existing frames of the source tag are kept; only artist, title and album
    are overwritten. The source file itself is never modified. An existing
    file at the destination is replaced.

    Args:
        source_path: Path to the source audio file
        export_dir: Folder to save the copy in, created if missing
        artist: New artist, also the first part of the file name
        title: New title, also the second part of the file name
        album: New album
        handler: Tag handler to use (defaults to a new ID3Handler)

    Returns:
        Path of the written file

    Raises:
        RetagError: One of its subclasses, for the step that failed. When the
            tag write fails the copied file is left in place.
    """
    handler = handler or ID3Handler()

    source = Path(source_path)
    if not source.is_file():
        raise SourceNotFoundError(f"Source file not found: {source_path}")

    result = handler.load_tag(str(source))
    if result.is_malformed:
        raise TagReadError(f"Failed to read ID3 tag: {result.error}") from result.error
    tags = handler.set_fields(result.base_tags(), artist, title, album)

    export_path = Path(export_dir)
    try:
        export_path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DirectoryCreateError(
            f"Failed to create export directory: {export_path}"
        ) from e

    new_file = export_path / build_filename(artist, title)

    try:
        shutil.copy(source, new_file)
    except (OSError, shutil.Error) as e:
        raise CopyError(f"Failed to copy file to {new_file}") from e

    try:
        handler.save_tag(tags, str(new_file))
    except (MutagenError, OSError) as e:
        raise TagWriteError(f"Failed to write ID3 tag to {new_file}") from e

    return new_file
