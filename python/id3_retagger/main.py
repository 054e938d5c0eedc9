#!/usr/bin/env python3
"""
ID3 Retagger - save an MP3 under a new artist/title/album.

Usage:
    python -m id3_retagger /path/to/song.mp3 --artist A --title T --album B [options]
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from id3_retagger.commands import invoke
from id3_retagger.config import eprint, load_config, resolve_export_dir
from id3_retagger.id3_handler import ID3Handler
from id3_retagger.models import TrackMetadata
from id3_retagger.retagger import build_filename

SUCCESS_PREFIX = "Successfully saved to "


def build_parser() -> argparse.ArgumentParser:
    """Build argument parser."""
    parser = argparse.ArgumentParser(
        description="Rewrite the artist, title and album of an MP3 file and "
                    "save it as '<artist> - <title>.mp3'.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Save a retagged copy next to the source
  python -m id3_retagger song.mp3 --artist "Artist" --title "Title" --album "Album"

  # Save it into another folder
  python -m id3_retagger song.mp3 -a "Artist" -t "Title" -b "Album" --export-dir out/
"""
    )

    parser.add_argument(
        "path",
        help="Path to the MP3 file to retag"
    )

    parser.add_argument(
        "--export-dir", "-o",
        help="Folder to save the retagged copy in "
             "(default: $ID3_RETAGGER_EXPORT_DIR, else the source's folder)"
    )

    # Tag values
    parser.add_argument(
        "--artist", "-a",
        required=True,
        help="New artist"
    )

    parser.add_argument(
        "--title", "-t",
        required=True,
        help="New title"
    )

    parser.add_argument(
        "--album", "-b",
        required=True,
        help="New album"
    )

    # Configuration
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to .env file (default: ./.env)"
    )

    # Verbosity
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only print the result line"
    )

    return parser


def show_written_tags(metadata: TrackMetadata, version: Optional[tuple]) -> None:
    """Print the tag as read back from the written file."""
    print(f"{'Field':<10} Value")
    print(f"{'=' * 10} {'=' * 30}")
    for field, value in [
        ("Artist", metadata.artist),
        ("Title", metadata.title),
        ("Album", metadata.album),
        ("Track #", metadata.track_number),
    ]:
        print(f"{field:<10} {value or '(empty)'}")
    if version:
        print(f"{'Tag':<10} ID3v{version[0]}.{version[1]}")


def main(argv=None):
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    config = load_config(args.env_file, quiet=args.quiet)
    export_dir = resolve_export_dir(config, args.path, args.export_dir)

    # Surrounding whitespace is never part of a tag value
    artist, title, album = args.artist.strip(), args.title.strip(), args.album.strip()
    result = invoke(
        "modify",
        file_path=args.path,
        export_path=export_dir,
        artist=artist,
        title=title,
        album=album,
    )

    if not result.startswith(SUCCESS_PREFIX):
        eprint(result)
        sys.exit(1)

    print(result)

    new_file = Path(export_dir) / build_filename(artist, title)
    handler = ID3Handler()
    metadata = handler.read_tags(str(new_file))
    if not args.quiet:
        show_written_tags(metadata, handler.tag_version(str(new_file)))

    if not metadata.matches(artist, title, album):
        eprint(f"Error: tag read back from {new_file} does not match the requested values")
        sys.exit(1)


if __name__ == "__main__":
    main()
