"""
ID3 Retagger - rewrite the artist/title/album of an MP3 file into a renamed copy.

This package provides tools to:
- Read an existing ID3 tag (or start from an empty one)
- Overwrite the artist, title and album frames
- Save the result as "<artist> - <title>.mp3" in an export folder, tagged as ID3v2.4
"""

__version__ = "1.0.0"
