"""Media file classification by extension and file name."""
from __future__ import annotations

import re
from pathlib import Path

from ..core.models import MediaEntry, Verdict


AUDIO_EXTENSIONS = frozenset({
    ".mp3", ".wav", ".ogg", ".flac", ".m4a", ".aac",
})

VIDEO_EXTENSIONS = frozenset({
    ".mp4", ".avi", ".mkv", ".mov", ".wmv",
})

MEDIA_EXTENSIONS = AUDIO_EXTENSIONS | VIDEO_EXTENSIONS

ILLEGAL_CHARACTERS = '<>:"/\\|?*'

# Illegal-character-free prefix, a dot, then a final segment without dots
VALID_NAME_PATTERN = re.compile(r'[^<>:"/\\|?*]+\.[^.]+')


def normalize_extension(extension: str) -> str:
    ext = extension.lower()
    if ext and not ext.startswith("."):
        ext = "." + ext
    return ext


def is_audio_video_file(extension: str) -> bool:
    """Check an extension ("mp3" or ".MP3") against the media allow-list."""
    return normalize_extension(extension) in MEDIA_EXTENSIONS


def is_valid_media_file_name(file_name: str) -> bool:
    """Check a file name for illegal characters and an extension segment."""
    return VALID_NAME_PATTERN.fullmatch(file_name) is not None


def classify(path: Path) -> MediaEntry:
    """Classify a regular file by its name.

    Files outside the allow-list are NOT_MEDIA even if their name is
    malformed; only media files are checked for a valid name.
    """
    if not is_audio_video_file(path.suffix):
        return MediaEntry(path=path, verdict=Verdict.NOT_MEDIA)
    if not is_valid_media_file_name(path.name):
        return MediaEntry(
            path=path,
            verdict=Verdict.INVALID_NAME,
            reason=f"skipping file with invalid name: {path.name}",
        )
    return MediaEntry(path=path, verdict=Verdict.ELIGIBLE)
