"""Playlist naming and serialization."""
from __future__ import annotations

import logging
import os
import re
from datetime import datetime
from pathlib import Path
from typing import Iterable, Optional

from ..core.exceptions import PlaylistWriteError
from ..core.models import DirectoryGroup, PlaylistDocument, RunDiagnostics
from ..date_utils import format_run_timestamp

logger = logging.getLogger(__name__)

PLAYLIST_EXTENSION = ".m3u"
DEFAULT_PLAYLIST_NAME = "default_playlist.m3u"

ILLEGAL_NAME_CHARS = re.compile(r'[<>:"/\\|?*]')


def sanitize_file_name(file_name: str) -> str:
    """Replace characters that are illegal in file names and trim spaces.

    Falls back to ``default_playlist.m3u`` when nothing is left.
    """
    sanitized = ILLEGAL_NAME_CHARS.sub("_", file_name).strip(" ")
    return sanitized or DEFAULT_PLAYLIST_NAME


class PlaylistWriter:
    """Builds the playlist document and writes it next to the media."""

    def choose_file_name(self, root: Path, now: Optional[datetime] = None) -> str:
        """Pick a playlist name in root that does not clobber an existing file.

        ``<root name>.m3u`` when free, otherwise ``<root name>-<timestamp>.m3u``.
        Two collisions within the same second are not disambiguated.
        """
        name = sanitize_file_name(root.name + PLAYLIST_EXTENSION)
        if (root / name).exists():
            stamped = f"{root.name}-{format_run_timestamp(now)}{PLAYLIST_EXTENSION}"
            name = sanitize_file_name(stamped)
            logger.debug(f"Playlist name taken, using {name}")
        return name

    def build_document(
        self,
        root: Path,
        groups: Iterable[DirectoryGroup],
        file_name: str,
        diagnostics: RunDiagnostics,
    ) -> PlaylistDocument:
        """Express each grouped file relative to root.

        Groups are emitted in directory order; files keep their group order.
        A file that cannot be made relative, or whose name is not valid
        UTF-8, is reported and left out.
        """
        entries: list[str] = []
        for group in sorted(groups, key=lambda g: g.directory):
            for path in group.paths:
                try:
                    relative = str(path.relative_to(root))
                    relative.encode("utf-8")
                except ValueError as e:
                    # UnicodeEncodeError is a ValueError too
                    diagnostics.error(
                        path,
                        f"Error calculating relative path for: {os.fsencode(path)!r}. {e}",
                    )
                    continue
                entries.append(relative)
        return PlaylistDocument(file_name=file_name, entries=tuple(entries))

    def write(self, root: Path, document: PlaylistDocument) -> Path:
        """Write the document to root using the platform line terminator.

        Raises:
            PlaylistWriteError: If the file cannot be created or written.
        """
        target = root / document.file_name
        try:
            with open(target, "w", encoding="utf-8") as f:
                for line in document.lines():
                    f.write(line + "\n")
        except OSError as e:
            raise PlaylistWriteError("Unable to create playlist file", target, e) from e

        logger.debug(f"Wrote {len(document)} entries to {target}")
        return target
