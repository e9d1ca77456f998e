"""Directory walking service."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

from ..core.exceptions import ScanError
from ..core.models import DirectoryGroup, MediaEntry, RunDiagnostics, Verdict
from ..engines.classifier import classify

logger = logging.getLogger(__name__)


class DirectoryWalker:
    """Finds media files under a root and buckets them by directory.

    Groups come back in the order their first file was found.
    """

    def __init__(self, follow_symlinks: bool = False):
        """Initialize the walker.

        Args:
            follow_symlinks: Whether to descend into symlinked directories.
        """
        self._follow_symlinks = follow_symlinks

    def walk(
        self,
        root: Path,
        recursive: bool,
        diagnostics: RunDiagnostics,
    ) -> dict[Path, DirectoryGroup]:
        """Enumerate eligible files under root.

        Args:
            root: Directory to scan.
            recursive: Whether to scan sub-directories too.
            diagnostics: Collects files skipped for invalid names.

        Returns:
            Mapping of directory to its group. Empty if nothing qualifies.

        Raises:
            ScanError: If root is not a readable directory.
        """
        if not root.is_dir():
            raise ScanError("Root is not a directory", root)
        try:
            root_stat = root.stat()
            top_level = list(root.iterdir())
        except OSError as e:
            raise ScanError("Unable to read root directory", root, e) from e

        visited = {(root_stat.st_dev, root_stat.st_ino)}
        groups: dict[Path, DirectoryGroup] = {}
        for entry in self._entries(top_level, recursive, diagnostics, visited):
            if entry.verdict is Verdict.INVALID_NAME:
                logger.debug(f"Invalid name: {entry.path}")
                diagnostics.warning(entry.path, entry.reason or entry.name)
                continue
            if not entry.is_eligible:
                continue

            key = entry.path.parent if recursive else root
            group = groups.get(key)
            if group is None:
                group = groups[key] = DirectoryGroup(directory=key)
            group.paths.append(entry.path)

        logger.debug(
            f"Walked {root}: {sum(len(g) for g in groups.values())} files "
            f"in {len(groups)} groups"
        )
        return groups

    def _entries(
        self,
        children: list[Path],
        recursive: bool,
        diagnostics: RunDiagnostics,
        visited: set[tuple[int, int]],
    ) -> Iterator[MediaEntry]:
        """Classify regular files, descending into directories if asked.

        ``visited`` holds (device, inode) of directories already entered so
        a followed symlink back to an ancestor is not walked again.
        """
        for child in children:
            if child.is_file():
                yield classify(child)
            elif recursive and child.is_dir():
                if child.is_symlink() and not self._follow_symlinks:
                    continue
                try:
                    st = child.stat()
                    identity = (st.st_dev, st.st_ino)
                    if identity in visited:
                        logger.debug(f"Already walked, skipping: {child}")
                        continue
                    visited.add(identity)
                    grandchildren = list(child.iterdir())
                except OSError as e:
                    diagnostics.warning(child, f"skipping unreadable directory: {child} ({e})")
                    continue
                yield from self._entries(grandchildren, recursive, diagnostics, visited)
