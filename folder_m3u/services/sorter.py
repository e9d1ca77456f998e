"""Per-directory ordering of playlist entries."""
from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Iterable

from ..core.config import SortPolicy
from ..core.models import DirectoryGroup, RunDiagnostics

logger = logging.getLogger(__name__)


class GroupSorter:
    """Reorders the files of each group in place.

    Alphabetical order compares ``Path`` objects, so it follows the
    platform's path ordering: case-sensitive on POSIX, case-insensitive
    on Windows. Modification-time order is stable; files whose timestamp
    cannot be read are reported and placed after all others.
    """

    def __init__(self, policy: SortPolicy):
        self._policy = policy

    @property
    def policy(self) -> SortPolicy:
        return self._policy

    def sort(self, groups: Iterable[DirectoryGroup], diagnostics: RunDiagnostics) -> None:
        if self._policy is SortPolicy.NONE:
            return
        for group in groups:
            if self._policy is SortPolicy.ALPHABETICAL:
                group.paths.sort()
            else:
                self._sort_by_modified_time(group, diagnostics)
            logger.debug(f"Sorted {len(group)} files in {group.directory} ({self._policy.value})")

    def _sort_by_modified_time(self, group: DirectoryGroup, diagnostics: RunDiagnostics) -> None:
        def key(path: Path) -> float:
            try:
                return path.stat().st_mtime
            except OSError as e:
                diagnostics.warning(
                    path, f"cannot read modification time for: {path} ({e}); placed last"
                )
                return math.inf

        group.paths.sort(key=key)
