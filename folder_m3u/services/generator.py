"""Playlist generation - walks, sorts and writes in one pass."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from ..core.config import GeneratorFlags
from ..core.models import GenerationResult, RunDiagnostics
from ..core.protocols import ProgressReporter
from .diagnostics_log import DiagnosticsLogWriter
from .playlist_writer import PlaylistWriter
from .scanner import DirectoryWalker
from .sorter import GroupSorter

logger = logging.getLogger(__name__)


@dataclass
class GeneratorDependencies:
    """Collaborators used by the generator.

    Explicitly passed in - no globals or singletons.
    """
    walker: DirectoryWalker = field(default_factory=DirectoryWalker)
    writer: PlaylistWriter = field(default_factory=PlaylistWriter)
    log_writer: DiagnosticsLogWriter = field(default_factory=DiagnosticsLogWriter)
    progress: Optional[ProgressReporter] = None


class PlaylistGenerator:
    """Runs the walk -> sort -> write pipeline for one directory.

    Each stage finishes before the next one starts. Only a failure to
    create the playlist or the diagnostics log aborts the run.
    """

    def __init__(self, flags: GeneratorFlags, deps: Optional[GeneratorDependencies] = None):
        self._flags = flags
        self._deps = deps or GeneratorDependencies()

    def generate(self, root_dir: Path, log_dir: Optional[Path] = None) -> GenerationResult:
        """Generate a playlist for root_dir.

        Every diagnostic is known once the document is built, so the log is
        flushed before the playlist is written: a log that cannot be created
        leaves no playlist behind.

        Args:
            root_dir: Directory to scan; the playlist is written here.
            log_dir: Where the diagnostics log goes (default: root_dir).

        Raises:
            ScanError: If root_dir cannot be read.
            PlaylistWriteError: If the playlist cannot be created.
            DiagnosticsSinkError: If diagnostics exist and cannot be logged.
        """
        root = root_dir.resolve()
        diagnostics = RunDiagnostics()
        deps = self._deps

        logger.debug(
            f"Generating playlist for {root} "
            f"(recurse={self._flags.recurse}, sort={self._flags.sort_policy.value})"
        )

        groups = deps.walker.walk(root, self._flags.recurse, diagnostics)
        GroupSorter(self._flags.sort_policy).sort(groups.values(), diagnostics)

        file_name = deps.writer.choose_file_name(root)
        document = deps.writer.build_document(root, groups.values(), file_name, diagnostics)
        diagnostics_path = deps.log_writer.write(diagnostics, log_dir or root)
        playlist_path = deps.writer.write(root, document)

        if deps.progress is not None:
            for diagnostic in diagnostics:
                deps.progress.warning(diagnostic.format())

        return GenerationResult(
            document=document,
            playlist_path=playlist_path,
            diagnostics=diagnostics,
            diagnostics_path=diagnostics_path,
        )


def generate_playlist(
    flags: GeneratorFlags,
    root_dir: Path,
    log_dir: Optional[Path] = None,
    progress: Optional[ProgressReporter] = None,
) -> GenerationResult:
    """Generate a playlist for root_dir with default collaborators."""
    deps = GeneratorDependencies(progress=progress)
    return PlaylistGenerator(flags, deps).generate(root_dir, log_dir)
