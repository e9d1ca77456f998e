"""Service layer - walking, sorting and writing."""
from .scanner import DirectoryWalker
from .sorter import GroupSorter
from .playlist_writer import PlaylistWriter, sanitize_file_name
from .diagnostics_log import DiagnosticsLogWriter
from .generator import (
    GeneratorDependencies,
    PlaylistGenerator,
    generate_playlist,
)

__all__ = [
    "DirectoryWalker",
    "GroupSorter",
    "PlaylistWriter",
    "sanitize_file_name",
    "DiagnosticsLogWriter",
    "GeneratorDependencies",
    "PlaylistGenerator",
    "generate_playlist",
]
