"""Folder-to-playlist generator.

Scans a directory for audio and video files and writes an .m3u playlist
of their relative paths, grouped by directory.
"""

__version__ = "1.0.0"

# Core exports
from .core.config import GeneratorFlags, SortPolicy, flags_from_program_name
from .core.models import (
    MediaEntry,
    DirectoryGroup,
    PlaylistDocument,
    RunDiagnostics,
    GenerationResult,
)
from .core.exceptions import (
    PlaylistGeneratorError,
    PlaylistWriteError,
    DiagnosticsSinkError,
    ScanError,
)

# Engine exports
from .engines.classifier import is_audio_video_file, is_valid_media_file_name

# Service exports
from .services.generator import PlaylistGenerator, generate_playlist
from .services.playlist_writer import sanitize_file_name

# Logging exports
from .logging.rich_logger import RichProgressReporter

__all__ = [
    # Core
    "GeneratorFlags",
    "SortPolicy",
    "flags_from_program_name",
    "MediaEntry",
    "DirectoryGroup",
    "PlaylistDocument",
    "RunDiagnostics",
    "GenerationResult",
    "PlaylistGeneratorError",
    "PlaylistWriteError",
    "DiagnosticsSinkError",
    "ScanError",
    # Engines
    "is_audio_video_file",
    "is_valid_media_file_name",
    # Services
    "PlaylistGenerator",
    "generate_playlist",
    "sanitize_file_name",
    # Logging
    "RichProgressReporter",
]
