"""Core domain models and protocols."""
from .protocols import ProgressReporter
from .models import (
    Verdict,
    DiagnosticLevel,
    MediaEntry,
    DirectoryGroup,
    PlaylistDocument,
    Diagnostic,
    RunDiagnostics,
    GenerationResult,
)
from .config import GeneratorFlags, SortPolicy, flags_from_program_name
from .exceptions import (
    PlaylistGeneratorError,
    ScanError,
    PlaylistWriteError,
    DiagnosticsSinkError,
)

__all__ = [
    # Protocols
    "ProgressReporter",
    # Models
    "Verdict",
    "DiagnosticLevel",
    "MediaEntry",
    "DirectoryGroup",
    "PlaylistDocument",
    "Diagnostic",
    "RunDiagnostics",
    "GenerationResult",
    # Config
    "GeneratorFlags",
    "SortPolicy",
    "flags_from_program_name",
    # Errors
    "PlaylistGeneratorError",
    "ScanError",
    "PlaylistWriteError",
    "DiagnosticsSinkError",
]
