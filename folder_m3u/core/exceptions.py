"""Fatal errors raised by a playlist run.

Per-file problems are never raised; they are collected in
``RunDiagnostics`` instead.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional


class PlaylistGeneratorError(Exception):
    """Base class for errors that abort a run."""

    def __init__(self, operation: str, path: Path, cause: Optional[BaseException] = None):
        self.operation = operation
        self.path = path
        self.cause = cause
        message = f"{operation}: {path}"
        if cause is not None:
            message = f"{message} ({cause})"
        super().__init__(message)


class ScanError(PlaylistGeneratorError):
    """The root directory cannot be scanned."""


class PlaylistWriteError(PlaylistGeneratorError):
    """The playlist file cannot be created or written."""


class DiagnosticsSinkError(PlaylistGeneratorError):
    """The diagnostics log cannot be created."""
