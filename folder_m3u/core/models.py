"""Domain models for a playlist run."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterator, Optional


M3U_HEADER = "#EXTM3U"


class Verdict(Enum):
    """Classifier outcome for a filesystem entry."""
    ELIGIBLE = "eligible"
    NOT_MEDIA = "not_media"
    INVALID_NAME = "invalid_name"


class DiagnosticLevel(Enum):
    WARNING = "Warning"
    ERROR = "Error"


@dataclass(frozen=True, slots=True)
class MediaEntry:
    """A regular file found by the walker, with its classification."""
    path: Path
    verdict: Verdict
    reason: Optional[str] = None

    @property
    def is_eligible(self) -> bool:
        return self.verdict is Verdict.ELIGIBLE

    @property
    def name(self) -> str:
        return self.path.name


@dataclass(slots=True)
class DirectoryGroup:
    """Eligible files sharing one containing directory.

    Only the order of ``paths`` may change once the walker is done.
    """
    directory: Path
    paths: list[Path] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.paths)

    def __iter__(self) -> Iterator[Path]:
        return iter(self.paths)


@dataclass(frozen=True, slots=True)
class PlaylistDocument:
    """What gets written: a file name and its relative-path lines."""
    file_name: str
    entries: tuple[str, ...] = ()
    header: str = M3U_HEADER

    def lines(self) -> list[str]:
        return [self.header, *self.entries]

    def __len__(self) -> int:
        return len(self.entries)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """One non-fatal problem met during a run."""
    level: DiagnosticLevel
    path: Path
    message: str

    def format(self) -> str:
        return f"{self.level.value}: {self.message}"


@dataclass(slots=True)
class RunDiagnostics:
    """Accumulated warnings and errors for one run."""
    entries: list[Diagnostic] = field(default_factory=list)

    def warning(self, path: Path, message: str) -> Diagnostic:
        return self._add(DiagnosticLevel.WARNING, path, message)

    def error(self, path: Path, message: str) -> Diagnostic:
        return self._add(DiagnosticLevel.ERROR, path, message)

    def _add(self, level: DiagnosticLevel, path: Path, message: str) -> Diagnostic:
        diagnostic = Diagnostic(level=level, path=path, message=message)
        self.entries.append(diagnostic)
        return diagnostic

    @property
    def has_problems(self) -> bool:
        return bool(self.entries)

    @property
    def warning_count(self) -> int:
        return sum(1 for d in self.entries if d.level is DiagnosticLevel.WARNING)

    @property
    def error_count(self) -> int:
        return sum(1 for d in self.entries if d.level is DiagnosticLevel.ERROR)

    def lines(self) -> list[str]:
        return [d.format() for d in self.entries]

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.entries)


@dataclass(frozen=True, slots=True)
class GenerationResult:
    """Outcome of a successful run."""
    document: PlaylistDocument
    playlist_path: Path
    diagnostics: RunDiagnostics
    diagnostics_path: Optional[Path] = None

    @property
    def playlist_name(self) -> str:
        return self.document.file_name

    @property
    def entry_count(self) -> int:
        return len(self.document)
