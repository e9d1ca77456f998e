"""Side log for non-fatal problems."""
from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Iterable, Optional

from ..core.exceptions import DiagnosticsSinkError
from ..core.models import RunDiagnostics
from ..date_utils import format_run_timestamp

logger = logging.getLogger(__name__)


def log_file_name(now: Optional[datetime] = None) -> str:
    return f"error-{format_run_timestamp(now)}.txt"


class DiagnosticsLogWriter:
    """Writes ``error-<timestamp>.txt`` files."""

    def write(
        self,
        diagnostics: RunDiagnostics,
        directory: Path,
        now: Optional[datetime] = None,
    ) -> Optional[Path]:
        """Flush diagnostics to a log file.

        Returns:
            The log path, or None if there was nothing to report.

        Raises:
            DiagnosticsSinkError: If the log file cannot be created.
        """
        if not diagnostics.has_problems:
            return None
        return self.write_lines(diagnostics.lines(), directory, now)

    def write_lines(
        self,
        lines: Iterable[str],
        directory: Path,
        now: Optional[datetime] = None,
    ) -> Path:
        """Append lines to the log file for this second."""
        target = directory / log_file_name(now)
        try:
            with open(target, "a", encoding="utf-8", errors="backslashreplace") as f:
                for line in lines:
                    f.write(line + "\n")
        except OSError as e:
            raise DiagnosticsSinkError("Unable to create error log file", target, e) from e

        logger.debug(f"Wrote diagnostics to {target}")
        return target
