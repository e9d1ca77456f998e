"""Tests for the diagnostics log writer."""
import pytest
from datetime import datetime
from pathlib import Path

from folder_m3u.core.exceptions import DiagnosticsSinkError
from folder_m3u.core.models import RunDiagnostics
from folder_m3u.services.diagnostics_log import DiagnosticsLogWriter, log_file_name


class TestDiagnosticsLogWriter:
    """Tests for DiagnosticsLogWriter."""

    NOW = datetime(2024, 6, 15, 10, 30, 45)

    def test_log_file_name(self):
        assert log_file_name(self.NOW) == "error-20240615-103045.txt"

    def test_nothing_to_write(self, tmp_path):
        assert DiagnosticsLogWriter().write(RunDiagnostics(), tmp_path, self.NOW) is None
        assert list(tmp_path.iterdir()) == []

    def test_writes_each_diagnostic(self, tmp_path):
        diagnostics = RunDiagnostics()
        diagnostics.warning(tmp_path / "x|y.mp3", "skipping file with invalid name: x|y.mp3")
        diagnostics.error(tmp_path / "z.mp3", "Error calculating relative path for: z.mp3. boom")

        path = DiagnosticsLogWriter().write(diagnostics, tmp_path, self.NOW)

        assert path == tmp_path / "error-20240615-103045.txt"
        assert path.read_text(encoding="utf-8").splitlines() == [
            "Warning: skipping file with invalid name: x|y.mp3",
            "Error: Error calculating relative path for: z.mp3. boom",
        ]

    def test_appends_within_same_second(self, tmp_path):
        writer = DiagnosticsLogWriter()
        writer.write_lines(["first"], tmp_path, self.NOW)
        path = writer.write_lines(["second"], tmp_path, self.NOW)
        assert path.read_text(encoding="utf-8").splitlines() == ["first", "second"]

    def test_unwritable_directory_is_fatal(self, tmp_path):
        diagnostics = RunDiagnostics()
        diagnostics.warning(tmp_path / "a.mp3", "problem")

        with pytest.raises(DiagnosticsSinkError) as exc_info:
            DiagnosticsLogWriter().write(diagnostics, tmp_path / "missing", self.NOW)

        assert exc_info.value.operation == "Unable to create error log file"

    def test_unencodable_text_escaped(self, tmp_path):
        path = DiagnosticsLogWriter().write_lines(["bad name caf\udce9.mp3"], tmp_path, self.NOW)
        assert path.read_text(encoding="utf-8") == "bad name caf\\udce9.mp3\n"
