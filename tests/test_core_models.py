"""Tests for core domain models and flags."""
import pytest
from dataclasses import FrozenInstanceError
from pathlib import Path

from folder_m3u.core.config import GeneratorFlags, SortPolicy, flags_from_program_name
from folder_m3u.core.exceptions import PlaylistWriteError, PlaylistGeneratorError
from folder_m3u.core.models import (
    Diagnostic,
    DiagnosticLevel,
    DirectoryGroup,
    GenerationResult,
    MediaEntry,
    PlaylistDocument,
    RunDiagnostics,
    Verdict,
)


class TestGeneratorFlags:
    """Tests for GeneratorFlags."""

    def test_defaults(self):
        flags = GeneratorFlags()
        assert flags.recurse is False
        assert flags.sort_policy is SortPolicy.NONE

    def test_alphabetical(self):
        assert GeneratorFlags(sort_alphabetical=True).sort_policy is SortPolicy.ALPHABETICAL

    def test_by_time(self):
        assert GeneratorFlags(sort_by_time=True).sort_policy is SortPolicy.MODIFIED_TIME

    def test_alphabetical_wins_over_time(self):
        """Both sort flags set resolves to alphabetical."""
        flags = GeneratorFlags(sort_alphabetical=True, sort_by_time=True)
        assert flags.sort_policy is SortPolicy.ALPHABETICAL

    def test_frozen(self):
        flags = GeneratorFlags()
        with pytest.raises(FrozenInstanceError):
            flags.recurse = True

    def test_merged_with(self):
        merged = GeneratorFlags(recurse=True).merged_with(GeneratorFlags(sort_by_time=True))
        assert merged == GeneratorFlags(recurse=True, sort_by_time=True)


class TestFlagsFromProgramName:
    """Tests for reading flags from an executable name."""

    def test_no_markers(self):
        assert flags_from_program_name("folder-m3u.exe") == GeneratorFlags()

    def test_all_markers(self):
        flags = flags_from_program_name("playlist--R+--A+--D+.exe")
        assert flags == GeneratorFlags(recurse=True, sort_alphabetical=True, sort_by_time=True)

    def test_single_marker(self):
        flags = flags_from_program_name("m3u--D+.exe")
        assert flags.sort_by_time
        assert not flags.recurse
        assert not flags.sort_alphabetical

    def test_marker_needs_plus(self):
        assert flags_from_program_name("m3u--R.exe") == GeneratorFlags()


class TestMediaEntry:
    """Tests for MediaEntry dataclass."""

    def test_name(self):
        entry = MediaEntry(path=Path("/music/a.mp3"), verdict=Verdict.ELIGIBLE)
        assert entry.name == "a.mp3"
        assert entry.is_eligible

    def test_immutable(self):
        entry = MediaEntry(path=Path("/music/a.mp3"), verdict=Verdict.ELIGIBLE)
        with pytest.raises(FrozenInstanceError):
            entry.verdict = Verdict.NOT_MEDIA


class TestDirectoryGroup:
    """Tests for DirectoryGroup."""

    def test_len_and_iter(self):
        group = DirectoryGroup(Path("/music"), [Path("/music/a.mp3"), Path("/music/b.mp3")])
        assert len(group) == 2
        assert list(group) == [Path("/music/a.mp3"), Path("/music/b.mp3")]

    def test_default_empty(self):
        assert len(DirectoryGroup(Path("/music"))) == 0


class TestPlaylistDocument:
    """Tests for PlaylistDocument."""

    def test_lines_start_with_header(self):
        doc = PlaylistDocument(file_name="music.m3u", entries=("a.mp3", "sub/b.mp3"))
        assert doc.lines() == ["#EXTM3U", "a.mp3", "sub/b.mp3"]
        assert len(doc) == 2

    def test_empty_document(self):
        assert PlaylistDocument(file_name="music.m3u").lines() == ["#EXTM3U"]


class TestRunDiagnostics:
    """Tests for RunDiagnostics accumulator."""

    def test_starts_empty(self):
        diagnostics = RunDiagnostics()
        assert not diagnostics.has_problems
        assert len(diagnostics) == 0
        assert diagnostics.lines() == []

    def test_warning_and_error(self):
        diagnostics = RunDiagnostics()
        diagnostics.warning(Path("/m/x.mp3"), "skipping file with invalid name: x.mp3")
        diagnostics.error(Path("/m/y.mp3"), "Error calculating relative path for: /m/y.mp3")

        assert diagnostics.has_problems
        assert diagnostics.warning_count == 1
        assert diagnostics.error_count == 1
        assert diagnostics.lines() == [
            "Warning: skipping file with invalid name: x.mp3",
            "Error: Error calculating relative path for: /m/y.mp3",
        ]

    def test_returns_diagnostic(self):
        diagnostics = RunDiagnostics()
        result = diagnostics.warning(Path("/m/x.mp3"), "oops")
        assert result == Diagnostic(DiagnosticLevel.WARNING, Path("/m/x.mp3"), "oops")
        assert list(diagnostics) == [result]


class TestGenerationResult:
    """Tests for GenerationResult."""

    def test_properties(self, tmp_path: Path):
        doc = PlaylistDocument(file_name="music.m3u", entries=("a.mp3",))
        result = GenerationResult(
            document=doc,
            playlist_path=tmp_path / "music.m3u",
            diagnostics=RunDiagnostics(),
        )
        assert result.playlist_name == "music.m3u"
        assert result.entry_count == 1
        assert result.diagnostics_path is None


class TestExceptions:
    """Tests for fatal error types."""

    def test_carries_operation_and_path(self):
        err = PlaylistWriteError("Unable to create playlist file", Path("/x/y.m3u"), OSError("denied"))
        assert isinstance(err, PlaylistGeneratorError)
        assert err.operation == "Unable to create playlist file"
        assert err.path == Path("/x/y.m3u")
        assert "/x/y.m3u" in str(err)
        assert "denied" in str(err)
