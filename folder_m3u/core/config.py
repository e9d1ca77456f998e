"""Run flags and sort policy."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SortPolicy(Enum):
    """How files inside a directory group are ordered."""
    NONE = "none"                    # Enumeration order
    ALPHABETICAL = "alphabetical"    # Full path, ascending
    MODIFIED_TIME = "modified-time"  # Last write time, ascending


# Markers recognised in a program file name, e.g. "playlist--R+--A+.exe"
RECURSE_MARKER = "--R+"
ALPHABETICAL_MARKER = "--A+"
MODIFIED_TIME_MARKER = "--D+"


@dataclass(frozen=True, slots=True)
class GeneratorFlags:
    """The three switches a playlist run is driven by."""
    recurse: bool = False
    sort_alphabetical: bool = False
    sort_by_time: bool = False

    @property
    def sort_policy(self) -> SortPolicy:
        """Resolve the sort flags.

        Alphabetical wins when both sort flags are set.
        """
        if self.sort_alphabetical:
            return SortPolicy.ALPHABETICAL
        if self.sort_by_time:
            return SortPolicy.MODIFIED_TIME
        return SortPolicy.NONE

    def merged_with(self, other: "GeneratorFlags") -> "GeneratorFlags":
        """Return flags set in either self or other."""
        return GeneratorFlags(
            recurse=self.recurse or other.recurse,
            sort_alphabetical=self.sort_alphabetical or other.sort_alphabetical,
            sort_by_time=self.sort_by_time or other.sort_by_time,
        )


def flags_from_program_name(name: str) -> GeneratorFlags:
    """Read flags encoded in an executable's file name."""
    return GeneratorFlags(
        recurse=RECURSE_MARKER in name,
        sort_alphabetical=ALPHABETICAL_MARKER in name,
        sort_by_time=MODIFIED_TIME_MARKER in name,
    )
