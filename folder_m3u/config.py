from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from .core.config import GeneratorFlags


class AppConfig(BaseModel):
    """Settings for one command-line run.

    Validated before the generator is built.
    """
    root_dir: Path = Field(
        ...,  # Required - no default
        description="Directory to scan; the playlist is written here"
    )
    recurse: bool = Field(
        default=False,
        description="Include files in sub-directories"
    )
    sort_alphabetical: bool = Field(
        default=False,
        description="Sort each directory's files by path"
    )
    sort_by_time: bool = Field(
        default=False,
        description="Sort each directory's files by modification time"
    )
    log_dir: Optional[Path] = Field(
        default=None,
        description="Directory for error logs (default: root_dir)"
    )

    @field_validator("root_dir")
    @classmethod
    def expand_root(cls, value: Path) -> Path:
        value = value.expanduser().resolve()
        if not value.is_dir():
            raise ValueError(f"Not a directory: {value}")
        return value

    @field_validator("log_dir")
    @classmethod
    def expand_log_dir(cls, value: Optional[Path]) -> Optional[Path]:
        if value is None:
            return None
        return value.expanduser().resolve()

    def to_flags(self) -> GeneratorFlags:
        return GeneratorFlags(
            recurse=self.recurse,
            sort_alphabetical=self.sort_alphabetical,
            sort_by_time=self.sort_by_time,
        )

    def resolve_log_dir(self) -> Path:
        if self.log_dir:
            return self.log_dir
        return self.root_dir
