"""Logging package with Rich-based console reporting."""

from .rich_logger import RichProgressReporter, QuietProgressReporter

__all__ = ["RichProgressReporter", "QuietProgressReporter"]
