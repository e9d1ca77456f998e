"""Command-line entry point: build an .m3u playlist for a folder."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from .config import AppConfig
from .core.config import GeneratorFlags, flags_from_program_name
from .core.exceptions import DiagnosticsSinkError, PlaylistGeneratorError
from .logging.rich_logger import RichProgressReporter, QuietProgressReporter
from .services.diagnostics_log import DiagnosticsLogWriter
from .services.generator import GeneratorDependencies, PlaylistGenerator


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="folder-m3u",
        description="Write an .m3u playlist of the audio and video files in a folder.",
        epilog=(
            "Flags can also be encoded in the program's file name: "
            "--R+ (recursive), --A+ (alphabetical), --D+ (by time)."
        ),
    )
    parser.add_argument(
        "directory",
        type=Path,
        nargs="?",
        default=None,
        help="Directory to scan (default: current directory)",
    )
    parser.add_argument(
        "-r", "--recursive",
        action="store_true",
        help="Include files in sub-directories",
    )
    parser.add_argument(
        "-a", "--alphabetical",
        action="store_true",
        help="Sort each directory's files by path (wins over --by-time)",
    )
    parser.add_argument(
        "-t", "--by-time",
        action="store_true",
        help="Sort each directory's files by modification time",
    )
    parser.add_argument(
        "--log-dir",
        type=Path,
        default=None,
        help="Directory for error logs (default: DIRECTORY)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Suppress non-essential output",
    )
    return parser


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def build_config(args: argparse.Namespace, program_flags: GeneratorFlags) -> AppConfig:
    """Merge command-line switches with flags taken from the program name."""
    flags = GeneratorFlags(
        recurse=args.recursive,
        sort_alphabetical=args.alphabetical,
        sort_by_time=args.by_time,
    ).merged_with(program_flags)

    return AppConfig(
        root_dir=args.directory or Path.cwd(),
        recurse=flags.recurse,
        sort_alphabetical=flags.sort_alphabetical,
        sort_by_time=flags.sort_by_time,
        log_dir=args.log_dir,
    )


def record_fatal_error(error: PlaylistGeneratorError, log_dir: Path, reporter) -> None:
    """Leave an error log behind for a run that could not finish."""
    try:
        log_path = DiagnosticsLogWriter().write_lines([f"Error: {error}"], log_dir)
    except DiagnosticsSinkError as e:
        reporter.error(f"Could not write error log: {e}")
        return
    reporter.error(f"An error occurred. Check {log_path} for details.")


def main(argv: Optional[list[str]] = None, program_name: Optional[str] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if program_name is None:
        program_name = Path(sys.argv[0]).name

    if args.quiet:
        reporter = QuietProgressReporter()
    else:
        reporter = RichProgressReporter(verbose=args.verbose)
    configure_logging(args.verbose)

    try:
        config = build_config(args, flags_from_program_name(program_name))
    except ValidationError as e:
        for err in e.errors():
            reporter.error(err["msg"])
        return 1

    flags = config.to_flags()
    reporter.print_header("folder-m3u")
    reporter.print_config({
        "Directory": str(config.root_dir),
        "Recursive": flags.recurse,
        "Sort": flags.sort_policy.value,
        "Log Directory": str(config.resolve_log_dir()),
    })

    deps = GeneratorDependencies(progress=reporter)
    try:
        result = PlaylistGenerator(flags, deps).generate(
            config.root_dir, config.resolve_log_dir()
        )
    except KeyboardInterrupt:
        return 130
    except PlaylistGeneratorError as e:
        reporter.error(str(e))
        if not isinstance(e, DiagnosticsSinkError):
            record_fatal_error(e, config.resolve_log_dir(), reporter)
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1

    reporter.print_summary(result)
    reporter.success(f"Playlist generated: {result.playlist_name}")
    if result.diagnostics_path is not None:
        reporter.warning(
            f"{len(result.diagnostics)} problem(s) recorded in {result.diagnostics_path}"
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
