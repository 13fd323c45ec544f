"""Command-line interface for dir2zip.

This module provides the command-line entry point for packaging a directory
into a ZIP archive. It resolves the output path and archive root name, builds
the exclusion set (defaults, -x names, -X name files and the archives already
present in the output directory), and runs the archive job.

Exit Codes:
    0: Successful completion
    1: Runtime error during execution
    2: Command-line syntax error
    126: Permission denied

Example:
    # Package a plugin folder next to the current directory
    $ dir2zip ../local-fonts-uploader

    # Display version information
    $ dir2zip --version
"""

import argparse
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Sequence, Tuple

from dir2zip.archiver.archive_job import create_filtered_archive
from dir2zip.archiver.listing import list_existing_archives
from dir2zip.cli.argparser import create_parser, validate_args
from dir2zip.defaults import ARCHIVE_EXTENSION, DEFAULT_EXCLUDES, TIMESTAMP_FORMAT
from dir2zip.exclusion_rules.git_rules import GitIgnoreExclusionRules
from dir2zip.exclusion_rules.name_rules import NameExclusionRules
from dir2zip.logger import get_logger

logger = get_logger(__name__)


def default_output_name(root_name: str, timestamp: bool = False, now: Optional[datetime] = None) -> str:
    """Return the default archive file name for *root_name*.

    Example:
        >>> default_output_name("my-plugin")
        'my-plugin.zip'
        >>> default_output_name("my-plugin", True, datetime(2024, 5, 1, 12, 34, tzinfo=timezone.utc))
        'my-plugin-2024-05-01-1234.zip'
    """
    base = root_name.replace("/", "-")
    if timestamp:
        stamp = (now or datetime.now(timezone.utc)).strftime(TIMESTAMP_FORMAT)
        base = f"{base}-{stamp}"
    return base + ARCHIVE_EXTENSION


def build_exclusions(
    args: argparse.Namespace, output_dir: Path
) -> Tuple[NameExclusionRules, Optional[GitIgnoreExclusionRules]]:
    """Assemble the exclusion set and the optional pattern rules for a run.

    The base-name set is the union of the default names, -x names, names read
    from -X files, and the names of archives already in *output_dir*.
    """
    names = NameExclusionRules(() if args.no_default_excludes else DEFAULT_EXCLUDES)
    names.update(args.exclude)
    if args.exclude_from:
        names.load_rules(args.exclude_from)

    if output_dir.is_dir():
        existing = list_existing_archives(output_dir, ARCHIVE_EXTENSION)
        if existing:
            logger.debug("Excluding existing archives: %s", ", ".join(existing))
        names.update(existing)

    patterns = None
    if args.ignore:
        patterns = GitIgnoreExclusionRules()
        for pattern in args.ignore:
            patterns.add_rule(pattern)

    return names, patterns


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point for the dir2zip command-line interface.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error
        126: Permission denied
    """
    parser = create_parser()
    # argparse calls sys.exit(2) for argument errors and sys.exit(0) for --version
    args = parser.parse_args(argv)

    try:
        validate_args(args)

        source: Path = args.source
        root_name = args.root_name or source.resolve().name
        output: Path = args.output or Path(default_output_name(root_name, args.timestamp))

        output.parent.mkdir(parents=True, exist_ok=True)
        names, patterns = build_exclusions(args, output.parent)

        create_filtered_archive(source, output, names.names, root_name, extra_rules=patterns)

    except PermissionError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(126)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
