"""Command-line argument parsing for dir2zip.

This module defines the command-line interface for dir2zip,
handling argument parsing and validation.
"""

import argparse
from pathlib import Path

from dir2zip import __version__
from dir2zip.archiver.archive_job import validate_archive_root_name
from dir2zip.defaults import DEFAULT_EXCLUDES


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with dir2zip's options.
    """
    description = """
    dir2zip: package a plugin folder into a distributable ZIP archive.

    Every file of the source directory is stored under a single top-level folder
    inside the archive, compressed at the highest level. Entries whose base name
    is excluded are skipped wherever they appear, and so is everything beneath
    an excluded directory. Archives already present in the output directory are
    always excluded, so earlier builds never end up inside new ones.
    """

    epilog = f"""
    Default exclusions (disable with --no-default-excludes):
      {", ".join(DEFAULT_EXCLUDES)}

    Examples:
      # Package ../my-plugin into ./my-plugin.zip
      dir2zip ../my-plugin

      # Choose the archive path and the folder name inside the archive
      dir2zip ../my-plugin -o dist/my-plugin.zip -r my-plugin

      # Exclude more base names, directly or from a file
      dir2zip ../my-plugin -x readme.md -x src -X .distignore

      # Exclude a path rather than a name, using gitignore-style patterns
      dir2zip ../my-plugin -i "admin/src" -i "*.LICENSE.txt"

      # Dated output name, e.g. my-plugin-2024-05-01-1234.zip
      dir2zip ../my-plugin -t
    """

    parser = argparse.ArgumentParser(
        prog="dir2zip",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"dir2zip {__version__}", help="Show the version and exit"
    )

    parser.add_argument(
        "source",
        type=Path,
        help="The directory to package.",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Archive path. Defaults to <root name>.zip in the current directory.",
    )
    parser.add_argument(
        "-r",
        "--root-name",
        metavar="NAME",
        help="Top-level folder name inside the archive. Defaults to the source directory's name.",
    )
    parser.add_argument(
        "-x",
        "--exclude",
        action="append",
        default=[],
        metavar="NAME",
        help="Exact base name to exclude at any depth (can be specified multiple times).",
    )
    parser.add_argument(
        "-X",
        "--exclude-from",
        action="append",
        default=[],
        type=Path,
        metavar="FILE",
        help="File listing base names to exclude, one per line (can be specified multiple times).",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        action="append",
        default=[],
        metavar="PATTERN",
        help=(
            "Gitignore-style pattern matched against paths relative to the source directory "
            "(can be specified multiple times)."
        ),
    )
    parser.add_argument(
        "--no-default-excludes",
        action="store_true",
        help="Do not apply the built-in exclusion names.",
    )
    parser.add_argument(
        "-t",
        "--timestamp",
        action="store_true",
        help="Append a UTC timestamp to the default output name.",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.timestamp and args.output:
        raise ValueError("-t/--timestamp only applies to the default output name; it cannot be used with -o/--output")

    if args.root_name is not None:
        validate_archive_root_name(args.root_name)

    for name in args.exclude:
        if not name or "/" in name or "\\" in name:
            raise ValueError(f"-x/--exclude expects a base name, got {name!r}; use -i/--ignore for paths")
