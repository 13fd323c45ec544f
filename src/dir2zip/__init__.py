"""Directory to ZIP packaging utilities.

This package provides tools for packaging a plugin folder into a distributable
ZIP archive, skipping build tooling and other excluded entries along the way.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("dir2zip")
except PackageNotFoundError:
    __version__ = "unknown"
