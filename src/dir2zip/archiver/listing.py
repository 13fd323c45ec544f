"""Discovery of archives already present in an output directory."""

import os
from typing import List

from dir2zip.defaults import ARCHIVE_EXTENSION
from dir2zip.types import PathType


def list_existing_archives(directory: PathType, extension: str = ARCHIVE_EXTENSION) -> List[str]:
    """Return the names of entries directly under *directory* with the given extension.

    The extension may be given with or without its leading dot and is compared
    case-sensitively. Names are returned in sorted order. The result is meant to
    be merged into the exclusion set so that earlier builds sitting next to the
    source are never packed into a new archive.

    Args:
        directory: Directory to list (not recursed).
        extension: Extension to match, e.g. ".zip".

    Returns:
        Sorted list of matching entry names.

    Raises:
        OSError: If the directory cannot be listed.

    Example:
        >>> list_existing_archives(".")  # doctest: +SKIP
        ['local-fonts-uploader.zip']
    """
    if not extension:
        raise ValueError("An extension is required")
    if not extension.startswith("."):
        extension = "." + extension

    return sorted(name for name in os.listdir(directory) if os.path.splitext(name)[1] == extension)
