class Dir2ZipError(Exception):
    """
    Base class for errors raised by dir2zip itself.

    Errors coming from the filesystem or the ZIP writer (``OSError`` and its
    subclasses, ``zipfile.BadZipFile``) are not wrapped and propagate unchanged.
    """

    pass


class InvalidArchiveRootError(Dir2ZipError, ValueError):
    """
    Exception raised when an archive root name cannot be used as a top-level folder.

    The archive root name is prepended to every stored path, so it must be a
    non-empty relative path without ``.`` or ``..`` segments.

    Attributes:
        root_name (str): The rejected archive root name.

    Example:
        >>> error = InvalidArchiveRootError("../up")
        >>> str(error)
        "Invalid archive root name: '../up'"
    """

    def __init__(self, root_name: str) -> None:
        """
        Initialize the exception with the rejected root name.

        Args:
            root_name (str): The archive root name that failed validation.
        """
        self.root_name = root_name
        super().__init__(f"Invalid archive root name: {root_name!r}")


class ArchiveNameError(Dir2ZipError, OSError):
    """
    Exception raised when an entry name cannot be stored in a ZIP archive.

    ZIP entry names are stored as UTF-8. On POSIX systems a file name may hold
    bytes that are not valid UTF-8; Python carries them as surrogate escapes,
    which cannot be encoded.

    Attributes:
        arcname (str): The archive path that could not be encoded.

    Example:
        >>> error = ArchiveNameError("root/caf\\udce9.txt")
        >>> str(error)
        "Archive entry name is not valid UTF-8: 'root/caf\\\\udce9.txt'"
    """

    def __init__(self, arcname: str) -> None:
        """
        Initialize the exception with the offending archive path.

        Args:
            arcname (str): The archive path that could not be encoded.
        """
        self.arcname = arcname
        super().__init__(f"Archive entry name is not valid UTF-8: {arcname!r}")
