"""Directory entries and the readers that enumerate them."""

import os
import stat
from abc import ABC, abstractmethod
from enum import Enum
from typing import List


class FileType(Enum):
    """Enumeration of entry types seen during traversal.

    Attributes:
        FILE: Regular file, or a symbolic link resolving to one
        DIRECTORY: Directory (never a symbolic link)
        SYMLINK: Symbolic link to a directory, or a dangling link
    """

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"


class DirectoryEntry:
    """A file or directory found while walking the source tree.

    Attributes:
        name (str): Base name of the entry, used for exclusion matching.
        path (str): Path of the entry on the source side.
        relative_path (str): Path relative to the source root, ``/`` separated.
            The archive path is this path under the archive root name.
        file_type (FileType): What kind of entry this is.

    Example:
        >>> entry = DirectoryEntry("b.txt", "/src/sub/b.txt", "sub/b.txt", FileType.FILE)
        >>> entry.is_dir
        False
    """

    def __init__(self, name: str, path: str, relative_path: str, file_type: FileType) -> None:
        self.name = name
        self.path = path
        self.relative_path = relative_path
        self.file_type = file_type

    @property
    def is_dir(self) -> bool:
        return self.file_type is FileType.DIRECTORY

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DirectoryEntry):
            return False
        return (self.name, self.path, self.relative_path, self.file_type) == (
            other.name,
            other.path,
            other.relative_path,
            other.file_type,
        )

    def __hash__(self) -> int:
        return hash((self.name, self.path, self.relative_path, self.file_type))

    def __repr__(self) -> str:
        return (
            f"DirectoryEntry(name={self.name!r}, path={self.path!r}, "
            f"relative_path={self.relative_path!r}, file_type={self.file_type})"
        )


class DirectoryReader(ABC):
    """Source of directory listings for an archive job.

    The archive job never touches the filesystem directly when walking; it asks
    a reader for the children of each directory. Tests substitute a reader
    backed by an in-memory tree.
    """

    @abstractmethod
    def list_entries(self, directory: str, relative_path: str) -> List[DirectoryEntry]:
        """Return the direct children of *directory*, sorted by name.

        Args:
            directory: Path of the directory to list.
            relative_path: Path of *directory* relative to the source root
                ("" for the root itself).

        Raises:
            OSError: If the directory cannot be read or a child cannot be statted.
        """
        pass


class OSDirectoryReader(DirectoryReader):
    """Directory reader backed by the local filesystem.

    Entries are classified with ``lstat``, so symbolic links are never descended.
    A link whose target is a regular file is reported as a file and archived with
    the target's bytes; any other link is reported as ``FileType.SYMLINK``.
    """

    def list_entries(self, directory: str, relative_path: str) -> List[DirectoryEntry]:
        entries = []
        for child in sorted(os.listdir(directory)):
            child_path = os.path.join(directory, child)
            child_relative = f"{relative_path}/{child}" if relative_path else child
            mode = os.lstat(child_path).st_mode

            if stat.S_ISDIR(mode):
                file_type = FileType.DIRECTORY
            elif stat.S_ISLNK(mode):
                file_type = FileType.FILE if os.path.isfile(child_path) else FileType.SYMLINK
            else:
                file_type = FileType.FILE

            entries.append(DirectoryEntry(child, child_path, child_relative, file_type))
        return entries
