"""Filtered directory archiving.

This package walks a source directory, applies exclusion rules to each entry,
and writes the remaining files into a compressed archive.
"""

from .archive_job import ArchiveJob, ArchiveResult, create_filtered_archive, validate_archive_root_name
from .archive_sink import ArchiveSink, ZipArchiveSink
from .directory_entry import DirectoryEntry, DirectoryReader, FileType, OSDirectoryReader
from .listing import list_existing_archives

__all__ = [
    "ArchiveJob",
    "ArchiveResult",
    "ArchiveSink",
    "DirectoryEntry",
    "DirectoryReader",
    "FileType",
    "OSDirectoryReader",
    "ZipArchiveSink",
    "create_filtered_archive",
    "list_existing_archives",
    "validate_archive_root_name",
]
