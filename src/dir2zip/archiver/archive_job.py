"""Filtered directory archiving.

This module provides the ArchiveJob class, which walks a source directory,
skips every entry matched by its exclusion rules (together with the subtree of
excluded directories), and stores the remaining files in an archive under a
renamed top-level folder.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional

from dir2zip.archiver.archive_sink import ArchiveSink, ZipArchiveSink
from dir2zip.archiver.directory_entry import DirectoryEntry, DirectoryReader, FileType, OSDirectoryReader
from dir2zip.exceptions import InvalidArchiveRootError
from dir2zip.exclusion_rules.base_rules import BaseExclusionRules
from dir2zip.exclusion_rules.composite_rules import CompositeExclusionRules
from dir2zip.exclusion_rules.name_rules import NameExclusionRules
from dir2zip.logger import get_logger
from dir2zip.types import PathType

logger = get_logger(__name__)


@dataclass
class ArchiveResult:
    """Outcome of a completed archive job.

    Attributes:
        destination: Path of the written archive.
        size: Final archive size in bytes.
        files: Archive paths of the stored files, in the order they were written.
        excluded: Archive paths of the skipped entries.
    """

    destination: Path
    size: int
    files: List[str] = field(default_factory=list)
    excluded: List[str] = field(default_factory=list)


def validate_archive_root_name(root_name: str) -> str:
    """Check an archive root name and return it in ``/`` separated form.

    Raises:
        InvalidArchiveRootError: If the name is empty, absolute, or has empty,
            ``.`` or ``..`` segments.

    Example:
        >>> validate_archive_root_name("local-fonts-uploader")
        'local-fonts-uploader'
        >>> validate_archive_root_name("plugins\\\\my-plugin")
        'plugins/my-plugin'
    """
    normalized = root_name.replace("\\", "/")
    if not normalized or normalized.startswith("/") or os.path.splitdrive(root_name)[0]:
        raise InvalidArchiveRootError(root_name)
    if any(part in ("", ".", "..") for part in normalized.split("/")):
        raise InvalidArchiveRootError(root_name)
    return normalized


class ArchiveJob:
    """One run of the filtered directory to archive operation.

    The job owns its exclusion rules, directory reader and archive sink for its
    whole lifetime. It walks the source depth first in sorted order: every child
    of a directory, including the full subtree of a child directory, is handled
    before the next sibling.

    For each entry the exclusion rules are consulted with the path relative to
    the source root (directories are also checked with a trailing ``/``). An
    excluded entry is logged and skipped; an excluded directory is never read.
    Files are stored under ``<archive root name>/<relative path>``. Directories
    produce no entries of their own, so empty directories do not appear.

    When anything fails after the sink is opened, the sink is aborted (partial
    output is removed) and the original exception propagates.

    Attributes:
        source_root (str): Directory being archived.
        destination (Path): Archive path.
        exclusion_rules (Optional[BaseExclusionRules]): Rules for skipping entries.
        archive_root_name (str): Top-level folder name inside the archive.

    Example:
        >>> job = ArchiveJob("plugin", "plugin.zip", NameExclusionRules([".git"]), "my-plugin")  # doctest: +SKIP
        >>> job.run().files  # doctest: +SKIP
        ['my-plugin/main.php', 'my-plugin/readme.txt']
    """

    def __init__(
        self,
        source_root: PathType,
        destination: PathType,
        exclusion_rules: Optional[BaseExclusionRules],
        archive_root_name: str,
        reader: Optional[DirectoryReader] = None,
        sink: Optional[ArchiveSink] = None,
    ) -> None:
        """Initialize an ArchiveJob.

        Args:
            source_root: Directory to archive.
            destination: Path of the archive to create or overwrite.
            exclusion_rules: Rules deciding which entries are skipped. None
                archives everything.
            archive_root_name: Folder name that replaces the source directory
                itself in every stored path.
            reader: Directory reader. Defaults to the local filesystem.
            sink: Archive sink. Defaults to a ZIP file at *destination*.

        Raises:
            InvalidArchiveRootError: If archive_root_name is not usable.
        """
        self.source_root = os.fspath(source_root)
        self.destination = Path(destination)
        self.exclusion_rules = exclusion_rules
        self.archive_root_name = validate_archive_root_name(archive_root_name)
        self.reader = reader if reader is not None else OSDirectoryReader()
        self.sink = sink if sink is not None else ZipArchiveSink(self.destination)
        self._destination_key = os.path.normcase(os.path.abspath(self.destination))
        self._files: List[str] = []
        self._excluded: List[str] = []

    def run(self) -> ArchiveResult:
        """Archive the source tree and seal the archive.

        Returns:
            The ArchiveResult describing the written archive.

        Raises:
            OSError: If the source cannot be read or the archive cannot be written.
            ArchiveNameError: If a file name cannot be stored in the archive.
        """
        self._files = []
        self._excluded = []

        self.sink.open()
        try:
            self._add_directory(self.source_root, "")
            size = self.sink.finalize()
        except BaseException:
            self._abort_sink()
            raise

        logger.info("Zip file was created: %s", self.destination)
        logger.info("Total size: %d bytes", size)

        return ArchiveResult(
            destination=self.destination, size=size, files=list(self._files), excluded=list(self._excluded)
        )

    def _abort_sink(self) -> None:
        # The failure that aborted the job is the one callers see
        try:
            self.sink.abort()
        except OSError as e:
            logger.warning("Could not remove partial archive %s: %s", self.destination, e)

    def archive_path(self, entry: DirectoryEntry) -> str:
        """Return the path *entry* is stored under inside the archive."""
        return f"{self.archive_root_name}/{entry.relative_path}"

    def is_excluded(self, entry: DirectoryEntry) -> bool:
        if self.exclusion_rules is None:
            return False
        if self.exclusion_rules.exclude(entry.relative_path):
            return True
        return entry.is_dir and self.exclusion_rules.exclude(entry.relative_path + "/")

    def _add_directory(self, directory: str, relative_path: str) -> None:
        for entry in self.reader.list_entries(directory, relative_path):
            arcname = self.archive_path(entry)

            if self.is_excluded(entry):
                logger.info("Excluded: %s", arcname)
                self._excluded.append(arcname)
                continue

            if entry.file_type is FileType.DIRECTORY:
                self._add_directory(entry.path, entry.relative_path)
            elif entry.file_type is FileType.SYMLINK:
                logger.warning("Skipping symbolic link that is not a file: %s", arcname)
            elif os.path.normcase(os.path.abspath(entry.path)) == self._destination_key:
                logger.debug("Skipping the archive being written: %s", arcname)
            else:
                logger.debug("Adding: %s", arcname)
                self.sink.add_file(entry.path, arcname)
                self._files.append(arcname)


def create_filtered_archive(
    source_root: PathType,
    destination_path: PathType,
    exclusion_names: Iterable[str],
    archive_root_name: str,
    extra_rules: Optional[BaseExclusionRules] = None,
) -> ArchiveResult:
    """Write a ZIP archive of *source_root* without the excluded entries.

    Every entry whose base name is in *exclusion_names* is skipped at any depth,
    together with everything beneath it when it is a directory. Remaining files
    are stored under ``archive_root_name`` with their paths relative to
    *source_root*, compressed with DEFLATE at level 9. Any existing file at
    *destination_path* is replaced.

    Args:
        source_root: Existing directory to archive.
        destination_path: Archive file to create or overwrite.
        exclusion_names: Exact base names to skip. May be empty.
        archive_root_name: Top-level folder name for every stored path.
        extra_rules: Additional rules (e.g. gitignore-style patterns) unioned
            with the base-name exclusions.

    Returns:
        The ArchiveResult, including the final archive size in bytes.

    Raises:
        FileNotFoundError: If source_root does not exist.
        NotADirectoryError: If source_root is not a directory.
        InvalidArchiveRootError: If archive_root_name is not usable.
        OSError: If reading the source or writing the archive fails.
        ArchiveNameError: If a file name cannot be stored in the archive.

    Example:
        >>> result = create_filtered_archive(  # doctest: +SKIP
        ...     "../local-fonts-uploader", "local-fonts-uploader.zip",
        ...     [".git", "node_modules"], "local-fonts-uploader")
        >>> result.size  # doctest: +SKIP
        48213
    """
    source = Path(source_root)
    if not source.exists():
        raise FileNotFoundError(f"Source directory does not exist: {source}")
    if not source.is_dir():
        raise NotADirectoryError(f"Source path is not a directory: {source}")

    rules: BaseExclusionRules = NameExclusionRules(exclusion_names)
    if extra_rules is not None:
        rules = CompositeExclusionRules([rules, extra_rules])

    job = ArchiveJob(source, destination_path, rules, archive_root_name)
    return job.run()
