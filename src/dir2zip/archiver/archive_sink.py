"""Archive sinks receiving the files selected by an archive job."""

import os
import zipfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from dir2zip.defaults import COMPRESSION_LEVEL
from dir2zip.exceptions import ArchiveNameError
from dir2zip.types import PathType


class ArchiveSink(ABC):
    """Destination for the files of one archive job.

    A sink is opened once, receives files through ``add_file()``, and is then
    either finalized (the archive is sealed and flushed) or aborted.
    """

    @abstractmethod
    def open(self) -> None:
        """Create or truncate the destination."""
        pass

    @abstractmethod
    def add_file(self, source: str, arcname: str) -> None:
        """Store the bytes of *source* under *arcname*."""
        pass

    @abstractmethod
    def finalize(self) -> int:
        """Seal the archive and return its final size in bytes."""
        pass

    @abstractmethod
    def abort(self) -> None:
        """Release the destination after a failure and discard partial output."""
        pass


class ZipArchiveSink(ArchiveSink):
    """ZIP archive written with DEFLATE at the highest compression level.

    File data is streamed from disk into the archive; the central directory is
    written when the sink is finalized. Opening the sink overwrites any existing
    file at the destination.

    Attributes:
        destination (Path): Where the archive is written.
        compresslevel (int): zlib compression level used for every entry.
    """

    def __init__(self, destination: PathType, compresslevel: int = COMPRESSION_LEVEL) -> None:
        self.destination = Path(destination)
        self.compresslevel = compresslevel
        self._zip: Optional[zipfile.ZipFile] = None

    def open(self) -> None:
        if self._zip is not None:
            raise ValueError("Archive sink is already open")
        # Files dated before 1980 are stored with the earliest ZIP timestamp instead of failing
        self._zip = zipfile.ZipFile(
            self.destination,
            "w",
            compression=zipfile.ZIP_DEFLATED,
            compresslevel=self.compresslevel,
            strict_timestamps=False,
        )

    def add_file(self, source: str, arcname: str) -> None:
        """Store *source* under *arcname*.

        Raises:
            ArchiveNameError: If *arcname* cannot be encoded as UTF-8, e.g. a
                POSIX file name holding undecodable bytes.
        """
        if self._zip is None:
            raise ValueError("Archive sink is not open")
        try:
            arcname.encode("utf-8")
        except UnicodeEncodeError:
            raise ArchiveNameError(arcname) from None
        self._zip.write(source, arcname=arcname)

    def finalize(self) -> int:
        if self._zip is None:
            raise ValueError("Archive sink is not open")
        self._zip.close()
        self._zip = None
        return os.path.getsize(self.destination)

    def abort(self) -> None:
        if self._zip is not None:
            try:
                self._zip.close()
            except OSError:
                # Partial output is deleted below
                pass
            self._zip = None
        if self.destination.exists():
            self.destination.unlink()
