"""
Copyright 2025 DNAi inc.

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

"""
Archive reader.

This module provides the ArchiveReader class, a thin adapter over the
standard library ``zipfile`` codec that exposes entries in container order
and maps codec failures onto the treezip error classes.
"""

import os
import zipfile
from typing import BinaryIO, Iterator, Optional

from .errors import ZipFormatError, ZipIOError, ZipOpenError
from .structures import ArchiveEntry


class ArchiveReader:
    """Reader for ZIP and ZIP64 archives.

    Example:
        with ArchiveReader("archive.zip") as z:
            for entry in z.entries():
                print(entry.name)
    """

    def __init__(self, path: "str | os.PathLike[str]"):
        """Open *path* and parse its central directory.

        Args:
            path: Path to the ZIP file.

        Raises:
            ZipOpenError: If the file cannot be opened.
            ZipFormatError: If the file is not a valid ZIP archive.
        """
        self._path = os.fspath(path)
        try:
            self._file: Optional[BinaryIO] = open(self._path, "rb")
        except OSError as e:
            raise ZipOpenError(f"Open failed: {self._path}: {e.strerror or e}") from e

        # If parsing fails, ensure the file is closed before propagating
        try:
            self._archive: Optional[zipfile.ZipFile] = zipfile.ZipFile(self._file)
        except (zipfile.BadZipFile, zipfile.LargeZipFile, EOFError, ValueError) as e:
            self._file.close()
            self._file = None
            raise ZipFormatError(f"Invalid zip: {self._path}: {e}") from e
        except OSError as e:
            self._file.close()
            self._file = None
            raise ZipOpenError(f"Open failed: {self._path}: {e}") from e

    @property
    def path(self) -> str:
        return self._path

    def _require_open(self) -> zipfile.ZipFile:
        if self._archive is None:
            raise ZipIOError("Archive file is closed")
        return self._archive

    def entries(self) -> Iterator[ArchiveEntry]:
        """Yield every entry in central directory order.

        Entries sharing a name are all yielded, in the order they appear.
        """
        for info in self._require_open().infolist():
            yield ArchiveEntry(
                name=info.filename,
                size=info.file_size,
                compressed_size=info.compress_size,
                info=info,
            )

    def open(self, entry: ArchiveEntry) -> BinaryIO:
        """Open an entry for reading its decompressed bytes.

        Args:
            entry: An entry produced by :meth:`entries` on this reader.

        Returns:
            Binary file-like object. CRC32 is verified when the stream is
            read to the end.
        """
        archive = self._require_open()
        target = entry.info if entry.info is not None else entry.name
        return archive.open(target, "r")

    def close(self) -> None:
        """Close the archive and release the file handle."""
        try:
            if self._archive is not None:
                self._archive.close()
        finally:
            self._archive = None
            if self._file is not None:
                self._file.close()
                self._file = None

    def __enter__(self) -> "ArchiveReader":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.close()
