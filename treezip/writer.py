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
Archive writer.

This module provides the ArchiveWriter class, which creates a new archive
and applies one fixed :class:`EntryOptions` configuration to every entry.
The container encoding itself is left to the standard library ``zipfile``
codec.
"""

import logging
import os
import shutil
import zipfile
from typing import BinaryIO, Optional

from .constants import (
    COPY_CHUNK_SIZE,
    DOS_DIRECTORY_FLAG,
    ENTRY_SEPARATOR,
    UNIX_DIR_TYPE,
    UNIX_FILE_TYPE,
)
from .errors import ZipCreateError, ZipIOError, ZipPathError
from .structures import EntryOptions
from .utils import timestamp_to_date_time

logger = logging.getLogger(__name__)


class ArchiveWriter:
    """Writer for ZIP archives.

    Every entry gets the same compression method and permission bits,
    taken from the writer's options.

    Example:
        with ArchiveWriter("archive.zip") as z:
            z.add_directory("docs")
            z.add_file("docs/readme.txt", "/path/to/readme.txt")
    """

    def __init__(self, path: "str | os.PathLike[str]", options: Optional[EntryOptions] = None):
        """Create (or truncate) the archive at *path*.

        Args:
            path: Output archive path.
            options: Per-entry configuration. Defaults to stored entries with
                mode 0o755.

        Raises:
            ZipCreateError: If the file cannot be created.
        """
        self._path = os.fspath(path)
        self._options = options if options is not None else EntryOptions()
        self._closed = False
        self.files_written = 0
        self.directories_written = 0

        try:
            self._file: Optional[BinaryIO] = open(self._path, "wb")
        except OSError as e:
            raise ZipCreateError(f"Create failed: {self._path}: {e.strerror or e}") from e

        try:
            self._archive = zipfile.ZipFile(
                self._file, "w", compression=self._options.compress_type, allowZip64=True
            )
        except RuntimeError as e:
            # Codec support for bzip2/lzma is missing from this interpreter
            self._file.close()
            self._file = None
            raise ZipCreateError(f"Create failed: {self._path}: {e}") from e

    @property
    def path(self) -> str:
        return self._path

    @property
    def options(self) -> EntryOptions:
        return self._options

    def _make_info(self, name: str, source_path: str, is_dir: bool) -> zipfile.ZipInfo:
        """Build the entry header for *name* from the source's stat data."""
        st = os.stat(source_path)
        info = zipfile.ZipInfo(name, date_time=timestamp_to_date_time(st.st_mtime))
        permissions = self._options.permissions
        if is_dir:
            # Directory markers carry no data
            info.compress_type = zipfile.ZIP_STORED
            info.external_attr = ((UNIX_DIR_TYPE | permissions) << 16) | DOS_DIRECTORY_FLAG
        else:
            info.compress_type = self._options.compress_type
            info.external_attr = (UNIX_FILE_TYPE | permissions) << 16
            info.file_size = st.st_size
        return info

    def _check_name(self, name: str) -> None:
        if self._closed:
            raise ZipIOError("Archive is closed")
        if not name:
            raise ZipPathError("Entry name cannot be empty")
        if "\x00" in name:
            raise ZipPathError("Entry name cannot contain null bytes")

    def add_file(self, name: str, source_path: str) -> None:
        """Add a file entry, streaming its content from disk.

        Args:
            name: Entry name (path within the archive).
            source_path: Path to the source file on disk.

        Raises:
            ZipPathError: If the name is empty or contains a null byte.
            ZipIOError: If the archive is closed, the source cannot be read
                or the entry cannot be written.
        """
        self._check_name(name)
        try:
            info = self._make_info(name, source_path, is_dir=False)
            with open(source_path, "rb") as src, self._archive.open(info, "w") as dst:
                shutil.copyfileobj(src, dst, COPY_CHUNK_SIZE)
        except (OSError, zipfile.LargeZipFile) as e:
            raise ZipIOError(f"Error adding file {source_path} as {name!r}: {e}") from e

        self.files_written += 1
        logger.debug("Added file %s (%d bytes)", name, info.file_size)

    def add_directory(self, name: str, source_path: str) -> None:
        """Add a directory marker entry.

        A trailing ``/`` is appended to *name* when missing.

        Args:
            name: Directory path within the archive.
            source_path: Directory on disk the marker stands for, used for
                its modification time.

        Raises:
            ZipPathError: If the name is empty or contains a null byte.
            ZipIOError: If the archive is closed or the marker cannot be
                written.
        """
        self._check_name(name)
        if not name.endswith(ENTRY_SEPARATOR):
            name += ENTRY_SEPARATOR
        try:
            info = self._make_info(name, source_path, is_dir=True)
            self._archive.writestr(info, b"")
        except OSError as e:
            raise ZipIOError(f"Error adding directory {name!r}: {e}") from e

        self.directories_written += 1
        logger.debug("Added directory %s", name)

    def close(self) -> None:
        """Write the central directory, then close the archive.

        Raises:
            ZipIOError: If the archive cannot be finalized.
        """
        if self._closed:
            return

        # The file handle is released even if finalizing fails
        try:
            self._archive.close()
        except OSError as e:
            raise ZipIOError(f"Finalize failed: {self._path}: {e}") from e
        finally:
            self._closed = True
            if self._file is not None:
                self._file.close()
                self._file = None

    def __enter__(self) -> "ArchiveWriter":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.close()
