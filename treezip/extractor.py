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
Extraction of an archive into a destination directory.

Entries whose names would land outside the destination (``..``
components, absolute paths, drive prefixes, or symlinks already on disk
that lead elsewhere) are skipped and logged; every other entry is written.
Extraction is not transactional: on error, files written by earlier entries
stay on disk.
"""

import logging
import os
import shutil
import zipfile

from .constants import COPY_CHUNK_SIZE
from .errors import ZipIOError
from .reader import ArchiveReader
from .structures import ArchiveEntry
from .utils import safe_extract_path

logger = logging.getLogger(__name__)

# Failures while reading entry data: truncated data, bad CRC, unsupported
# compression method or an encrypted entry
_ENTRY_READ_ERRORS = (OSError, EOFError, zipfile.BadZipFile, NotImplementedError, RuntimeError)


def _extract_entry(reader: ArchiveReader, entry: ArchiveEntry, target_path: str) -> None:
    if entry.is_directory:
        try:
            os.makedirs(target_path, exist_ok=True)
        except OSError as e:
            raise ZipIOError(f"Cannot create directory {target_path}: {e}") from e
        return

    parent = os.path.dirname(target_path)
    if parent and not os.path.isdir(parent):
        try:
            os.makedirs(parent, exist_ok=True)
        except OSError as e:
            raise ZipIOError(f"Cannot create directory {parent}: {e}") from e

    try:
        dst = open(target_path, "wb")
    except OSError as e:
        raise ZipIOError(f"Cannot create file {target_path}: {e}") from e

    with dst:
        try:
            with reader.open(entry) as src:
                shutil.copyfileobj(src, dst, COPY_CHUNK_SIZE)
        except _ENTRY_READ_ERRORS as e:
            raise ZipIOError(f"Error extracting {entry.name!r} to {target_path}: {e}") from e


def extract(archive_path: "str | os.PathLike[str]", destination_dir: "str | os.PathLike[str]") -> bool:
    """Extract every safe entry of *archive_path* under *destination_dir*.

    The destination is created if needed. Directory entries (names ending
    in ``/``) are created idempotently; file entries are created or
    truncated and their decompressed content streamed in. Entries with
    duplicate names overwrite each other in archive order.

    Args:
        archive_path: Path to the ZIP file.
        destination_dir: Extraction root; need not exist.

    Returns:
        True once every entry has been written or skipped.

    Raises:
        ZipOpenError: If the archive cannot be opened.
        ZipFormatError: If the archive's central directory cannot be parsed.
        ZipIOError: If a directory or file cannot be created or written, or
            an entry's data cannot be read.
    """
    destination_dir = os.fspath(destination_dir)
    extracted = 0
    skipped = 0

    with ArchiveReader(archive_path) as reader:
        try:
            os.makedirs(destination_dir, exist_ok=True)
        except OSError as e:
            raise ZipIOError(f"Cannot create directory {destination_dir}: {e}") from e

        for entry in reader.entries():
            target_path = safe_extract_path(destination_dir, entry.name)
            if target_path is None:
                logger.warning("Skipping unsafe entry %r in %s", entry.name, reader.path)
                skipped += 1
                continue

            _extract_entry(reader, entry, target_path)
            logger.debug("Extracted %s -> %s", entry.name, target_path)
            extracted += 1

    logger.info(
        "Extracted %d entries from %s into %s (%d skipped)",
        extracted,
        os.fspath(archive_path),
        destination_dir,
        skipped,
    )
    return True
