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
Path helpers shared by the extractor and the packer.

This module provides entry-name sanitizing and destination containment
checks (the zip-slip defense), relative entry names for walked paths,
the source tree walker and DOS timestamp clamping.
"""

import logging
import os
import time
from typing import Iterator, Optional

from .constants import DOS_EPOCH, DOS_LATEST, ENTRY_SEPARATOR
from .errors import ZipPathError
from .structures import FileSystemNode

logger = logging.getLogger(__name__)

# Separators understood by the host platform besides "/"
_HOST_SEPARATORS = tuple(sep for sep in (os.sep, os.path.altsep) if sep and sep != ENTRY_SEPARATOR)


def enclosed_name(name: str) -> Optional[str]:
    """Return the sanitized relative form of an entry name.

    Empty and ``.`` components are dropped. Backslashes only act as
    separators where the host platform treats them as such (Windows); on
    POSIX ``back\\slash.txt`` or ``c:notes.txt`` are ordinary file names.
    The name is rejected (``None``) when it:
    - is empty or contains a NUL byte
    - starts with a separator (absolute path)
    - starts with a drive the host platform recognizes, such as ``C:``
    - contains a ``..`` component anywhere
    - is left with no components after normalization

    Args:
        name: Entry name as stored in the archive.

    Returns:
        Forward-slash separated relative path, or None if the entry has no
        safe destination.
    """
    if not name or "\x00" in name:
        return None

    normalized = name
    for sep in _HOST_SEPARATORS:
        normalized = normalized.replace(sep, ENTRY_SEPARATOR)
    if normalized.startswith(ENTRY_SEPARATOR):
        return None

    parts = []
    for part in normalized.split(ENTRY_SEPARATOR):
        if part in ("", "."):
            continue
        if part == "..":
            return None
        if os.path.splitdrive(part)[0]:
            return None
        parts.append(part)

    if not parts:
        return None
    return ENTRY_SEPARATOR.join(parts)


def safe_extract_path(destination_dir: str, name: str) -> Optional[str]:
    """Compute the output path for an entry, or None if it must be skipped.

    The sanitized name is joined onto the literal destination root and both
    are resolved (following any symlinks already on disk); the entry is only
    accepted when the resolved target stays inside the resolved root.

    Args:
        destination_dir: Extraction root as given by the caller.
        name: Entry name as stored in the archive.

    Returns:
        Output path under ``destination_dir``, or None.
    """
    relative = enclosed_name(name)
    if relative is None:
        return None

    target = os.path.join(destination_dir, *relative.split(ENTRY_SEPARATOR))
    root = os.path.realpath(destination_dir)
    resolved = os.path.realpath(target)
    try:
        if os.path.commonpath([root, resolved]) != root:
            return None
    except ValueError:
        # Different drives on Windows
        return None
    return target


def relative_entry_name(path: str, root: str) -> str:
    """Strip *root* from *path* and return a forward-slash entry name.

    Returns an empty string for the root itself.

    Raises:
        ZipPathError: If *path* is not below *root* or the result is not
            representable as UTF-8 text.
    """
    try:
        relative = os.path.relpath(path, root)
    except ValueError as e:
        raise ZipPathError(f"Path prefix error: {path!r} is not under {root!r}") from e

    if relative == os.curdir:
        return ""
    if os.path.isabs(relative) or relative == os.pardir or relative.startswith(os.pardir + os.sep):
        raise ZipPathError(f"Path prefix error: {path!r} is not under {root!r}")

    try:
        relative.encode("utf-8")
    except UnicodeEncodeError as e:
        raise ZipPathError(f"Invalid UTF-8 path: {path!r}") from e

    if os.sep != ENTRY_SEPARATOR:
        relative = relative.replace(os.sep, ENTRY_SEPARATOR)
    return relative


def _log_walk_error(error: OSError) -> None:
    logger.warning("Skipping unreadable path %s: %s", error.filename, error.strerror or error)


def walk_tree(root: str) -> Iterator[FileSystemNode]:
    """Yield every directory and regular file under *root*, root first.

    Siblings are visited in sorted order. Symbolic links and special files
    are skipped, and directories that cannot be listed are logged and
    skipped without aborting the walk; the directory itself is still
    yielded, only its contents are missing.

    Raises:
        ZipPathError: If a walked path cannot be turned into an entry name.
    """
    yield FileSystemNode(path=root, relative_path="", is_directory=True)

    for dirpath, dirnames, filenames in os.walk(root, onerror=_log_walk_error):
        kept = []
        for dirname in sorted(dirnames):
            path = os.path.join(dirpath, dirname)
            if os.path.islink(path):
                logger.debug("Skipping symbolic link %s", path)
                continue
            kept.append(dirname)
            yield FileSystemNode(path=path, relative_path=relative_entry_name(path, root), is_directory=True)
        # os.walk descends into whatever is left in dirnames
        dirnames[:] = kept

        for filename in sorted(filenames):
            path = os.path.join(dirpath, filename)
            if os.path.islink(path) or not os.path.isfile(path):
                logger.debug("Skipping non-regular file %s", path)
                continue
            yield FileSystemNode(path=path, relative_path=relative_entry_name(path, root), is_directory=False)


def timestamp_to_date_time(timestamp: float) -> tuple[int, int, int, int, int, int]:
    """Convert a POSIX timestamp to a ZIP ``date_time`` tuple.

    DOS dates only cover 1980-2107, so out-of-range timestamps are clamped
    to the nearest representable value.
    """
    try:
        local = time.localtime(timestamp)
    except (OverflowError, OSError, ValueError):
        return DOS_EPOCH if timestamp < 0 else DOS_LATEST

    if local.tm_year < DOS_EPOCH[0]:
        return DOS_EPOCH
    if local.tm_year > DOS_LATEST[0]:
        return DOS_LATEST
    return (local.tm_year, local.tm_mon, local.tm_mday, local.tm_hour, local.tm_min, local.tm_sec)
