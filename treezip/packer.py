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
Packing a directory tree into a new archive.
"""

import logging
import os
from typing import Optional

from .errors import ZipPathError
from .structures import EntryOptions
from .utils import walk_tree
from .writer import ArchiveWriter

logger = logging.getLogger(__name__)


def compress(
    source_dir: "str | os.PathLike[str]",
    archive_path: "str | os.PathLike[str]",
    options: Optional[EntryOptions] = None,
) -> bool:
    """Pack every file and directory under *source_dir* into *archive_path*.

    Entry names are paths relative to *source_dir* with ``/`` separators.
    Directories become directory-marker entries (so empty ones survive a
    round trip); the root itself is never an entry. Any existing file at
    *archive_path* is overwritten.

    Args:
        source_dir: Directory to pack.
        archive_path: Archive to create.
        options: Per-entry configuration; defaults to stored entries with
            mode 0o755.

    Returns:
        True once the archive has been finalized.

    Raises:
        ZipPathError: If *source_dir* is not a directory, or a relative
            entry name cannot be computed.
        ZipCreateError: If the archive cannot be created.
        ZipIOError: If a source file cannot be read, or the archive cannot
            be written or finalized.
    """
    source_dir = os.fspath(source_dir)
    if not os.path.isdir(source_dir):
        raise ZipPathError(f"Source directory not found: {source_dir}")

    with ArchiveWriter(archive_path, options) as writer:
        # The archive may live inside the tree it is packing
        archive_real = os.path.realpath(writer.path)
        for node in walk_tree(source_dir):
            if node.is_root:
                continue
            if node.is_directory:
                writer.add_directory(node.relative_path, node.path)
            elif os.path.realpath(node.path) == archive_real:
                logger.debug("Skipping the archive being written: %s", node.path)
            else:
                writer.add_file(node.relative_path, node.path)

    logger.info(
        "Packed %s into %s (%d files, %d directories, %s)",
        source_dir,
        writer.path,
        writer.files_written,
        writer.directories_written,
        writer.options.compression,
    )
    return True
