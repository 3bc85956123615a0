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
Record types passed between the extractor, the packer and the codec adapters.

All of these are transient: they live for the duration of a single
``extract`` or ``compress`` call.
"""

import zipfile
from dataclasses import dataclass, field
from typing import Any, Optional

from .constants import (
    COMPRESSION_METHODS,
    DEFAULT_COMPRESSION,
    DEFAULT_PERMISSIONS,
    ENTRY_SEPARATOR,
    MAX_PERMISSIONS,
)
from .errors import ZipArgumentError


@dataclass(frozen=True)
class EntryOptions:
    """Per-entry configuration applied to every entry the packer writes.

    The defaults reproduce the fixed configuration: entries are stored
    (not compressed) and carry mode ``0o755`` regardless of the source
    file's own permissions.

    Attributes:
        compression: One of ``stored``, ``deflate``, ``bzip2``, ``lzma``.
        permissions: Unix permission bits recorded for each entry.
    """

    compression: str = DEFAULT_COMPRESSION
    permissions: int = DEFAULT_PERMISSIONS

    def __post_init__(self) -> None:
        if self.compression not in COMPRESSION_METHODS:
            supported = ", ".join(sorted(COMPRESSION_METHODS))
            raise ZipArgumentError(
                f"Unsupported compression method: {self.compression!r} (expected one of: {supported})"
            )
        if isinstance(self.permissions, bool) or not isinstance(self.permissions, int):
            raise ZipArgumentError(f"Permissions must be an integer, got {type(self.permissions).__name__}")
        if not 0 <= self.permissions <= MAX_PERMISSIONS:
            raise ZipArgumentError(f"Invalid permissions: {oct(self.permissions)} (must be 0o0-0o7777)")

    @property
    def compress_type(self) -> int:
        """Codec method id for :attr:`compression`."""
        return COMPRESSION_METHODS[self.compression]


@dataclass
class ArchiveEntry:
    """A single entry read from an archive.

    ``name`` is the entry's stored name exactly as the codec reports it;
    it has not been sanitized.
    """

    name: str
    size: int = 0
    compressed_size: int = 0
    info: Optional[zipfile.ZipInfo] = field(default=None, repr=False, compare=False)

    @property
    def is_directory(self) -> bool:
        """True when the entry is a directory marker (name ends with ``/``)."""
        return self.name.endswith(ENTRY_SEPARATOR)


@dataclass(frozen=True)
class FileSystemNode:
    """A file or directory found while walking a source tree."""

    path: str
    relative_path: str
    is_directory: bool

    @property
    def is_root(self) -> bool:
        return self.relative_path == ""


@dataclass(frozen=True)
class NativeResult:
    """Outcome of a registry call: either a value or an error message."""

    ok: bool
    value: Any = None
    error: Optional[str] = None
