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
TREEZIP - Safe conversion between directory trees and ZIP archives.

This library packs a directory into a single ZIP archive and extracts
archives back into directory trees, skipping entries whose names would
escape the destination ("zip slip"). The container encoding is handled by
the Python standard library.
"""

from .errors import (
    ZipArgumentError,
    ZipCreateError,
    ZipError,
    ZipFormatError,
    ZipIOError,
    ZipOpenError,
    ZipPathError,
)
from .extractor import extract
from .packer import compress
from .reader import ArchiveReader
from .structures import EntryOptions
from .writer import ArchiveWriter

__all__ = [
    "extract",
    "compress",
    "EntryOptions",
    "ArchiveReader",
    "ArchiveWriter",
    "ZipError",
    "ZipArgumentError",
    "ZipOpenError",
    "ZipCreateError",
    "ZipFormatError",
    "ZipPathError",
    "ZipIOError",
]

__version__ = "0.1.0"
