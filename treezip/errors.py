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
Custom exception classes for treezip.

Every failure surfaced by :func:`treezip.extract` and :func:`treezip.compress`
is a subclass of :class:`ZipError` carrying a descriptive message. Entries
skipped by the zip-slip defense are never reported through these classes.
"""


class ZipError(Exception):
    """Base exception class for all treezip errors."""

    pass


class ZipArgumentError(ZipError):
    """Raised when an operation receives the wrong number or type of arguments.

    Detected before any filesystem or archive I/O takes place.
    """

    pass


class ZipOpenError(ZipError):
    """Raised when an archive file cannot be opened for reading."""

    pass


class ZipCreateError(ZipError):
    """Raised when an archive file cannot be created for writing."""

    pass


class ZipFormatError(ZipError):
    """Raised when an archive's central directory cannot be parsed.

    This exception is raised when:
    - The End of Central Directory record is missing
    - The file is truncated or is not a ZIP archive at all
    """

    pass


class ZipPathError(ZipError):
    """Raised when a relative entry name cannot be computed.

    This exception is raised when:
    - A walked path does not start with the source directory
    - A path component is not representable as UTF-8 text
    - The source directory does not exist
    - An entry name is empty or contains a null byte
    """

    pass


class ZipIOError(ZipError):
    """Raised when creating, reading or writing a file or directory fails.

    Also covers decompression and CRC failures while copying entry data,
    and failure to finalize a new archive.
    """

    pass
