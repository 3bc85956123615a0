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
Constants for entry configuration, compression methods and path handling.
"""

import stat
import zipfile

# Compression method names (for API)
COMPRESSION_STORED = "stored"
COMPRESSION_DEFLATE = "deflate"
COMPRESSION_BZIP2 = "bzip2"
COMPRESSION_LZMA = "lzma"

# Compression method mapping onto the codec's method ids
COMPRESSION_METHODS = {
    COMPRESSION_STORED: zipfile.ZIP_STORED,
    COMPRESSION_DEFLATE: zipfile.ZIP_DEFLATED,
    COMPRESSION_BZIP2: zipfile.ZIP_BZIP2,
    COMPRESSION_LZMA: zipfile.ZIP_LZMA,
}

# Reverse mapping
METHOD_TO_NAME = {method: name for name, method in COMPRESSION_METHODS.items()}

# Fixed per-entry configuration used by the packer
DEFAULT_COMPRESSION = COMPRESSION_STORED
DEFAULT_PERMISSIONS = 0o755  # rwxr-xr-x on every entry
MAX_PERMISSIONS = 0o7777

# Unix file type bits stored in the high word of external_attr
UNIX_FILE_TYPE = stat.S_IFREG
UNIX_DIR_TYPE = stat.S_IFDIR

# MS-DOS directory attribute (low byte of external_attr)
DOS_DIRECTORY_FLAG = 0x10

# Entry names always use forward slashes
ENTRY_SEPARATOR = "/"

# Stream copy chunk size
COPY_CHUNK_SIZE = 1024 * 1024  # 1 MiB

# Timestamp range representable in DOS date/time fields
DOS_EPOCH = (1980, 1, 1, 0, 0, 0)
DOS_LATEST = (2107, 12, 31, 23, 59, 58)
