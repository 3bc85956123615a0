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
Debugging utilities for treezip.

This module provides tools for inspecting archives and for checking that a
pack/extract round trip reproduced a directory tree.
"""

import filecmp
import os

from .constants import METHOD_TO_NAME
from .reader import ArchiveReader
from .utils import enclosed_name


def dump_archive(file_path: str) -> str:
    """Describe every entry of an archive, one per line.

    Each line shows the entry kind, size, compressed size, compression method,
    Unix mode and name. Entries that extraction would skip are flagged ``UNSAFE``.

    Args:
        file_path: Path to ZIP file.

    Returns:
        Formatted listing.
    """
    output = []
    with ArchiveReader(file_path) as z:
        entries = list(z.entries())
        output.append(f"Archive: {file_path} ({len(entries)} entries)")
        for entry in entries:
            kind = "d" if entry.is_directory else "-"
            info = entry.info
            method = METHOD_TO_NAME.get(info.compress_type, str(info.compress_type)) if info else "?"
            mode = (info.external_attr >> 16) & 0o7777 if info else 0
            flag = "" if enclosed_name(entry.name) is not None else "  UNSAFE"
            sizes = f"{entry.size:>12} {entry.compressed_size:>12}"
            output.append(f"{kind} {sizes} {method:<8} {mode:04o}  {entry.name}{flag}")

    return "\n".join(output)


def _collect_differences(left: str, right: str, prefix: str, differences: list[str]) -> None:
    comparison = filecmp.dircmp(left, right, ignore=[])

    for name in sorted(comparison.left_only):
        differences.append(f"only in {left}: {prefix}{name}")
    for name in sorted(comparison.right_only):
        differences.append(f"only in {right}: {prefix}{name}")
    for name in sorted(comparison.common_funny):
        differences.append(f"type mismatch: {prefix}{name}")

    _, mismatch, errors = filecmp.cmpfiles(left, right, comparison.common_files, shallow=False)
    for name in sorted(mismatch):
        differences.append(f"content differs: {prefix}{name}")
    for name in sorted(errors):
        differences.append(f"unreadable: {prefix}{name}")

    for subdir in sorted(comparison.common_dirs):
        _collect_differences(
            os.path.join(left, subdir),
            os.path.join(right, subdir),
            f"{prefix}{subdir}/",
            differences,
        )


def compare_directories(left: str, right: str) -> tuple[bool, list[str]]:
    """Compare two directory trees by structure and file content.

    Args:
        left: First directory.
        right: Second directory.

    Returns:
        Tuple of (identical, list_of_differences).
    """
    differences: list[str] = []
    _collect_differences(left, right, "", differences)
    return len(differences) == 0, differences
