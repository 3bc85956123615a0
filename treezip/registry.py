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
Native function table for embedding treezip in a scripting host.

A host keeps a mapping from operation name to a callable taking the list of
argument values. :func:`register` adds ``zip_extract`` and
``zip_compress`` to such a mapping; :func:`call` dispatches by name and
folds the outcome into a :class:`NativeResult`.

Example:
    table = {}
    register(table)
    result = call(table, "zip_compress", ["project", "project.zip"])
    if not result.ok:
        print(result.error)
"""

import os
from typing import Any, Callable, MutableMapping, Sequence

from .errors import ZipArgumentError, ZipError
from .extractor import extract
from .packer import compress
from .structures import NativeResult

NativeFn = Callable[[Sequence[Any]], Any]


def _as_text(value: Any, position: int) -> str:
    """Return *value* as a path string, or raise ZipArgumentError."""
    if isinstance(value, str):
        return value
    if isinstance(value, os.PathLike):
        path = os.fspath(value)
        if isinstance(path, str):
            return path
    raise ZipArgumentError(f"Argument {position} must be a string, got {type(value).__name__}")


def _two_text_args(args: Sequence[Any], usage: str) -> tuple[str, str]:
    if len(args) < 2:
        raise ZipArgumentError(f"Args: {usage}")
    return _as_text(args[0], 0), _as_text(args[1], 1)


def zip_extract(args: Sequence[Any]) -> bool:
    """``zip_extract(zip_path, dest_dir)``: extract an archive."""
    archive_path, destination_dir = _two_text_args(args, "zip_path, dest_dir")
    return extract(archive_path, destination_dir)


def zip_compress(args: Sequence[Any]) -> bool:
    """``zip_compress(source_dir, zip_path)``: pack a directory."""
    source_dir, archive_path = _two_text_args(args, "source_dir, zip_path")
    return compress(source_dir, archive_path)


NATIVE_FUNCTIONS: dict[str, NativeFn] = {
    "zip_extract": zip_extract,
    "zip_compress": zip_compress,
}


def register(table: MutableMapping[str, NativeFn]) -> None:
    """Insert the treezip operations into a host's function table."""
    table.update(NATIVE_FUNCTIONS)


def call(table: MutableMapping[str, NativeFn], name: str, args: Sequence[Any]) -> NativeResult:
    """Invoke *name* from *table* with *args*.

    Returns:
        NativeResult with ``ok=True`` and the handler's value, or
        ``ok=False`` and the error message for any :class:`ZipError` or an
        unknown function name.
    """
    handler = table.get(name)
    if handler is None:
        return NativeResult(ok=False, error=f"Unknown function: {name}")
    try:
        value = handler(args)
    except ZipError as e:
        return NativeResult(ok=False, error=str(e))
    return NativeResult(ok=True, value=value)
