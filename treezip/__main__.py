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

from __future__ import annotations

"""
Command-line interface for TREEZIP (``treezip``).

Supported commands (via ``python -m treezip``):

- ``extract``  : Extract an archive into a directory
- ``compress`` : Pack a directory into a new archive
- ``list``     : List entries in an archive, flagging unsafe names
- ``compare``  : Compare two directory trees (round-trip check)

Example usages:

    # Pack ./project into project.zip (stored entries, mode 0755)
    python -m treezip compress project project.zip

    # Extract everything into ./output
    python -m treezip extract project.zip -d output

    # Check the round trip
    python -m treezip compare project output
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .constants import COMPRESSION_METHODS, DEFAULT_COMPRESSION, DEFAULT_PERMISSIONS, MAX_PERMISSIONS
from .debug import compare_directories, dump_archive
from .errors import ZipArgumentError, ZipError, ZipFormatError
from .extractor import extract
from .packer import compress
from .structures import EntryOptions


def _print_error(message: str, exit_code: int = 1, suggestion: Optional[str] = None) -> None:
    """Print an error message to stderr and exit with the given code.

    Args:
        message: Error message to display.
        exit_code: Exit code to use.
        suggestion: Optional suggestion to help the user resolve the error.
    """
    sys.stderr.write(f"treezip: {message}\n")
    if suggestion:
        sys.stderr.write(f"treezip: Suggestion: {suggestion}\n")
    sys.exit(exit_code)


def _parse_permissions(value: str) -> int:
    """Parse an octal mode such as ``755`` or ``0o644``."""
    try:
        mode = int(value, 8)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid octal mode: {value!r}")
    if not 0 <= mode <= MAX_PERMISSIONS:
        raise argparse.ArgumentTypeError(f"mode out of range: {value!r}")
    return mode


def _configure_logging(verbose: bool, quiet: bool) -> None:
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="treezip: %(levelname)s: %(message)s", stream=sys.stderr)


def _cmd_extract(archive: Path, output_dir: Path) -> None:
    """Extract *archive* into *output_dir*."""
    extract(archive, output_dir)


def _cmd_compress(source: Path, archive: Path, compression: str, permissions: int) -> None:
    """Pack *source* into *archive* with one fixed entry configuration."""
    options = EntryOptions(compression=compression, permissions=permissions)
    compress(source, archive, options)


def _cmd_list(archive: Path) -> None:
    """Print one line per entry."""
    print(dump_archive(str(archive)))


def _cmd_compare(left: Path, right: Path) -> None:
    """Compare two trees; exit with status 1 if they differ."""
    for path in (left, right):
        if not path.is_dir():
            _print_error(f"Not a directory: {path}", exit_code=2)

    identical, differences = compare_directories(str(left), str(right))
    if identical:
        print("Directories are identical")
        return
    for line in differences:
        print(line)
    sys.exit(1)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="treezip",
        description="Pack directories into ZIP archives and extract them safely.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Log every entry processed")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only report errors")

    subparsers = parser.add_subparsers(dest="command", required=True)

    # extract
    p_extract = subparsers.add_parser("extract", help="Extract archive contents")
    p_extract.add_argument("archive", type=Path, help="Path to the ZIP archive")
    p_extract.add_argument(
        "-d",
        "--directory",
        type=Path,
        default=Path("."),
        help="Target directory to extract into (default: current directory)",
    )

    # compress
    p_compress = subparsers.add_parser("compress", help="Create a new archive from a directory")
    p_compress.add_argument("source", type=Path, help="Directory to pack")
    p_compress.add_argument("archive", type=Path, help="Archive to create (overwritten if present)")
    p_compress.add_argument(
        "--compression",
        choices=sorted(COMPRESSION_METHODS),
        default=DEFAULT_COMPRESSION,
        help=f"Compression method for every entry (default: {DEFAULT_COMPRESSION})",
    )
    p_compress.add_argument(
        "--permissions",
        type=_parse_permissions,
        default=DEFAULT_PERMISSIONS,
        metavar="OCTAL",
        help=f"Unix mode recorded for every entry (default: {DEFAULT_PERMISSIONS:o})",
    )

    # list
    p_list = subparsers.add_parser("list", help="List archive entries")
    p_list.add_argument("archive", type=Path, help="Path to the ZIP archive")

    # compare
    p_compare = subparsers.add_parser("compare", help="Compare two directory trees")
    p_compare.add_argument("left", type=Path, help="First directory")
    p_compare.add_argument("right", type=Path, help="Second directory")

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """
    Entry point for the TREEZIP CLI.

    This function is invoked when running:

        python -m treezip ...

    or via the ``treezip`` console script.
    """
    if argv is None:
        argv = sys.argv[1:]

    # If no arguments are provided, show a short banner and quick examples.
    if not argv:
        print(f"TREEZIP - directory trees to ZIP archives and back (version {__version__})")
        print()
        print("Quick examples (CLI):")
        print("  python -m treezip compress folder archive.zip")
        print("  python -m treezip extract archive.zip -d output_dir")
        print("  python -m treezip list archive.zip")
        print("  python -m treezip compare folder output_dir")
        print()
        print('For full help, run: "python -m treezip --help"')
        return

    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose, args.quiet)

    try:
        if args.command == "extract":
            _cmd_extract(args.archive, args.directory)
        elif args.command == "compress":
            _cmd_compress(args.source, args.archive, args.compression, args.permissions)
        elif args.command == "list":
            _cmd_list(args.archive)
        elif args.command == "compare":
            _cmd_compare(args.left, args.right)
    except ZipArgumentError as e:
        _print_error(str(e), exit_code=2)
    except ZipFormatError as e:
        _print_error(str(e), exit_code=1, suggestion="Make sure the file is a complete ZIP archive")
    except ZipError as e:
        _print_error(str(e), exit_code=1)


if __name__ == "__main__":
    main()
