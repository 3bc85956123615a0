import os
import sys
import time

import pytest

from treezip.constants import DOS_EPOCH, DOS_LATEST
from treezip.errors import ZipPathError
from treezip.utils import (
    enclosed_name,
    relative_entry_name,
    safe_extract_path,
    timestamp_to_date_time,
    walk_tree,
)

windows_only = pytest.mark.skipif(sys.platform != "win32", reason="Windows path semantics")
posix_only = pytest.mark.skipif(sys.platform == "win32", reason="POSIX path semantics")


@pytest.mark.parametrize(
    "name, expected",
    [
        ("file.txt", "file.txt"),
        ("dir/", "dir"),
        ("a/b/c.txt", "a/b/c.txt"),
        ("./a//b/./c.txt", "a/b/c.txt"),
        ("weird..name.txt", "weird..name.txt"),
        ("..hidden", "..hidden"),
        ("", None),
        (".", None),
        ("./", None),
        ("/", None),
        ("/etc/passwd", None),
        ("../escape.txt", None),
        ("../../etc/passwd", None),
        ("a/../b.txt", None),
        ("a/b/..", None),
        ("nul\x00byte.txt", None),
    ],
)
def test_enclosed_name(name, expected):
    assert enclosed_name(name) == expected


@posix_only
@pytest.mark.parametrize(
    "name, expected",
    [
        ("a\\b\\c.txt", "a\\b\\c.txt"),
        ("back\\slash.txt", "back\\slash.txt"),
        ("c:notes.txt", "c:notes.txt"),
        ("C:/boot.ini", "C:/boot.ini"),
        ("..\\escape.txt", "..\\escape.txt"),
        ("\\windows\\system32", "\\windows\\system32"),
    ],
)
def test_enclosed_name_keeps_literal_posix_names(name, expected):
    assert enclosed_name(name) == expected


@windows_only
@pytest.mark.parametrize(
    "name, expected",
    [
        ("a\\b\\c.txt", "a/b/c.txt"),
        ("\\windows\\system32", None),
        ("C:/boot.ini", None),
        ("c:relative.txt", None),
        ("..\\escape.txt", None),
    ],
)
def test_enclosed_name_windows_separators_and_drives(name, expected):
    assert enclosed_name(name) == expected


def test_safe_extract_path_joins_under_destination(tmp_path):
    dest = str(tmp_path / "dest")

    assert safe_extract_path(dest, "a/b.txt") == os.path.join(dest, "a", "b.txt")
    assert safe_extract_path(dest, "dir/") == os.path.join(dest, "dir")
    assert safe_extract_path(dest, "../b.txt") is None
    assert safe_extract_path(dest, "") is None


def test_relative_entry_name(tmp_path):
    root = str(tmp_path)

    assert relative_entry_name(root, root) == ""
    assert relative_entry_name(os.path.join(root, "a"), root) == "a"
    assert relative_entry_name(os.path.join(root, "a", "b", "c.txt"), root) == "a/b/c.txt"


def test_relative_entry_name_outside_root(tmp_path):
    with pytest.raises(ZipPathError, match="Path prefix error"):
        relative_entry_name(str(tmp_path.parent), str(tmp_path))


def test_walk_tree_visits_each_node_once(make_tree):
    src = make_tree({"b": {"inner.txt": "1"}, "a": {}, "top.txt": "2"})

    nodes = list(walk_tree(str(src)))

    assert nodes[0].is_root and nodes[0].is_directory
    assert [(n.relative_path, n.is_directory) for n in nodes[1:]] == [
        ("a", True),
        ("b", True),
        ("top.txt", False),
        ("b/inner.txt", False),
    ]


def test_timestamp_to_date_time_in_range():
    stamp = time.mktime((2024, 5, 17, 13, 45, 30, 0, 0, -1))

    assert timestamp_to_date_time(stamp) == (2024, 5, 17, 13, 45, 30)


def test_timestamp_to_date_time_clamps():
    assert timestamp_to_date_time(time.mktime((1975, 6, 1, 12, 0, 0, 0, 0, -1))) == DOS_EPOCH
    assert timestamp_to_date_time(time.mktime((2200, 1, 1, 12, 0, 0, 0, 0, -1))) == DOS_LATEST
