import warnings
import zipfile
from pathlib import Path

import pytest


def build_tree(root: Path, layout: dict) -> Path:
    """Create files and directories under *root* from a nested mapping.

    ``bytes``/``str`` values become files, dict values become directories.
    """
    root.mkdir(parents=True, exist_ok=True)
    for name, value in layout.items():
        path = root / name
        if isinstance(value, dict):
            build_tree(path, value)
        elif isinstance(value, str):
            path.write_text(value, encoding="utf-8")
        else:
            path.write_bytes(value)
    return root


@pytest.fixture
def make_tree(tmp_path):
    def _make(layout: dict, name: str = "src") -> Path:
        return build_tree(tmp_path / name, layout)

    return _make


@pytest.fixture
def make_zip(tmp_path):
    """Write an archive with entries given verbatim as (name, data) pairs.

    Names are stored as-is, so traversal and absolute names can be crafted.
    """

    def _make(entries, name: str = "crafted.zip") -> Path:
        path = tmp_path / name
        with warnings.catch_warnings():
            # zipfile warns on duplicate names
            warnings.simplefilter("ignore")
            with zipfile.ZipFile(path, "w") as zf:
                for entry_name, data in entries:
                    zf.writestr(zipfile.ZipInfo(entry_name), data)
        return path

    return _make
