import zipfile

import pytest

from treezip.errors import ZipFormatError, ZipIOError, ZipPathError
from treezip.reader import ArchiveReader
from treezip.writer import ArchiveWriter


def test_writer_counts_entries(make_tree, tmp_path):
    src = make_tree({"dir": {"file.txt": "abc"}})
    archive = tmp_path / "out.zip"

    with ArchiveWriter(archive) as z:
        z.add_directory("dir", str(src / "dir"))
        z.add_file("dir/file.txt", str(src / "dir" / "file.txt"))

    assert (z.directories_written, z.files_written) == (1, 1)
    with zipfile.ZipFile(archive) as zf:
        assert zf.namelist() == ["dir/", "dir/file.txt"]


def test_closed_writer_rejects_entries(make_tree, tmp_path):
    src = make_tree({"file.txt": "abc"})
    z = ArchiveWriter(tmp_path / "out.zip")
    z.close()
    z.close()

    with pytest.raises(ZipIOError, match="Archive is closed"):
        z.add_file("file.txt", str(src / "file.txt"))
    with pytest.raises(ZipIOError, match="Archive is closed"):
        z.add_directory("dir", str(src))


@pytest.mark.parametrize("name", ["", "bad\x00name.txt"])
def test_writer_rejects_invalid_names(make_tree, tmp_path, name):
    src = make_tree({"file.txt": "abc"})

    with ArchiveWriter(tmp_path / "out.zip") as z:
        with pytest.raises(ZipPathError):
            z.add_file(name, str(src / "file.txt"))

    assert z.files_written == 0


def test_closed_reader_rejects_access(make_zip):
    reader = ArchiveReader(make_zip([("file.txt", b"abc")]))
    entry = next(reader.entries())
    reader.close()

    with pytest.raises(ZipIOError, match="Archive file is closed"):
        list(reader.entries())
    with pytest.raises(ZipIOError, match="Archive file is closed"):
        reader.open(entry)


def test_reader_reports_sizes(tmp_path):
    archive = tmp_path / "sizes.zip"
    with zipfile.ZipFile(archive, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        zf.writestr("big.txt", b"a" * 10000)

    with ArchiveReader(archive) as z:
        (entry,) = z.entries()

    assert entry.size == 10000
    assert 0 < entry.compressed_size < entry.size


def test_reader_rejects_non_zip(tmp_path):
    bogus = tmp_path / "bogus.zip"
    bogus.write_bytes(b"not a zip")

    with pytest.raises(ZipFormatError, match="Invalid zip"):
        ArchiveReader(bogus)
