import pytest

from treezip.__main__ import main


def test_banner_without_arguments(capsys):
    main([])

    out = capsys.readouterr().out
    assert out.startswith("TREEZIP")
    assert "python -m treezip compress folder archive.zip" in out


def test_compress_extract_compare(make_tree, tmp_path, capsys):
    src = make_tree({"a": {"b": {"file.txt": "hi"}, "c": {}}})
    archive = tmp_path / "out.zip"
    dest = tmp_path / "dest"

    main(["compress", str(src), str(archive)])
    main(["extract", str(archive), "-d", str(dest)])
    main(["compare", str(src), str(dest)])

    assert capsys.readouterr().out.strip() == "Directories are identical"
    assert (dest / "a" / "b" / "file.txt").read_text() == "hi"


def test_compress_with_options_and_list(make_tree, tmp_path, capsys):
    src = make_tree({"data.txt": "x" * 100})
    archive = tmp_path / "out.zip"

    main(["compress", str(src), str(archive), "--compression", "deflate", "--permissions", "644"])
    main(["list", str(archive)])

    out = capsys.readouterr().out.splitlines()
    assert out[1].split()[3:] == ["deflate", "0644", "data.txt"]
    size, compressed = (int(v) for v in out[1].split()[1:3])
    assert size == 100 and compressed < size


def test_compare_reports_differences(make_tree, capsys):
    left = make_tree({"x.txt": "1"}, name="left")
    right = make_tree({}, name="right")

    with pytest.raises(SystemExit) as excinfo:
        main(["compare", str(left), str(right)])

    assert excinfo.value.code == 1
    assert f"only in {left}: x.txt" in capsys.readouterr().out


def test_extract_missing_archive_exits_with_error(tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["extract", str(tmp_path / "missing.zip"), "-d", str(tmp_path / "dest")])

    assert excinfo.value.code == 1
    assert capsys.readouterr().err.startswith("treezip: Open failed")


def test_extract_invalid_archive_suggests_fix(tmp_path, capsys):
    bogus = tmp_path / "bogus.zip"
    bogus.write_bytes(b"nope")

    with pytest.raises(SystemExit) as excinfo:
        main(["extract", str(bogus)])

    assert excinfo.value.code == 1
    err = capsys.readouterr().err
    assert "Invalid zip" in err
    assert "treezip: Suggestion:" in err


def test_invalid_permissions_rejected_by_parser(make_tree, tmp_path, capsys):
    src = make_tree({})

    with pytest.raises(SystemExit) as excinfo:
        main(["compress", str(src), str(tmp_path / "out.zip"), "--permissions", "rwx"])

    assert excinfo.value.code == 2
    assert "invalid octal mode" in capsys.readouterr().err
