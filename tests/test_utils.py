import os
from pathlib import Path

import pytest

from srm.errors import FilesystemAccessError
from srm.utils import (
    contains, display_name, is_dir, is_read_only, join_destination,
    strip_trailing_separators,
)


def test_contains():
    assert contains("lindsay", ["matt", "mark", "john", "lindsay"])
    assert not contains("paul", ["matt", "mark"])
    assert not contains("x", [])


def test_is_dir(tmp_path: Path):
    f = tmp_path / "a.txt"
    f.write_text("hello")
    assert is_dir(str(tmp_path))
    assert not is_dir(str(f))


def test_is_read_only(tmp_path: Path):
    f = tmp_path / "a.txt"
    f.write_text("hello")
    assert not is_read_only(str(f))
    f.chmod(0o444)
    assert is_read_only(str(f))


def test_missing_path_raises_access_error(tmp_path: Path):
    missing = str(tmp_path / "nope")
    with pytest.raises(FilesystemAccessError) as info:
        is_dir(missing)
    assert info.value.path == missing
    assert "cannot stat" in str(info.value)
    with pytest.raises(FilesystemAccessError):
        is_read_only(missing)


def test_strip_trailing_separators():
    assert strip_trailing_separators("foo/") == "foo"
    assert strip_trailing_separators("foo///") == "foo"
    assert strip_trailing_separators("a/b") == "a/b"
    assert strip_trailing_separators("/") == "/"


def test_display_name():
    assert display_name("a.txt") == "a.txt"
    assert display_name("dir/sub/a.txt") == "a.txt"
    assert display_name("/abs/path/a.txt") == "a.txt"
    assert display_name("foo/") == display_name("foo") == "foo"
    assert display_name("x/foo//") == "foo"


def test_join_destination():
    assert join_destination("/tmp", "a.txt") == Path("/tmp/a.txt")
    assert join_destination("/tmp/", "a.txt") == Path("/tmp/a.txt")
    assert join_destination("/tmp", "-f") == Path("/tmp") / "-f"


def test_join_destination_keeps_root_for_separator_name():
    assert join_destination("/tmp", os.sep) == Path("/tmp")
