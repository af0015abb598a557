import errno

import pytest

from pypipex.errors import CommandNotFoundError, PathNotSetError
from pypipex.path import find_cmd, get_path, join_path, split_fields


def test_split_fields_drops_empty_fields():
    assert split_fields("a::b:", ":") == ["a", "b"]


def test_split_fields_leading_separators():
    assert split_fields("  ls  -l ", " ") == ["ls", "-l"]


@pytest.mark.parametrize("text", ["", "   "])
def test_split_fields_yields_nothing_for_blank_input(text):
    assert split_fields(text, " ") == []


def test_split_fields_rejects_long_separator():
    with pytest.raises(ValueError):
        split_fields("a,b", ",,")


def test_split_fields_round_trip_with_join():
    parts = ["usr", "local", "bin"]
    assert split_fields(":".join(parts), ":") == parts


def test_get_path_returns_value():
    assert get_path({"HOME": "/home/x", "PATH": "/bin:/usr/bin"}) == "/bin:/usr/bin"


def test_get_path_missing():
    assert get_path({"HOME": "/home/x"}) is None
    assert get_path(None) is None


def test_join_path():
    assert join_path("/usr/bin", "ls") == "/usr/bin/ls"


def test_find_cmd_with_slash_is_unchanged():
    assert find_cmd("./does/not/exist", {}) == "./does/not/exist"


def test_find_cmd_searches_directories(tmp_path):
    empty = tmp_path / "empty"
    full = tmp_path / "full"
    empty.mkdir()
    full.mkdir()
    (full / "tool").write_text("")
    env = {"PATH": f"{empty}:{full}"}
    assert find_cmd("tool", env) == join_path(str(full), "tool")


def test_find_cmd_first_directory_wins(tmp_path):
    first = tmp_path / "first"
    second = tmp_path / "second"
    for directory in (first, second):
        directory.mkdir()
        (directory / "tool").write_text("")
    env = {"PATH": f"{first}:{second}"}
    assert find_cmd("tool", env) == join_path(str(first), "tool")


def test_find_cmd_not_found(tmp_path):
    with pytest.raises(CommandNotFoundError) as info:
        find_cmd("nosuchtool", {"PATH": str(tmp_path)})
    assert info.value.command == "nosuchtool"
    assert str(info.value) == "nosuchtool: command not found"


def test_find_cmd_without_path():
    with pytest.raises(PathNotSetError) as info:
        find_cmd("ls", {})
    assert info.value.errno == errno.ENOENT