import os
import subprocess

import pytest

from pypipex.errors import CommandNotFoundError
from pypipex.runner import main, parse_command, pipex, start_command


@pytest.fixture
def env():
    return {"PATH": os.environ.get("PATH", "/usr/bin:/bin")}


def test_parse_command_collapses_spaces():
    assert parse_command("ls  -l   -a ") == ["ls", "-l", "-a"]


def test_parse_command_blank():
    assert parse_command("   ") == []


def test_start_command_reads_from_given_stdin(tmp_path, env):
    source = tmp_path / "in.txt"
    source.write_text("hello\nworld\n")
    with open(source, "rb") as handle:
        proc = start_command("cat", env, handle, subprocess.PIPE)
        out, _ = proc.communicate()
    assert out == b"hello\nworld\n"
    assert proc.returncode == 0


def test_start_command_empty_raises(env):
    with pytest.raises(CommandNotFoundError):
        start_command("", env, None, None)


def test_pipex_passes_data_through(tmp_path, env):
    infile = tmp_path / "in.txt"
    outfile = tmp_path / "out.txt"
    infile.write_text("c\na\nb\n")
    status = pipex(str(infile), "cat", "sort", str(outfile), env)
    assert status == 0
    assert outfile.read_text() == "a\nb\nc\n"


def test_pipex_with_arguments(tmp_path, env):
    infile = tmp_path / "in.txt"
    outfile = tmp_path / "out.txt"
    infile.write_text("apple\nbanana\ncherry\n")
    status = pipex(str(infile), "grep an", "cat", str(outfile), env)
    assert status == 0
    assert outfile.read_text() == "banana\n"


def test_pipex_returns_status_of_second_command(tmp_path, env):
    infile = tmp_path / "in.txt"
    outfile = tmp_path / "out.txt"
    infile.write_text("apple\n")
    status = pipex(str(infile), "cat", "grep zzz", str(outfile), env)
    assert status == 1
    assert outfile.read_text() == ""


def test_pipex_truncates_outfile(tmp_path, env):
    infile = tmp_path / "in.txt"
    outfile = tmp_path / "out.txt"
    infile.write_text("new\n")
    outfile.write_text("old content that is longer\n")
    pipex(str(infile), "cat", "cat", str(outfile), env)
    assert outfile.read_text() == "new\n"


def test_pipex_missing_infile(tmp_path, env, capsys):
    outfile = tmp_path / "out.txt"
    status = pipex(str(tmp_path / "missing"), "cat", "cat", str(outfile), env)
    err = capsys.readouterr().err
    assert "pipex: No such file or directory\n" in err
    assert status == 0
    assert outfile.exists()
    assert outfile.read_text() == ""


def test_pipex_unknown_second_command(tmp_path, env, capsys):
    infile = tmp_path / "in.txt"
    outfile = tmp_path / "out.txt"
    infile.write_text("x\n")
    status = pipex(str(infile), "cat", "nosuchcmd_xyz", str(outfile), env)
    err = capsys.readouterr().err
    assert "pipex: nosuchcmd_xyz: command not found\n" in err
    assert status == 1


def test_pipex_without_path(tmp_path, capsys):
    infile = tmp_path / "in.txt"
    outfile = tmp_path / "out.txt"
    infile.write_text("x\n")
    status = pipex(str(infile), "cat", "cat", str(outfile), {})
    err = capsys.readouterr().err
    assert err.count("pipex: No such file or directory\n") == 2
    assert status == 1


def test_main_wrong_argument_count(capsys):
    assert main(["a", "b"]) == 1
    assert capsys.readouterr().err == "pipex: too few/many arguments\n"


def test_main_runs_pipeline(tmp_path, monkeypatch):
    infile = tmp_path / "in.txt"
    outfile = tmp_path / "out.txt"
    infile.write_text("one\ntwo\n")
    monkeypatch.setenv("PATH", os.environ.get("PATH", "/usr/bin:/bin"))
    status = main([str(infile), "cat", "cat", str(outfile)])
    assert status == 0
    assert outfile.read_text() == infile.read_text()