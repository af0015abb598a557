"""Running two commands joined by a pipe between an input and an output file."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Mapping, Sequence
from typing import IO, Optional, Union

from pypipex.errors import CommandNotFoundError, PipexError, UsageError, report
from pypipex.path import find_cmd, split_fields

Stream = Union[int, IO, None]


def parse_command(command: str) -> list[str]:
    """Split a command line into arguments on spaces."""
    return split_fields(command, " ")


def start_command(
    command: str,
    env: Optional[Mapping[str, str]],
    stdin: Stream,
    stdout: Stream,
) -> subprocess.Popen:
    """Start ``command`` with the given standard input and output.

    The program is resolved through ``PATH`` in ``env``; the argument list
    keeps the name as it was written. Raises PipexError when the command
    cannot be resolved and OSError when it cannot be executed.
    """
    argv = parse_command(command)
    if not argv:
        raise CommandNotFoundError(command)
    executable = find_cmd(argv[0], env)
    return subprocess.Popen(
        argv,
        executable=executable,
        stdin=stdin,
        stdout=stdout,
        env=None if env is None else dict(env),
    )


def _launch(
    command: str, env: Optional[Mapping[str, str]], stdin: int, stdout: int
) -> Optional[subprocess.Popen]:
    try:
        return start_command(command, env, stdin, stdout)
    except PipexError as exc:
        report(exc)
    except OSError:
        # A program that exists but cannot be executed fails silently.
        pass
    return None


def _run_reading(
    infile: str, command: str, env: Optional[Mapping[str, str]], pipe_write: int
) -> Optional[subprocess.Popen]:
    try:
        fd = os.open(infile, os.O_RDONLY)
    except OSError as exc:
        report(exc)
        return None
    try:
        return _launch(command, env, fd, pipe_write)
    finally:
        os.close(fd)


def _run_writing(
    outfile: str, command: str, env: Optional[Mapping[str, str]], pipe_read: int
) -> Optional[subprocess.Popen]:
    try:
        fd = os.open(outfile, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644)
    except OSError as exc:
        report(exc)
        return None
    try:
        return _launch(command, env, pipe_read, fd)
    finally:
        os.close(fd)


def pipex(
    infile: str,
    cmd1: str,
    cmd2: str,
    outfile: str,
    env: Optional[Mapping[str, str]] = None,
) -> int:
    """Run ``< infile cmd1 | cmd2 > outfile`` and return the exit status of
    ``cmd2``: 1 when it could not be started, 0 when it was killed by a signal.
    """
    if env is None:
        env = os.environ
    read_fd, write_fd = os.pipe()
    try:
        first = _run_reading(infile, cmd1, env, write_fd)
    finally:
        os.close(write_fd)
    try:
        second = _run_writing(outfile, cmd2, env, read_fd)
    finally:
        os.close(read_fd)
    status = second.wait() if second is not None else 1
    if first is not None:
        first.wait()
    return status if status >= 0 else 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point: ``pipex infile cmd1 cmd2 outfile``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 4:
        report(UsageError())
        return UsageError.exit_status
    infile, cmd1, cmd2, outfile = args
    try:
        return pipex(infile, cmd1, cmd2, outfile, dict(os.environ))
    except OSError as exc:
        report(exc)
        return 1