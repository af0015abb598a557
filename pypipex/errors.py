"""Errors raised by the pipeline and the way they are reported."""

from __future__ import annotations

import errno as _errno
import os
import sys
from typing import Optional, TextIO

PROGRAM = "pipex"


class PipexError(Exception):
    """Base class for pipeline errors; ends the program with ``exit_status``."""

    exit_status = 1
    errno: Optional[int] = None


class UsageError(PipexError):
    """The program was given the wrong number of arguments."""

    def __init__(self) -> None:
        super().__init__("too few/many arguments")


class PathNotSetError(PipexError):
    """No ``PATH`` entry was found in the environment."""

    errno = _errno.ENOENT

    def __init__(self) -> None:
        super().__init__(os.strerror(_errno.ENOENT))


class CommandNotFoundError(PipexError):
    """A command could not be found in any ``PATH`` directory."""

    errno = _errno.ENOENT

    def __init__(self, command: str) -> None:
        super().__init__(f"{command}: command not found")
        self.command = command


def _describe(error: BaseException) -> str:
    if isinstance(error, PipexError):
        return str(error)
    if isinstance(error, OSError) and error.errno is not None:
        return os.strerror(error.errno)
    return str(error)


def report(error: BaseException, stream: Optional[TextIO] = None) -> str:
    """Write ``error`` to ``stream`` (standard error by default) as a
    ``pipex:`` line and return the text written."""
    target = sys.stderr if stream is None else stream
    text = f"{PROGRAM}: {_describe(error)}\n"
    target.write(text)
    return text