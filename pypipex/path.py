"""Locating executables through the ``PATH`` environment variable."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Optional

from pypipex.errors import CommandNotFoundError, PathNotSetError


def split_fields(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty fields."""
    if not isinstance(text, str):
        raise TypeError("text must be a string")
    if not isinstance(sep, str) or len(sep) != 1:
        raise ValueError("sep must be a single character")
    return [field for field in text.split(sep) if field]


def get_path(env: Optional[Mapping[str, str]]) -> Optional[str]:
    """Return the value of ``PATH`` in ``env``, or ``None`` when it is absent."""
    if env is None:
        return None
    return env.get("PATH")


def join_path(directory: str, command: str) -> str:
    """Join a directory and a command name with a single ``/``."""
    return f"{directory}/{command}"


def find_cmd(command: str, env: Optional[Mapping[str, str]]) -> str:
    """Resolve ``command`` to the path of an existing file.

    A command containing ``/`` is returned unchanged. Otherwise each
    directory of ``PATH`` is tried in order and the first existing
    candidate is returned.

    Raises PathNotSetError when ``env`` has no ``PATH`` and
    CommandNotFoundError when no directory holds the command.
    """
    if "/" in command:
        return command
    path = get_path(env)
    if path is None:
        raise PathNotSetError()
    for directory in split_fields(path, ":"):
        candidate = join_path(directory, command)
        if os.access(candidate, os.F_OK):
            return candidate
    raise CommandNotFoundError(command)