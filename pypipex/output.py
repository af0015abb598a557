"""Writing characters, strings, lines and numbers to a text stream."""

from __future__ import annotations

from typing import TextIO

from pypipex.numbers import itoa


def _require_str(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a string")
    return value


def put_char(c: str, stream: TextIO) -> None:
    """Write the single character ``c`` to ``stream``."""
    _require_str(c, "c")
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {len(c)}")
    stream.write(c)


def put_str(s: str, stream: TextIO) -> None:
    """Write ``s`` to ``stream``."""
    stream.write(_require_str(s, "s"))


def put_endl(s: str, stream: TextIO) -> None:
    """Write ``s`` followed by a newline to ``stream``."""
    stream.write(_require_str(s, "s") + "\n")


def put_nbr(n: int, stream: TextIO) -> None:
    """Write the decimal form of the 32-bit integer ``n`` to ``stream``."""
    stream.write(itoa(n))