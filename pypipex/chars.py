"""Character classification and case conversion for the ASCII range.

Each function accepts either a one-character string or an integer code
point. The case conversions return a value of the same kind they were given.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[str, int]


def _code(c: CharLike) -> int:
    """Return the integer code of ``c``."""
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code point")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)}")
        return ord(c)
    raise TypeError("expected a character or an integer code point")


def _is_upper(code: int) -> bool:
    return ord("A") <= code <= ord("Z")


def _is_lower(code: int) -> bool:
    return ord("a") <= code <= ord("z")


def _is_digit(code: int) -> bool:
    return ord("0") <= code <= ord("9")


def is_alpha(c: CharLike) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return _is_upper(code) or _is_lower(code)


def is_digit(c: CharLike) -> bool:
    """True for the decimal digits 0-9."""
    return _is_digit(_code(c))


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and decimal digits."""
    code = _code(c)
    return _is_upper(code) or _is_lower(code) or _is_digit(code)


def is_ascii(c: CharLike) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for printable ASCII, space (32) through tilde (126)."""
    return 32 <= _code(c) <= 126


def _convert(c: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(c, str) else code


def to_lower(c: CharLike) -> CharLike:
    """Map an ASCII upper-case letter to lower case; leave anything else."""
    code = _code(c)
    if _is_upper(code):
        code += 32
    return _convert(c, code)


def to_upper(c: CharLike) -> CharLike:
    """Map an ASCII lower-case letter to upper case; leave anything else."""
    code = _code(c)
    if _is_lower(code):
        code -= 32
    return _convert(c, code)