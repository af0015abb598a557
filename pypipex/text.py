"""String helpers: search, compare, slice, join, trim, bounded copy and mapping.

Positions are returned as indices into the string, or ``None`` where
nothing is found. Searching for the NUL character finds the end of the
string, as a terminated string would.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Optional, Union

CharLike = Union[str, int]


def _char(c: CharLike) -> str:
    """Return ``c`` as a one-character string."""
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code point")
    if isinstance(c, int):
        return chr(c)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)}")
        return c
    raise TypeError("expected a character or an integer code point")


def _require_str(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a string")
    return value


def _require_count(n: int, name: str) -> int:
    if n < 0:
        raise ValueError(f"{name} must not be negative")
    return n


def str_chr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``s``; ``len(s)`` for NUL; else ``None``."""
    ch = _char(c)
    if ch == "\0":
        return len(_require_str(s, "s"))
    index = _require_str(s, "s").find(ch)
    return None if index == -1 else index


def str_rchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``s``; ``len(s)`` for NUL; else ``None``."""
    ch = _char(c)
    if ch == "\0":
        return len(_require_str(s, "s"))
    index = _require_str(s, "s").rfind(ch)
    return None if index == -1 else index


def str_ncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the first differing code points, where the
    end of a string counts as code point 0, or 0 when they agree.
    """
    _require_str(first, "first")
    _require_str(second, "second")
    _require_count(n, "n")
    a = first[:n]
    b = second[:n]
    longest = max(len(a), len(b))
    for x, y in zip(a.ljust(longest, "\0"), b.ljust(longest, "\0")):
        if x != y:
            return ord(x) - ord(y)
    return 0


def str_nstr(big: str, little: str, n: int) -> Optional[int]:
    """Index of ``little`` inside the first ``n`` characters of ``big``.

    An empty ``little`` matches at 0. Returns ``None`` when not found.
    """
    _require_str(big, "big")
    _require_str(little, "little")
    _require_count(n, "n")
    if not little:
        return 0
    index = big[:n].find(little)
    return None if index == -1 else index


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` from ``start``; empty past the end."""
    _require_str(s, "s")
    _require_count(start, "start")
    _require_count(length, "length")
    if start >= len(s):
        return ""
    return s[start:start + min(len(s) - start, length)]


def str_join(first: str, second: str) -> str:
    """Concatenate two strings."""
    return _require_str(first, "first") + _require_str(second, "second")


def str_trim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    _require_str(s, "s")
    _require_str(charset, "charset")
    if not charset:
        return s
    return s.strip(charset)


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, one kept for the terminator.

    Returns the copied text and the full length of ``src``.
    """
    _require_str(src, "src")
    _require_count(size, "size")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` slots.

    Returns the resulting text and the length the full concatenation would
    have had. When ``size`` does not exceed the length of ``dst``, ``dst``
    is returned unchanged along with ``size + len(src)``.
    """
    _require_str(dst, "dst")
    _require_str(src, "src")
    _require_count(size, "size")
    dst_len = min(len(dst), size)
    if size <= dst_len:
        return dst, size + len(src)
    room = size - 1 - dst_len
    return dst + src[:room], dst_len + len(src)


def str_mapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    _require_str(s, "s")
    return "".join(func(index, ch) for index, ch in enumerate(s))


def str_iteri(
    s: Union[str, MutableSequence],
    func: Callable[[int, object], object],
) -> Union[str, MutableSequence]:
    """Call ``func(index, item)`` for each item of ``s``.

    A non-``None`` return value replaces the item. Mutable sequences are
    updated in place and returned; for a string a new string is returned.
    """
    if isinstance(s, str):
        items: MutableSequence = list(s)
    else:
        items = s
    for index, item in enumerate(list(items)):
        replacement = func(index, item)
        if replacement is not None:
            items[index] = replacement
    if isinstance(s, str):
        return "".join(items)
    return items