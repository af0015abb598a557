"""Byte-buffer helpers: search, compare, copy, move, fill and allocate."""

from __future__ import annotations

from typing import Optional

BytesLike = bytes | bytearray | memoryview


def _check_span(buffer: BytesLike, offset: int, n: int, name: str) -> None:
    if n < 0:
        raise ValueError("byte count must not be negative")
    if offset < 0 or offset + n > len(buffer):
        raise ValueError(
            f"{name}: span {offset}..{offset + n} exceeds buffer of {len(buffer)} bytes"
        )


def mem_chr(data: BytesLike, value: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` within the first
    ``n`` bytes, or ``None`` when there is none."""
    _check_span(data, 0, n, "data")
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index == -1 else index


def mem_cmp(first: BytesLike, second: BytesLike, n: int) -> int:
    """Compare the first ``n`` bytes; return -1, 0 or 1."""
    _check_span(first, 0, n, "first")
    _check_span(second, 0, n, "second")
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return -1 if a < b else 1
    return 0


def mem_copy(dest: bytearray, src: BytesLike, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` to the start of ``dest``; return ``dest``."""
    _check_span(dest, 0, n, "dest")
    _check_span(src, 0, n, "src")
    dest[:n] = bytes(src[:n])
    return dest


def mem_move(buffer: bytearray, dest_offset: int, src_offset: int, n: int) -> bytearray:
    """Move ``n`` bytes within ``buffer`` from ``src_offset`` to
    ``dest_offset``; overlapping regions are handled. Return ``buffer``."""
    _check_span(buffer, dest_offset, n, "dest")
    _check_span(buffer, src_offset, n, "src")
    buffer[dest_offset:dest_offset + n] = bytes(buffer[src_offset:src_offset + n])
    return buffer


def mem_set(buffer: bytearray, value: int, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buffer`` to ``value`` (taken modulo 256)."""
    _check_span(buffer, 0, n, "buffer")
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def zero(buffer: bytearray, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buffer`` to zero."""
    return mem_set(buffer, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)