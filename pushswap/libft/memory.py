"""Byte buffer helpers: fill, copy, move, search, compare and allocate."""

from __future__ import annotations

from typing import Iterable, Optional, Union

Buffer = Union[bytes, bytearray, memoryview]

_ALLOC_LIMIT = 4294967295


def _check_span(buf: Buffer, start: int, n: int) -> None:
    if n < 0 or start < 0:
        raise ValueError("offsets and lengths must not be negative")
    if start + n > len(buf):
        raise IndexError(
            f"span of {n} bytes at {start} exceeds buffer of {len(buf)} bytes"
        )


def memset(buf: bytearray, value: int, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buf`` to the low byte of ``value``."""
    _check_span(buf, 0, n)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    memset(buf, 0, n)


def memcpy(
    dest: Optional[bytearray], src: Optional[Buffer], n: int
) -> Optional[bytearray]:
    """Copy ``n`` bytes from ``src`` to the start of ``dest``.

    Returns ``dest``; when both are missing, returns None.
    """
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise TypeError("memcpy needs both a destination and a source")
    _check_span(dest, 0, n)
    _check_span(src, 0, n)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Move ``n`` bytes within ``buf`` from offset ``src`` to offset ``dest``.

    Overlapping spans are handled as if through a temporary copy.
    """
    _check_span(buf, dest, n)
    _check_span(buf, src, n)
    buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf


def memchr(buf: Buffer, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to the low byte of ``value`` in ``buf[:n]``."""
    _check_span(buf, 0, n)
    index = bytes(buf[:n]).find(value & 0xFF)
    return index if index >= 0 else None


def memcmp(a: Buffer, b: Buffer, n: int) -> int:
    """Difference of the first differing bytes within ``n``, or 0 if equal."""
    _check_span(a, 0, n)
    _check_span(b, 0, n)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Zero-filled buffer of ``count * size`` bytes.

    Raises ValueError for negative arguments and MemoryError for requests
    beyond 4294967295 bytes.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    total = count * size
    if total > _ALLOC_LIMIT:
        raise MemoryError(f"refusing to allocate {total} bytes")
    return bytearray(total)


def count_array(items: Iterable[object]) -> int:
    """Number of items before the first None (or all of them)."""
    count = 0
    for item in items:
        if item is None:
            break
        count += 1
    return count