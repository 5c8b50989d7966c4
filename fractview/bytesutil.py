"""Byte-buffer search, comparison and copying."""

from __future__ import annotations


def _check_length(n: int, *buffers: bytes) -> None:
    if n < 0:
        raise ValueError("n must not be negative")
    if any(n > len(buffer) for buffer in buffers):
        raise ValueError("n is larger than the buffer")


def mem_find(data: bytes, c: int, n: int) -> int | None:
    """Index of the first byte equal to ``c`` (taken modulo 256) in the first ``n`` bytes."""
    _check_length(n, data)
    index = data.find(bytes([c & 0xFF]), 0, n)
    return None if index < 0 else index


def mem_compare(a: bytes, b: bytes, n: int) -> int:
    """Difference of the first differing byte pair among the first ``n`` bytes, else 0."""
    _check_length(n, a, b)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def mem_copy_until(src: bytes, c: int, n: int) -> tuple[bytes, bool]:
    """Copy at most ``n`` bytes of ``src``, stopping after the first byte equal to ``c``.

    Returns the copied bytes and whether ``c`` was found.
    """
    index = mem_find(src, c, n)
    if index is None:
        return bytes(src[:n]), False
    return bytes(src[:index + 1]), True