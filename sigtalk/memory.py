"""Byte-buffer helpers: fill, copy, move, search and compare."""

from __future__ import annotations

from typing import Optional


def _check_span(name: str, data, length: int, offset: int = 0) -> None:
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if offset < 0 or offset + length > len(data):
        raise ValueError(
            f"{name}: span [{offset}, {offset + length}) exceeds size {len(data)}"
        )


def memset(buffer: bytearray, value: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes of ``buffer`` with ``value`` (low 8 bits)."""
    _check_span("memset", buffer, length)
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def bzero(buffer: bytearray, length: int) -> None:
    """Set the first ``length`` bytes of ``buffer`` to zero."""
    memset(buffer, 0, length)


def memcpy(dst: bytearray, src: bytes, length: int) -> bytearray:
    """Copy ``length`` bytes from ``src`` to the start of ``dst``."""
    _check_span("memcpy source", src, length)
    _check_span("memcpy destination", dst, length)
    dst[:length] = src[:length]
    return dst


def memmove(buffer: bytearray, dst: int, src: int, length: int) -> bytearray:
    """Copy ``length`` bytes within ``buffer`` from offset ``src`` to ``dst``.

    Overlapping regions are handled correctly.
    """
    _check_span("memmove source", buffer, length, src)
    _check_span("memmove destination", buffer, length, dst)
    buffer[dst:dst + length] = bytes(buffer[src:src + length])
    return buffer


def memchr(data: bytes, value: int, length: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` in the first ``length`` bytes."""
    _check_span("memchr", data, length)
    index = bytes(data[:length]).find(bytes([value & 0xFF]))
    return None if index < 0 else index


def memcmp(first: bytes, second: bytes, size: int) -> int:
    """Compare the first ``size`` bytes; return the difference of the first
    differing pair, or 0 if they are equal."""
    _check_span("memcmp first", first, size)
    _check_span("memcmp second", second, size)
    for a, b in zip(first[:size], second[:size]):
        if a != b:
            return a - b
    return 0


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)