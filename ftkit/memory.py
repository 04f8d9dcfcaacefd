"""Byte-buffer operations: fill, zero, search, compare, copy and move.

Buffers are ``bytearray`` (or writable ``memoryview``) objects for the
operations that write, and any bytes-like object for those that only
read. Reaching past the end of a buffer raises ``ValueError``.
"""

from __future__ import annotations

from typing import Optional, Union

ReadableBuffer = Union[bytes, bytearray, memoryview]
WritableBuffer = Union[bytearray, memoryview]


def _check_count(n: int) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")


def _check_span(buffer: ReadableBuffer, offset: int, n: int, name: str) -> None:
    if offset < 0:
        raise ValueError(f"{name} offset must not be negative, got {offset}")
    if offset + n > len(buffer):
        raise ValueError(
            f"{name}: {n} bytes at offset {offset} exceed buffer of {len(buffer)} bytes"
        )


def memset(buffer: WritableBuffer, c: int, n: int) -> WritableBuffer:
    """Set the first *n* bytes of *buffer* to ``c & 0xFF`` and return *buffer*."""
    _check_count(n)
    _check_span(buffer, 0, n, "buffer")
    buffer[:n] = bytes([c & 0xFF]) * n
    return buffer


def bzero(buffer: WritableBuffer, n: int) -> None:
    """Set the first *n* bytes of *buffer* to zero."""
    memset(buffer, 0, n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zero-filled buffer large enough for *nmemb* items of *size* bytes."""
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    return bytearray(nmemb * size)


def memchr(data: ReadableBuffer, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``c & 0xFF`` in the first *n* bytes.

    Returns ``None`` when the byte does not occur there.
    """
    _check_count(n)
    _check_span(data, 0, n, "data")
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(s1: ReadableBuffer, s2: ReadableBuffer, n: int) -> int:
    """Compare the first *n* bytes of two buffers as unsigned values.

    Returns the difference of the first pair of bytes that differ, or 0.
    """
    _check_count(n)
    _check_span(s1, 0, n, "s1")
    _check_span(s2, 0, n, "s2")
    for a, b in zip(bytes(s1[:n]), bytes(s2[:n])):
        if a != b:
            return a - b
    return 0


def memcpy(dest: WritableBuffer, src: ReadableBuffer, n: int) -> WritableBuffer:
    """Copy the first *n* bytes of *src* to the start of *dest* and return *dest*."""
    _check_count(n)
    _check_span(src, 0, n, "src")
    _check_span(dest, 0, n, "dest")
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: WritableBuffer, dest: int, src: int, n: int) -> WritableBuffer:
    """Move *n* bytes within *buffer* from offset *src* to offset *dest*.

    The regions may overlap; the result is as if the source bytes were
    first copied aside. Returns *buffer*.
    """
    _check_count(n)
    _check_span(buffer, src, n, "src")
    _check_span(buffer, dest, n, "dest")
    if n == 0 or dest == src:
        return buffer
    buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer