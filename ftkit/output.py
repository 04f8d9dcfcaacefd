"""Writing characters, strings and numbers to file descriptors."""

from __future__ import annotations

import os
from typing import Union

from ftkit.convert import itoa
from ftkit.strings import strdup

CharLike = Union[int, str]


def _write_all(fd: int, data: bytes) -> None:
    """Write every byte of *data* to *fd*, retrying after short writes."""
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def putchar_fd(c: CharLike, fd: int) -> None:
    """Write the character *c* to *fd*.

    An integer is written as a single byte, truncated to its low 8 bits.
    """
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        data = c.encode("utf-8")
    elif isinstance(c, int) and not isinstance(c, bool):
        data = bytes([c & 0xFF])
    else:
        raise TypeError(
            f"expected an int or a one-character str, got {type(c).__name__}"
        )
    _write_all(fd, data)


def putstr_fd(s: str, fd: int) -> None:
    """Write *s*, up to its first NUL, to *fd*."""
    _write_all(fd, strdup(s).encode("utf-8"))


def putendl_fd(s: str, fd: int) -> None:
    """Write *s*, up to its first NUL, followed by a newline to *fd*."""
    _write_all(fd, (strdup(s) + "\n").encode("utf-8"))


def putnbr_fd(n: int, fd: int) -> None:
    """Write the decimal text of the 32-bit signed integer *n* to *fd*."""
    _write_all(fd, itoa(n).encode("ascii"))