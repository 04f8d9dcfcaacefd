"""String length, search, comparison and bounded copy operations.

Strings are Python ``str`` values. A NUL character (``"\\0"``) ends a
string as it would in a C buffer: anything after it is ignored. Search
functions return an index, or ``None`` where nothing is found.
"""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Iterator, NamedTuple, Optional, Tuple, Union

CharLike = Union[int, str]


class BoundedCopy(NamedTuple):
    """Result of a size-limited copy.

    ``text`` is what the destination holds afterwards; ``length`` is the
    length of the string the copy tried to create.
    """

    text: str
    length: int


def _terminated(s: str) -> str:
    """Return *s* up to, not including, its first NUL."""
    return s.partition("\0")[0]


def _char(c: CharLike) -> str:
    """Return *c* as a single character; integers are truncated to a byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int) and not isinstance(c, bool):
        return chr(c & 0xFF)
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def _check_size(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def _code_pairs(s1: str, s2: str) -> Iterator[Tuple[int, int]]:
    """Yield pairs of character codes, padding the shorter string with NUL."""
    return zip_longest(
        map(ord, _terminated(s1)), map(ord, _terminated(s2)), fillvalue=0
    )


def _compare(pairs: Iterator[Tuple[int, int]]) -> int:
    for a, b in pairs:
        if a != b:
            return a - b
    return 0


def strlen(s: str) -> int:
    """Return the number of characters before the first NUL."""
    return len(_terminated(s))


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first occurrence of *c* in *s*.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    ch = _char(c)
    text = _terminated(s)
    if ch == "\0":
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last occurrence of *c* in *s*.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    ch = _char(c)
    text = _terminated(s)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most *n* characters of two strings.

    Returns the difference of the character codes at the first position
    where they differ, or 0 if the compared parts are equal.
    """
    _check_size(n, "n")
    return _compare(islice(_code_pairs(s1, s2), n))


def strcmp(s1: str, s2: str) -> int:
    """Compare two strings; return the code difference at the first mismatch, or 0."""
    return _compare(_code_pairs(s1, s2))


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Find *little* in *big*, looking at no more than *length* characters.

    An empty *little* matches at index 0. A match must end within the
    first *length* characters of *big*.
    """
    _check_size(length, "length")
    needle = _terminated(little)
    if not needle:
        return 0
    haystack = _terminated(big)
    index = haystack.find(needle, 0, min(length, len(haystack)))
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> BoundedCopy:
    """Copy *src* into a destination of *size* characters including its terminator.

    The copied text holds at most ``size - 1`` characters (none when
    *size* is 0). The reported length is always ``strlen(src)``.
    """
    _check_size(size, "size")
    text = _terminated(src)
    return BoundedCopy(text[: max(size - 1, 0)], len(text))


def strlcat(dest: str, src: str, size: int) -> BoundedCopy:
    """Append *src* to *dest* in a destination of *size* characters.

    The result holds at most ``size - 1`` characters. If *dest* already
    fills *size*, it is left as it is and the reported length is
    ``strlen(src) + size``; otherwise it is ``strlen(dest) + strlen(src)``.
    """
    _check_size(size, "size")
    head = _terminated(dest)
    tail = _terminated(src)
    dest_len = min(len(head), size)
    if size <= dest_len:
        return BoundedCopy(head, len(tail) + size)
    room = size - 1 - dest_len
    return BoundedCopy(head + tail[:room], dest_len + len(tail))


def strdup(s: str) -> str:
    """Return a copy of *s* up to its first NUL."""
    return _terminated(s)