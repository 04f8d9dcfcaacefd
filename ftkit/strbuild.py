"""Building new strings from existing ones.

These functions cover substrings, joining, trimming, splitting and
mapping over characters. As elsewhere in the package, a NUL character
(``"\\0"``) ends a string, and anything after it is ignored.
"""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, Union

from ftkit.strings import strdup

CharLike = Union[int, str]


def _separator(sep: CharLike) -> str:
    """Return *sep* as a single character; integers are truncated to a byte."""
    if isinstance(sep, str):
        if len(sep) != 1:
            raise ValueError(f"expected a single character, got {sep!r}")
        return sep
    if isinstance(sep, int) and not isinstance(sep, bool):
        return chr(sep & 0xFF)
    raise TypeError(
        f"expected an int or a one-character str, got {type(sep).__name__}"
    )


def substr(s: str, start: int, length: int) -> str:
    """Return at most *length* characters of *s* beginning at index *start*.

    A *start* at or past the end of the string gives an empty string.
    Negative values raise ``ValueError``.
    """
    if start < 0:
        raise ValueError(f"start must not be negative, got {start}")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    text = strdup(s)
    if start >= len(text):
        return ""
    return text[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return *s1* followed by *s2*."""
    return strdup(s1) + strdup(s2)


def strtrim(s: str, charset: str) -> str:
    """Remove every character found in *charset* from both ends of *s*."""
    return strdup(s).strip(strdup(charset))


def split(s: str, sep: CharLike) -> List[str]:
    """Split *s* on the character *sep*, dropping empty pieces."""
    text = strdup(s)
    separator = _separator(sep)
    if separator == "\0":
        return [text] if text else []
    return [piece for piece in text.split(separator) if piece]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Return a new string made of ``f(index, char)`` for each character of *s*.

    Each call must return a single character. A NUL among the results
    ends the new string there.
    """
    mapped = []
    for index, ch in enumerate(strdup(s)):
        result = f(index, ch)
        if not isinstance(result, str) or len(result) != 1:
            raise ValueError(
                f"mapping function must return a single character, got {result!r}"
            )
        mapped.append(result)
    return strdup("".join(mapped))


def striteri(
    chars: MutableSequence[str], f: Callable[[int, str], Optional[str]]
) -> None:
    """Call ``f(index, char)`` on each character of *chars*, in place.

    Iteration stops at the first NUL element. When *f* returns a
    character, it replaces the one at that index; returning ``None``
    leaves it as it is.
    """
    for index, ch in enumerate(chars):
        if ch == "\0":
            break
        replacement = f(index, ch)
        if replacement is not None:
            chars[index] = replacement