"""ASCII character classification and case conversion.

Every function accepts either an integer character code or a
one-character string. The predicates return ``bool``. The case
converters return a value of the same kind they were given. Codes
outside the ASCII letters come back unchanged.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]

_UPPER_FIRST = ord("A")
_UPPER_LAST = ord("Z")
_LOWER_FIRST = ord("a")
_LOWER_LAST = ord("z")
_DIGIT_FIRST = ord("0")
_DIGIT_LAST = ord("9")
_CASE_OFFSET = _LOWER_FIRST - _UPPER_FIRST


def _code(c: CharLike) -> int:
    """Return the integer code of *c*, which is an int or a single character."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int) and not isinstance(c, bool):
        return c
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def _is_upper(code: int) -> bool:
    return _UPPER_FIRST <= code <= _UPPER_LAST


def _is_lower(code: int) -> bool:
    return _LOWER_FIRST <= code <= _LOWER_LAST


def isalpha(c: CharLike) -> bool:
    """Return True if *c* is an ASCII letter."""
    code = _code(c)
    return _is_lower(code) or _is_upper(code)


def isdigit(c: CharLike) -> bool:
    """Return True if *c* is an ASCII decimal digit."""
    return _DIGIT_FIRST <= _code(c) <= _DIGIT_LAST


def isalnum(c: CharLike) -> bool:
    """Return True if *c* is an ASCII letter or digit."""
    return isalpha(c) or isdigit(c)


def isascii(c: CharLike) -> bool:
    """Return True if *c* lies in the 7-bit ASCII range 0..127."""
    return 0 <= _code(c) <= 127


def isprint(c: CharLike) -> bool:
    """Return True if *c* is a printable ASCII character (space through tilde)."""
    return 32 <= _code(c) <= 126


def _convert(c: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(c, str) else code


def tolower(c: CharLike) -> CharLike:
    """Map an ASCII upper-case letter to lower case; return anything else unchanged."""
    code = _code(c)
    if _is_upper(code):
        return _convert(c, code + _CASE_OFFSET)
    return c


def toupper(c: CharLike) -> CharLike:
    """Map an ASCII lower-case letter to upper case; return anything else unchanged."""
    code = _code(c)
    if _is_lower(code):
        return _convert(c, code - _CASE_OFFSET)
    return c