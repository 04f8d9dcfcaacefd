"""Conversions between decimal text and 32-bit signed integers."""

from __future__ import annotations

import operator
from itertools import takewhile

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

# Tab, newline, vertical tab, form feed, carriage return and space.
_WHITESPACE = "\t\n\v\f\r "


def _wrap_int32(value: int) -> int:
    """Reduce *value* to the range of a 32-bit two's-complement integer."""
    return (value - INT_MIN) % 2**32 + INT_MIN


def _is_ascii_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def atoi(text: str) -> int:
    """Parse a leading decimal integer from *text*.

    Leading whitespace is skipped and a single optional sign is accepted.
    Parsing stops at the first character that is not an ASCII digit; if
    no digits follow, the result is 0. Values that do not fit in 32 bits
    wrap around as a 32-bit integer would.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = "".join(takewhile(_is_ascii_digit, rest))
    value = int(digits) if digits else 0
    return _wrap_int32(sign * value)


def itoa(n: int) -> str:
    """Return the decimal text of *n*, a 32-bit signed integer.

    Raises ``OverflowError`` if *n* lies outside the 32-bit range.
    """
    value = operator.index(n)
    if not INT_MIN <= value <= INT_MAX:
        raise OverflowError(f"{value} does not fit in a 32-bit signed integer")
    return str(value)