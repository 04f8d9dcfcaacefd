"""A small printf supporting the conversions %c, %s, %p, %d, %i, %u, %x, %X and %%.

``format_string`` builds the text; ``printf`` writes it to standard
output (file descriptor 1) and returns the number of bytes written.
Integer arguments are reduced to the width of the C type each
conversion reads: 32 bits for %c, %d, %i, %u, %x and %X, and 64 bits
for %p. A conversion letter that is not recognised produces no output
and consumes no argument.
"""

from __future__ import annotations

import operator
import os
from typing import Any, Callable, Dict, Iterator

from ftkit.strings import strdup

_STDOUT = 1
_HEX_LOWER = "0123456789abcdef"
_HEX_UPPER = "0123456789ABCDEF"


def _to_hex(value: int, digits: str) -> str:
    if value < 16:
        return digits[value]
    text = []
    while value:
        value, rest = divmod(value, 16)
        text.append(digits[rest])
    return "".join(reversed(text))


def _int_arg(value: Any, spec: str) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(
            f"%{spec} expects an integer, got {type(value).__name__}"
        ) from None


def _signed32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def _unsigned32(value: int) -> int:
    return value % 2**32


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_int_arg(value, "c") & 0xFF)


def _format_str(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a str or None, got {type(value).__name__}")
    return strdup(value)


def _format_signed(value: Any) -> str:
    return str(_signed32(_int_arg(value, "d")))


def _format_unsigned(value: Any) -> str:
    return str(_unsigned32(_int_arg(value, "u")))


def _format_pointer(value: Any) -> str:
    address = 0 if value is None else _int_arg(value, "p") % 2**64
    if not address:
        return "(nil)"
    return "0x" + _to_hex(address, _HEX_LOWER)


def _format_hex_lower(value: Any) -> str:
    return _to_hex(_unsigned32(_int_arg(value, "x")), _HEX_LOWER)


def _format_hex_upper(value: Any) -> str:
    return _to_hex(_unsigned32(_int_arg(value, "X")), _HEX_UPPER)


_CONVERSIONS: Dict[str, Callable[[Any], str]] = {
    "c": _format_char,
    "s": _format_str,
    "d": _format_signed,
    "i": _format_signed,
    "p": _format_pointer,
    "u": _format_unsigned,
    "x": _format_hex_lower,
    "X": _format_hex_upper,
}


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    handler = _CONVERSIONS.get(spec)
    if handler is None:
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    return handler(value)


def format_string(fmt: str, *args: Any) -> str:
    """Return *fmt* with each conversion replaced by the next argument.

    The format ends at its first NUL. A lone ``%`` at the end raises
    ``ValueError``; running out of arguments raises ``TypeError``.
    Extra arguments are ignored.
    """
    remaining = iter(args)
    chars = iter(strdup(fmt))
    pieces = []
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format ends with an incomplete conversion '%'")
        pieces.append(_convert(spec, remaining))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return the bytes written."""
    data = format_string(fmt, *args).encode("utf-8")
    view = memoryview(data)
    while view:
        view = view[os.write(_STDOUT, view):]
    return len(data)