"""C-style string, memory, list, formatting and line-reading helpers."""

__version__ = "0.1.0"
__all__ = [
    "convert",
    "ctype",
    "linkedlist",
    "memory",
    "nextline",
    "output",
    "printf",
    "strbuild",
    "strings",
]