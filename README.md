# ftkit

A small toolkit of helpers that follow classic C library conventions:
character classes, byte buffers, string handling, number conversion,
a singly linked list, a compact `printf` and a buffered line reader.
Where C would hand back a pointer, these functions return an index or
`None`; where C would fail, they raise.

## Install

```
pip install .
```

For the test suite:

```
pip install .[test]
pytest
```

## Modules

- `ftkit.ctype`: `isalnum`, `isalpha`, `isascii`, `isdigit`, `isprint`,
  `tolower`, `toupper`. Each takes an integer character code or a
  one-character string and looks only at the ASCII range. The predicates
  return `bool`; the case converters return the same kind of value they
  were given.
- `ftkit.memory`: `bzero`, `calloc`, `memchr`, `memcmp`, `memcpy`,
  `memmove`, `memset`. Writing functions take a `bytearray` or writable
  `memoryview`; reading functions take any bytes-like object. `memchr`
  returns an index or `None`. `memmove(buffer, dest, src, n)` moves bytes
  between two offsets of one buffer, with overlap handled. Reaching past
  the end of a buffer raises `ValueError`.
- `ftkit.convert`: `atoi` (skips leading whitespace, takes one optional
  sign, then digits; wraps as a 32-bit integer) and `itoa` (raises
  `OverflowError` outside the 32-bit signed range).
- `ftkit.strings`: `strlen`, `strchr`, `strrchr`, `strncmp`, `strcmp`,
  `strnstr`, `strlcpy`, `strlcat`, `strdup`. A NUL character ends a
  string. Searches return an index or `None`. `strlcpy(src, size)` and
  `strlcat(dest, src, size)` return a `BoundedCopy(text, length)`.
- `ftkit.strbuild`: `substr`, `strjoin`, `strtrim`, `split`, `strmapi`,
  `striteri`. `striteri` works in place on a mutable sequence of
  characters, such as a `list`.
- `ftkit.output`: `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd`.
  They write straight to a file descriptor with `os.write`.
- `ftkit.linkedlist`: `Node` and `LinkedList`, with `head`, `push_front`,
  `push_back`, `last`, `len()`, iteration, `for_each`, `map(f, delete)`
  and `clear(delete)`.
- `ftkit.printf`: `format_string` returns the formatted text and `printf`
  writes it to file descriptor 1 and returns the bytes written. Both
  handle `%c %s %d %i %u %x %X %p %%`. They do not handle flags, widths
  or precision.
- `ftkit.nextline`: `LineReader(buffer_size=10)` with `read_line(fd)` and
  `forget(fd)`, and `get_next_line(fd)` on a shared reader. They read a
  file descriptor one line at a time and keep separate state for each
  descriptor below 1024.

## Examples

```python
from ftkit.convert import atoi, itoa
from ftkit.strbuild import split, strtrim
from ftkit.strings import strchr, strlcpy
from ftkit.printf import format_string

atoi("  -42abc")                 # -42
itoa(-2147483648)                # "-2147483648"
split("lorem ipsum  dolor", " ") # ["lorem", "ipsum", "dolor"]
strtrim("xxhixx", "x")           # "hi"
strchr("hello", "l")             # 2
strlcpy("Hello, World!", 10)     # BoundedCopy(text="Hello, Wo", length=13)
format_string("%s=%x", "n", 255) # "n=ff"
```

```python
from ftkit.memory import memmove

buf = bytearray(b"abcdefghiu")
memmove(buf, 3, 1, 3)            # bytearray(b"abcbcdghiu")
```

```python
import os
from ftkit.nextline import LineReader

fd = os.open("notes.txt", os.O_RDONLY)
reader = LineReader(buffer_size=10)
while (line := reader.read_line(fd)) is not None:
    print(line, end="")
os.close(fd)
```

## What it does not do

ftkit is a library only: it installs no command-line program. Output
goes to raw file descriptors; `printf` always writes to standard output.