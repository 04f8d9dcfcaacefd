"""Reading a file descriptor one line at a time.

A ``LineReader`` reads in chunks of ``buffer_size`` bytes and keeps
whatever it read past the end of a line for the next call, separately
for each descriptor. Lines are returned with their newline, decoded as
UTF-8; undecodable bytes are kept as surrogate escapes.
"""

from __future__ import annotations

import os
from typing import Dict, Optional

BUFFER_SIZE = 10
MAX_FD = 1024


class LineReader:
    """Line-by-line reader that remembers unread data per file descriptor."""

    def __init__(self, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.buffer_size = buffer_size
        self._pending: Dict[int, bytearray] = {}

    @staticmethod
    def _check_fd(fd: int) -> None:
        if not 0 <= fd < MAX_FD:
            raise ValueError(f"file descriptor must be in 0..{MAX_FD - 1}, got {fd}")

    def read_line(self, fd: int) -> Optional[str]:
        """Return the next line from *fd*, newline included, or ``None`` at end of input.

        The last line is returned without a newline if the input does not
        end with one. If reading fails, the data kept for *fd* is dropped
        and the ``OSError`` propagates.
        """
        self._check_fd(fd)
        pending = self._pending.pop(fd, bytearray())
        searched = 0
        while b"\n" not in pending[searched:]:
            searched = len(pending)
            try:
                chunk = os.read(fd, self.buffer_size)
            except OSError:
                raise
            if not chunk:
                break
            pending += chunk
        if not pending:
            return None
        end = pending.find(b"\n")
        cut = len(pending) if end < 0 else end + 1
        rest = pending[cut:]
        if rest:
            self._pending[fd] = rest
        return bytes(pending[:cut]).decode("utf-8", "surrogateescape")

    def forget(self, fd: int) -> None:
        """Drop any data kept for *fd*."""
        self._check_fd(fd)
        self._pending.pop(fd, None)


_default_reader = LineReader()


def get_next_line(fd: int) -> Optional[str]:
    """Return the next line from *fd* using a shared reader with the default buffer size."""
    return _default_reader.read_line(fd)