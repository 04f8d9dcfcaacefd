import os

import pytest

from ftkit.output import putchar_fd, putendl_fd, putnbr_fd, putstr_fd


class _Pipe:
    """An OS pipe whose write end is handed to the function under test."""

    def __init__(self):
        self._read_end, self.fd = os.pipe()
        self._write_open = True

    def read(self):
        self.close_write()
        with os.fdopen(self._read_end, "rb") as stream:
            self._read_end = None
            return stream.read()

    def close_write(self):
        if self._write_open:
            os.close(self.fd)
            self._write_open = False

    def close(self):
        self.close_write()
        if self._read_end is not None:
            os.close(self._read_end)
            self._read_end = None


@pytest.fixture
def pipe():
    p = _Pipe()
    yield p
    p.close()


class TestPutcharFd:
    def test_str_character(self, pipe):
        putchar_fd("a", pipe.fd)
        assert pipe.read() == b"a"

    def test_int_character(self, pipe):
        putchar_fd(ord("z"), pipe.fd)
        assert pipe.read() == b"z"

    def test_int_truncated_to_byte(self, pipe):
        putchar_fd(0x100 + ord("A"), pipe.fd)
        assert pipe.read() == b"A"

    def test_rejects_long_string(self, pipe):
        with pytest.raises(ValueError):
            putchar_fd("ab", pipe.fd)

    def test_rejects_other_types(self, pipe):
        with pytest.raises(TypeError):
            putchar_fd(1.0, pipe.fd)


class TestPutstrFd:
    def test_writes_string(self, pipe):
        putstr_fd("ola tudo", pipe.fd)
        assert pipe.read() == "ola tudo".encode()

    def test_empty_string_writes_nothing(self, pipe):
        putstr_fd("", pipe.fd)
        assert pipe.read() == b""

    def test_stops_at_nul(self, pipe):
        putstr_fd("ola\0tudo", pipe.fd)
        assert pipe.read() == "ola".encode()

    def test_bad_descriptor(self):
        with pytest.raises(OSError):
            putstr_fd("x", -1)


class TestPutendlFd:
    def test_appends_newline(self, pipe):
        putendl_fd("ola tudo", pipe.fd)
        assert pipe.read() == "ola tudo\n".encode()

    def test_empty_string_is_just_newline(self, pipe):
        putendl_fd("", pipe.fd)
        assert pipe.read() == b"\n"


class TestPutnbrFd:
    def test_source_example(self, pipe):
        putnbr_fd(12332, pipe.fd)
        assert pipe.read() == b"12332"

    def test_int_min(self, pipe):
        putnbr_fd(-2147483648, pipe.fd)
        assert pipe.read() == b"-2147483648"

    def test_zero(self, pipe):
        putnbr_fd(0, pipe.fd)
        assert pipe.read() == b"0"

    @pytest.mark.parametrize("n", [1, -1, 9, 10, -10, 2147483647, -99999])
    def test_round_trip(self, pipe, n):
        putnbr_fd(n, pipe.fd)
        assert int(pipe.read()) == n

    def test_out_of_range(self, pipe):
        with pytest.raises(OverflowError):
            putnbr_fd(2**31, pipe.fd)