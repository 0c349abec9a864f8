"""Writing characters, strings and integers to a file descriptor."""

from __future__ import annotations

import os
from typing import Union

Text = Union[str, bytes]

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def _encode(s: Text) -> bytes:
    if isinstance(s, str):
        return s.encode("utf-8")
    if isinstance(s, (bytes, bytearray, memoryview)):
        return bytes(s)
    raise TypeError(f"expected str or bytes, got {type(s).__name__}")


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def putchar_fd(c: Text, fd: int) -> None:
    """Write a single character to *fd*."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _write_all(fd, _encode(c))


def putstr_fd(s: Text, fd: int) -> None:
    """Write *s* to *fd*."""
    _write_all(fd, _encode(s))


def putendl_fd(s: Text, fd: int) -> None:
    """Write *s* followed by a newline to *fd*."""
    _write_all(fd, _encode(s) + b"\n")


def putnbr_fd(n: int, fd: int) -> None:
    """Write the decimal form of the 32-bit signed integer *n* to *fd*."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} is outside the 32-bit signed integer range")
    _write_all(fd, str(n).encode("ascii"))