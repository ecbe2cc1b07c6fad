"""Write characters, strings and integers to a text stream or file descriptor.

``stream`` may be any object with a ``write`` method that accepts ``str``,
or an integer file descriptor. Text sent to a descriptor is encoded as UTF-8.
"""

from __future__ import annotations

import os
from typing import TextIO, Union

Stream = Union[TextIO, int]
CharLike = Union[int, str]


def _write(stream: Stream, text: str) -> None:
    if isinstance(stream, bool):
        raise TypeError("stream must be a writable text stream or a file descriptor")
    if isinstance(stream, int):
        data = text.encode("utf-8")
        while data:
            written = os.write(stream, data)
            data = data[written:]
        return
    stream.write(text)


def _char(c: CharLike) -> str:
    if isinstance(c, bool):
        raise TypeError("expected an int or a one-character str, got bool")
    if isinstance(c, int):
        if not 0 <= c <= 255:
            raise ValueError(f"character code out of range: {c}")
        return chr(c)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def putchar_fd(c: CharLike, stream: Stream) -> None:
    """Write the single character ``c``."""
    _write(stream, _char(c))


def putstr_fd(s: str, stream: Stream) -> None:
    """Write the string ``s``."""
    _write(stream, s)


def putendl_fd(s: str, stream: Stream) -> None:
    """Write the string ``s`` followed by a newline."""
    _write(stream, s + "\n")


def putnbr_fd(n: int, stream: Stream) -> None:
    """Write the decimal representation of ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    _write(stream, str(n))