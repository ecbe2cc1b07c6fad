"""A small printf supporting the conversions %c %s %p %d %i %u %x %X and %%.

Integers are taken as C would take them: %d and %i wrap to a signed 32-bit
value, %u, %x and %X to an unsigned 32-bit value, and %p to an unsigned
64-bit value. An unknown conversion character is written as it is.
"""

from __future__ import annotations

import sys
from typing import Any, Callable, Iterator, Optional, TextIO

_UINT32 = 2**32
_INT32_MIN = -(2**31)
_UINT64_MASK = 2**64 - 1
_MISSING = object()


def _as_int(value: Any, spec: str) -> int:
    if not isinstance(value, int):
        raise TypeError(f"%{spec} needs an int, got {type(value).__name__}")
    return int(value)


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c needs a single character, got {value!r}")
        return value
    return chr(_as_int(value, "c") & 0xFF)


def _format_string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s needs a str, got {type(value).__name__}")
    return value


def _format_pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = _as_int(value, "p") & _UINT64_MASK
    if address == 0:
        return "(nil)"
    return f"0x{address:x}"


def _format_signed(value: Any) -> str:
    number = _as_int(value, "d")
    return str((number - _INT32_MIN) % _UINT32 + _INT32_MIN)


def _format_unsigned(value: Any) -> str:
    return str(_as_int(value, "u") % _UINT32)


def _format_hex_lower(value: Any) -> str:
    return f"{_as_int(value, 'x') % _UINT32:x}"


def _format_hex_upper(value: Any) -> str:
    return f"{_as_int(value, 'X') % _UINT32:X}"


_HANDLERS: dict[str, Callable[[Any], str]] = {
    "c": _format_char,
    "s": _format_string,
    "p": _format_pointer,
    "d": _format_signed,
    "i": _format_signed,
    "u": _format_unsigned,
    "x": _format_hex_lower,
    "X": _format_hex_upper,
}


def _convert(spec: str, values: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    handler = _HANDLERS.get(spec)
    if handler is None:
        return spec
    value = next(values, _MISSING)
    if value is _MISSING:
        raise TypeError(f"not enough arguments for %{spec}")
    return handler(value)


def sprintf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by ``args``.

    Raises TypeError when an argument is missing or of the wrong kind, and
    ValueError when the format ends in a lone ``%``.
    """
    pieces: list[str] = []
    values = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format ends with an incomplete conversion")
        pieces.append(_convert(spec, values))
    return "".join(pieces)


def printf(fmt: str, *args: Any, file: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``file`` (standard output by default)
    and return the number of characters written."""
    text = sprintf(fmt, *args)
    stream = sys.stdout if file is None else file
    stream.write(text)
    return len(text)