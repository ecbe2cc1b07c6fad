"""ASCII character classification and case conversion.

Every function accepts either an integer code or a one-character string.
The predicates return a bool. The converters return the same kind of value
they were given.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]

_LOWER = range(ord("a"), ord("z") + 1)
_UPPER = range(ord("A"), ord("Z") + 1)
_DIGITS = range(ord("0"), ord("9") + 1)
_CASE_OFFSET = ord("a") - ord("A")


def _code(c: CharLike) -> int:
    """Return the integer code of ``c``."""
    if isinstance(c, bool):
        raise TypeError("expected an int or a one-character str, got bool")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def _same_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def isalpha(c: CharLike) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return code in _LOWER or code in _UPPER


def isdigit(c: CharLike) -> bool:
    """True for the ASCII digits 0 to 9."""
    return _code(c) in _DIGITS


def isalnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return isalpha(c) or isdigit(c)


def isascii(c: CharLike) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def isprint(c: CharLike) -> bool:
    """True for printable ASCII, space (32) to tilde (126)."""
    return 32 <= _code(c) <= 126


def toupper(c: CharLike) -> CharLike:
    """Map an ASCII lowercase letter to uppercase; return anything else as is."""
    code = _code(c)
    if code in _LOWER:
        return _same_kind(c, code - _CASE_OFFSET)
    return c


def tolower(c: CharLike) -> CharLike:
    """Map an ASCII uppercase letter to lowercase; return anything else as is."""
    code = _code(c)
    if code in _UPPER:
        return _same_kind(c, code + _CASE_OFFSET)
    return c