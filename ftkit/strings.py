"""String helpers: search, compare, bounded copy, slicing, splitting and
integer conversion.

Searches return an index into the string, or None when nothing is found.
"""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional, Tuple, Union

CharLike = Union[int, str]

_WHITESPACE = " \t\n\v\f\r"


def _char(c: CharLike) -> str:
    """Return ``c`` as a one-character string."""
    if isinstance(c, bool):
        raise TypeError("expected an int or a one-character str, got bool")
    if isinstance(c, int):
        return chr(c % 256)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def _non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strlen(s: str) -> int:
    """Return the number of characters in ``s``."""
    return len(s)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for the NUL character finds the end of the string.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for the NUL character finds the end of the string.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Return the code difference of the first unequal pair, the end of a
    string counting as code 0, or 0 when the compared parts match.
    """
    _non_negative("n", n)
    for a, b in zip(s1[:n] + "\0", s2[:n] + "\0"):
        if a != b:
            return ord(a) - ord(b)
        if a == "\0":
            break
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Return the index of ``needle`` inside the first ``length`` characters
    of ``haystack``, or None. An empty needle is found at index 0."""
    _non_negative("length", length)
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the
    terminator.

    Return the copied (possibly truncated) text and the full length of
    ``src``; a return length not below ``size`` means truncation.
    """
    _non_negative("size", size)
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` in a buffer of ``size`` characters
    including the terminator.

    Return the resulting text and the length it tried to create. When
    ``size`` does not exceed ``len(dst)`` nothing is appended and the
    length returned is ``size + len(src)``.
    """
    _non_negative("size", size)
    if size <= len(dst):
        return dst, size + len(src)
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    return "".join(s)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` from ``start``; empty
    when ``start`` is past the end."""
    _non_negative("start", start)
    _non_negative("length", length)
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove characters in ``charset`` from both ends of ``s``."""
    if s is None or charset is None:
        raise TypeError("strtrim needs a string and a character set")
    return s.strip(charset)


def split(s: str, sep: CharLike) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty pieces."""
    if s is None:
        raise TypeError("split needs a string")
    return [word for word in s.split(_char(sep)) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Return a new string of ``f(index, char)`` for each character."""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(
    chars: MutableSequence[str], f: Callable[[int, str], Optional[str]]
) -> None:
    """Call ``f(index, char)`` for each item of ``chars`` in order.

    Where ``f`` returns a value, it replaces the item in place.
    """
    for index, ch in enumerate(chars):
        replacement = f(index, ch)
        if replacement is not None:
            chars[index] = replacement


def atoi(s: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace and one optional sign are accepted; parsing stops at
    the first non-digit. A string with no digits gives 0.
    """
    rest = s.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    result = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        result = result * 10 + (ord(ch) - ord("0"))
    return sign * result


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(int(n))