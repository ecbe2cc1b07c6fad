"""Byte-buffer helpers: fill, zero, allocate, search, compare and copy."""

from __future__ import annotations

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]

SIZE_MAX = 2**64 - 1


def _check_length(length: int, *available: int) -> None:
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    for size in available:
        if length > size:
            raise ValueError(f"length {length} exceeds buffer size {size}")


def memset(buffer: bytearray, value: int, length: int) -> bytearray:
    """Set the first ``length`` bytes of ``buffer`` to ``value & 0xFF``."""
    _check_length(length, len(buffer))
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def bzero(buffer: bytearray, length: int) -> None:
    """Zero the first ``length`` bytes of ``buffer``."""
    memset(buffer, 0, length)


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``count * size`` bytes.

    Raises OverflowError when the total exceeds the platform size limit.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count == 0 or size == 0:
        return bytearray()
    total = count * size
    if total > SIZE_MAX:
        raise OverflowError(f"{count} * {size} bytes exceeds the size limit")
    return bytearray(total)


def memchr(data: BytesLike, value: int, length: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value & 0xFF`` within
    the first ``length`` bytes, or None."""
    _check_length(length, len(data))
    index = bytes(data[:length]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first: BytesLike, second: BytesLike, length: int) -> int:
    """Compare the first ``length`` bytes; return the difference of the first
    unequal pair, or 0 when they match."""
    _check_length(length, len(first), len(second))
    for a, b in zip(bytes(first[:length]), bytes(second[:length])):
        if a != b:
            return a - b
    return 0


def memcpy(dest: bytearray, src: BytesLike, length: int) -> bytearray:
    """Copy the first ``length`` bytes of ``src`` to the start of ``dest``."""
    _check_length(length, len(dest), len(src))
    if length:
        dest[:length] = bytes(src[:length])
    return dest


def memmove(buffer: bytearray, dest: int, src: int, length: int) -> bytearray:
    """Move ``length`` bytes inside ``buffer`` from offset ``src`` to offset
    ``dest``; overlapping regions are handled."""
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_length(length, len(buffer) - dest, len(buffer) - src)
    if length:
        buffer[dest:dest + length] = bytes(buffer[src:src + length])
    return buffer