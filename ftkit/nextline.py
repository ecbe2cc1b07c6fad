"""Read a file descriptor one line at a time."""

from __future__ import annotations

import os
import sys
from typing import Iterator, Optional

from ftkit.printf import printf

BUFFER_SIZE = 1000


class LineReader:
    """Reads lines from a file descriptor through a fixed-size buffer.

    Each line is returned as bytes and keeps its trailing newline; the last
    line of the input may have none.
    """

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        if hasattr(fd, "fileno"):
            fd = fd.fileno()
        if fd < 0:
            raise ValueError(f"invalid file descriptor {fd}")
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.fd = fd
        self.buffer_size = buffer_size
        self._pending = b""

    def readline(self) -> Optional[bytes]:
        """Return the next line, or None at the end of the input.

        A read error discards anything buffered and is raised as OSError.
        """
        try:
            os.read(self.fd, 0)
            while b"\n" not in self._pending:
                chunk = os.read(self.fd, self.buffer_size)
                if not chunk:
                    break
                self._pending += chunk
        except OSError:
            self._pending = b""
            raise
        if not self._pending:
            return None
        end = self._pending.find(b"\n")
        cut = len(self._pending) if end < 0 else end + 1
        line, self._pending = self._pending[:cut], self._pending[cut:]
        return line

    def __iter__(self) -> Iterator[bytes]:
        while (line := self.readline()) is not None:
            yield line


_readers: dict[int, LineReader] = {}


def get_next_line(fd: int) -> Optional[bytes]:
    """Return the next line of ``fd``, or None at the end or on error.

    Buffered data is kept between calls for each descriptor and dropped
    when the descriptor is invalid or exhausted.
    """
    if fd < 0:
        _readers.pop(fd, None)
        return None
    reader = _readers.get(fd)
    if reader is None:
        reader = _readers[fd] = LineReader(fd)
    try:
        line = reader.readline()
    except OSError:
        _readers.pop(fd, None)
        return None
    if line is None:
        _readers.pop(fd, None)
    return line


def main(argv: Optional[list[str]] = None) -> int:
    """Print every line of a file (``test.txt`` by default), numbered."""
    args = sys.argv[1:] if argv is None else argv
    path = args[0] if args else "test.txt"
    try:
        fd = os.open(path, os.O_RDONLY)
    except OSError:
        printf("Erreur lors de l'ouverture du fichier\n")
        return 1
    try:
        count = 0
        while (line := get_next_line(fd)) is not None:
            count += 1
            printf("Ligne %d: %s", count, line.decode("utf-8", errors="replace"))
    finally:
        os.close(fd)

    printf("\nTest avec un fd invalide:\n")
    if get_next_line(-1) is not None:
        printf("Erreur: get_next_line a renvoyé une ligne avec un fd invalide\n")
    else:
        printf("OK: get_next_line a correctement géré le fd invalide\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())