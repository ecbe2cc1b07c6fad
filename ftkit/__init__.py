"""Character, memory, string, output, linked-list, printf-style formatting
and line-reading utilities."""

__version__ = "1.0.0"

__all__ = ["chars", "memory", "strings", "output", "linked", "printf", "nextline"]