# ftkit

A compact toolkit of everyday helpers, with no dependencies outside the
standard library. It supports Python 3.10 and later.

| Module | What it holds |
| --- | --- |
| `ftkit.chars` | ASCII classification and case conversion: `isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`, `toupper`, `tolower` |
| `ftkit.memory` | byte-buffer helpers: `memset`, `bzero`, `calloc`, `memchr`, `memcmp`, `memcpy`, `memmove` |
| `ftkit.strings` | string helpers: `strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`, `strlcpy`, `strlcat`, `strdup`, `substr`, `strjoin`, `strtrim`, `split`, `strmapi`, `striteri`, `atoi`, `itoa` |
| `ftkit.output` | writing to a text stream or an integer file descriptor: `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd` |
| `ftkit.linked` | a singly linked list: `Node`, `LinkedList` |
| `ftkit.printf` | a small formatter: `sprintf`, `printf` |
| `ftkit.nextline` | reading a file descriptor line by line: `LineReader`, `get_next_line`, `main` |

## Installation

```console
pip install .
```

To run the tests:

```console
pip install ".[test]"
pytest
```

## Characters

The functions in `ftkit.chars` take an integer code or a one-character
string. The predicates return a bool; `toupper` and `tolower` return the same
kind of value they were given and leave anything that is not an ASCII letter
unchanged.

```python
from ftkit.chars import isalnum, toupper

isalnum("7")     # True
toupper("a")     # 'A'
toupper(97)      # 65
```

## Memory

The buffer helpers work on `bytearray` objects in place and raise
`ValueError` when a length is negative or larger than a buffer.
`calloc(count, size)` returns a zeroed `bytearray` and raises `OverflowError`
when the total exceeds 2**64 - 1. `memchr` returns an index or `None`;
`memmove(buffer, dest, src, length)` moves bytes between two offsets of the
same buffer and handles overlap.

```python
from ftkit.memory import calloc, memmove

buf = bytearray(b"abcdef")
memmove(buf, 2, 0, 3)   # bytearray(b'ababcf')
calloc(2, 3)            # bytearray(b'\x00\x00\x00\x00\x00\x00')
```

## Strings

Searches return an index into the string, or `None`. `strlcpy` and `strlcat`
return a pair of the resulting text and the length they tried to create.

```python
from ftkit.strings import split, itoa, atoi, strtrim, strlcpy

split("  hello  world ", " ")   # ['hello', 'world']
itoa(-42)                       # '-42'
atoi("   -123abc")              # -123
strtrim("xxhixx", "x")          # 'hi'
strlcpy("hello", 3)             # ('he', 5)
```

## Output

```python
import io
from ftkit.output import putendl_fd, putnbr_fd

out = io.StringIO()
putnbr_fd(-7, out)
putendl_fd(" done", out)
out.getvalue()   # '-7 done\n'
```

Passing an integer instead of a stream writes UTF-8 encoded text to that file
descriptor.

## Linked lists

```python
from ftkit.linked import LinkedList

items = LinkedList([1, 2, 3])
items.push_back(4)
items.push_front(0)
len(items)                          # 5
list(items)                         # [0, 1, 2, 3, 4]
list(items.map(lambda x: x * 10))   # [0, 10, 20, 30, 40]
items.clear()
```

`clear` and `map` accept an optional `delete` callback that is given each
content being discarded.

## Formatting

`sprintf` supports `%c %s %p %d %i %u %x %X %%`. `%d` and `%i` wrap to a
signed 32-bit value, `%u`, `%x` and `%X` to an unsigned 32-bit value. `%s`
with `None` gives `(null)`, `%p` with `0` or `None` gives `(nil)`. Any other
character after `%` is written as it is. A missing or mistyped argument
raises `TypeError`; a format ending in a lone `%` raises `ValueError`.

```python
from ftkit.printf import sprintf, printf

sprintf("%d items, %x in hex, %s", 42, 255, "done")  # '42 items, ff in hex, done'
sprintf("%p", 0)                                    # '(nil)'
printf("%u\n", -1)    # writes '4294967295\n' to standard output, returns 11
```

There are no width, precision or flag modifiers.

## Reading lines

`LineReader(fd, buffer_size=1000)` reads through a fixed-size buffer and
returns each line as `bytes`, keeping its newline; `readline()` returns
`None` at the end of the input, and iterating yields every line.

```python
import os
from ftkit.nextline import LineReader

fd = os.open("notes.txt", os.O_RDONLY)
try:
    for line in LineReader(fd):
        print(line.decode(), end="")
finally:
    os.close(fd)
```

`get_next_line(fd)` keeps one reader per descriptor between calls and returns
`None` at the end of the input, on a read error, or for a negative
descriptor.

## Command line

`ftkit-lines` reads a file (`test.txt` in the current directory when no path
is given) and prints each line prefixed with `Ligne <n>: `, then reports how
an invalid descriptor was handled. It exits with status 1 if the file cannot
be opened.

```console
ftkit-lines notes.txt
```