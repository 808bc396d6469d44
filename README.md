# ftprintf

`ftprintf` is a set of small helpers that follow the behaviour of familiar C
library functions: ASCII character tests, operations on `bytearray` buffers,
functions on NUL-terminated strings, and a singly linked list.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Character tests: `ftprintf.chars`

`isalnum`, `isalpha`, `isascii`, `isdigit`, `isprint`, `tolower` and
`toupper` take either a one-character string or an integer code point.
The tests return `True` or `False`; `tolower` and `toupper` change only ASCII
letters and return the same kind of value they were given.

```python
from ftprintf.chars import isprint, toupper

isprint(" ")      # True
toupper("a")      # 'A'
toupper(97)       # 65
```

## Byte buffers: `ftprintf.memory`

These work on `bytearray` (or other mutable byte) buffers and raise
`ValueError` when a length is negative or longer than a buffer.

- `memset(buf, value, length)` fills bytes (value taken modulo 256) and returns `buf`.
- `bzero(buf, length)` zeroes bytes.
- `calloc(count, size)` returns a zeroed `bytearray`; it raises
  `OverflowError` when `count * size` exceeds `SIZE_MAX` (2**64 - 1).
- `memcpy(dst, src, n)` and `memmove(dst, src, n)` copy bytes and return `dst`;
  `memmove` is safe for overlapping views.
- `memchr(data, value, n)` returns the index of the first matching byte, or `None`.
- `memcmp(a, b, n)` returns the difference of the first unequal bytes, or 0.
- `strlcpy(dst, src, dstsize)` and `strlcat(dst, src, dstsize)` do bounded
  NUL-terminated copies and return the length the full result would have.

```python
from ftprintf.memory import calloc, strlcpy

buf = calloc(4, 1)
strlcpy(buf, b"hello\0", 4)   # 5
bytes(buf)                    # b'hel\x00'
```

## Strings: `ftprintf.strings`

Strings are read up to their first `"\0"`, as C strings are. Where these
functions return a position they return an index into the string, or `None`.

- `strlen(s)` (0 for `None`), `strdup(s)`, `strjoin(s1, s2)`, `substr(s, start, length)`
- `atoi(s)`: leading whitespace, an optional sign and digits; the result
  wraps to a signed 32-bit integer, and text without digits gives 0
- `split(s, sep)`: pieces between separators, empty ones dropped
- `strchr(s, c)`, `strrchr(s, c)`, `strnstr(haystack, needle, length)`
- `strncmp(s1, s2, n)`: difference of the first unequal character codes, or 0
- `strtrim(s, charset)`: removes characters of `charset` from both ends
- `strmapi(s, f)`: builds a new string from `f(index, char)`
- `striteri(buf, f)`: calls `f(index, char)` over a mutable sequence and
  stores any non-`None` result back in place

```python
from ftprintf.strings import atoi, split, strtrim

split("  hello  world ", " ")   # ['hello', 'world']
atoi("  -42abc")                # -42
strtrim("xxhixx", "x")          # 'hi'
```

## Linked list: `ftprintf.linked_list`

`LinkedList(items=None)` is a singly linked list of `Node` objects
(`content`, `next`). It supports `len()`, iteration over contents,
`push_front(content)`, `append(content)`, `last()` (the last node or `None`),
`clear(delete=None)`, `for_each(func)` and `map(func, delete=None)`, which
returns a new list; if `func` raises, contents already produced are passed to
`delete` and the exception propagates.

```python
from ftprintf.linked_list import LinkedList

items = LinkedList([1, 2, 3])
len(items)                        # 3
list(items.map(lambda x: x * 2))  # [2, 4, 6]
```

## What this package does not do

There is no formatted-output function here: no `%`-style formatter, no
number-to-text conversion helpers and no functions that write characters,
strings or numbers to a stream. The package offers only the character,
buffer, string and linked-list helpers described above.