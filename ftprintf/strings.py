"""C-string style helpers: length, parsing, searching, splitting and building strings.

Strings are treated the way NUL-terminated strings are: anything after the first
``"\\0"`` character is ignored.
"""

import operator
from itertools import islice, takewhile, zip_longest

from .chars import isdigit

_WHITESPACE = " \t\n\r\f\v"


def _cstr(s):
    """Return ``s`` cut at its first NUL character."""
    index = s.find("\0")
    return s if index < 0 else s[:index]


def _char(c):
    """Return ``c`` as a one-character string; integers are taken modulo 256."""
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {c!r}")
        return c
    return chr(operator.index(c) & 0xFF)


def _require(value, name):
    if value is None:
        raise TypeError(f"{name} must not be None")
    return value


def strlen(s):
    """Return the length of ``s`` up to its first NUL; 0 for None."""
    if s is None:
        return 0
    return len(_cstr(s))


def atoi(s):
    """Parse a leading decimal integer the way the C library does.

    Leading whitespace and one optional sign are accepted; parsing stops at the
    first non-digit. The result wraps to a signed 32-bit integer. None and text
    without digits give 0.
    """
    if s is None:
        return 0
    text = _cstr(s).lstrip(_WHITESPACE)
    sign = 1
    if text[:1] in ("-", "+"):
        if text[0] == "-":
            sign = -1
        text = text[1:]
    digits = "".join(takewhile(isdigit, text))
    value = sign * int(digits) if digits else 0
    value &= 0xFFFFFFFF
    return value - 2**32 if value >= 2**31 else value


def split(s, sep):
    """Split ``s`` on the character ``sep``, dropping empty pieces."""
    text = _cstr(_require(s, "s"))
    separator = _char(sep)
    if separator == "\0":
        return [text] if text else []
    return [word for word in text.split(separator) if word]


def strchr(s, c):
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for ``"\\0"`` finds the terminator, at index ``strlen(s)``.
    """
    if s is None:
        return None
    text = _cstr(s)
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(s, c):
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for ``"\\0"`` finds the terminator, at index ``strlen(s)``.
    """
    if s is None:
        return None
    text = _cstr(s)
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strdup(s):
    """Return a copy of the string ``s``."""
    return str(_cstr(_require(s, "s")))


def striteri(buf, f):
    """Call ``f(index, char)`` for each character of the mutable sequence ``buf``.

    Iteration stops at the first NUL. When ``f`` returns a value other than None,
    it replaces the character in place. Nothing happens when ``f`` is None.
    """
    if buf is None or f is None:
        return
    try:
        length = buf.index("\0")
    except ValueError:
        length = len(buf)
    for index, ch in enumerate(list(islice(buf, length))):
        result = f(index, ch)
        if result is not None:
            buf[index] = result


def strjoin(s1, s2):
    """Return ``s1`` followed by ``s2``; a None side counts as missing."""
    if s1 is None and s2 is None:
        raise TypeError("at least one of s1 and s2 must be a string")
    if s1 is None:
        return strdup(s2)
    if s2 is None:
        return strdup(s1)
    return _cstr(s1) + _cstr(s2)


def strmapi(s, f):
    """Return the string built from ``f(index, char)`` for each character of ``s``."""
    text = _cstr(_require(s, "s"))
    _require(f, "f")
    return "".join(f(index, ch) for index, ch in enumerate(text))


def strncmp(s1, s2, n):
    """Compare at most ``n`` characters.

    Returns the difference of the first unequal character codes, a shorter string
    comparing as if followed by NUL, or 0 when they match. None on either side gives 0.
    """
    if s1 is None or s2 is None:
        return 0
    pairs = zip_longest(_cstr(s1), _cstr(s2), fillvalue="\0")
    for a, b in islice(pairs, max(n, 0)):
        if a == "\0" or b == "\0" or a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(haystack, needle, length):
    """Return the index of ``needle`` in the first ``length`` characters of ``haystack``.

    An empty needle is found at 0. Returns None when there is no match.
    """
    if needle is None:
        return None
    if haystack is None:
        return None
    target = _cstr(needle)
    if not target:
        return 0
    index = _cstr(haystack)[:max(length, 0)].find(target)
    return None if index < 0 else index


def strtrim(s, charset):
    """Return ``s`` without the characters of ``charset`` at either end."""
    text = _cstr(_require(s, "s"))
    if charset is None:
        return text
    return text.strip(_cstr(charset))


def substr(s, start, length):
    """Return at most ``length`` characters of ``s`` from index ``start``.

    A start at or past the end gives an empty string.
    """
    text = _cstr(_require(s, "s"))
    start = operator.index(start)
    length = operator.index(length)
    if start < 0:
        raise ValueError(f"start must not be negative, got {start}")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if start >= len(text):
        return ""
    return text[start:start + length]