"""ASCII character classification and case conversion."""

import operator


def _code(c):
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {c!r}")
        return ord(c)
    return operator.index(c)


def isdigit(c):
    """Return True for the ASCII digits 0-9."""
    code = _code(c)
    return ord("0") <= code <= ord("9")


def isalpha(c):
    """Return True for ASCII letters."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def isalnum(c):
    """Return True for ASCII letters and digits."""
    return isalpha(c) or isdigit(c)


def isascii(c):
    """Return True for code points 0 to 127."""
    return 0 <= _code(c) <= 127


def isprint(c):
    """Return True for printable ASCII characters, space included."""
    return 32 <= _code(c) <= 126


def tolower(c):
    """Map an ASCII uppercase letter to lowercase; leave anything else as is."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code


def toupper(c):
    """Map an ASCII lowercase letter to uppercase; leave anything else as is."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code