"""Byte-buffer helpers: filling, copying, searching, comparing and bounded string copy."""

SIZE_MAX = 2**64 - 1


def _check_span(buf, length, name="buffer"):
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if length > len(buf):
        raise ValueError(f"{name} holds {len(buf)} bytes, fewer than {length}")


def _cstrlen(data):
    """Length of the NUL-terminated string at the start of ``data``."""
    index = bytes(data).find(b"\0")
    return len(data) if index < 0 else index


def memset(buf, value, length):
    """Set the first ``length`` bytes of ``buf`` to ``value`` (taken modulo 256)."""
    _check_span(buf, length)
    buf[:length] = bytes([value & 0xFF]) * length
    return buf


def bzero(buf, length):
    """Zero the first ``length`` bytes of ``buf``."""
    memset(buf, 0, length)


def calloc(count, size):
    """Return a zeroed buffer of ``count * size`` bytes.

    Raises OverflowError when the product exceeds SIZE_MAX.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count == 0 or size == 0:
        return bytearray()
    if count > SIZE_MAX // size:
        raise OverflowError(f"{count} * {size} bytes exceeds SIZE_MAX")
    return bytearray(count * size)


def memcpy(dst, src, n):
    """Copy ``n`` bytes from ``src`` to the start of ``dst``; return ``dst``."""
    if n == 0:
        return dst
    _check_span(dst, n, "destination")
    _check_span(src, n, "source")
    dst[:n] = src[:n]
    return dst


def memmove(dst, src, n):
    """Copy ``n`` bytes from ``src`` to ``dst``, correct even when they overlap."""
    if n == 0:
        return dst
    _check_span(dst, n, "destination")
    _check_span(src, n, "source")
    dst[:n] = bytes(src[:n])
    return dst


def memchr(data, value, n):
    """Return the index of the first byte equal to ``value`` in ``data[:n]``, or None."""
    _check_span(data, n)
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a, b, n):
    """Compare the first ``n`` bytes; return the difference of the first unequal pair, or 0."""
    _check_span(a, n)
    _check_span(b, n)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def strlcpy(dst, src, dstsize):
    """Copy the C string ``src`` into ``dst``, at most ``dstsize - 1`` bytes plus NUL.

    Returns the length of ``src``.
    """
    if dstsize < 0:
        raise ValueError(f"dstsize must not be negative, got {dstsize}")
    src_len = _cstrlen(src)
    if dstsize > 0:
        _check_span(dst, dstsize, "destination")
        count = min(src_len, dstsize - 1)
        dst[:count] = src[:count]
        dst[count] = 0
    return src_len


def strlcat(dst, src, dstsize):
    """Append the C string ``src`` to the C string in ``dst``, bounded by ``dstsize``.

    Returns the length the full result would have had.
    """
    if dstsize < 0:
        raise ValueError(f"dstsize must not be negative, got {dstsize}")
    src_len = _cstrlen(src)
    if dstsize == 0:
        return src_len
    _check_span(dst, dstsize, "destination")
    dst_len = _cstrlen(dst)
    if dstsize <= dst_len:
        return src_len + dstsize
    count = min(src_len, dstsize - 1 - dst_len)
    dst[dst_len:dst_len + count] = src[:count]
    dst[dst_len + count] = 0
    return src_len + dst_len