"""Byte-buffer operations over bytearray and bytes objects."""

from __future__ import annotations

CALLOC_LIMIT = 65535


def _check_span(buf: bytes | bytearray, n: int) -> None:
    if n < 0 or n > len(buf):
        raise ValueError(f"length {n} is outside a buffer of {len(buf)} bytes")


def _cstrlen(data: bytes | bytearray) -> int:
    end = data.find(b"\0")
    return len(data) if end == -1 else end


def memset(buf: bytearray, value: int, n: int) -> bytearray:
    """Set the first n bytes of buf to the low byte of value and return buf."""
    _check_span(buf, n)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Zero the first n bytes of buf."""
    memset(buf, 0, n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zeroed buffer of nmemb * size bytes.

    Either count above 65535 is refused with ValueError.
    """
    if nmemb > CALLOC_LIMIT or size > CALLOC_LIMIT:
        raise ValueError("allocation request too large")
    if nmemb < 0 or size < 0:
        raise ValueError("allocation sizes must not be negative")
    return bytearray(nmemb * size)


def memcpy(dest: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy the first n bytes of src into dest and return dest."""
    _check_span(dest, n)
    _check_span(src, n)
    dest[:n] = src[:n]
    return dest


def memmove(buf: bytearray, dest_offset: int, src_offset: int, n: int) -> bytearray:
    """Copy n bytes within buf from src_offset to dest_offset; regions may overlap."""
    if min(dest_offset, src_offset, n) < 0:
        raise ValueError("offsets and length must not be negative")
    if max(dest_offset, src_offset) + n > len(buf):
        raise ValueError("move runs past the end of the buffer")
    buf[dest_offset:dest_offset + n] = bytes(buf[src_offset:src_offset + n])
    return buf


def memchr(data: bytes | bytearray, value: int, n: int) -> int | None:
    """Index of the first byte equal to the low byte of value in data[:n], or None."""
    _check_span(data, n)
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index == -1 else index


def memcmp(a: bytes | bytearray, b: bytes | bytearray, n: int) -> int:
    """Difference of the first unequal unsigned bytes in the first n, or 0."""
    _check_span(a, n)
    _check_span(b, n)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def strlcpy(dst: bytearray, src: bytes | bytearray, size: int) -> int:
    """Copy the NUL-terminated src into dst, writing at most size bytes with the NUL.

    Returns the length of src.
    """
    if size < 0 or size > len(dst):
        raise ValueError(f"size {size} is outside a buffer of {len(dst)} bytes")
    srclen = _cstrlen(src)
    if size > 0:
        count = min(size - 1, srclen)
        dst[:count] = src[:count]
        dst[count] = 0
    return srclen


def strlcat(dst: bytearray, src: bytes | bytearray, size: int) -> int:
    """Append the NUL-terminated src to the string in dst, keeping the total under size.

    Returns the length the full string would have had.
    """
    if size < 0 or size > len(dst):
        raise ValueError(f"size {size} is outside a buffer of {len(dst)} bytes")
    dlen = _cstrlen(dst)
    srclen = _cstrlen(src)
    if size <= dlen:
        return size + srclen
    count = min(size - 1 - dlen, srclen)
    dst[dlen:dlen + count] = src[:count]
    dst[dlen + count] = 0
    return dlen + srclen