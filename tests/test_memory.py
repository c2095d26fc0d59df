import pytest

from ftprint.memory import (
    bzero,
    calloc,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
    strlcat,
    strlcpy,
)


def test_memset_fills_prefix():
    buf = bytearray(b"abcdef")
    result = memset(buf, ord("z"), 4)
    assert result is buf
    assert buf[:4] == bytes([ord("z")]) * 4
    assert buf[4:] == b"ef"


def test_memset_uses_low_byte():
    buf = bytearray(3)
    memset(buf, 0x100 + ord("A"), 2)
    assert buf[:2] == b"AA"
    assert buf[2] == 0


def test_memset_past_end_rejected():
    with pytest.raises(ValueError):
        memset(bytearray(2), 1, 3)


def test_bzero_clears_prefix():
    buf = bytearray(b"xyzw")
    bzero(buf, 3)
    assert not any(buf[:3])
    assert buf[3:] == b"w"


def test_calloc_returns_zeroed_buffer():
    result = calloc(3, 4)
    assert len(result) == 3 * 4
    assert not any(result)


def test_calloc_limit_is_inclusive():
    assert len(calloc(65535, 1)) == 65535


@pytest.mark.parametrize("nmemb,size", [(65536, 1), (1, 65536)])
def test_calloc_over_limit(nmemb, size):
    with pytest.raises(ValueError):
        calloc(nmemb, size)


def test_memcpy_copies_prefix():
    dest = bytearray(b"......")
    result = memcpy(dest, b"hello", 3)
    assert result is dest
    assert dest == b"hel" + b"..."


def test_memcpy_source_too_short():
    with pytest.raises(ValueError):
        memcpy(bytearray(5), b"ab", 3)


def test_memmove_overlap_forward():
    original = b"abcdefgh"
    buf = bytearray(original)
    memmove(buf, 2, 0, 5)
    assert buf[2:7] == original[0:5]
    assert buf[:2] == original[:2]


def test_memmove_overlap_backward():
    original = b"abcdefgh"
    buf = bytearray(original)
    memmove(buf, 0, 3, 5)
    assert buf[0:5] == original[3:8]
    assert buf[5:] == original[5:]


def test_memmove_out_of_range():
    with pytest.raises(ValueError):
        memmove(bytearray(4), 2, 0, 3)


def test_memchr_finds_first_occurrence():
    data = b"hello"
    index = memchr(data, ord("l"), len(data))
    assert data[index] == ord("l")
    assert ord("l") not in data[:index]


def test_memchr_respects_length():
    assert memchr(b"hello", ord("o"), 4) is None


def test_memchr_masks_value():
    data = b"\x01A"
    index = memchr(data, 0x100 + ord("A"), 2)
    assert data[index] == ord("A")


def test_memcmp_ordering():
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0
    assert memcmp(b"abc", b"abd", 2) == 0


def test_memcmp_is_unsigned():
    assert memcmp(b"\x00", b"\xff", 1) < 0


def test_strlcpy_truncates_and_terminates():
    src = b"hello world"
    dst = bytearray(8)
    assert strlcpy(dst, src, 6) == len(src)
    assert dst[:5] == src[:5]
    assert dst[5] == 0


def test_strlcpy_zero_size_leaves_buffer():
    dst = bytearray(b"keep")
    assert strlcpy(dst, b"xy", 0) == len(b"xy")
    assert dst == b"keep"


def test_strlcpy_size_past_buffer():
    with pytest.raises(ValueError):
        strlcpy(bytearray(2), b"abc", 3)


def test_strlcat_appends():
    dst = bytearray(b"ab" + bytes(8))
    assert strlcat(dst, b"cdef", 10) == len(b"ab") + len(b"cdef")
    assert dst[:6] == b"ab" + b"cdef"
    assert dst[6] == 0


def test_strlcat_truncates():
    dst = bytearray(b"ab" + bytes(8))
    assert strlcat(dst, b"cdef", 4) == len(b"ab") + len(b"cdef")
    assert dst[:3] == b"ab" + b"c"
    assert dst[3] == 0


def test_strlcat_size_not_above_destination_length():
    dst = bytearray(b"abc\0")
    assert strlcat(dst, b"cdef", 1) == 1 + len(b"cdef")
    assert dst == b"abc\0"