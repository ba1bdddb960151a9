import pytest

from ftkit.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_memset_fills_prefix_and_returns_buffer():
    buf = bytearray(b"hello world")
    result = memset(buf, ord("x"), 5)
    assert result is buf
    assert bytes(buf[:5]) == b"x" * 5
    assert bytes(buf[5:]) == b" world"


def test_memset_wraps_value():
    buf = bytearray(3)
    memset(buf, 256 + ord("A"), 3)
    assert bytes(buf) == b"A" * 3


def test_memset_zero_length_changes_nothing():
    buf = bytearray(b"abc")
    memset(buf, 0, 0)
    assert buf == bytearray(b"abc")


def test_bzero():
    buf = bytearray(b"abcdef")
    bzero(buf, 4)
    assert bytes(buf) == bytes(4) + b"ef"


def test_memcpy_copies_and_returns_dest():
    dest = bytearray(b"........")
    result = memcpy(dest, b"abcd", 4)
    assert result is dest
    assert bytes(dest[:4]) == b"abcd"
    assert bytes(dest[4:]) == b"...."


def test_memmove_overlap_forward():
    buf = bytearray(b"abcdef")
    view = memoryview(buf)
    result = memmove(view[2:], view, 4)
    assert bytes(result) == b"abcd"
    assert bytes(buf) == b"ababcd"


def test_memmove_overlap_backward():
    buf = bytearray(b"abcdef")
    view = memoryview(buf)
    result = memmove(view, view[2:], 4)
    assert bytes(result) == b"cdefef"
    assert bytes(buf) == b"cdefef"


def test_memmove_non_overlapping_same_as_memcpy():
    a = bytearray(6)
    b = bytearray(6)
    memmove(a, b"xyzxyz", 6)
    memcpy(b, b"xyzxyz", 6)
    assert a == b


def test_memchr_found():
    data = b"find the needle"
    assert memchr(data, ord("n"), len(data)) == data.index(b"n")


def test_memchr_limited_by_length():
    data = b"abcdef"
    assert memchr(data, ord("e"), 3) is None
    assert memchr(data, ord("e"), 6) == data.index(b"e")


def test_memchr_wraps_value():
    data = b"\x00\x01\x02"
    assert memchr(data, 258, 3) == data.index(b"\x02")


def test_memcmp_equal():
    assert memcmp(b"abc", b"abc", 3) == 0


def test_memcmp_difference_of_first_mismatch():
    assert memcmp(b"abc", b"abd", 3) == ord("c") - ord("d")
    assert memcmp(b"abd", b"abc", 3) == ord("d") - ord("c")


def test_memcmp_ignores_bytes_past_n():
    assert memcmp(b"abX", b"abY", 2) == 0
    assert memcmp(b"x", b"y", 0) == 0


def test_memcmp_unsigned_bytes():
    assert memcmp(b"\xff", b"\x00", 1) > 0


def test_calloc_zeroed():
    buf = calloc(4, 3)
    assert len(buf) == 12
    assert all(byte == 0 for byte in buf)


def test_calloc_zero_sizes():
    assert calloc(0, 8) == bytearray()
    assert calloc(8, 0) == bytearray()


def test_calloc_overflow():
    with pytest.raises(OverflowError):
        calloc(2**63, 4)


def test_length_beyond_buffer_rejected():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, 3)
    with pytest.raises(ValueError):
        memcpy(bytearray(4), b"ab", 3)


def test_negative_length_rejected():
    with pytest.raises(ValueError):
        memchr(b"abc", 0, -1)