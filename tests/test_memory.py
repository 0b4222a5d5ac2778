import pytest

from libft.memory import (
    SIZE_MAX,
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


def test_bzero_prefix():
    buf = bytearray(b"abcdef")
    bzero(buf, 3)
    assert buf == bytearray(3) + b"def"


def test_bzero_too_long():
    with pytest.raises(ValueError):
        bzero(bytearray(2), 3)


def test_calloc_zeroed():
    buf = calloc(4, 2)
    assert len(buf) == 4 * 2
    assert not any(buf)


def test_calloc_zero_size():
    assert calloc(3, 0) == bytearray()


def test_calloc_overflow():
    with pytest.raises(OverflowError):
        calloc(SIZE_MAX // 4 + 1, 4)


def test_calloc_negative():
    with pytest.raises(ValueError):
        calloc(-1, 1)


def test_memchr_found_and_limited():
    data = b"hello"
    assert memchr(data, ord("l"), len(data)) == data.index(b"l")
    assert memchr(data, ord("l"), data.index(b"l")) is None


def test_memchr_wraps_value():
    assert memchr(b"\xff", -1, 1) == 0


def test_memcmp():
    assert memcmp(b"abc", b"abd", 3) == ord("c") - ord("d")
    assert memcmp(b"abc", b"abd", 2) == 0


def test_memcmp_count_too_large():
    with pytest.raises(ValueError):
        memcmp(b"ab", b"abc", 3)


def test_memcpy_returns_dest():
    dest = bytearray(5)
    result = memcpy(dest, b"abcxyz", 3)
    assert result is dest
    assert dest == b"abc" + bytes(2)


def test_memcpy_both_none():
    assert memcpy(None, None, 4) is None


def test_memmove_forward_overlap():
    original = b"abcdef"
    buf = bytearray(original)
    memmove(buf, 2, 0, 4)
    assert buf == original[:2] + original[0:4]


def test_memmove_backward_overlap():
    original = b"abcdef"
    buf = bytearray(original)
    memmove(buf, 0, 2, 4)
    assert buf == original[2:6] + original[4:]


def test_memmove_out_of_range():
    with pytest.raises(ValueError):
        memmove(bytearray(4), 2, 0, 3)


def test_memset():
    buf = bytearray(b"abcde")
    assert memset(buf, ord("z"), 3) is buf
    assert buf == b"z" * 3 + b"de"


def test_memset_wraps_value():
    buf = bytearray(2)
    memset(buf, 256 + ord("A"), 2)
    assert buf == b"A" * 2


def test_strlcpy_fits():
    src = b"hello"
    dst = bytearray(10)
    assert strlcpy(dst, src, len(dst)) == len(src)
    assert dst[: len(src) + 1] == src + b"\0"


def test_strlcpy_truncates():
    src = b"hello"
    dst = bytearray(10)
    assert strlcpy(dst, src, 3) == len(src)
    assert dst[:3] == src[:2] + b"\0"


def test_strlcpy_size_zero_leaves_dst():
    dst = bytearray(b"keep")
    assert strlcpy(dst, b"abc", 0) == len(b"abc")
    assert dst == b"keep"


def test_strlcat_appends():
    dst = bytearray(b"ab\0" + bytes(7))
    assert strlcat(dst, b"cd", len(dst)) == len(b"ab") + len(b"cd")
    assert dst[:5] == b"ab" + b"cd" + b"\0"


def test_strlcat_truncates():
    dst = bytearray(b"ab\0" + bytes(7))
    assert strlcat(dst, b"cdef", 4) == len(b"ab") + len(b"cdef")
    assert dst[:4] == b"ab" + b"c" + b"\0"


def test_strlcat_size_below_dest_length():
    original = b"abcdef\0\0"
    dst = bytearray(original)
    assert strlcat(dst, b"xy", 3) == 3 + len(b"xy")
    assert dst == original


def test_strlcat_none_with_zero_size():
    assert strlcat(None, b"abc", 0) == 0
    with pytest.raises(TypeError):
        strlcat(None, b"abc", 2)