import pytest

from pushswap.libft.memory import (
    bzero,
    calloc,
    count_array,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
)


def test_memset_fills_prefix_only():
    original = b"hello world"
    buf = bytearray(original)
    result = memset(buf, ord("x"), 5)
    assert result is buf
    assert all(b == ord("x") for b in buf[:5])
    assert buf[5:] == original[5:]


def test_memset_uses_low_byte():
    buf = bytearray(4)
    memset(buf, 0x141, 4)
    assert set(buf) == {0x41}


def test_memset_past_end_raises():
    with pytest.raises(IndexError):
        memset(bytearray(3), 0, 4)


def test_bzero_clears_prefix():
    original = b"abcdef"
    buf = bytearray(original)
    bzero(buf, 3)
    assert buf[:3] == bytes(3)
    assert buf[3:] == original[3:]


def test_memcpy_copies_bytes():
    dest = bytearray(6)
    result = memcpy(dest, b"abcdef", 4)
    assert result is dest
    assert dest[:4] == b"abcd"
    assert dest[4:] == bytes(2)


def test_memcpy_both_missing_returns_none():
    assert memcpy(None, None, 3) is None


def test_memcpy_one_missing_raises():
    with pytest.raises(TypeError):
        memcpy(bytearray(2), None, 1)


def test_memmove_forward_overlap():
    buf = bytearray(b"abcdef")
    memmove(buf, 2, 0, 4)
    assert buf == bytearray(b"ababcd")


def test_memmove_backward_overlap_keeps_source_order():
    buf = bytearray(b"abcdef")
    memmove(buf, 0, 2, 4)
    assert buf[:4] == b"cdef"
    assert buf[4:] == b"ef"


def test_memmove_out_of_range_raises():
    with pytest.raises(IndexError):
        memmove(bytearray(4), 2, 0, 3)


def test_memchr_finds_first_occurrence():
    data = b"banana"
    index = memchr(data, ord("n"), len(data))
    assert index is not None
    assert data[index] == ord("n")
    assert ord("n") not in data[:index]


def test_memchr_respects_limit():
    assert memchr(b"banana", ord("n"), 2) is None


def test_memcmp_ordering():
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0
    assert memcmp(b"abc", b"abd", 2) == 0
    assert memcmp(b"x", b"y", 0) == 0


def test_memcmp_is_antisymmetric():
    a, b = b"hello", b"help!"
    assert memcmp(a, b, 5) == -memcmp(b, a, 5)


def test_calloc_zero_filled():
    buf = calloc(4, 3)
    assert len(buf) == 12
    assert not any(buf)


def test_calloc_zero_count_is_empty():
    assert len(calloc(0, 8)) == 0


def test_calloc_too_large_raises():
    with pytest.raises(MemoryError):
        calloc(4294967295, 2)


def test_calloc_negative_raises():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_count_array_stops_at_none():
    assert count_array(["a", "b", None, "c"]) == 2
    assert count_array(["a", "b", "c"]) == 3
    assert count_array([]) == 0