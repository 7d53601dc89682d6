import pytest

from sigtalk.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_memset_fills_prefix_only():
    buf = bytearray(b"xxxxx")
    result = memset(buf, ord("A"), 3)
    assert result is buf
    assert buf[:3] == b"A" * 3
    assert buf[3:] == b"xx"


def test_memset_uses_low_byte():
    buf = bytearray(2)
    memset(buf, 0x141, 2)
    assert buf == bytes([0x41, 0x41])


def test_memset_out_of_bounds():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, 3)


def test_bzero_clears_prefix():
    buf = bytearray(b"hello")
    bzero(buf, 4)
    assert buf[:4] == bytes(4)
    assert buf[4:] == b"o"


def test_memcpy_copies_prefix():
    dst = bytearray(b"......")
    result = memcpy(dst, b"abcdef", 3)
    assert result is dst
    assert dst[:3] == b"abc"
    assert dst[3:] == b"..."


def test_memcpy_zero_length_keeps_dst():
    dst = bytearray(b"keep")
    memcpy(dst, b"", 0)
    assert dst == b"keep"


def test_memcpy_source_too_short():
    with pytest.raises(ValueError):
        memcpy(bytearray(10), b"ab", 5)


def test_memmove_overlap_forward():
    buf = bytearray(b"abcdef")
    memmove(buf, 2, 0, 4)
    assert buf == b"ababcd"


def test_memmove_overlap_backward():
    buf = bytearray(b"abcdef")
    memmove(buf, 0, 2, 4)
    assert buf == b"cdefef"


def test_memmove_same_position_is_identity():
    buf = bytearray(b"abcdef")
    memmove(buf, 1, 1, 4)
    assert buf == b"abcdef"


def test_memmove_out_of_bounds():
    with pytest.raises(ValueError):
        memmove(bytearray(b"abc"), 2, 0, 2)


def test_memchr_finds_first():
    data = b"hello"
    assert memchr(data, ord("l"), len(data)) == data.index(b"l")


def test_memchr_respects_length():
    assert memchr(b"hello", ord("o"), 4) is None


def test_memchr_finds_zero_byte():
    data = b"ab\x00cd"
    assert memchr(data, 0, len(data)) == data.index(b"\x00")


def test_memchr_masks_value():
    assert memchr(b"\x41", 0x141, 1) == 0


def test_memcmp_equal():
    assert memcmp(b"abc", b"abc", 3) == 0


def test_memcmp_sign():
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0


def test_memcmp_antisymmetric():
    a, b = b"\x00\xff\x10", b"\x00\x01\x20"
    assert memcmp(a, b, 3) == -memcmp(b, a, 3)


def test_memcmp_stops_at_size():
    assert memcmp(b"abX", b"abY", 2) == 0


def test_memcmp_bytes_are_unsigned():
    assert memcmp(b"\x80", b"\x7f", 1) > 0


def test_calloc_zeroed():
    buf = calloc(3, 4)
    assert len(buf) == 3 * 4
    assert not any(buf)


def test_calloc_zero_count():
    assert len(calloc(0, 8)) == 0


def test_calloc_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)