import pytest

from pipework.memory import (
    SIZE_MAX,
    bzero,
    calloc,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
)


def test_memset_fills_prefix_only():
    original = b"abcdef"
    buf = bytearray(original)
    result = memset(buf, ord("x"), 5)
    assert result is buf
    assert buf[:5] == b"x" * 5
    assert buf[5:] == original[5:]


def test_memset_uses_low_byte():
    buf = bytearray(3)
    memset(buf, 256 + ord("x"), 3)
    assert buf == b"x" * 3


def test_memset_count_past_end():
    with pytest.raises(IndexError):
        memset(bytearray(2), 0, 3)


def test_memset_negative_count():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, -1)


def test_bzero_clears_prefix():
    original = b"Hello\x00\x00\x00\x00\x00"
    buf = bytearray(original)
    bzero(buf, len(buf))
    assert buf == bytes(len(original))


def test_bzero_partial():
    buf = bytearray(b"Hello")
    bzero(buf, 2)
    assert buf[:2] == bytes(2)
    assert buf[2:] == b"llo"


def test_calloc_is_zeroed_with_requested_size():
    block = calloc(5, 4)
    assert len(block) == 5 * 4
    assert not any(block)


@pytest.mark.parametrize("count,size", [(0, 8), (8, 0), (0, 0)])
def test_calloc_zero_gives_one_byte(count, size):
    assert calloc(count, size) == bytearray(1)


def test_calloc_overflow():
    with pytest.raises(MemoryError):
        calloc(SIZE_MAX // 2 + 1, 2)


def test_memchr_finds_first_match():
    data = b"ABCD35dhaa5aa"
    assert memchr(data, ord("5"), len(data)) == data.index(b"5")


def test_memchr_respects_count():
    data = b"ABCD35dhaa5aa"
    assert memchr(data, ord("5"), data.index(b"5")) is None


def test_memchr_missing():
    assert memchr(b"abc", ord("z"), 3) is None


def test_memchr_masks_value():
    data = b"\x00\x01\x02"
    assert memchr(data, 0x102, 3) == 2


def test_memcmp_reports_difference():
    first, second = b"ABCDEFK", b"ABCDEFA"
    assert memcmp(first, second, len(first)) == ord("K") - ord("A")
    assert memcmp(second, first, len(first)) == ord("A") - ord("K")


def test_memcmp_equal_prefix():
    assert memcmp(b"ABCDEFK", b"ABCDEFA", 6) == 0
    assert memcmp(b"same", b"same", 4) == 0


def test_memcmp_is_unsigned():
    assert memcmp(b"\xff", b"\x01", 1) > 0


def test_memcmp_count_past_shorter_buffer():
    with pytest.raises(IndexError):
        memcmp(b"ABCDEFK", b"ABCDEFKS", 8)


def test_memcpy_copies_prefix():
    dest = bytearray(20)
    src = b"123456789"
    result = memcpy(dest, src, 5)
    assert result is dest
    assert dest[:5] == src[:5]
    assert dest[5:] == bytes(15)


def test_memcpy_count_past_end():
    with pytest.raises(IndexError):
        memcpy(bytearray(2), b"abc", 3)


def test_memmove_forward_overlap():
    buf = bytearray(b"abcdefg")
    memmove(buf, 2, 0, 3)
    assert buf[:2] == b"ab"
    assert buf[2:5] == b"abc"
    assert buf[5:] == b"fg"


def test_memmove_backward_overlap():
    original = b"abcdefg"
    buf = bytearray(original)
    memmove(buf, 0, 2, 5)
    assert buf[:5] == original[2:7]
    assert buf[5:] == original[5:]


def test_memmove_same_offset_unchanged():
    buf = bytearray(b"abcdefg")
    memmove(buf, 3, 3, 4)
    assert buf == b"abcdefg"


def test_memmove_out_of_range():
    with pytest.raises(IndexError):
        memmove(bytearray(b"abc"), 1, 0, 3)
    with pytest.raises(IndexError):
        memmove(bytearray(b"abc"), -1, 0, 1)