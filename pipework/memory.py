"""Byte-buffer operations over mutable and immutable byte sequences.

Mutating functions work in place on a bytearray (or writable memoryview)
and return it. Counts that reach past the end of a buffer raise IndexError.
"""

from __future__ import annotations

from typing import Optional, Union

ByteSource = Union[bytes, bytearray, memoryview]
ByteBuffer = Union[bytearray, memoryview]

SIZE_MAX = 2**64 - 1


def _check_count(count: int, *buffers: ByteSource) -> None:
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    for buffer in buffers:
        if count > len(buffer):
            raise IndexError(f"count {count} exceeds buffer length {len(buffer)}")


def memset(buffer: ByteBuffer, value: int, count: int) -> ByteBuffer:
    """Fill the first count bytes of buffer with the low byte of value."""
    _check_count(count, buffer)
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def bzero(buffer: ByteBuffer, count: int) -> ByteBuffer:
    """Zero the first count bytes of buffer."""
    return memset(buffer, 0, count)


def calloc(count: int, size: int) -> bytearray:
    """Allocate count * size zeroed bytes.

    A zero count or size yields a single zero byte. A product larger than
    SIZE_MAX raises MemoryError.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count == 0 or size == 0:
        count = size = 1
    elif count > SIZE_MAX // size:
        raise MemoryError(f"cannot allocate {count} elements of {size} bytes")
    return bytearray(count * size)


def memchr(data: ByteSource, value: int, count: int) -> Optional[int]:
    """Index of the first byte equal to the low byte of value within count bytes, or None."""
    _check_count(count, data)
    target = value & 0xFF
    for index, byte in enumerate(bytes(data[:count])):
        if byte == target:
            return index
    return None


def memcmp(first: ByteSource, second: ByteSource, count: int) -> int:
    """Difference of the first unequal bytes within count bytes, or 0 if none differ."""
    _check_count(count, first, second)
    for a, b in zip(bytes(first[:count]), bytes(second[:count])):
        if a != b:
            return a - b
    return 0


def memcpy(dest: ByteBuffer, src: ByteSource, count: int) -> ByteBuffer:
    """Copy the first count bytes of src into the start of dest."""
    _check_count(count, dest, src)
    dest[:count] = bytes(src[:count])
    return dest


def memmove(buffer: ByteBuffer, dest: int, src: int, count: int) -> ByteBuffer:
    """Copy count bytes at offset src to offset dest within buffer; overlap is safe."""
    if dest < 0 or src < 0:
        raise IndexError("offsets must not be negative")
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    if max(dest, src) + count > len(buffer):
        raise IndexError("region reaches past the end of the buffer")
    buffer[dest:dest + count] = bytes(buffer[src:src + count])
    return buffer