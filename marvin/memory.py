"""Byte-buffer helpers: filling, zeroing, searching, comparing and copying.

Buffers are bytes-like objects; the functions that write need a mutable one
such as a bytearray. Counts that reach past the end of a buffer are an error.
"""

from typing import Optional, Union

Buffer = Union[bytes, bytearray, memoryview]


def _check_count(count: int, *buffers: Buffer) -> None:
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    for buffer in buffers:
        if count > len(buffer):
            raise ValueError(
                f"count {count} exceeds buffer length {len(buffer)}"
            )


def memset(buffer: bytearray, value: int, count: int) -> bytearray:
    """Set the first count bytes of buffer to value (taken modulo 256)."""
    _check_count(count, buffer)
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def bzero(buffer: bytearray, count: int) -> bytearray:
    """Set the first count bytes of buffer to zero."""
    return memset(buffer, 0, count)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer holding count items of size bytes each."""
    if count < 0 or size < 0:
        raise ValueError(
            f"count and size must not be negative, got {count} and {size}"
        )
    return bytearray(count * size)


def memchr(buffer: Buffer, value: int, count: int) -> Optional[int]:
    """Return the index of value (modulo 256) in the first count bytes.

    Returns None when the byte does not occur there.
    """
    _check_count(count, buffer)
    index = bytes(buffer[:count]).find(value & 0xFF)
    return index if index >= 0 else None


def memcmp(first: Buffer, second: Buffer, count: int) -> int:
    """Compare the first count bytes of two buffers.

    Returns the difference of the first pair of bytes that differ, or 0
    when the compared ranges are equal.
    """
    _check_count(count, first, second)
    for left, right in zip(bytes(first[:count]), bytes(second[:count])):
        if left != right:
            return left - right
    return 0


def memcpy(dest: bytearray, src: Buffer, count: int) -> bytearray:
    """Copy the first count bytes of src to the start of dest."""
    _check_count(count, dest, src)
    dest[:count] = bytes(src[:count])
    return dest


def memmove(buffer: bytearray, dest: int, src: int, count: int) -> bytearray:
    """Copy count bytes inside one buffer from offset src to offset dest.

    The ranges may overlap; the result is as if the source bytes were
    first copied aside.
    """
    if dest < 0 or src < 0:
        raise ValueError(
            f"offsets must not be negative, got dest={dest} src={src}"
        )
    _check_count(count)
    end = max(dest, src) + count
    if end > len(buffer):
        raise ValueError(
            f"range ending at {end} exceeds buffer length {len(buffer)}"
        )
    if dest != src and count:
        buffer[dest:dest + count] = bytes(buffer[src:src + count])
    return buffer