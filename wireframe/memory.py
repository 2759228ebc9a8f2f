"""Byte-buffer helpers: fill, copy, move, search and compare."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytearray, memoryview]
ReadableBuffer = Union[bytes, bytearray, memoryview]


def _check_span(size: int, length: int, start: int = 0) -> None:
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if start < 0:
        raise ValueError(f"offset must not be negative, got {start}")
    if start + length > size:
        raise ValueError(
            f"span of {length} bytes at offset {start} exceeds buffer of {size} bytes"
        )


def mem_set(buf: Buffer, value: int, length: int) -> Buffer:
    """Fill the first ``length`` bytes of ``buf`` with ``value`` (taken modulo 256)."""
    _check_span(len(buf), length)
    buf[:length] = bytes([value & 0xFF]) * length
    return buf


def zero(buf: Buffer, length: int) -> None:
    """Set the first ``length`` bytes of ``buf`` to zero."""
    mem_set(buf, 0, length)


def mem_copy(dst: Buffer, src: ReadableBuffer, length: int) -> Buffer:
    """Copy the first ``length`` bytes of ``src`` into the start of ``dst``."""
    _check_span(len(dst), length)
    _check_span(len(src), length)
    dst[:length] = bytes(src[:length])
    return dst


def mem_move(buf: Buffer, dst_offset: int, src_offset: int, length: int) -> Buffer:
    """Move ``length`` bytes within ``buf``; overlapping ranges are handled."""
    _check_span(len(buf), length, src_offset)
    _check_span(len(buf), length, dst_offset)
    if length and dst_offset != src_offset:
        buf[dst_offset:dst_offset + length] = bytes(buf[src_offset:src_offset + length])
    return buf


def mem_find(data: ReadableBuffer, value: int, length: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` among the first ``length``, or None."""
    _check_span(len(data), length)
    index = bytes(data[:length]).find(value & 0xFF)
    return None if index < 0 else index


def mem_compare(a: ReadableBuffer, b: ReadableBuffer, length: int) -> int:
    """Compare the first ``length`` bytes as unsigned values.

    Returns zero when they match, otherwise the difference between the
    first pair of bytes that differ.
    """
    _check_span(len(a), length)
    _check_span(len(b), length)
    for x, y in zip(bytes(a[:length]), bytes(b[:length])):
        if x != y:
            return x - y
    return 0


def zeroed(count: int, size: int) -> bytearray:
    """A new zero-filled buffer holding ``count`` elements of ``size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)