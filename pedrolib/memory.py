"""Byte-buffer primitives and NUL-terminated string helpers.

Buffers are mutable bytes-like objects such as ``bytearray`` or writable
``memoryview`` slices; read-only sources may be any bytes-like object.
A C string inside a buffer ends at its first NUL byte, or at the end of the
buffer when it holds none.
"""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytearray, memoryview]
ReadableBuffer = Union[bytes, bytearray, memoryview]

SIZE_MAX = (1 << 64) - 1


def _check_span(buf: ReadableBuffer, n: int, what: str) -> None:
    if n < 0:
        raise ValueError(f"negative byte count for {what}: {n}")
    if n > len(buf):
        raise ValueError(f"{what} holds {len(buf)} bytes, {n} requested")


def _c_length(buf: ReadableBuffer) -> int:
    """Length of the C string at the start of buf."""
    index = bytes(buf).find(b"\0")
    return len(buf) if index < 0 else index


def _c_string(buf: ReadableBuffer) -> bytes:
    """The bytes of buf up to, but not including, its first NUL."""
    data = bytes(buf)
    index = data.find(b"\0")
    return data if index < 0 else data[:index]


def bzero(buf: Buffer, n: int) -> None:
    """Set the first n bytes of buf to zero."""
    _check_span(buf, n, "buffer")
    buf[:n] = bytes(n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of count elements of size bytes each.

    Raises OverflowError when count * size does not fit in a 64-bit size.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if size != 0 and count > SIZE_MAX // size:
        raise OverflowError(f"{count} elements of {size} bytes overflow the size range")
    return bytearray(count * size)


def memset(buf: Buffer, value: int, n: int) -> Buffer:
    """Fill the first n bytes of buf with the low byte of value; return buf."""
    _check_span(buf, n, "buffer")
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def memcpy(dst: Optional[Buffer], src: Optional[ReadableBuffer], n: int) -> Optional[Buffer]:
    """Copy n bytes from src into the start of dst; return dst.

    When both dst and src are None, None is returned.
    """
    if dst is None and src is None:
        return None
    if dst is None or src is None:
        raise TypeError("memcpy needs both a destination and a source")
    _check_span(dst, n, "destination")
    _check_span(src, n, "source")
    dst[:n] = bytes(src[:n])
    return dst


def memmove(dst: Optional[Buffer], src: Optional[ReadableBuffer], n: int) -> Optional[Buffer]:
    """Copy n bytes from src into dst, correct even when the two overlap.

    Overlapping regions are expressed as memoryview slices of one buffer.
    When both dst and src are None, None is returned.
    """
    if dst is None and src is None:
        return None
    if dst is None or src is None:
        raise TypeError("memmove needs both a destination and a source")
    _check_span(dst, n, "destination")
    _check_span(src, n, "source")
    # Taking a snapshot of the source first makes any overlap harmless.
    dst[:n] = bytes(src[:n])
    return dst


def memchr(data: ReadableBuffer, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to the low byte of value among the first n.

    Returns None when no such byte is found.
    """
    _check_span(data, n, "buffer")
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a: ReadableBuffer, b: ReadableBuffer, n: int) -> int:
    """Compare the first n bytes of a and b.

    Returns the difference of the first pair of differing bytes, or 0.
    """
    _check_span(a, n, "first buffer")
    _check_span(b, n, "second buffer")
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def realloc(buf: Optional[ReadableBuffer], old_size: int, new_size: int) -> Optional[bytearray]:
    """Return a new buffer of new_size bytes holding the start of buf.

    Up to old_size bytes of buf are carried over (never more than fit); the
    rest is zero. A new_size of 0 releases the buffer and gives None.
    """
    if new_size < 0 or old_size < 0:
        raise ValueError("sizes must not be negative")
    if new_size == 0:
        return None
    result = bytearray(new_size)
    if buf is not None:
        _check_span(buf, old_size, "buffer")
        keep = min(old_size, new_size)
        result[:keep] = bytes(buf[:keep])
    return result


def strcpy(dest: Buffer, src: ReadableBuffer) -> Buffer:
    """Copy the C string in src, with its terminator, into dest; return dest."""
    text = _c_string(src)
    if len(text) + 1 > len(dest):
        raise ValueError(f"destination of {len(dest)} bytes cannot hold {len(text) + 1}")
    dest[: len(text)] = text
    dest[len(text)] = 0
    return dest


def strcat(dest: Buffer, src: ReadableBuffer) -> Buffer:
    """Append the C string in src to the C string in dest; return dest."""
    start = _c_length(dest)
    text = _c_string(src)
    end = start + len(text)
    if end + 1 > len(dest):
        raise ValueError(f"destination of {len(dest)} bytes cannot hold {end + 1}")
    dest[start:end] = text
    dest[end] = 0
    return dest


def strlcpy(dest: Buffer, src: ReadableBuffer, size: int) -> int:
    """Copy at most size - 1 bytes of src into dest and terminate it.

    Returns the length of the C string in src, so a result of size or more
    means the copy was truncated. A size of 0 leaves dest untouched.
    """
    _check_span(dest, size, "destination")
    text = _c_string(src)
    if size != 0:
        count = min(len(text), size - 1)
        dest[:count] = text[:count]
        dest[count] = 0
    return len(text)


def strlcat(dest: Optional[Buffer], src: Optional[ReadableBuffer], size: int) -> int:
    """Append src to the C string in dest within a total of size bytes.

    Returns the length of the string it tried to create: the initial length of
    dest plus that of src, or size plus the length of src when dest already
    fills size bytes.
    """
    if (dest is None or src is None) and size == 0:
        return 0
    if dest is None or src is None:
        raise TypeError("strlcat needs both a destination and a source")
    _check_span(dest, size, "destination")
    text = _c_string(src)
    start = _c_length(dest)
    if size <= start:
        return size + len(text)
    count = min(len(text), size - 1 - start)
    dest[start : start + count] = text[:count]
    dest[start + count] = 0
    return start + len(text)