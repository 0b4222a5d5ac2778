"""Byte-buffer operations on bytearrays."""

from __future__ import annotations

SIZE_MAX = (1 << 64) - 1

Buffer = bytes | bytearray


def _check_count(n: int, *lengths: int) -> None:
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    for length in lengths:
        if n > length:
            raise ValueError(f"count {n} exceeds buffer length {length}")


def _cstr(data: Buffer) -> bytes:
    """Bytes up to (not including) the first NUL."""
    return bytes(data).split(b"\0", 1)[0]


def bzero(buf: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    _check_count(n, len(buf))
    buf[:n] = bytes(n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``nmemb * size`` bytes."""
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    if size == 0:
        return bytearray()
    if nmemb > SIZE_MAX // size:
        raise OverflowError("requested size overflows the address space")
    return bytearray(nmemb * size)


def memchr(buf: Buffer, c: int, n: int) -> int | None:
    """Index of the first byte equal to ``c & 0xFF`` among the first ``n`` bytes."""
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    index = buf.find(c & 0xFF, 0, n)
    return index if index >= 0 else None


def memcmp(a: Buffer, b: Buffer, n: int) -> int:
    """Difference of the first differing bytes among the first ``n``, or 0."""
    _check_count(n, len(a), len(b))
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def memcpy(dest: bytearray | None, src: Buffer | None, n: int) -> bytearray | None:
    """Copy ``n`` bytes of ``src`` to the start of ``dest`` and return ``dest``."""
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise TypeError("both buffers are required")
    _check_count(n, len(dest), len(src))
    dest[:n] = src[:n]
    return dest


def memmove(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes from offset ``src`` to offset ``dest`` of ``buf``; regions may overlap."""
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_count(n, len(buf) - dest, len(buf) - src)
    buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with ``c & 0xFF`` and return ``buf``."""
    _check_count(n, len(buf))
    buf[:n] = bytes((c & 0xFF,)) * n
    return buf


def strlcpy(dst: bytearray, src: Buffer, size: int) -> int:
    """Copy ``src`` into ``dst`` with NUL termination within ``size`` bytes.

    Returns the length of ``src``.
    """
    text = _cstr(src)
    _check_count(size, len(dst))
    if size:
        count = min(len(text), size - 1)
        dst[:count] = text[:count]
        dst[count] = 0
    return len(text)


def strlcat(dst: bytearray | None, src: Buffer | None, size: int) -> int:
    """Append ``src`` to the NUL-terminated string in ``dst`` within ``size`` bytes.

    Returns the length the full result would have had.
    """
    if dst is None or src is None:
        if size == 0:
            return 0
        raise TypeError("both buffers are required")
    text = _cstr(src)
    _check_count(size, len(dst))
    try:
        dest_len = dst.index(0, 0, size)
    except ValueError:
        dest_len = size
    if dest_len >= size:
        return size + len(text)
    chunk = text[: size - dest_len - 1]
    end = dest_len + len(chunk)
    dst[dest_len:end] = chunk
    dst[end] = 0
    return dest_len + len(text)