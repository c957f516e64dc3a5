"""Byte-buffer helpers: filling, copying, searching and comparing.

Buffers are ``bytearray`` objects (or any mutable buffer supporting slice
assignment) for the writing functions and any bytes-like object for the
reading ones. A length that reaches past the end of a buffer raises
``ValueError`` instead of touching memory that does not belong to it.
"""

from __future__ import annotations

from typing import Optional

__all__ = ["memset", "bzero", "calloc", "memcpy", "memmove", "memchr", "memcmp"]


def _check_span(name: str, buf, start: int, length: int) -> None:
    if length < 0:
        raise ValueError(f"{name}: length must not be negative, got {length}")
    if start < 0 or start + length > len(buf):
        raise ValueError(
            f"{name}: span [{start}, {start + length}) exceeds buffer of size {len(buf)}"
        )


def memset(buf: bytearray, c: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes of ``buf`` with ``c`` truncated to a byte."""
    _check_span("memset", buf, 0, length)
    buf[:length] = bytes([c & 0xFF]) * length
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    memset(buf, 0, n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``nmemb * size`` bytes."""
    if nmemb < 0 or size < 0:
        raise ValueError("calloc: element count and size must not be negative")
    return bytearray(nmemb * size)


def memcpy(dst: Optional[bytearray], src, n: int) -> Optional[bytearray]:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dst``.

    When both buffers are None there is nothing to copy and None is returned.
    """
    if dst is None and src is None:
        return None
    if dst is None or src is None:
        raise ValueError("memcpy: only one of dst and src is None")
    _check_span("memcpy", src, 0, n)
    _check_span("memcpy", dst, 0, n)
    dst[:n] = bytes(src[:n])
    return dst


def memmove(buf: bytearray, dst: int, src: int, length: int) -> bytearray:
    """Copy ``length`` bytes inside ``buf`` from offset ``src`` to offset ``dst``.

    Overlapping regions are handled: the result is as if the source bytes
    were first copied aside.
    """
    _check_span("memmove", buf, src, length)
    _check_span("memmove", buf, dst, length)
    if dst != src:
        buf[dst:dst + length] = bytes(buf[src:src + length])
    return buf


def memchr(data, c: int, n: int) -> Optional[int]:
    """Return the offset of the first byte equal to ``c`` (as a byte) in the first ``n`` bytes.

    Returns None when the byte does not occur there.
    """
    _check_span("memchr", data, 0, n)
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(s1, s2, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers.

    Returns the difference between the first pair of unequal bytes, or 0 when
    the spans are equal. Two None buffers compare equal.
    """
    if s1 is None and s2 is None:
        return 0
    if s1 is None or s2 is None:
        raise ValueError("memcmp: only one of s1 and s2 is None")
    _check_span("memcmp", s1, 0, n)
    _check_span("memcmp", s2, 0, n)
    for a, b in zip(bytes(s1[:n]), bytes(s2[:n])):
        if a != b:
            return a - b
    return 0