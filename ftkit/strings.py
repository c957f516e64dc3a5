"""String inspection, search and bounded copy helpers.

Strings are treated as text that ends at the first NUL character, if it
holds one: everything from a ``"\\0"`` onward is ignored. Positions are
returned as indices into the string, and None stands for "not found".
"""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Optional, Tuple, Union

__all__ = [
    "strlen",
    "strchr",
    "strrchr",
    "strncmp",
    "strnstr",
    "strlcpy",
    "strlcat",
    "strdup",
]

CharLike = Union[int, str]

_NUL = "\0"


def _cstr(s: str) -> str:
    """Return ``s`` cut at its first NUL character."""
    if not isinstance(s, str):
        raise TypeError(f"expected a str, got {type(s).__name__}")
    head, _, _ = s.partition(_NUL)
    return head


def _char(c: CharLike) -> str:
    """Turn a one-character string or an integer (truncated to a byte) into a character."""
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {len(c)} characters")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def _check_size(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strlen(s: str) -> int:
    """Return the number of characters before the first NUL."""
    return len(_cstr(s))


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for the NUL character finds the end of the string.
    """
    text = _cstr(s)
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for the NUL character finds the end of the string.
    """
    text = _cstr(s)
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the difference between the code points of the first pair that
    differs (the end of a string counting as 0), or 0 when they agree.
    """
    _check_size("n", n)
    pairs = zip_longest(_cstr(s1), _cstr(s2), fillvalue=_NUL)
    for a, b in islice(pairs, n):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find ``needle`` lying wholly within the first ``length`` characters of ``haystack``.

    Returns the index of the match, or None. An empty needle matches at 0.
    """
    _check_size("length", length)
    target = _cstr(needle)
    if not target:
        return 0
    index = _cstr(haystack)[:length].find(target)
    return None if index < 0 else index


def strlcpy(src: str, dstsize: int) -> Tuple[str, int]:
    """Copy ``src`` into a destination of ``dstsize`` slots, one kept for the terminator.

    Returns the copied text and the full length of ``src``; the copy was
    truncated when that length is at least ``dstsize``.
    """
    _check_size("dstsize", dstsize)
    text = _cstr(src)
    if dstsize == 0:
        return "", len(text)
    return text[: dstsize - 1], len(text)


def strlcat(dst: str, src: str, dstsize: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a destination of ``dstsize`` slots.

    Returns the resulting text and the length the result would have had with
    unlimited room: ``len(src)`` plus the smaller of ``dstsize`` and ``len(dst)``.
    """
    _check_size("dstsize", dstsize)
    head = _cstr(dst)
    tail = _cstr(src)
    total = len(tail) + min(dstsize, len(head))
    room = dstsize - len(head) - 1
    if room <= 0:
        return head, total
    return head + tail[:room], total


def strdup(s: str) -> str:
    """Return a copy of ``s`` up to its first NUL."""
    return _cstr(s)