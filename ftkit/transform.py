"""Building new strings from existing ones and converting between text and integers.

Strings are read up to their first NUL character, like everywhere else in
the package. Integers follow 32-bit signed semantics: ``atoi`` wraps around
on overflow and ``itoa`` accepts only values a 32-bit int can hold.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Union

from .chars import isdigit
from .strings import strdup

__all__ = [
    "substr",
    "strjoin",
    "strtrim",
    "split",
    "atoi",
    "itoa",
    "strmapi",
    "striteri",
]

CharLike = Union[int, str]

INT_MIN = -2147483648
INT_MAX = 2147483647

_WHITESPACE = frozenset(" \t\n\v\f\r")


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {len(c)} characters")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def _wrap_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value > INT_MAX else value


def _check_callable(f) -> None:
    if not callable(f):
        raise TypeError(f"expected a callable, got {type(f).__name__}")


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A start at or past the end of the string gives an empty string.
    """
    if start < 0:
        raise ValueError(f"start must not be negative, got {start}")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    text = strdup(s)
    if start >= len(text):
        return ""
    return text[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return strdup(s1) + strdup(s2)


def strtrim(s: str, charset: Optional[str]) -> str:
    """Strip every character found in ``charset`` from both ends of ``s``.

    An empty or None set returns the string unchanged.
    """
    text = strdup(s)
    if charset is None:
        return text
    chars = strdup(charset)
    if not chars:
        return text
    return text.strip(chars)


def split(s: str, c: CharLike) -> List[str]:
    """Split ``s`` on the separator ``c``, dropping empty pieces."""
    text = strdup(s)
    sep = _char(c)
    if sep == "\0":
        return [text] if text else []
    return [word for word in text.split(sep) if word]


def atoi(s: str) -> int:
    """Parse a leading decimal integer the way the C ``atoi`` does.

    Leading whitespace is skipped, one optional sign is read, then digits up
    to the first non-digit. No digits gives 0. The result wraps around to
    the 32-bit signed range.
    """
    text = strdup(s)
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    value = 0
    while pos < len(text) and isdigit(text[pos]):
        value = value * 10 + (ord(text[pos]) - ord("0"))
        pos += 1
    return _wrap_int32(sign * value)


def itoa(n: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from ``f(index, char)`` applied to every character."""
    _check_callable(f)
    return "".join(_char(f(index, ch)) for index, ch in enumerate(strdup(s)))


def striteri(s: str, f: Callable[[int, str], Optional[str]]) -> str:
    """Call ``f(index, char)`` on every character and return the edited string.

    Where ``f`` returns a character it replaces the original one; where it
    returns None the character is kept.
    """
    _check_callable(f)
    result = []
    for index, ch in enumerate(strdup(s)):
        replacement = f(index, ch)
        result.append(ch if replacement is None else _char(replacement))
    return "".join(result)