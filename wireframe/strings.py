"""String helpers: parsing and formatting integers, splitting, searching,
bounded copies, slicing, trimming and per-character mapping."""

from __future__ import annotations

import re
from itertools import zip_longest
from typing import Callable, MutableSequence, Optional

_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")
_TERMINATOR = "\0"


def _single_char(c: str, what: str = "character") -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single {what}, got {c!r}")
    return c


def _non_negative(value: int, name: str) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped, one optional sign is accepted, and
    parsing stops at the first non-digit. Text without digits gives 0.
    """
    match = _LEADING_INT.match(text)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits)
    return -value if sign == "-" else value


def itoa(n: int) -> str:
    """Decimal representation of ``n``."""
    return f"{n:d}"


def split(text: str, sep: str) -> list[str]:
    """The non-empty pieces of ``text`` between occurrences of ``sep``."""
    _single_char(sep, "separator")
    return [word for word in text.split(sep) if word]


def word_count(text: str, sep: str) -> int:
    """Number of non-empty pieces of ``text`` separated by ``sep``."""
    return len(split(text, sep))


def find_char(text: str, c: str) -> Optional[int]:
    """Index of the first ``c`` in ``text``, or None.

    Searching for the terminator character ``"\\0"`` finds the end of
    the text when it holds none.
    """
    _single_char(c)
    index = text.find(c)
    if index >= 0:
        return index
    return len(text) if c == _TERMINATOR else None


def rfind_char(text: str, c: str) -> Optional[int]:
    """Index of the last ``c`` in ``text``, or None.

    Searching for ``"\\0"`` finds the end of the text when it holds none.
    """
    _single_char(c)
    index = text.rfind(c)
    if index >= 0:
        return index
    return len(text) if c == _TERMINATOR else None


def find_in(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at index 0.
    """
    _non_negative(length, "length")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def compare(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters of ``a`` and ``b``.

    Returns zero when they match, otherwise the difference between the
    codes of the first pair that differ; the end of a string counts as
    code zero.
    """
    _non_negative(n, "n")
    for x, y in zip_longest(a[:n], b[:n], fillvalue=_TERMINATOR):
        if x != y:
            return ord(x) - ord(y)
    return 0


def bounded_copy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into room for ``size`` characters including a terminator.

    Returns the copied text and the full length of ``src``; a result
    length above ``size - 1`` means the copy was truncated.
    """
    _non_negative(size, "size")
    copied = src[: size - 1] if size else ""
    return copied, len(src)


def bounded_concat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a total room of ``size`` characters.

    Room for a terminator is kept. Returns the resulting text and the
    length the full concatenation would have had; when ``dst`` already
    fills ``size`` it is returned unchanged and the length is
    ``size + len(src)``.
    """
    _non_negative(size, "size")
    dst_len = min(len(dst), size)
    if dst_len == size:
        return dst, size + len(src)
    room = size - 1 - dst_len
    return dst + src[:room], dst_len + len(src)


def substring(text: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``text`` from ``start``; empty past the end."""
    _non_negative(start, "start")
    _non_negative(length, "length")
    if start >= len(text):
        return ""
    return text[start:start + length]


def join(a: str, b: str) -> str:
    """``a`` followed by ``b``."""
    if a is None or b is None:
        raise TypeError("join needs two strings")
    return a + b


def trim(text: str, charset: str) -> str:
    """``text`` without leading and trailing characters found in ``charset``."""
    if text is None or charset is None:
        raise TypeError("trim needs a text and a character set")
    return text.strip(charset) if charset else text


def map_chars(text: str, func: Callable[[int, str], str]) -> str:
    """A new string made of ``func(index, char)`` for each character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def iter_chars(
    chars: MutableSequence[str], func: Callable[[int, str], Optional[str]]
) -> MutableSequence[str]:
    """Call ``func(index, char)`` for each character, in place.

    A result other than None replaces the character at that index.
    The same sequence is returned.
    """
    for index, char in enumerate(list(chars)):
        replacement = func(index, char)
        if replacement is not None:
            chars[index] = replacement
    return chars