"""Writing characters, strings and integers to a text stream."""

from __future__ import annotations

from typing import Optional, TextIO


def put_char(c: str, stream: TextIO) -> None:
    """Write a single character."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    stream.write(c)


def put_str(text: Optional[str], stream: TextIO) -> None:
    """Write ``text``; nothing is written when it is None."""
    if text is None:
        return
    stream.write(text)


def put_endl(text: Optional[str], stream: TextIO) -> None:
    """Write ``text`` followed by a newline."""
    put_str(text, stream)
    stream.write("\n")


def put_nbr(n: int, stream: TextIO) -> None:
    """Write the decimal representation of ``n``."""
    stream.write(f"{n:d}")