"""Reading a height map: rows of whitespace-separated integer heights."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Iterator, Union

from .lines import read_lines
from .strings import atoi, split

_INT_BITS = 32


def _to_int32(value: int) -> int:
    half = 1 << (_INT_BITS - 1)
    return (value + half) % (1 << _INT_BITS) - half


def parse_line(line: str) -> list[int]:
    """The heights on one line: each space-separated word read as an integer.

    Words are separated by single spaces only, so a trailing newline that
    stands alone as a word reads as a height of 0. Values wrap to a
    signed 32-bit integer.
    """
    return [_to_int32(atoi(word)) for word in split(line, " ")]


@dataclass
class HeightMap:
    """A grid of heights; its width is taken from the first row."""

    grid: list[list[int]] = field(default_factory=list)

    @property
    def height(self) -> int:
        """Number of rows."""
        return len(self.grid)

    @property
    def width(self) -> int:
        """Number of columns in the first row."""
        return len(self.grid[0]) if self.grid else 0

    def __getitem__(self, row: int) -> list[int]:
        return self.grid[row]

    def __iter__(self) -> Iterator[list[int]]:
        return iter(self.grid)

    def __len__(self) -> int:
        return len(self.grid)


def read_map(path: Union[str, os.PathLike]) -> HeightMap:
    """Read the height map stored at ``path``.

    Raises OSError when the file cannot be opened and ValueError when it
    holds no lines.
    """
    with open(path, "rb") as stream:
        grid = [parse_line(line.decode("latin-1")) for line in read_lines(stream)]
    if not grid:
        raise ValueError(f"{os.fspath(path)!s}: the map is empty")
    return HeightMap(grid)