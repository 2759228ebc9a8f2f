"""A fixed-size pixel canvas and line drawing with a colour ramp."""

from __future__ import annotations

import sys
from array import array
from dataclasses import dataclass

WIN_W = 1000
WIN_H = 1000
OFFSET_X = 400
OFFSET_Y = 300
SCALE = 20
HEIGHT_SCALE = 2
ANGLE = 1.15
COLOR = 0xFF0000
WHITE = 0xFFFFFF

_PIXEL_MASK = 0xFFFFFFFF


@dataclass
class Point:
    """A screen position together with the height it was projected from."""

    x: int
    y: int
    z: int = 0


class Canvas:
    """A grid of 32-bit colours, 0xRRGGBB in the low bytes, all black at first."""

    def __init__(self, width: int = WIN_W, height: int = WIN_H) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.pixels = array("I", bytes(4 * width * height))

    def _contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set one pixel; positions off the canvas are ignored."""
        if self._contains(x, y):
            self.pixels[y * self.width + x] = color & _PIXEL_MASK

    def get_pixel(self, x: int, y: int) -> int:
        """The colour at a position; IndexError when it is off the canvas."""
        if not self._contains(x, y):
            raise IndexError(f"pixel ({x}, {y}) is outside the canvas")
        return self.pixels[y * self.width + x]

    def to_rgb_bytes(self) -> bytes:
        """The pixels, row by row, as packed 8-bit red, green, blue triples."""
        words = array("I", self.pixels)
        if sys.byteorder == "big":
            words.byteswap()
        data = words.tobytes()
        rgb = bytearray(3 * len(words))
        rgb[0::3] = data[2::4]
        rgb[1::3] = data[1::4]
        rgb[2::3] = data[0::4]
        return bytes(rgb)


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def draw_line(
    canvas: Canvas, start: Point, end: Point, start_color: int, end_color: int
) -> None:
    """Draw from ``start`` to ``end`` with Bresenham's algorithm.

    The colour moves from ``start_color`` by a fixed integer step per
    pixel when the two heights differ: along the vertical distance when
    the line descends in height, along the horizontal one when it
    rises. A zero distance on the axis used raises ZeroDivisionError.
    """
    dx = abs(start.x - end.x)
    dy = abs(start.y - end.y)
    step_x = 1 if start.x < end.x else -1
    step_y = 1 if start.y < end.y else -1
    rise = start.z - end.z
    err = dx - dy
    color = start_color
    x, y = start.x, start.y
    while x != end.x or y != end.y:
        canvas.put_pixel(x, y, color)
        if rise > 0:
            color -= _trunc_div(start_color - end_color, dy)
        elif rise < 0:
            color += _trunc_div(start_color - end_color, dx)
        doubled = err * 2
        if doubled > -dy:
            err -= dy
            x += step_x
        if doubled < dx:
            err += dx
            y += step_y
    canvas.put_pixel(x, y, color)