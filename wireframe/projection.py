"""Isometric projection of a height map and drawing of its wireframe."""

from __future__ import annotations

from .canvas import (
    ANGLE,
    COLOR,
    HEIGHT_SCALE,
    OFFSET_X,
    OFFSET_Y,
    SCALE,
    WHITE,
    Canvas,
    Point,
    draw_line,
)
from .parsing import HeightMap


def project(x: int, y: int, z: int) -> Point:
    """The screen position of grid cell (``x``, ``y``) at height ``z``."""
    screen_x = (x - y) * SCALE + OFFSET_X
    screen_y = int((x + y) * SCALE / ANGLE - z * HEIGHT_SCALE + OFFSET_Y)
    return Point(screen_x, screen_y, z)


def _edge_colors(start: Point, end: Point) -> tuple[int, int]:
    if start.z == end.z and start.z == 0:
        return WHITE, WHITE
    if start.z == end.z and start.z > 0:
        return COLOR, COLOR
    return COLOR, WHITE


def _draw_edge(canvas: Canvas, start: Point, end: Point) -> None:
    draw_line(canvas, start, end, *_edge_colors(start, end))


def draw_map(canvas: Canvas, height_map: HeightMap) -> None:
    """Draw every edge between neighbouring cells of ``height_map``.

    Flat ground is white, flat raised ground red, and slopes run from
    red to white.
    """
    rows, cols = height_map.height, height_map.width
    for y in range(rows):
        for x in range(cols):
            start = project(x, y, height_map[y][x])
            if x < cols - 1:
                _draw_edge(canvas, start, project(x + 1, y, height_map[y][x + 1]))
            if y < rows - 1:
                _draw_edge(canvas, start, project(x, y + 1, height_map[y + 1][x]))