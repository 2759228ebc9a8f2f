"""The command: read a height map and show its wireframe in a window."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .canvas import Canvas
from .parsing import HeightMap, read_map
from .projection import draw_map

_TITLE = "wireframe"


def render(height_map: HeightMap) -> Canvas:
    """A window-sized canvas with ``height_map`` drawn on it."""
    canvas = Canvas()
    draw_map(canvas, height_map)
    return canvas


def _show(canvas: Canvas) -> int:
    import pygame

    try:
        pygame.init()
        screen = pygame.display.set_mode((canvas.width, canvas.height))
    except pygame.error:
        pygame.quit()
        return 1
    try:
        pygame.display.set_caption(_TITLE)
        image = pygame.image.frombuffer(
            canvas.to_rgb_bytes(), (canvas.width, canvas.height), "RGB"
        )
        screen.blit(image, (0, 0))
        pygame.display.flip()
        running = True
        while running:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False
    finally:
        pygame.quit()
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Show the map named by the single argument; 1 on bad usage or input."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        return 1
    try:
        height_map = read_map(args[0])
    except (OSError, ValueError):
        return 1
    return _show(render(height_map))


if __name__ == "__main__":
    sys.exit(main())