# wireframe

Draws a height map as an isometric wireframe in a 1000×1000 window.

## Installing

```
pip install .
```

The window is shown with pygame, which is installed as a dependency.

## Map files

A map is a plain text file. Each line is a row of the grid and holds
integer heights separated by spaces:

```
0 0 0 0
0 2 2 0
0 2 2 0
0 0 0 0
```

The width of the grid is taken from the first line, so every later row
should hold at least as many heights. Each word is read as a leading
decimal integer: an optional sign followed by digits, anything after
the digits ignored, a word without digits read as 0. Values wrap to a
signed 32-bit integer. The file is read as Latin-1 text.

## Running

```
wireframe path/to/map.fdf
```

The program exits with status 1 when it is not given exactly one
argument, when the file cannot be opened, when it holds no lines, or
when the window cannot be created. In the window, press Escape or close
the window to quit; the program then exits with status 0.

Each grid point is placed on screen at
`x = (col - row) * 20 + 400` and
`y = (col + row) * 20 / 1.15 - height * 2 + 300`.
Edges between two points at height zero are drawn white, edges between
two equal raised points red, and other edges start red and change colour
by a fixed integer step per pixel. Pixels outside the window are
dropped.

## Using it from Python

```python
from wireframe.parsing import read_map
from wireframe.app import render

height_map = read_map("map.fdf")
canvas = render(height_map)
print(canvas.get_pixel(400, 300))
```

- `wireframe.parsing`: `read_map(path)` returns a `HeightMap` (with
  `grid`, `width`, `height`, indexing and iteration); `parse_line(line)`
  reads one row.
- `wireframe.canvas`: `Canvas` (`put_pixel`, `get_pixel`,
  `to_rgb_bytes`), `Point`, and `draw_line(canvas, start, end,
  start_color, end_color)`, a Bresenham line with the colour step
  described above. A sloped line whose distance along the axis used for
  the colour step is zero raises `ZeroDivisionError`.
- `wireframe.projection`: `project(x, y, z)` and
  `draw_map(canvas, height_map)`.
- `wireframe.app`: `render(height_map)` and `main(argv=None)`.

The package also carries small general helpers:

- `wireframe.lines`: `LineReader` and `read_lines(stream, buffer_size)`,
  reading a text or binary stream line by line through a fixed-size
  buffer, newlines kept.
- `wireframe.strings`: `atoi`, `itoa`, `split`, `word_count`,
  `find_char`, `rfind_char`, `find_in`, `compare`, `bounded_copy`,
  `bounded_concat`, `substring`, `join`, `trim`, `map_chars`,
  `iter_chars`.
- `wireframe.chars`: ASCII classification and case conversion
  (`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`,
  `to_upper`, `to_lower`).
- `wireframe.memory`: byte-buffer helpers (`mem_set`, `zero`,
  `mem_copy`, `mem_move`, `mem_find`, `mem_compare`, `zeroed`).
- `wireframe.output`: `put_char`, `put_str`, `put_endl`, `put_nbr`
  writing to a text stream.
- `wireframe.linked`: `Node` and `LinkedList` (`push_front`,
  `push_back`, `last`, `pop_front`, `clear`, `for_each`, `map`).

## What it does not do

The view is fixed: there is no zooming, panning or rotation, and no
other projection. The window size, scale and offsets are constants.
Colours written after a height in the map (such as `10,0xFF0000`) are
not read; only the leading integer counts.