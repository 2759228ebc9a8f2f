import pytest

from wireframe.canvas import (
    COLOR,
    WHITE,
    WIN_H,
    WIN_W,
    Canvas,
    Point,
    draw_line,
)


def test_put_and_get_pixel_round_trip():
    canvas = Canvas(4, 4)
    canvas.put_pixel(2, 3, 0x123456)
    assert canvas.get_pixel(2, 3) == 0x123456
    assert canvas.get_pixel(3, 2) == 0


def test_put_pixel_off_canvas_is_ignored():
    canvas = Canvas(4, 4)
    for x, y in [(-1, 0), (0, -1), (4, 0), (0, 4)]:
        canvas.put_pixel(x, y, WHITE)
    assert set(canvas.pixels) == {0}


def test_put_pixel_keeps_low_32_bits():
    canvas = Canvas(2, 2)
    canvas.put_pixel(0, 0, -1)
    assert canvas.get_pixel(0, 0) == 0xFFFFFFFF


def test_get_pixel_off_canvas_raises():
    with pytest.raises(IndexError):
        Canvas(2, 2).get_pixel(2, 0)


def test_default_size_is_window_size():
    canvas = Canvas()
    assert (canvas.width, canvas.height) == (WIN_W, WIN_H)
    assert len(canvas.pixels) == WIN_W * WIN_H


def test_invalid_size_rejected():
    with pytest.raises(ValueError):
        Canvas(0, 5)


def test_to_rgb_bytes_orders_channels():
    canvas = Canvas(2, 1)
    canvas.put_pixel(0, 0, 0x123456)
    data = canvas.to_rgb_bytes()
    assert data[:3] == b"\x12\x34\x56"
    assert len(data) == 3 * canvas.width * canvas.height


def test_horizontal_line_covers_span():
    canvas = Canvas(6, 3)
    draw_line(canvas, Point(0, 1), Point(4, 1), WHITE, WHITE)
    assert [canvas.get_pixel(x, 1) for x in range(5)] == [WHITE] * 5
    assert canvas.get_pixel(5, 1) == 0
    assert canvas.get_pixel(2, 0) == 0


def test_diagonal_line_touches_both_ends_and_middle():
    canvas = Canvas(8, 8)
    draw_line(canvas, Point(6, 6), Point(1, 1), COLOR, COLOR)
    for i in range(1, 7):
        assert canvas.get_pixel(i, i) == COLOR


def test_single_point_line():
    canvas = Canvas(3, 3)
    draw_line(canvas, Point(1, 1, 4), Point(1, 1, 0), COLOR, WHITE)
    assert canvas.get_pixel(1, 1) == COLOR
    assert sum(1 for p in canvas.pixels if p) == 1


def test_descending_height_ramps_colour_monotonically():
    canvas = Canvas(3, 6)
    draw_line(canvas, Point(0, 0, 5), Point(0, 4, 0), COLOR, WHITE)
    column = [canvas.get_pixel(0, y) for y in range(5)]
    assert column[0] == COLOR
    assert column == sorted(column)
    assert column[-1] <= WHITE


def test_rising_height_with_no_horizontal_distance_fails():
    with pytest.raises(ZeroDivisionError):
        draw_line(Canvas(3, 6), Point(0, 0, 0), Point(0, 3, 5), COLOR, WHITE)