import logging

import pytest

from raytracer_core.canvas import Canvas
from raytracer_core.color import Color


def test_new_is_black():
    canvas = Canvas(10, 20)
    assert canvas.width == 10
    assert canvas.height == 20
    assert len(canvas) == 200
    assert all(p == Color(0, 0, 0) for p in canvas)


def test_with_color():
    canvas = Canvas.with_color(3, 2, Color(1, 0.8, 0.6))
    assert all(p == Color(1, 0.8, 0.6) for p in canvas)


def test_negative_size():
    with pytest.raises(ValueError):
        Canvas(-1, 5)


def test_write_and_read_pixel():
    canvas = Canvas(10, 20)
    red = Color(1, 0, 0)
    assert canvas.write_pixel(2, 3, red)
    assert canvas.pixel_at(2, 3) == red
    # neighbours untouched
    assert canvas.pixel_at(3, 3) == Color.black()
    assert canvas.pixel_at(2, 4) == Color.black()


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (10, 0), (0, 20), (10, 19), (100, 100)])
def test_out_of_range_is_absent(x, y):
    canvas = Canvas(10, 20)
    assert canvas.pixel_at(x, y) is None
    assert canvas.write_pixel(x, y, Color.white()) is False
    assert all(p == Color.black() for p in canvas)


def test_x_past_width_does_not_wrap():
    canvas = Canvas(4, 2)
    assert not canvas.write_pixel(4, 0, Color.white())
    assert canvas.pixel_at(0, 1) == Color.black()


def test_iteration_is_row_major():
    canvas = Canvas(3, 2)
    canvas.write_pixel(2, 0, Color.red())
    canvas.write_pixel(0, 1, Color.blue())
    colors = list(canvas)
    assert colors[2] == Color.red()
    assert colors[3] == Color.blue()
    for i, color in enumerate(colors):
        assert canvas.pixel_at(i % canvas.width, i // canvas.width) is color


def test_pixels_yields_positions():
    canvas = Canvas(2, 2)
    canvas.write_pixel(1, 0, Color.green())
    positions = [(x, y) for x, y, _ in canvas.pixels()]
    assert positions == [(0, 0), (1, 0), (0, 1), (1, 1)]
    assert [c for x, y, c in canvas.pixels() if (x, y) == (1, 0)] == [Color.green()]


def test_cells_are_independent():
    canvas = Canvas(3, 2)
    canvas.pixel_at(0, 0).r = 1.0
    assert canvas.pixel_at(0, 0) == Color(1, 0, 0)
    assert canvas.pixel_at(2, 1) == Color.black()
    assert canvas.pixel_at(1, 0) == Color.black()


def test_fill_color_is_copied():
    fill = Color(0.2, 0.2, 0.2)
    canvas = Canvas.with_color(2, 2, fill)
    fill.g = 0.9
    assert canvas.pixel_at(1, 1) == Color(0.2, 0.2, 0.2)
    assert canvas.pixel_at(0, 0) is not canvas.pixel_at(1, 1)


def test_written_color_is_copied():
    canvas = Canvas(2, 1)
    red = Color.red()
    canvas.write_pixel(0, 0, red)
    canvas.write_pixel(1, 0, red)
    red.b = 1.0
    canvas.pixel_at(0, 0).g = 1.0
    assert canvas.pixel_at(0, 0) == Color(1, 1, 0)
    assert canvas.pixel_at(1, 0) == Color(1, 0, 0)


def test_off_canvas_write_logs_lazily(caplog):
    canvas = Canvas(2, 2)
    with caplog.at_level(logging.DEBUG, logger='raytracer_core.canvas'):
        canvas.write_pixel(5, -1, Color.white())
    record = caplog.records[-1]
    assert record.args == (5, -1, 2, 2)
    assert record.getMessage() == "Skipping pixel (5, -1) outside 2x2 canvas"
