from raytracer_core.canvas import Canvas
from raytracer_core.color import Color
from raytracer_core.ppm import LINE_LIMIT, encode_ppm, write_ppm


def test_header():
    lines = Canvas(5, 3).ppm().splitlines()
    assert lines[0:3] == ['P3', '5 3', '255']


def test_pixel_data():
    canvas = Canvas(5, 3)
    canvas.write_pixel(0, 0, Color(1.5, 0, 0))
    canvas.write_pixel(2, 1, Color(0, 0.5, 0))
    canvas.write_pixel(4, 2, Color(-0.5, 0, 1))
    expected = (
        "P3\n"
        "5 3\n"
        "255\n"
        "255 0 0 0 0 0 0 0 0 0 0 0 0 0 0\n"
        "0 0 0 0 0 0 0 128 0 0 0 0 0 0 0\n"
        "0 0 0 0 0 0 0 0 0 0 0 0 0 0 255\n"
    )
    assert canvas.ppm() == expected
    assert all(len(line) < LINE_LIMIT for line in expected.splitlines())


def test_long_rows_are_wrapped():
    canvas = Canvas.with_color(10, 2, Color(1, 0.8, 0.6))
    lines = canvas.ppm().splitlines()
    assert lines[3:7] == [
        "255 204 153 255 204 153 255 204 153 255 204 153 255 204 153 255 204",
        "153 255 204 153 255 204 153 255 204 153 255 204 153",
        "255 204 153 255 204 153 255 204 153 255 204 153 255 204 153 255 204",
        "153 255 204 153 255 204 153 255 204 153 255 204 153",
    ]
    assert len(lines) == 7


def test_line_reaching_limit_is_flushed():
    # 17 tokens of "255" make a 67 character line; " 12" would make it 70.
    canvas = Canvas.with_color(6, 1, Color.white())
    canvas.write_pixel(5, 0, Color(1, 1, 12 / 255))
    lines = canvas.ppm().splitlines()
    assert lines[3:] == [" ".join(["255"] * 17), "12"]


def test_line_below_limit_is_kept():
    # " 0" brings the line to 69 characters, still under the limit.
    canvas = Canvas.with_color(6, 1, Color.white())
    canvas.write_pixel(5, 0, Color(1, 1, 0))
    lines = canvas.ppm().splitlines()
    assert lines[3:] == [" ".join(["255"] * 17 + ["0"])]
    assert len(lines[3]) == 69


def test_rows_never_share_a_line():
    canvas = Canvas(1, 3)
    lines = canvas.ppm().splitlines()
    assert lines[3:] == ["0 0 0", "0 0 0", "0 0 0"]


def test_no_line_reaches_limit():
    canvas = Canvas.with_color(40, 5, Color(0.25, 0.5, 1))
    for line in canvas.ppm().splitlines():
        assert len(line) < LINE_LIMIT
        assert line == line.rstrip()


def test_ends_with_newline():
    assert Canvas(5, 3).ppm().endswith('\n')
    assert not Canvas(5, 3).ppm().endswith('\n\n')


def test_empty_canvas():
    assert encode_ppm(Canvas(0, 0)) == "P3\n0 0\n255\n"


def test_write_ppm(tmp_path):
    canvas = Canvas(4, 2, Color.red())
    path = tmp_path / "out.ppm"
    write_ppm(canvas, path)
    assert path.read_text(encoding='ascii') == canvas.ppm()
