#
# PROJECT: raytracer-core
# MODULE: raytracer_core/color.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 3
# LOG_REF: 2026-10-17
#

import math
import numbers

from .scalar import float_eq

# Largest channel value in 8-bit output.
MAX_COLOR_VALUE = 255


def _to_byte(channel: float) -> int:
    """Clamp to [0, 1], scale to 0-255 and round half away from zero."""
    if math.isnan(channel):
        return 0
    clamped = min(max(channel, 0.0), 1.0)
    # round() would round half to even: 127.5 must give 128.
    return int(math.floor(clamped * MAX_COLOR_VALUE + 0.5))


class Color:
    """
    RGB color with unbounded float channels.

    Channels may leave [0, 1] during blending; they are only clamped when
    converted to bytes for output.
    """
    __slots__ = ('r', 'g', 'b')

    def __init__(self, r: float, g: float, b: float):
        self.r = float(r)
        self.g = float(g)
        self.b = float(b)

    @classmethod
    def black(cls) -> 'Color':
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def white(cls) -> 'Color':
        return cls(1.0, 1.0, 1.0)

    @classmethod
    def red(cls) -> 'Color':
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def green(cls) -> 'Color':
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def blue(cls) -> 'Color':
        return cls(0.0, 0.0, 1.0)

    @classmethod
    def from_hex(cls, hex_str) -> 'Color':
        """Build a color from '#RRGGBB'. Raises ValueError on malformed input."""
        color = parse_hex_color(hex_str)
        if color is None:
            raise ValueError(f"Invalid hex color: {hex_str!r}")
        return color

    def __repr__(self):
        return f"Color({self.r}, {self.g}, {self.b})"

    def __iter__(self):
        yield self.r
        yield self.g
        yield self.b

    def __eq__(self, other):
        if not isinstance(other, Color):
            return NotImplemented
        return (float_eq(self.r, other.r) and float_eq(self.g, other.g)
                and float_eq(self.b, other.b))

    __hash__ = None

    def __add__(self, other):
        if isinstance(other, Color):
            return Color(self.r + other.r, self.g + other.g, self.b + other.b)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Color):
            return Color(self.r - other.r, self.g - other.g, self.b - other.b)
        return NotImplemented

    def __mul__(self, other):
        # Color * Color is the Hadamard product used for blending.
        if isinstance(other, Color):
            return Color(self.r * other.r, self.g * other.g, self.b * other.b)
        if isinstance(other, numbers.Real):
            return Color(self.r * other, self.g * other, self.b * other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, numbers.Real):
            return Color(self.r * other, self.g * other, self.b * other)
        return NotImplemented

    def add(self, other: 'Color') -> 'Color':
        return self + other

    def sub(self, other: 'Color') -> 'Color':
        return self - other

    def scale(self, scalar: float) -> 'Color':
        return self * scalar

    def blend(self, other: 'Color') -> 'Color':
        return self * other

    def as_bytes(self):
        """Return (r, g, b) as 8-bit integers, e.g. Color(1.5, 0.5, 0) -> (255, 128, 0)."""
        return (_to_byte(self.r), _to_byte(self.g), _to_byte(self.b))

    def to_hex(self) -> str:
        r, g, b = self.as_bytes()
        return f"#{r:02X}{g:02X}{b:02X}"


def parse_hex_color(hex_str):
    """
    Parse a hex color string to a Color.
    Accepts: '#RRGGBB' or 'RRGGBB' (case-insensitive).
    Returns: Color with channels in [0, 1], or None on failure.
    """
    if hex_str is None:
        return None
    val = str(hex_str).strip().lstrip('#')
    if len(val) != 6:
        return None
    try:
        r = int(val[0:2], 16)
        g = int(val[2:4], 16)
        b = int(val[4:6], 16)
    except ValueError:
        return None
    return Color(r / MAX_COLOR_VALUE, g / MAX_COLOR_VALUE, b / MAX_COLOR_VALUE)


def gradient(color_a: Color, color_b: Color, steps: int):
    """Build a list of `steps` colors interpolated linearly from color_a to color_b."""
    palette = []
    for i in range(steps):
        t = i / float(steps - 1) if steps > 1 else 0.0
        palette.append(color_a + (color_b - color_a) * t)
    return palette
