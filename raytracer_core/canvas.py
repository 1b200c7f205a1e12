#
# PROJECT: raytracer-core
# MODULE: raytracer_core/canvas.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 5
# LOG_REF: 2026-10-17
#

import logging
from typing import Iterator, Optional, Tuple

from .color import Color

logger = logging.getLogger(__name__)


class Canvas:
    """
    Fixed-size grid of Colors, x to the right and y downwards.

    Pixel coordinates usually come from rounded projections, so access
    outside the grid is not an error: pixel_at() returns None and
    write_pixel() returns False without touching the canvas.

    Not safe for concurrent writers without external locking.
    """
    __slots__ = ['w', 'h', 'grid']

    def __init__(self, w: int, h: int, color: Optional[Color] = None):
        if w < 0 or h < 0:
            raise ValueError(f"Canvas size must be non-negative, got {w}x{h}")
        if color is None:
            color = Color.black()
        self.w, self.h = w, h
        # Each cell owns its Color so in-place edits stay local to one pixel.
        self.grid = [[Color(*color) for _ in range(w)] for _ in range(h)]

    @classmethod
    def with_color(cls, w: int, h: int, color: Color) -> 'Canvas':
        return cls(w, h, color)

    @property
    def width(self) -> int:
        return self.w

    @property
    def height(self) -> int:
        return self.h

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.w and 0 <= y < self.h

    def pixel_at(self, x: int, y: int) -> Optional[Color]:
        """The Color stored at (x, y); editing it changes only that pixel."""
        if not self.contains(x, y):
            return None
        return self.grid[y][x]

    def write_pixel(self, x: int, y: int, color: Color) -> bool:
        if not self.contains(x, y):
            logger.debug("Skipping pixel (%d, %d) outside %dx%d canvas", x, y, self.w, self.h)
            return False
        self.grid[y][x] = Color(*color)
        return True

    def __iter__(self) -> Iterator[Color]:
        """Colors in row-major order; index i is pixel (i % width, i // width)."""
        for row in self.grid:
            yield from row

    def __len__(self):
        return self.w * self.h

    def pixels(self) -> Iterator[Tuple[int, int, Color]]:
        for y, row in enumerate(self.grid):
            for x, color in enumerate(row):
                yield x, y, color

    def ppm(self) -> str:
        """Encode as plain-text PPM (P3)."""
        from .ppm import encode_ppm
        return encode_ppm(self)
