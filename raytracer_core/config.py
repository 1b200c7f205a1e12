#
# PROJECT: raytracer-core
# MODULE: raytracer_core/config.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 6
# LOG_REF: 2026-10-17
#

import logging
import os
from dataclasses import dataclass, field
from typing import Optional

from .color import Color

# scene -> (width, height, foreground hex, background hex)
SCENE_DEFAULTS = {
    'projectile': (900, 500, '#FF0000', '#FFFFFF'),
    'clock': (400, 400, '#FFFFFF', '#000000'),
}


@dataclass
class DemoConfig:
    """Configuration for a demo render. Unset fields take the scene's defaults."""
    scene: str = 'projectile'
    width: Optional[int] = None
    height: Optional[int] = None
    fg_color: Optional[str] = None
    bg_color: Optional[str] = None
    output: str = 'output.ppm'
    log_level: str = 'INFO'
    log_file: Optional[str] = None

    # Parsed colors, derived from the hex settings
    foreground: Optional[Color] = field(init=False, repr=False, default=None)
    background: Optional[Color] = field(init=False, repr=False, default=None)

    def __post_init__(self):
        if self.scene not in SCENE_DEFAULTS:
            raise ValueError(f"Unknown scene {self.scene!r}, "
                             f"expected one of {sorted(SCENE_DEFAULTS)}")
        width, height, fg, bg = SCENE_DEFAULTS[self.scene]
        if self.width is None: self.width = width
        if self.height is None: self.height = height
        if self.fg_color is None: self.fg_color = fg
        if self.bg_color is None: self.bg_color = bg
        self.init_colors()

    def init_colors(self):
        """Validate size and parse the hex settings. Raises ValueError on bad input."""
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Canvas size must be positive, got {self.width}x{self.height}")
        self.foreground = Color.from_hex(self.fg_color)
        self.background = Color.from_hex(self.bg_color)

    @property
    def level(self) -> int:
        """Numeric logging level; unknown names fall back to INFO."""
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.INFO

    @classmethod
    def from_env(cls, **overrides) -> 'DemoConfig':
        """
        Build a config whose output path and log level default to
        RAYTRACER_OUTPUT and RAYTRACER_LOG_LEVEL. Keyword overrides that are
        not None win over both.
        """
        values = {
            'output': os.environ.get('RAYTRACER_OUTPUT', 'output.ppm'),
            'log_level': os.environ.get('RAYTRACER_LOG_LEVEL', 'INFO'),
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
