#
# PROJECT: raytracer-core
# MODULE: raytracer_core/__init__.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md
# LOG_REF: 2026-10-17
#

from .scalar import EPSILON, float_eq
from .tuples import Point, Vector
from .color import Color, parse_hex_color
from .matrix import Matrix
from .canvas import Canvas
from .ppm import encode_ppm, write_ppm
from .config import DemoConfig
from .logging_config import setup_logging

__version__ = "0.1.0"
