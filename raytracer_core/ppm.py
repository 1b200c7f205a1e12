#
# PROJECT: raytracer-core
# MODULE: raytracer_core/ppm.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 5
# LOG_REF: 2026-10-17
#

"""
Plain-text PPM (P3) encoder.

Layout:
    P3
    {width} {height}
    255
    r g b r g b ...   one or more lines per canvas row

Rows never share a line. A token that would bring its line to LINE_LIMIT
characters or more starts a new line instead. Every line ends in '\\n'.
"""

import logging
import os
from typing import List, Union

from .canvas import Canvas
from .color import MAX_COLOR_VALUE

logger = logging.getLogger(__name__)

PPM_MAGIC = "P3"
LINE_LIMIT = 70


def _wrap_row(tokens: List[str]) -> List[str]:
    lines = []
    line = ""
    for token in tokens:
        candidate = f"{line} {token}" if line else token
        if line and len(candidate) >= LINE_LIMIT:
            lines.append(line.rstrip())
            line = token
        else:
            line = candidate
    if line:
        lines.append(line.rstrip())
    return lines


def encode_ppm(canvas: Canvas) -> str:
    out = [PPM_MAGIC, f"{canvas.width} {canvas.height}", str(MAX_COLOR_VALUE)]
    for row in canvas.grid:
        tokens = [str(v) for color in row for v in color.as_bytes()]
        out.extend(_wrap_row(tokens))
    text = "\n".join(out) + "\n"
    logger.debug("Encoded %dx%d canvas as PPM (%d body lines, %d bytes)",
                 canvas.width, canvas.height, len(out) - 3, len(text))
    return text


def write_ppm(canvas: Canvas, path: Union[str, os.PathLike]) -> None:
    """Write canvas to `path` as PPM. OSError propagates to the caller."""
    data = encode_ppm(canvas)
    with open(path, 'w', encoding='ascii', newline='\n') as f:
        f.write(data)
    logger.info("Wrote %dx%d PPM to %s", canvas.width, canvas.height, path)
