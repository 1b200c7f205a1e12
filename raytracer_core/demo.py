#
# PROJECT: raytracer-core
# MODULE: raytracer_core/demo.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 7
# LOG_REF: 2026-10-17
#

import logging
import math
from dataclasses import dataclass

from .canvas import Canvas
from .color import gradient
from .config import DemoConfig
from .matrix import Matrix
from .ppm import write_ppm
from .tuples import Point, Vector

logger = logging.getLogger(__name__)


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero (round() ties to even)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


@dataclass
class Projectile:
    position: Point
    velocity: Vector


@dataclass
class Environment:
    gravity: Vector
    wind: Vector


def tick(projectile: Projectile, environment: Environment):
    """Advance the projectile by one time step."""
    projectile.position = projectile.position + projectile.velocity
    projectile.velocity = projectile.velocity + environment.gravity + environment.wind


def render_projectile(config: DemoConfig) -> Canvas:
    """Plot the trajectory of a projectile fired up and to the right."""
    canvas = Canvas.with_color(config.width, config.height, config.background)
    projectile = Projectile(Point(0.0, 1.0, 0.0),
                            Vector(1.0, 1.8, 0.0).normalized() * 11.25)
    environment = Environment(Vector(0.0, -0.1, 0.0), Vector(-0.01, 0.0, 0.0))

    ticks = 0
    plotted = 0
    while projectile.position.y > 0:
        tick(projectile, environment)
        ticks += 1
        if projectile.position.y < 0:
            break
        # Canvas y grows downwards
        x = round_half_away(projectile.position.x)
        y = canvas.height - round_half_away(projectile.position.y)
        if canvas.write_pixel(x, y, config.foreground):
            plotted += 1

    logger.info("Projectile landed after %d ticks at x=%.2f (%d pixels plotted)",
                ticks, projectile.position.x, plotted)
    return canvas


def render_clock(config: DemoConfig) -> Canvas:
    """Mark the twelve hour positions of a clock face by rotating about z."""
    canvas = Canvas.with_color(config.width, config.height, config.background)
    twelve = Point(0.0, 1.0, 0.0)
    radius = 3.0 * canvas.width / 8.0
    fade = (config.foreground + config.background) * 0.5
    colors = gradient(config.foreground, fade, 12)

    for hour in range(12):
        point = Matrix.rotation_z(hour * math.pi / 6.0) @ twelve
        x = round_half_away(radius * point.x + canvas.width / 2.0)
        y = round_half_away(radius * point.y + canvas.height / 2.0)
        canvas.write_pixel(x, y, colors[hour])

    logger.info("Clock face drawn with radius %.1f", radius)
    return canvas


SCENES = {
    'projectile': render_projectile,
    'clock': render_clock,
}


class DemoApp:
    """Renders one demo scene to a PPM file."""

    def __init__(self, config: DemoConfig):
        self.config = config

    def render(self) -> Canvas:
        logger.info("Rendering '%s' at %dx%d", self.config.scene,
                    self.config.width, self.config.height)
        return SCENES[self.config.scene](self.config)

    def run(self) -> Canvas:
        """Render and write the output file. OSError propagates."""
        canvas = self.render()
        write_ppm(canvas, self.config.output)
        return canvas


def main(config: DemoConfig) -> Canvas:
    """Entry point used by client_demo.py."""
    app = DemoApp(config)
    return app.run()
