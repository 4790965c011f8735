"""
Base shapes: static geometric fields.

None of these look at config.step. Time is injected by the Shift
decorator. Each shape is 0 at its canonical start and 1 at its
boundary, and keeps growing past the boundary.
"""

from __future__ import annotations
import math

from termsweep.core.vector import Vector
from termsweep.patterns.base import Config, Pattern, PatternFactory


class Circle(Pattern):
    """Distance from the center, normalized by the distance to a corner."""

    def __init__(self, config: Config):
        self.center = config.size.center()
        self.radius = self.center.length()
        if self.radius <= 0:
            raise ValueError(f"Degenerate size for circle: {config.size}")

    def sample(self, pos: Vector) -> float:
        return (pos - self.center).length() / self.radius


class Line(Pattern):
    """Horizontal sweep from the left edge to the right edge."""

    def __init__(self, config: Config):
        self.width = config.size.x
        if self.width <= 0:
            raise ValueError(f"Degenerate size for line: {config.size}")

    def sample(self, pos: Vector) -> float:
        return pos.x / self.width


class Rhombus(Pattern):
    """Manhattan distance from the center, normalized by the corner distance."""

    def __init__(self, config: Config):
        self.center = config.size.center()
        self.distance = self.center.sum()
        if self.distance <= 0:
            raise ValueError(f"Degenerate size for rhombus: {config.size}")

    def sample(self, pos: Vector) -> float:
        return (pos - self.center).abs().sum() / self.distance


class Wheel(Pattern):
    """Angle around the center, one full turn mapped to [0, 1]."""

    def __init__(self, config: Config):
        self.center = config.size.center()

    def sample(self, pos: Vector) -> float:
        return ((pos - self.center).angle() + math.pi) / (2.0 * math.pi)


class CircleFactory(PatternFactory):
    def create(self, config: Config) -> Pattern:
        return Circle(config)


class LineFactory(PatternFactory):
    def create(self, config: Config) -> Pattern:
        return Line(config)


class RhombusFactory(PatternFactory):
    def create(self, config: Config) -> Pattern:
        return Rhombus(config)


class WheelFactory(PatternFactory):
    def create(self, config: Config) -> Pattern:
        return Wheel(config)
