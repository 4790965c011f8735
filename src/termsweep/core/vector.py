"""
Vector: 2D floating point coordinate used by every pattern.

Terminal cells are roughly twice as tall as they are wide, so positions
derived from cell coordinates double the row axis. Circular and angular
patterns stay visually round that way.
"""

from __future__ import annotations
from dataclasses import dataclass
import math


@dataclass(frozen=True)
class Vector:
    """An immutable 2D vector. All operations return new vectors."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def from_terminal(cls, col: int, row: int) -> Vector:
        """Map an integer cell coordinate to field coordinates."""
        return cls(float(col), float(row) * 2.0)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y)

    def length(self) -> float:
        """Euclidean length."""
        return math.hypot(self.x, self.y)

    def sum(self) -> float:
        """Sum of both components (L1 norm for non-negative vectors)."""
        return self.x + self.y

    def abs(self) -> Vector:
        """Elementwise absolute value."""
        return Vector(abs(self.x), abs(self.y))

    def center(self) -> Vector:
        """Half of this vector, i.e. the center of a box of this size."""
        return Vector(self.x / 2.0, self.y / 2.0)

    def angle(self) -> float:
        """Angle in radians in (-pi, pi], as atan2(y, x)."""
        return math.atan2(self.y, self.x)

    def swap(self) -> Vector:
        """Exchange the x and y axes."""
        return Vector(self.y, self.x)
