"""
Transforms: decorators that wrap exactly one child pattern.

Each transform exists twice:
- a factory that wraps a child factory (and may hand it a modified Config)
- a pattern that wraps the child pattern created for that frame

Composition order matters:
- Shift must wrap the undecorated base shape. Its offset is computed
  against the raw geometric field.
- Swap must sit below Segments and Slice, so repeats and windows are
  computed in the rotated space.
"""

from __future__ import annotations
from dataclasses import dataclass, replace

from termsweep.core.vector import Vector
from termsweep.patterns.base import Config, Pattern, PatternFactory


class Shift(Pattern):
    """
    Slides the child's transition band across time.

    At step 0 the whole field sits at or above 1 (Keep), at step 1 it sits
    at or below 0 (Clear).
    """

    def __init__(self, child: Pattern, shift: float):
        self.child = child
        self.shift = shift

    def sample(self, pos: Vector) -> float:
        return self.child.sample(pos) + 1.0 - 2.0 * self.shift


class Invert(Pattern):
    """Reverses level polarity. Paired with a reversed step in the factory."""

    def __init__(self, child: Pattern):
        self.child = child

    def sample(self, pos: Vector) -> float:
        return 1.0 - self.child.sample(pos)


class Swap(Pattern):
    """Samples the child with x and y exchanged (rotates the field by 90°)."""

    def __init__(self, child: Pattern):
        self.child = child

    def sample(self, pos: Vector) -> float:
        return self.child.sample(pos.swap())


class Segments(Pattern):
    """
    Repeats the transition band n times.

    Levels outside [0, 1) are Keep/Clear sentinels and pass through
    unchanged.
    """

    def __init__(self, child: Pattern, segments: int):
        self.child = child
        self.segments = segments

    def sample(self, pos: Vector) -> float:
        level = self.child.sample(pos)
        if 0.0 <= level < 1.0:
            return (level * self.segments) % 1.0
        return level


class Slice(Pattern):
    """
    Stretches the last 1/n of the child's range over [0, 1].

    Values before the window become negative, values after it exceed 1.
    """

    def __init__(self, child: Pattern, scale: int):
        self.child = child
        self.width = 1.0 / scale
        self.rest = 1.0 - self.width

    def sample(self, pos: Vector) -> float:
        return (self.child.sample(pos) - self.rest) / self.width


@dataclass
class ShiftFactory(PatternFactory):
    child: PatternFactory

    def create(self, config: Config) -> Pattern:
        return Shift(self.child.create(config), config.step)


@dataclass
class InvertFactory(PatternFactory):
    child: PatternFactory

    def create(self, config: Config) -> Pattern:
        copy = replace(config, step=1.0 - config.step)
        return Invert(self.child.create(copy))


@dataclass
class SwapFactory(PatternFactory):
    child: PatternFactory

    def create(self, config: Config) -> Pattern:
        copy = replace(config, size=config.size.swap())
        return Swap(self.child.create(copy))


@dataclass
class SegmentsFactory(PatternFactory):
    child: PatternFactory
    segments: int = 1

    def __post_init__(self):
        if self.segments < 1:
            raise ValueError(f"segments must be >= 1, got {self.segments}")

    def create(self, config: Config) -> Pattern:
        return Segments(self.child.create(config), self.segments)


@dataclass
class SliceFactory(PatternFactory):
    child: PatternFactory
    scale: int = 1

    def __post_init__(self):
        if self.scale < 1:
            raise ValueError(f"scale must be >= 1, got {self.scale}")

    def create(self, config: Config) -> Pattern:
        return Slice(self.child.create(config), self.scale)
