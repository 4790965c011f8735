"""
Sampler: one glyph field and one color field on a shared clock.

Both pattern trees are created from the same Config, so they are always
at the same step while their geometry and decoration can differ freely.
"""

from __future__ import annotations
from dataclasses import dataclass

from termsweep.core.vector import Vector
from termsweep.patterns.base import Config, Pattern, PatternFactory


class Sampler:
    """The pair of patterns bound to one frame."""

    def __init__(self, char: Pattern, color: Pattern):
        self._char = char
        self._color = color

    def char(self, pos: Vector) -> float:
        """Level of the glyph field."""
        return self._char.sample(pos)

    def color(self, pos: Vector) -> float:
        """Level of the color field."""
        return self._color.sample(pos)


@dataclass
class SamplerFactory:
    """Blueprints for the glyph and color fields."""

    char: PatternFactory
    color: PatternFactory

    def create(self, config: Config) -> Sampler:
        return Sampler(self.char.create(config), self.color.create(config))
