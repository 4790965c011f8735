"""
Base classes for patterns.

A pattern is a scalar field over the terminal grid. Its value at a
position is the "level":
- level < 0: the transition has already passed (cell gets cleared)
- 0 <= level < 1: the transition band (cell gets drawn)
- level >= 1: the transition has not arrived yet (cell is kept)

Patterns are built in two stages. A PatternFactory is a stateless
blueprint; create() binds it to one frame's Config and returns a
Pattern that is sampled many times. No Pattern outlives its frame.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from termsweep.core.vector import Vector


@dataclass(frozen=True)
class Config:
    """Snapshot of one frame, handed to factories at instantiation time."""

    size: Vector = field(default_factory=Vector)  # Terminal size in field coordinates
    step: float = 0.0  # Animation progress in [0, 1]


class Pattern(ABC):
    """A field bound to one Config."""

    @abstractmethod
    def sample(self, pos: Vector) -> float:
        """
        Return the level at a position.

        For base patterns the start of the animation is at level 0 and
        the boundary of the region is at level 1.
        """
        ...


class PatternFactory(ABC):
    """Blueprint that creates a Pattern for a given frame."""

    @abstractmethod
    def create(self, config: Config) -> Pattern:
        """Create a new Pattern bound to the given configuration."""
        ...
