"""
Renderer: draws one frame of the animation into the Surface.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from termsweep.core.vector import Vector
from termsweep.patterns.base import Config
from termsweep.sampling.converter import CLEAR, KEEP

if TYPE_CHECKING:
    from termsweep.sampling.converter import Converter
    from termsweep.sampling.sampler import SamplerFactory
    from termsweep.terminal.surface import Surface


class Renderer:
    """
    Samples every cell for a step and writes the result to the Surface.

    The pattern trees are rebuilt from a fresh Config every frame, so a
    terminal resize between frames is picked up automatically.
    """

    def __init__(self, surface: "Surface", sampler: "SamplerFactory", converter: "Converter"):
        self.surface = surface
        self.sampler = sampler
        self.converter = converter

    def render(self, step: float):
        """
        Fill the frame buffer for the given step.

        Args:
            step: Animation progress in [0, 1]
        """
        width, height = self.surface.size()
        config = Config(size=Vector.from_terminal(width, height), step=step)
        sampler = self.sampler.create(config)

        self.surface.begin_frame(width, height)

        for y in range(height):
            for x in range(width):
                pos = Vector.from_terminal(x, y)
                sample = self.converter.char(sampler.char(pos))

                if sample is KEEP:
                    continue
                if sample is CLEAR:
                    self.surface.clear(x, y)
                else:
                    color = self.converter.color(sampler.color(pos))
                    self.surface.draw(x, y, sample.char, color)

    def present(self):
        """Emit the finished frame."""
        self.surface.present()
