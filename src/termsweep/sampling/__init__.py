"""
Sampling: turning levels into glyphs and colors.

- Sampler pairs a glyph field with a color field
- Converter maps levels to KEEP / CLEAR / Draw and to palette colors
- Palettes are ordered color lists
"""

from termsweep.sampling.sampler import Sampler, SamplerFactory
from termsweep.sampling.converter import (
    CLEAR,
    KEEP,
    CharConverter,
    CharSample,
    ColorConverter,
    Converter,
    Draw,
    create_converter,
)
from termsweep.sampling.palette import PALETTES, Color, get_palette

__all__ = [
    "Sampler",
    "SamplerFactory",
    "CLEAR",
    "KEEP",
    "CharConverter",
    "CharSample",
    "ColorConverter",
    "Converter",
    "Draw",
    "create_converter",
    "PALETTES",
    "Color",
    "get_palette",
]
