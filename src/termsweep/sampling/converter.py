"""
Converters: from continuous levels to discrete output.

The two conversions are deliberately asymmetric:
- char: clamps. Below 0 clears, at or above 1 keeps, in between draws.
- color: wraps. Any level maps to a palette entry, cyclically.

Color is only consulted after char has decided to draw.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence, Union
import math

from termsweep.sampling.palette import Color


class _Sentinel:
    def __init__(self, name: str):
        self.name = name

    def __repr__(self) -> str:
        return self.name


KEEP = _Sentinel("KEEP")  # Leave the cell untouched
CLEAR = _Sentinel("CLEAR")  # Blank the cell


@dataclass(frozen=True)
class Draw:
    """Draw a glyph (color is resolved separately)."""

    char: str


CharSample = Union[_Sentinel, Draw]


class CharConverter:
    """Maps a level to KEEP, CLEAR or Draw(glyph)."""

    def __init__(self, chars: str):
        if not chars:
            raise ValueError("chars must not be empty")
        self.chars = chars
        self.count = len(chars)

    def convert(self, level: float) -> CharSample:
        if level < 0.0:
            return CLEAR
        if level < 1.0:
            # min() guards against rounding up to count for levels just below 1
            index = min(int(level * self.count), self.count - 1)
            return Draw(self.chars[index])
        return KEEP


class ColorConverter:
    """Maps any level to a palette color, wrapping around."""

    def __init__(self, colors: Sequence[Color]):
        if not colors:
            raise ValueError("colors must not be empty")
        self.colors = tuple(colors)

    def convert(self, level: float) -> Color:
        count = len(self.colors)
        # Python's % is non-negative for a positive divisor
        index = math.floor(level * count) % count
        return self.colors[index]


class Converter:
    """Bundles the glyph and color conversions."""

    def __init__(self, char: CharConverter, color: ColorConverter):
        self._char = char
        self._color = color

    def char(self, level: float) -> CharSample:
        return self._char.convert(level)

    def color(self, level: float) -> Color:
        return self._color.convert(level)


def create_converter(chars: str, colors: Sequence[Color]) -> Converter:
    """Convenience factory for a converter over a glyph set and palette."""
    return Converter(CharConverter(chars), ColorConverter(colors))
