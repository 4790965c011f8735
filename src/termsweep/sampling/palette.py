"""
Colors and named palettes.

Color values are ANSI SGR foreground codes (30-37 dark, 90-97 bright,
39 default). A palette is an ordered, non-empty list of colors that the
color converter cycles through.
"""

from __future__ import annotations
from enum import Enum


class Color(Enum):
    """Terminal foreground colors."""

    RESET = 39
    BLACK = 30
    DARK_RED = 31
    DARK_GREEN = 32
    DARK_YELLOW = 33
    DARK_BLUE = 34
    DARK_MAGENTA = 35
    DARK_CYAN = 36
    GREY = 37
    DARK_GREY = 90
    RED = 91
    GREEN = 92
    YELLOW = 93
    BLUE = 94
    MAGENTA = 95
    CYAN = 96
    WHITE = 97

    @property
    def sgr(self) -> str:
        """Select Graphic Rendition parameter for this color."""
        return str(self.value)


PALETTES: dict[str, tuple[Color, ...]] = {
    "red": (Color.YELLOW, Color.DARK_YELLOW, Color.RED),
    "red_light": (Color.WHITE, Color.YELLOW, Color.RED),
    "green": (Color.CYAN, Color.DARK_GREEN, Color.GREEN),
    "green_light": (Color.WHITE, Color.CYAN, Color.GREEN),
    "blue": (Color.MAGENTA, Color.DARK_BLUE, Color.BLUE),
    "blue_light": (Color.WHITE, Color.MAGENTA, Color.BLUE),
    "white": (Color.BLACK, Color.GREY, Color.WHITE),
    "rainbow": (Color.MAGENTA, Color.BLUE, Color.GREEN, Color.YELLOW, Color.RED),
}


def get_palette(name: str) -> tuple[Color, ...]:
    """Look up a named palette."""
    try:
        return PALETTES[name]
    except KeyError:
        raise ValueError(f"Unknown palette: {name}") from None
