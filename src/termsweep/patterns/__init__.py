"""
Patterns: composable scalar fields over the terminal grid.

- Base shapes (Circle, Line, Rhombus, Wheel) define static geometry
- Transforms (Shift, Invert, Swap, Segments, Slice) decorate one child
- build_pattern() stacks transforms in the order they require
"""

from termsweep.patterns.base import Config, Pattern, PatternFactory
from termsweep.patterns.shapes import (
    Circle,
    CircleFactory,
    Line,
    LineFactory,
    Rhombus,
    RhombusFactory,
    Wheel,
    WheelFactory,
)
from termsweep.patterns.transforms import (
    Invert,
    InvertFactory,
    Segments,
    SegmentsFactory,
    Shift,
    ShiftFactory,
    Slice,
    SliceFactory,
    Swap,
    SwapFactory,
)
from termsweep.patterns.library import SHAPES, build_pattern, create_shape

__all__ = [
    "Config",
    "Pattern",
    "PatternFactory",
    "Circle",
    "CircleFactory",
    "Line",
    "LineFactory",
    "Rhombus",
    "RhombusFactory",
    "Wheel",
    "WheelFactory",
    "Invert",
    "InvertFactory",
    "Segments",
    "SegmentsFactory",
    "Shift",
    "ShiftFactory",
    "Slice",
    "SliceFactory",
    "Swap",
    "SwapFactory",
    "SHAPES",
    "build_pattern",
    "create_shape",
]
