"""
Named shapes and the standard decoration order.

build_pattern() is the one place that knows how to stack transforms
on top of a base shape so that Shift sees the raw field and Swap sits
below the range remapping transforms.
"""

from __future__ import annotations
from typing import Callable

from termsweep.patterns.base import PatternFactory
from termsweep.patterns.shapes import CircleFactory, LineFactory, RhombusFactory, WheelFactory
from termsweep.patterns.transforms import (
    InvertFactory,
    SegmentsFactory,
    ShiftFactory,
    SliceFactory,
    SwapFactory,
)


SHAPES: dict[str, Callable[[], PatternFactory]] = {
    "circle": CircleFactory,
    "line": LineFactory,
    "rhombus": RhombusFactory,
    "wheel": WheelFactory,
}


def create_shape(name: str) -> PatternFactory:
    """Create a base shape factory by name."""
    try:
        return SHAPES[name]()
    except KeyError:
        raise ValueError(f"Unknown shape: {name}") from None


def build_pattern(
    shape: str | PatternFactory,
    shift: bool = True,
    invert: bool = False,
    swap: bool = False,
    segments: int | None = None,
    slice_scale: int | None = None,
) -> PatternFactory:
    """
    Decorate a base shape in the standard order.

    Args:
        shape: Shape name or an undecorated base factory
        shift: Animate the field over time (Shift)
        invert: Run the animation backwards (Invert)
        swap: Rotate the field by 90° (Swap)
        segments: Repeat the transition band n times (Segments)
        slice_scale: Only use the final 1/n of the range (Slice)

    Returns:
        The outermost factory of the tree
    """
    factory = create_shape(shape) if isinstance(shape, str) else shape

    if shift:
        factory = ShiftFactory(factory)
    if invert:
        factory = InvertFactory(factory)
    if swap:
        factory = SwapFactory(factory)
    if segments is not None:
        factory = SegmentsFactory(factory, segments)
    if slice_scale is not None:
        factory = SliceFactory(factory, slice_scale)

    return factory
