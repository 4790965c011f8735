"""
Core primitives.

This layer knows NOTHING about patterns, colors or terminals.
It only knows:
- 2D coordinates (Vector)
- A fixed-size buffer of cells (Grid)
"""

from termsweep.core.vector import Vector
from termsweep.core.grid import Grid

__all__ = [
    "Vector",
    "Grid",
]
