"""
Grid: fixed-size 2D buffer of per-cell render instructions.

Indexed as grid[x, y]. Out-of-range access is a programmer error and
raises IndexError; negative indices are rejected rather than wrapped.
"""

from __future__ import annotations
from typing import Any, Iterator

import numpy as np


class Grid:
    """A width x height buffer backed by a numpy object array."""

    def __init__(self, width: int, height: int, fill: Any = None):
        if width < 0 or height < 0:
            raise ValueError(f"Invalid grid size: {width}x{height}")
        self._fill = fill
        # Row-major storage: [height, width]
        self.values = np.full((height, width), fill, dtype=object)

    @property
    def width(self) -> int:
        return self.values.shape[1]

    @property
    def height(self) -> int:
        return self.values.shape[0]

    @property
    def shape(self) -> tuple[int, int]:
        """Return (width, height)."""
        return self.width, self.height

    def reset(self):
        """Set every cell back to the fill value."""
        self.values.fill(self._fill)

    def _check(self, pos: tuple[int, int]) -> tuple[int, int]:
        x, y = pos
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Position {pos} outside grid {self.width}x{self.height}")
        return y, x

    def __getitem__(self, pos: tuple[int, int]) -> Any:
        return self.values[self._check(pos)]

    def __setitem__(self, pos: tuple[int, int], value: Any):
        self.values[self._check(pos)] = value

    def iter_rows(self) -> Iterator[tuple[int, np.ndarray]]:
        """Iterate over (y, row) from top to bottom."""
        for y in range(self.height):
            yield y, self.values[y]
