"""
Random choice among user supplied options.
"""

from __future__ import annotations
from typing import Sequence, TypeVar
import random

T = TypeVar("T")


class Chooser:
    """Picks one option, falling back to all options when none were given."""

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng if rng is not None else random.Random()

    def choose(self, selection: Sequence[T], options: Sequence[T]) -> T:
        """
        Choose uniformly from selection, or from options if selection is empty.

        Raises:
            ValueError: if both are empty
        """
        candidates = selection if selection else options
        if not candidates:
            raise ValueError("Nothing to choose from")
        return self.rng.choice(list(candidates))
