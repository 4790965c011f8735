"""
Timer: fixed-rate frame pacing without drift.

A naive sleep(delay) adds the render time of every frame to the period.
The Timer instead sleeps only for what is left of the period since the
previous tick, and skips sleeping when a frame ran over.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Protocol
import time


class Clock(Protocol):
    """Protocol for the time source (replaceable in tests)."""

    def now(self) -> float:
        """Monotonic time in seconds."""
        ...

    def sleep(self, seconds: float) -> None:
        """Block for the given number of seconds."""
        ...


class SystemClock:
    """Clock backed by time.monotonic() and time.sleep()."""

    def now(self) -> float:
        return time.monotonic()

    def sleep(self, seconds: float) -> None:
        time.sleep(seconds)


@dataclass
class Timer:
    """Deadline based frame timer."""

    delay: float  # Seconds per frame (1 / fps)
    clock: Clock = field(default_factory=SystemClock)

    _last: float | None = field(default=None, init=False)

    def set(self):
        """Stamp the start of the first tick."""
        self._last = self.clock.now()

    def sleep(self):
        """
        Sleep until one delay has passed since the previous tick.

        The next tick is stamped after waking, so a slow frame delays the
        following ones instead of being made up for.
        """
        if self._last is None:
            self.set()
        elapsed = self.clock.now() - self._last
        remaining = self.delay - elapsed
        if remaining > 0:
            self.clock.sleep(remaining)
        self._last = self.clock.now()

    def elapsed(self) -> float:
        """Seconds since the last tick (0 before set())."""
        if self._last is None:
            return 0.0
        return self.clock.now() - self._last
