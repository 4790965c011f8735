"""
Runner: the frame loop.

For a duration D and frame delay d the runner plays N = floor(D / d)
intervals, rendering N + 1 frames at steps 0, 1/N, ..., 1. Steps are
derived from the tick index, not from wall time, so a slow terminal
delays frames but never skips or reorders them.

The run ends in one of three ways: all ticks done, cancellation, or an
error. In every case the Surface is closed exactly once.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING
import logging
import math
import threading

if TYPE_CHECKING:
    from termsweep.engine.renderer import Renderer
    from termsweep.engine.timer import Timer
    from termsweep.terminal.surface import Surface

logger = logging.getLogger(__name__)


class CancellationToken:
    """Thread and signal safe cancellation flag."""

    def __init__(self):
        self._event = threading.Event()

    def cancel(self):
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()


@dataclass
class Runner:
    """
    Drives the Renderer at a fixed rate for a fixed duration.

    Attributes:
        duration: Total length of the animation in seconds
        timer: Frame pacing
        renderer: Draws and presents frames
        surface: Closed once the loop ends
        token: Checked once per tick before rendering
    """

    duration: float
    timer: "Timer"
    renderer: "Renderer"
    surface: "Surface"
    token: CancellationToken = field(default_factory=CancellationToken)

    @property
    def ticks(self) -> int:
        """Number of intervals N; N + 1 frames are rendered."""
        # Epsilon absorbs round-off such as 0.3 / 0.1 == 2.9999999999999996
        return max(1, math.floor(self.duration / self.timer.delay + 1e-9))

    def run(self) -> dict:
        """
        Play the animation and restore the terminal.

        Returns:
            Statistics dictionary

        Raises:
            Whatever the renderer or terminal raised; teardown still runs.
        """
        frames = 0
        cancelled = False

        try:
            n_ticks = self.ticks
            logger.debug("Starting run: %d frames over %.3fs", n_ticks + 1, self.duration)
            self.timer.set()
            for i in range(n_ticks + 1):
                if self.token.cancelled:
                    cancelled = True
                    logger.info("Run cancelled after %d frames", frames)
                    break

                self.renderer.render(i / n_ticks)
                self.renderer.present()
                frames += 1
                self.timer.sleep()
        finally:
            self.surface.close()

        logger.debug("Run finished: %d frames", frames)
        return {
            "n_ticks": n_ticks,
            "frames": frames,
            "cancelled": cancelled,
        }
