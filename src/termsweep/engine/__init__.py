"""
Engine: renders frames and paces them.

- Renderer: samples every cell for one step into the Surface
- Timer: deadline based sleep between frames (no drift)
- Runner: fixed-rate loop with cancellation and guaranteed teardown
"""

from termsweep.engine.renderer import Renderer
from termsweep.engine.timer import Clock, SystemClock, Timer
from termsweep.engine.runner import CancellationToken, Runner

__all__ = [
    "Renderer",
    "Clock",
    "SystemClock",
    "Timer",
    "CancellationToken",
    "Runner",
]
