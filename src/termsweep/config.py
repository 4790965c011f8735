"""
Run configuration and logging setup.

AnimationConfig is validated eagerly: an invalid configuration is
rejected before the terminal is touched and never reaches the frame
loop.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
import logging
import math
import threading

from termsweep.sampling.palette import PALETTES, Color

DEFAULT_CHARS = ".:+#"
DEFAULT_PALETTE = "rainbow"


class ConfigError(ValueError):
    """Raised for configuration that can never produce a valid run."""


@dataclass
class AnimationConfig:
    """Configuration for one run."""

    chars: str = DEFAULT_CHARS  # Glyphs, from the start of the band to its end
    palette: tuple[Color, ...] = field(default_factory=lambda: PALETTES[DEFAULT_PALETTE])
    fps: float = 30.0  # Frames per second
    duration: float = 1.0  # Seconds

    def __post_init__(self):
        if not self.chars:
            raise ConfigError("Glyph set must not be empty")
        for char in self.chars:
            if char < " " or char == "\x7f":
                raise ConfigError(f"Glyph set contains control character {char!r}")
        if not self.palette:
            raise ConfigError("Palette must not be empty")
        if not (math.isfinite(self.fps) and self.fps > 0):
            raise ConfigError(f"FPS must be positive and finite, got {self.fps}")
        if self.fps * threading.TIMEOUT_MAX < 1.0:
            raise ConfigError(f"FPS too low, frame delay exceeds {threading.TIMEOUT_MAX}s")
        if not (math.isfinite(self.duration) and self.duration > 0):
            raise ConfigError(f"Duration must be positive and finite, got {self.duration}")
        if not math.isfinite(self.duration * self.fps):
            raise ConfigError("Too many frames for this duration and FPS")

    @property
    def delay(self) -> float:
        """Seconds per frame."""
        return 1.0 / self.fps


def setup_logging(level: int = logging.WARNING, log_file: str | Path | None = None):
    """
    Configure the root logger.

    Logging to stderr while the animation owns the terminal would tear
    the picture, so pass a log_file for anything below WARNING.
    """
    fmt = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    if log_file is not None:
        logging.basicConfig(level=level, format=fmt, filename=str(log_file), force=True)
    else:
        logging.basicConfig(level=level, format=fmt, force=True)
