"""
Pytest configuration and shared fixtures.
"""

import matplotlib

matplotlib.use("Agg")

import pytest

from termsweep.core import Vector
from termsweep.patterns import Config, Pattern, PatternFactory


class RecordingTerminal:
    """Terminal that records queued commands and groups them per flush."""

    def __init__(self, width=10, height=4, position=None):
        self.width = width
        self.height = height
        # Cursor starts on the bottom row, like a shell prompt
        self._position = position if position is not None else (0, height - 1)
        self.pending = []
        self.flushed = []
        self.fail_on = None  # Command type, "flush" or "position" that raises OSError

    def queue(self, command):
        if isinstance(self.fail_on, type) and isinstance(command, self.fail_on):
            raise OSError("queue failed")
        self.pending.append(command)

    def flush(self):
        if self.fail_on == "flush":
            raise OSError("flush failed")
        self.flushed.append(self.pending)
        self.pending = []

    def size(self):
        return self.width, self.height

    def position(self):
        if self.fail_on == "position":
            raise OSError("no cursor report")
        return self._position

    @property
    def commands(self):
        """All flushed commands in order."""
        return [cmd for batch in self.flushed for cmd in batch]


class ScriptedClock:
    """Clock whose now() advances only by sleeping or by explicit calls."""

    def __init__(self, start=0.0):
        self.time = start
        self.sleeps = []

    def now(self):
        return self.time

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        self.time += seconds

    def advance(self, seconds):
        self.time += seconds


class ConstantPattern(Pattern):
    def __init__(self, level):
        self.level = level
        self.positions = []

    def sample(self, pos):
        self.positions.append(pos)
        return self.level


class ConstantFactory(PatternFactory):
    """Factory returning a fixed level and remembering every Config it saw."""

    def __init__(self, level):
        self.level = level
        self.configs = []

    def create(self, config):
        self.configs.append(config)
        return ConstantPattern(self.level)


class FunctionFactory(PatternFactory):
    """Factory wrapping a plain function of position."""

    def __init__(self, func):
        self.func = func
        self.configs = []

    def create(self, config):
        self.configs.append(config)
        func = self.func

        class _Pattern(Pattern):
            def sample(self, pos):
                return func(pos)

        return _Pattern()


@pytest.fixture
def terminal():
    """A 10x4 recording terminal."""
    return RecordingTerminal()


@pytest.fixture
def clock():
    return ScriptedClock()


@pytest.fixture
def config():
    """Frame config for an 80x24 terminal halfway through the animation."""
    return Config(size=Vector.from_terminal(80, 24), step=0.5)
