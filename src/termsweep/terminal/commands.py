"""
Terminal commands and their ANSI/VT escape sequences.

Commands are small immutable values. A Terminal queues them and writes
their escape sequences on flush.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from termsweep.sampling.palette import Color

CSI = "\x1b["


class Command(ABC):
    """Base class for anything a Terminal can queue."""

    @abstractmethod
    def ansi(self) -> str:
        """Escape sequence (or text) written for this command."""
        ...


@dataclass(frozen=True)
class Hide(Command):
    """Hide the cursor."""

    def ansi(self) -> str:
        return f"{CSI}?25l"


@dataclass(frozen=True)
class Show(Command):
    """Show the cursor."""

    def ansi(self) -> str:
        return f"{CSI}?25h"


@dataclass(frozen=True)
class MoveTo(Command):
    """Move the cursor to a zero-based (column, row)."""

    x: int
    y: int

    def ansi(self) -> str:
        return f"{CSI}{self.y + 1};{self.x + 1}H"


@dataclass(frozen=True)
class SetForegroundColor(Command):
    color: Color

    def ansi(self) -> str:
        return f"{CSI}{self.color.sgr}m"


@dataclass(frozen=True)
class Print(Command):
    """Print text at the cursor (advances the cursor)."""

    text: str

    def ansi(self) -> str:
        return self.text


class ClearType(Enum):
    ALL = f"{CSI}2J"  # Visible screen
    PURGE = f"{CSI}2J{CSI}3J"  # Visible screen and scrollback


@dataclass(frozen=True)
class ClearScreen(Command):
    kind: ClearType = ClearType.ALL

    def ansi(self) -> str:
        return self.kind.value
