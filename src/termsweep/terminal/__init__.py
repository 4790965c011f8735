"""
Terminal output.

- commands: immutable ANSI commands (cursor, color, text, clear)
- Terminal / AnsiTerminal: queue + flush over a text stream
- Surface: the per-frame buffer that emits only what changed
"""

from termsweep.terminal.commands import (
    ClearScreen,
    ClearType,
    Command,
    Hide,
    MoveTo,
    Print,
    SetForegroundColor,
    Show,
)
from termsweep.terminal.terminal import AnsiTerminal, Terminal
from termsweep.terminal.surface import BLANK, Cell, Surface

__all__ = [
    "ClearScreen",
    "ClearType",
    "Command",
    "Hide",
    "MoveTo",
    "Print",
    "SetForegroundColor",
    "Show",
    "AnsiTerminal",
    "Terminal",
    "BLANK",
    "Cell",
    "Surface",
]
