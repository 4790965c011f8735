"""
Surface: per-frame cell buffer and diffing emitter.

Each frame the buffer starts out as Keep everywhere. The renderer only
touches cells that change; present() then emits the smallest command
stream it can:
- a cursor move only after the start of a row or after skipping a Keep cell,
  and only when the cursor is not already there (the starting position is
  read from the terminal on construction)
- a color change only when the color differs from the last one emitted
- the glyph itself, always

The Surface owns the terminal for its whole lifetime. Construction hides
the cursor; close() restores the terminal exactly once, whatever the
reason the run ended.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING
import logging

from termsweep.core.grid import Grid
from termsweep.sampling.palette import Color
from termsweep.terminal.commands import (
    ClearScreen,
    ClearType,
    Hide,
    MoveTo,
    Print,
    SetForegroundColor,
    Show,
)

if TYPE_CHECKING:
    from termsweep.terminal.terminal import Terminal

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Cell:
    """A cell to (re)draw this frame. Kept cells are stored as None."""

    char: str
    color: Color


BLANK = Cell(" ", Color.RESET)


def _check_printable(char: str):
    if len(char) != 1 or char < " " or char == "\x7f":
        raise ValueError(f"Cannot print special character {char!r}")


class Surface:
    """Buffers one frame of cells and writes the difference to a Terminal."""

    def __init__(self, terminal: "Terminal"):
        self.terminal = terminal
        self.grid = Grid(0, 0)
        self._closed = False
        self._cursor = self._query_cursor()
        self.terminal.queue(Hide())

    def _query_cursor(self) -> tuple[int, int] | None:
        try:
            return self.terminal.position()
        except OSError:
            logger.info("Cursor position unavailable, the first move is always emitted")
            return None

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    @property
    def closed(self) -> bool:
        return self._closed

    def size(self) -> tuple[int, int]:
        """Current terminal size as (columns, rows)."""
        return self.terminal.size()

    def begin_frame(self, width: int, height: int):
        """Start a new frame: every cell is Keep. Reallocates on resize."""
        if self.grid.shape != (width, height):
            self.grid = Grid(width, height)
        else:
            self.grid.reset()

    def draw(self, x: int, y: int, char: str, color: Color):
        """Overwrite the cell with a glyph in a color."""
        _check_printable(char)
        self.grid[x, y] = Cell(char, color)

    def clear(self, x: int, y: int):
        """Blank the cell (a space in the default color)."""
        self.grid[x, y] = BLANK

    def present(self):
        """Emit the frame's commands and flush them."""
        last_color = None

        for y, row in self.grid.iter_rows():
            needs_move = True

            for x, cell in enumerate(row):
                if cell is None:
                    needs_move = True
                    continue

                if needs_move:
                    needs_move = False
                    self._move_to(x, y)
                if cell.color != last_color:
                    last_color = cell.color
                    self.terminal.queue(SetForegroundColor(cell.color))
                self.terminal.queue(Print(cell.char))
                self._cursor = (x + 1, y)

        self.terminal.flush()

    def _move_to(self, x: int, y: int):
        if self._cursor != (x, y):
            self._cursor = (x, y)
            self.terminal.queue(MoveTo(x, y))

    def close(self):
        """
        Restore the terminal. Safe to call more than once.

        Every restoration step is attempted even if an earlier one fails.
        Failures are logged and never raised.
        """
        if self._closed:
            return
        self._closed = True

        steps = [
            lambda: self.terminal.queue(Show()),
            lambda: self.terminal.queue(SetForegroundColor(Color.RESET)),
            lambda: self.terminal.queue(MoveTo(0, 0)),
            lambda: self.terminal.queue(ClearScreen(ClearType.PURGE)),
            self.terminal.flush,
        ]
        for step in steps:
            try:
                step()
            except Exception:
                logger.exception("Failed to restore terminal")

    def __enter__(self) -> Surface:
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
