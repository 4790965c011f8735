"""
Terminal: the capability the Surface draws through.

The Surface only needs four operations, captured by the Terminal
protocol. AnsiTerminal implements them on top of a text stream
(normally sys.stdout) by writing ANSI escape sequences.
"""

from __future__ import annotations
from typing import Protocol, TextIO
import os
import re
import select
import shutil
import sys
import termios
import tty

from termsweep.terminal.commands import Command

_POSITION_REPORT = re.compile(r"\x1b\[(\d+);(\d+)R")


class Terminal(Protocol):
    """Protocol for terminal backends."""

    def queue(self, command: Command) -> None:
        """Queue a command for the next flush."""
        ...

    def flush(self) -> None:
        """Write all queued commands."""
        ...

    def size(self) -> tuple[int, int]:
        """Current size as (columns, rows)."""
        ...

    def position(self) -> tuple[int, int]:
        """Current zero-based cursor position as (column, row)."""
        ...


class AnsiTerminal:
    """
    Terminal backed by a text stream.

    Commands are buffered in memory and written with a single write()
    per flush. I/O errors (OSError) propagate to the caller.
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        input_stream: TextIO | None = None,
        position_timeout: float = 1.0,
    ):
        self.stream = stream if stream is not None else sys.stdout
        self.input_stream = input_stream if input_stream is not None else sys.stdin
        self.position_timeout = position_timeout
        self._pending: list[str] = []

    def queue(self, command: Command) -> None:
        self._pending.append(command.ansi())

    def flush(self) -> None:
        data = "".join(self._pending)
        self._pending.clear()
        self.stream.write(data)
        self.stream.flush()

    def size(self) -> tuple[int, int]:
        columns, lines = shutil.get_terminal_size()
        return columns, lines

    def position(self) -> tuple[int, int]:
        """
        Ask the terminal for the cursor position (DSR, ESC[6n).

        Requires an interactive POSIX terminal on input_stream.

        Raises:
            OSError: if input_stream is not a terminal or does not answer
                within position_timeout
        """
        fd = self.input_stream.fileno()
        try:
            saved = termios.tcgetattr(fd)
        except termios.error as e:
            raise OSError(f"Input is not a terminal: {e}") from e
        response = ""
        try:
            tty.setcbreak(fd)
            self.stream.write("\x1b[6n")
            self.stream.flush()
            while not response.endswith("R"):
                ready, _, _ = select.select([fd], [], [], self.position_timeout)
                if not ready:
                    raise OSError("Terminal did not report cursor position")
                response += os.read(fd, 1).decode(errors="replace")
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, saved)

        match = _POSITION_REPORT.search(response)
        if match is None:
            raise OSError(f"Malformed cursor position report: {response!r}")
        row, col = int(match.group(1)), int(match.group(2))
        return col - 1, row - 1
