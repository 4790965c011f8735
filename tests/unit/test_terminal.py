"""Unit tests for ANSI commands and AnsiTerminal."""

import io
import os

import pytest

from termsweep.sampling import Color
from termsweep.terminal import (
    AnsiTerminal,
    ClearScreen,
    Command,
    ClearType,
    Hide,
    MoveTo,
    Print,
    SetForegroundColor,
    Show,
)
from termsweep.terminal import terminal as terminal_module


class TestCommands:
    def test_cursor_visibility(self):
        assert Hide().ansi() == "\x1b[?25l"
        assert Show().ansi() == "\x1b[?25h"

    def test_move_to_is_one_based(self):
        assert MoveTo(0, 0).ansi() == "\x1b[1;1H"
        assert MoveTo(4, 2).ansi() == "\x1b[3;5H"

    def test_foreground(self):
        assert SetForegroundColor(Color.GREEN).ansi() == "\x1b[92m"
        assert SetForegroundColor(Color.RESET).ansi() == "\x1b[39m"

    def test_print(self):
        assert Print("#").ansi() == "#"

    def test_clear(self):
        assert ClearScreen().ansi() == "\x1b[2J"
        assert ClearScreen(ClearType.PURGE).ansi() == "\x1b[2J\x1b[3J"

    def test_command_is_abstract(self):
        with pytest.raises(TypeError):
            Command()

    def test_commands_compare_by_value(self):
        assert MoveTo(1, 2) == MoveTo(1, 2)
        assert MoveTo(1, 2) != MoveTo(2, 1)


class BrokenStream:
    def write(self, data):
        raise OSError("broken pipe")

    def flush(self):
        pass


class FakeInput:
    def fileno(self):
        return 99


class TestAnsiTerminal:
    def test_queue_does_not_write(self):
        out = io.StringIO()
        term = AnsiTerminal(out)
        term.queue(Print("a"))
        assert out.getvalue() == ""

    def test_flush_writes_in_order(self):
        out = io.StringIO()
        term = AnsiTerminal(out)
        term.queue(MoveTo(1, 0))
        term.queue(SetForegroundColor(Color.RED))
        term.queue(Print("x"))
        term.flush()
        assert out.getvalue() == "\x1b[1;2H\x1b[91mx"

    def test_flush_clears_queue(self):
        out = io.StringIO()
        term = AnsiTerminal(out)
        term.queue(Print("x"))
        term.flush()
        term.flush()
        assert out.getvalue() == "x"

    def test_write_error_propagates(self):
        term = AnsiTerminal(BrokenStream())
        term.queue(Print("x"))
        with pytest.raises(OSError):
            term.flush()

    def test_size(self, monkeypatch):
        monkeypatch.setattr(
            terminal_module.shutil, "get_terminal_size", lambda: os.terminal_size((120, 40))
        )
        assert AnsiTerminal(io.StringIO()).size() == (120, 40)

    def _patch_tty(self, monkeypatch, reply: bytes, ready: bool = True):
        data = iter(reply)
        monkeypatch.setattr(terminal_module.termios, "tcgetattr", lambda fd: ["saved"])
        monkeypatch.setattr(terminal_module.termios, "tcsetattr", lambda fd, when, attrs: None)
        monkeypatch.setattr(terminal_module.tty, "setcbreak", lambda fd: None)
        monkeypatch.setattr(
            terminal_module.select, "select",
            lambda r, w, x, timeout: (r if ready else [], [], []),
        )
        monkeypatch.setattr(terminal_module.os, "read", lambda fd, n: bytes([next(data)]))

    def test_position(self, monkeypatch):
        self._patch_tty(monkeypatch, b"\x1b[5;12R")
        out = io.StringIO()
        term = AnsiTerminal(out, input_stream=FakeInput())
        assert term.position() == (11, 4)
        assert out.getvalue() == "\x1b[6n"

    def test_position_not_a_terminal(self, monkeypatch):
        def not_a_tty(fd):
            raise terminal_module.termios.error(25, "Inappropriate ioctl for device")

        monkeypatch.setattr(terminal_module.termios, "tcgetattr", not_a_tty)
        term = AnsiTerminal(io.StringIO(), input_stream=FakeInput())
        with pytest.raises(OSError):
            term.position()

    def test_position_timeout(self, monkeypatch):
        self._patch_tty(monkeypatch, b"", ready=False)
        term = AnsiTerminal(io.StringIO(), input_stream=FakeInput())
        with pytest.raises(OSError):
            term.position()

    def test_position_malformed(self, monkeypatch):
        self._patch_tty(monkeypatch, b"garbageR")
        term = AnsiTerminal(io.StringIO(), input_stream=FakeInput())
        with pytest.raises(OSError):
            term.position()
