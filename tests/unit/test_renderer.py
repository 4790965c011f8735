"""Unit tests for Renderer."""

from conftest import ConstantFactory, FunctionFactory, RecordingTerminal
from termsweep.core import Vector
from termsweep.engine import Renderer
from termsweep.sampling import Color, SamplerFactory, create_converter
from termsweep.terminal import BLANK, Cell, MoveTo, Print, SetForegroundColor, Surface

CHAR_LEVELS = {
    Vector(0, 0): 1.0,  # Keep
    Vector(1, 0): -0.5,  # Clear
    Vector(0, 2): 0.0,  # Draw "A"
    Vector(1, 2): 0.5,  # Draw "X"
}
COLOR_LEVELS = {
    Vector(0, 2): 0.0,  # Red
    Vector(1, 2): 0.5,  # Blue
}


def make_renderer(terminal, char, color):
    surface = Surface(terminal)
    converter = create_converter("AX", [Color.RED, Color.BLUE])
    return Renderer(surface, SamplerFactory(char=char, color=color), converter), surface


class TestRender:
    """Tests for Renderer.render."""

    def test_config_from_terminal_size(self):
        terminal = RecordingTerminal(width=7, height=3)
        char = ConstantFactory(1.0)
        color = ConstantFactory(0.0)
        renderer, _ = make_renderer(terminal, char, color)

        renderer.render(0.25)

        assert char.configs[0].size == Vector(7, 6)
        assert char.configs[0].step == 0.25
        assert color.configs == char.configs

    def test_cells(self):
        terminal = RecordingTerminal(width=2, height=2)
        color_positions = []

        def color_level(pos):
            color_positions.append(pos)
            return COLOR_LEVELS[pos]

        renderer, surface = make_renderer(
            terminal, FunctionFactory(CHAR_LEVELS.__getitem__), FunctionFactory(color_level)
        )
        renderer.render(0.0)

        assert surface.grid[0, 0] is None
        assert surface.grid[1, 0] == BLANK
        assert surface.grid[0, 1] == Cell("A", Color.RED)
        assert surface.grid[1, 1] == Cell("X", Color.BLUE)
        # Color is only sampled where a glyph is drawn
        assert color_positions == [Vector(0, 2), Vector(1, 2)]

    def test_render_does_not_emit(self):
        terminal = RecordingTerminal(width=3, height=2)
        renderer, _ = make_renderer(terminal, ConstantFactory(0.5), ConstantFactory(0.0))
        renderer.render(0.5)
        assert terminal.flushed == []

    def test_all_keep(self):
        terminal = RecordingTerminal(width=3, height=2)
        renderer, surface = make_renderer(terminal, ConstantFactory(2.0), ConstantFactory(0.0))
        renderer.render(0.8)
        assert all(surface.grid[x, y] is None for x in range(3) for y in range(2))

    def test_follows_resize(self):
        terminal = RecordingTerminal(width=3, height=2)
        renderer, surface = make_renderer(terminal, ConstantFactory(0.0), ConstantFactory(0.0))
        renderer.render(0.0)
        terminal.width, terminal.height = 5, 4
        renderer.render(0.1)
        assert surface.grid.shape == (5, 4)


class TestPresent:
    def test_present_emits_frame(self):
        terminal = RecordingTerminal(width=2, height=2)
        renderer, _ = make_renderer(
            terminal,
            FunctionFactory(CHAR_LEVELS.__getitem__),
            FunctionFactory(COLOR_LEVELS.__getitem__),
        )
        renderer.render(0.0)
        renderer.present()

        assert terminal.flushed[-1][1:] == [
            MoveTo(1, 0),
            SetForegroundColor(Color.RESET),
            Print(" "),
            MoveTo(0, 1),
            SetForegroundColor(Color.RED),
            Print("A"),
            SetForegroundColor(Color.BLUE),
            Print("X"),
        ]
