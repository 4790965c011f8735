"""
Command line front end.

Parses options, picks the animation, color field and palette (randomly
among the user's choices, or among all of them), then plays the
transition on the current terminal.
"""

from __future__ import annotations
from contextlib import contextmanager
from typing import Sequence
import argparse
import logging
import random
import signal

from termsweep import __version__
from termsweep.choose import Chooser
from termsweep.config import DEFAULT_CHARS, AnimationConfig, setup_logging
from termsweep.engine import CancellationToken, Clock, Renderer, Runner, SystemClock, Timer
from termsweep.patterns import SHAPES, build_pattern
from termsweep.sampling import PALETTES, SamplerFactory, create_converter, get_palette
from termsweep.terminal import AnsiTerminal, Surface, Terminal

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="termsweep",
        description="Play a full-screen terminal transition.",
    )
    shapes = sorted(SHAPES)
    parser.add_argument("-a", "--animation", action="append", default=[], choices=shapes,
                        help="shape of the glyph field (repeat to pick randomly)")
    parser.add_argument("-c", "--color", action="append", default=[], choices=shapes,
                        help="shape of the color field (repeat to pick randomly)")
    parser.add_argument("-p", "--palette", action="append", default=[], choices=sorted(PALETTES),
                        help="color palette (repeat to pick randomly)")
    parser.add_argument("--chars", default=DEFAULT_CHARS,
                        help="glyphs from the leading to the trailing edge (default: %(default)r)")
    parser.add_argument("--fps", type=float, default=30.0, help="frames per second")
    parser.add_argument("-d", "--duration", type=float, default=1.0, help="seconds")
    parser.add_argument("--invert", action="store_true", help="run the animation backwards")
    parser.add_argument("--swap", action="store_true", help="rotate the animation by 90 degrees")
    parser.add_argument("--segments", type=int, default=None,
                        help="repeat the glyph band n times")
    parser.add_argument("--slice", type=int, default=None, dest="slice_scale",
                        help="only sweep the last 1/n of the field")
    parser.add_argument("--color-segments", type=int, default=3,
                        help="repeat the palette n times across the color field")
    parser.add_argument("--seed", type=int, default=None, help="random seed for the choices")
    parser.add_argument("--preview", metavar="PATH", default=None,
                        help="save a plot of the fields instead of playing")
    parser.add_argument("--log-file", default=None, help="write logs to this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug output")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def build_sampler(args: argparse.Namespace, chooser: Chooser) -> SamplerFactory:
    """Build the glyph and color pattern trees from parsed arguments."""
    shapes = sorted(SHAPES)
    char_shape = chooser.choose(args.animation, shapes)
    color_shape = chooser.choose(args.color, shapes)
    logger.debug("Glyph field: %s, color field: %s", char_shape, color_shape)

    char = build_pattern(
        char_shape,
        invert=args.invert,
        swap=args.swap,
        segments=args.segments,
        slice_scale=args.slice_scale,
    )
    color = build_pattern(color_shape, segments=args.color_segments)
    return SamplerFactory(char=char, color=color)


def build_config(args: argparse.Namespace, chooser: Chooser) -> AnimationConfig:
    """Build the run configuration. Raises ConfigError when invalid."""
    palette = chooser.choose(args.palette, sorted(PALETTES))
    logger.debug("Palette: %s", palette)
    return AnimationConfig(
        chars=args.chars,
        palette=get_palette(palette),
        fps=args.fps,
        duration=args.duration,
    )


def play(
    config: AnimationConfig,
    sampler: SamplerFactory,
    terminal: Terminal,
    clock: Clock | None = None,
    token: CancellationToken | None = None,
) -> dict:
    """Play one transition on a terminal. The terminal is always restored."""
    with Surface(terminal) as surface:
        renderer = Renderer(surface, sampler, create_converter(config.chars, config.palette))
        timer = Timer(config.delay, clock if clock is not None else SystemClock())
        runner = Runner(
            duration=config.duration,
            timer=timer,
            renderer=renderer,
            surface=surface,
            token=token if token is not None else CancellationToken(),
        )
        return runner.run()


@contextmanager
def cancel_on_signals(token: CancellationToken, signals=(signal.SIGINT, signal.SIGTERM)):
    """Route the given signals to token.cancel() while the block runs."""

    def handler(signum, frame):
        logger.info("Received signal %d", signum)
        token.cancel()

    previous = {sig: signal.signal(sig, handler) for sig in signals}
    try:
        yield token
    finally:
        for sig, old in previous.items():
            signal.signal(sig, old)


def main(argv: Sequence[str] | None = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.WARNING
    setup_logging(level=level, log_file=args.log_file)

    chooser = Chooser(random.Random(args.seed))
    try:
        config = build_config(args, chooser)
        sampler = build_sampler(args, chooser)
    except ValueError as e:
        parser.error(str(e))

    if args.preview is not None:
        from termsweep.viz.fields import plot_steps, save_figure

        fig = plot_steps(sampler.char, title="Glyph field")
        save_figure(fig, args.preview)
        return 0

    token = CancellationToken()
    with cancel_on_signals(token):
        stats = play(config, sampler, AnsiTerminal(), token=token)
    logger.debug("Stats: %s", stats)
    return 0
