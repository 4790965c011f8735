"""Unit tests for Runner."""

import pytest

from conftest import ScriptedClock
from termsweep.engine import CancellationToken, Runner, Timer


class RecordingRenderer:
    def __init__(self, events, on_render=None, fail_on_present=False):
        self.events = events
        self.on_render = on_render
        self.fail_on_present = fail_on_present

    def render(self, step):
        self.events.append(("render", step))
        if self.on_render is not None:
            self.on_render(step)

    def present(self):
        self.events.append(("present",))
        if self.fail_on_present:
            raise OSError("terminal gone")


class RecordingSurface:
    def __init__(self, events):
        self.events = events

    def close(self):
        self.events.append(("close",))


class RecordingClock(ScriptedClock):
    def __init__(self, events):
        super().__init__()
        self.events = events

    def sleep(self, seconds):
        self.events.append(("sleep", seconds))
        super().sleep(seconds)


def make_runner(events, duration, delay, **renderer_kwargs):
    clock = RecordingClock(events)
    return Runner(
        duration=duration,
        timer=Timer(delay=delay, clock=clock),
        renderer=RecordingRenderer(events, **renderer_kwargs),
        surface=RecordingSurface(events),
    )


class TestRunner:
    """Tests for the frame loop."""

    def test_steps_and_order(self):
        events = []
        runner = make_runner(events, duration=4.0, delay=2.0)

        stats = runner.run()

        assert events == [
            ("render", 0.0), ("present",), ("sleep", 2.0),
            ("render", 0.5), ("present",), ("sleep", 2.0),
            ("render", 1.0), ("present",), ("sleep", 2.0),
            ("close",),
        ]
        assert stats == {"n_ticks": 2, "frames": 3, "cancelled": False}

    def test_ticks(self):
        assert make_runner([], duration=1.0, delay=1 / 30).ticks == 30
        assert make_runner([], duration=0.3, delay=0.1).ticks == 3
        assert make_runner([], duration=4.5, delay=2.0).ticks == 2

    def test_short_duration_renders_first_and_last_frame(self):
        events = []
        runner = make_runner(events, duration=0.01, delay=1.0)
        runner.run()
        steps = [e[1] for e in events if e[0] == "render"]
        assert steps == [0.0, 1.0]

    def test_steps_non_decreasing(self):
        events = []
        make_runner(events, duration=1.0, delay=0.1).run()
        steps = [e[1] for e in events if e[0] == "render"]
        assert len(steps) == 11
        assert steps == sorted(steps)
        assert steps[0] == 0.0 and steps[-1] == 1.0

    def test_cancel_stops_before_next_render(self):
        events = []
        token = CancellationToken()
        runner = make_runner(events, duration=10.0, delay=1.0, on_render=lambda step: token.cancel())
        runner.token = token

        stats = runner.run()

        renders = [e for e in events if e[0] == "render"]
        assert renders == [("render", 0.0)]
        assert events[-1] == ("close",)
        assert events.count(("close",)) == 1
        assert stats["cancelled"] is True

    def test_cancelled_before_start(self):
        events = []
        runner = make_runner(events, duration=1.0, delay=0.5)
        runner.token.cancel()
        stats = runner.run()
        assert events == [("close",)]
        assert stats["frames"] == 0

    def test_error_propagates_after_teardown(self):
        events = []
        runner = make_runner(events, duration=4.0, delay=2.0, fail_on_present=True)

        with pytest.raises(OSError):
            runner.run()

        assert events == [("render", 0.0), ("present",), ("close",)]

    def test_tick_error_still_closes_surface(self):
        events = []
        runner = make_runner(events, duration=1.0, delay=0.0)

        with pytest.raises(ZeroDivisionError):
            runner.run()

        assert events == [("close",)]


class TestCancellationToken:
    def test_initially_not_cancelled(self):
        assert CancellationToken().cancelled is False

    def test_cancel(self):
        token = CancellationToken()
        token.cancel()
        token.cancel()
        assert token.cancelled is True
