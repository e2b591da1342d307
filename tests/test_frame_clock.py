"""Tests for the per-frame driver."""

import pytest

from radialclock.timer.engine import ClockEngine, ClockState
from radialclock.timer.frame_clock import FrameClock, FRAME_INTERVAL_MS

from helpers import FakeAudio, FakeDisplay, FakeInputField, SignalCollector


class FakeClock:
    def __init__(self, now: float = 100.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.mark.usefixtures("qapp")
class TestFrameClock:

    def test_start_stop(self):
        fc = FrameClock(clock=FakeClock())
        assert fc.is_active is False
        fc.start()
        assert fc.is_active is True
        fc.stop()
        assert fc.is_active is False

    def test_default_interval(self):
        fc = FrameClock()
        assert fc._qt_timer.interval() == FRAME_INTERVAL_MS

    def test_emits_measured_delta(self):
        clock = FakeClock(10.0)
        fc = FrameClock(clock=clock)
        c = SignalCollector()
        fc.frame.connect(c)

        fc.start()
        clock.now = 10.25
        fc._on_timeout()
        clock.now = 10.30
        fc._on_timeout()

        assert c[0] == pytest.approx(0.25)
        assert c[1] == pytest.approx(0.05)
        fc.stop()

    def test_clock_going_backwards_yields_zero(self):
        clock = FakeClock(10.0)
        fc = FrameClock(clock=clock)
        c = SignalCollector()
        fc.frame.connect(c)
        fc.start()
        clock.now = 9.0
        fc._on_timeout()
        assert c.last == 0.0
        fc.stop()

    def test_timeout_before_start_yields_zero(self):
        fc = FrameClock(clock=FakeClock())
        c = SignalCollector()
        fc.frame.connect(c)
        fc._on_timeout()
        assert c.last == 0.0

    def test_drives_engine(self):
        clock = FakeClock(0.0)
        fc = FrameClock(clock=clock)
        eng = ClockEngine(FakeDisplay(), FakeInputField(), FakeAudio(), duration=2)
        fc.frame.connect(eng.tick)

        eng.advance()
        fc.start()
        for i in range(1, 5):
            clock.now = i * 0.5
            fc._on_timeout()
        fc.stop()

        assert eng.state == ClockState.ENDED
