"""Tests for Timer."""

import pytest

from termledger.time import Timer


class FakeClock:
    def __init__(self, now: float = 100.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.mark.unit
class TestTimer:
    """Tests for Timer."""

    def test_elapsed(self):
        clock = FakeClock()
        timer = Timer(clock=clock)
        clock.now += 2.5
        assert timer.elapsed() == 2.5

    def test_str(self):
        clock = FakeClock()
        timer = Timer(clock=clock)
        clock.now += 75
        assert str(timer) == "1m15s"

    def test_decimals(self):
        clock = FakeClock()
        timer = Timer(decimals=1, clock=clock)
        clock.now += 4.5
        assert str(timer) == "4.5s"

    def test_reset(self):
        clock = FakeClock()
        timer = Timer(clock=clock)
        clock.now += 30
        timer.reset()
        clock.now += 0.5
        assert str(timer) == "500ms"

    def test_default_clock_starts_near_zero(self):
        assert Timer().elapsed() < 60
