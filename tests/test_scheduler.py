import pytest

from snakepilot.scheduler import TICK_EVENT, TickScheduler, interval_for
from snakepilot.state import InputMode


class FakeTimer:
    def __init__(self):
        self.calls = []

    def __call__(self, event, millis):
        self.calls.append((event, millis))


@pytest.mark.parametrize(
    "mode, expected",
    [(InputMode.NORMAL, 150), (InputMode.ACCELERATED, 70), (InputMode.POINTER, 75)],
)
def test_intervals(mode, expected):
    assert interval_for(mode) == expected


def test_rearm_replaces_interval():
    timer = FakeTimer()
    scheduler = TickScheduler(set_timer=timer)
    scheduler.arm(InputMode.NORMAL)
    scheduler.arm(InputMode.POINTER)
    assert timer.calls == [(TICK_EVENT, 150), (TICK_EVENT, 75)]
    assert scheduler.interval == 75
    assert scheduler.interval is not None


def test_cancel_stops_timer_once():
    timer = FakeTimer()
    scheduler = TickScheduler(set_timer=timer)
    scheduler.arm(InputMode.ACCELERATED)
    scheduler.cancel()
    scheduler.cancel()
    assert timer.calls == [(TICK_EVENT, 70), (TICK_EVENT, 0)]
    assert scheduler.interval is None
