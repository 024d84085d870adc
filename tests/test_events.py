from itertools import islice

import pytest

from termtris.visualization.events import Event, EventKind, receiver


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


class FakeScreen:
    """Replays key codes; a -1 means the timeout ran out."""

    def __init__(self, clock, keys):
        self.clock = clock
        self.keys = list(keys)
        self.timeouts = []

    def timeout(self, ms):
        self.timeouts.append(ms)

    def getch(self):
        key = self.keys.pop(0) if self.keys else -1
        if key == -1:
            self.clock.now += self.timeouts[-1] / 1000.0 + 0.001
        return key


def test_keys_arrive_before_tick():
    clock = FakeClock()
    screen = FakeScreen(clock, [ord("a"), ord("d")])
    events = list(islice(receiver(screen, 100, clock=clock), 3))
    assert events == [
        Event(EventKind.INPUT, ord("a")),
        Event(EventKind.INPUT, ord("d")),
        Event(EventKind.TICK),
    ]
    assert screen.timeouts[0] == 100


def test_ticks_repeat_without_input():
    clock = FakeClock()
    screen = FakeScreen(clock, [])
    events = list(islice(receiver(screen, 50, clock=clock), 3))
    assert [e.kind for e in events] == [EventKind.TICK] * 3


@pytest.mark.parametrize("tick_ms", [0, -100])
def test_non_positive_interval_is_rejected(tick_ms):
    clock = FakeClock()
    screen = FakeScreen(clock, [ord("q")])
    with pytest.raises(ValueError):
        next(receiver(screen, tick_ms, clock=clock))
    assert screen.timeouts == []
