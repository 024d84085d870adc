from __future__ import annotations

import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterator, Optional


class EventKind(Enum):
    TICK = "tick"
    INPUT = "input"


@dataclass(frozen=True)
class Event:
    kind: EventKind
    key: Optional[int] = None


def receiver(screen, tick_ms: int, clock: Callable[[], float] = time.monotonic) -> Iterator[Event]:
    """Merge timer ticks and key presses into one stream.

    ``screen`` needs curses-style ``timeout(ms)`` and ``getch()``; ``getch``
    returns -1 when nothing was pressed before the timeout.
    """
    if tick_ms <= 0:
        raise ValueError(f"tick interval must be positive, got {tick_ms} ms")
    period = tick_ms / 1000.0
    next_tick = clock() + period
    while True:
        remaining = next_tick - clock()
        if remaining <= 0:
            next_tick += period
            yield Event(EventKind.TICK)
            continue
        screen.timeout(max(1, int(remaining * 1000)))
        key = screen.getch()
        if key != -1:
            yield Event(EventKind.INPUT, key)
