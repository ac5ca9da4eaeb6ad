from __future__ import annotations

import math


class TickClock:
    """
    Fixed-cadence tick deadlines. Ticks are counted against an absolute
    schedule so timer jitter doesn't make the game run slow or fast.
    """

    def __init__(self, *, hz: int = 60, max_catch_up: int = 5) -> None:
        self.period = 1.0 / max(1, hz)
        self._max_catch_up = max(1, max_catch_up)
        self._next = 0.0

    def start(self, now: float) -> None:
        self._next = now + self.period

    def due(self, now: float) -> int:
        """How many ticks are owed at ``now``; advances the schedule past them."""
        n = 0
        while now >= self._next and n < self._max_catch_up:
            self._next += self.period
            n += 1
        if now >= self._next:
            # Too far behind (debugger, minimized window): drop the backlog.
            self._next = now + self.period
        return n

    def delay_ms(self, now: float) -> int:
        return max(1, math.ceil((self._next - now) * 1000.0))
