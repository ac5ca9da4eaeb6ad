from __future__ import annotations

import logging
import time
import tkinter as tk
from collections.abc import Callable

from minigames.app.tick_clock import TickClock

logger = logging.getLogger(__name__)


class TkScheduler:
    """Scheduler backed by ``Tk.after``."""

    def __init__(self, root: tk.Misc) -> None:
        self._root = root

    def call_later(self, delay_ms: int, fn: Callable[[], None]) -> str:
        return self._root.after(max(0, int(delay_ms)), fn)

    def cancel(self, handle: str) -> None:
        try:
            self._root.after_cancel(handle)
        except tk.TclError:
            logger.debug("after_cancel(%s) on a destroyed root", handle)


class GameLoop:
    """
    Runs ``tick_fn(n)`` with the number of fixed ticks that fell due since the
    last wake-up, then ``render_fn()`` once. Wake-ups with nothing due skip
    both, so input is only sampled by a tick that consumes it.
    """

    def __init__(
        self,
        *,
        root: tk.Tk,
        tick_fn: Callable[[int], None],
        render_fn: Callable[[], None],
        hz: int = 60,
    ) -> None:
        self._root = root
        self._tick_fn = tick_fn
        self._render_fn = render_fn
        self._clock = TickClock(hz=hz)
        self._after_id: str | None = None
        self._running = False

    def start(self) -> None:
        if self._running:
            return
        self._running = True
        self._clock.start(time.monotonic())
        self._wake_later()

    def stop(self) -> None:
        self._running = False
        if self._after_id is None:
            return
        after_id, self._after_id = self._after_id, None
        try:
            self._root.after_cancel(after_id)
        except tk.TclError:
            logger.debug("game loop stopped after root was destroyed")

    def _wake_later(self) -> None:
        self._after_id = self._root.after(self._clock.delay_ms(time.monotonic()), self._wake)

    def _wake(self) -> None:
        self._after_id = None
        due = self._clock.due(time.monotonic())
        if due:
            try:
                self._tick_fn(due)
                self._render_fn()
            except Exception:
                logger.exception("tick failed, game loop halted")
                self.stop()
                raise
        if self._running:
            self._wake_later()
