from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from minigames.app.scheduler import Scheduler
from minigames.domain.exceptions import LevelCompleted, PlayerDied
from minigames.domain.game_state import Field, GameState, GoalRegion, Tuning, initial_state
from minigames.domain.input_state import InputState
from minigames.domain.world import World

logger = logging.getLogger(__name__)

DEATH_OVERLAY_DELAY_MS = 300


class PlatformerSession:
    """
    Owns the running platformer state between the loop and the view.

    The view reads ``state`` to draw. Terminal outcomes reach the view only
    through ``on_died`` (delayed, so the fall stays visible) and
    ``on_level_complete`` (immediate).
    """

    def __init__(
        self,
        *,
        field: Field,
        tuning: Tuning | None = None,
        scheduler: Scheduler,
        on_died: Callable[[], None],
        on_level_complete: Callable[[], None],
        death_delay_ms: int = DEATH_OVERLAY_DELAY_MS,
        world: World | None = None,
    ) -> None:
        self._field = field
        self._tuning = tuning or Tuning()
        self._scheduler = scheduler
        self._on_died = on_died
        self._on_level_complete = on_level_complete
        self._death_delay_ms = death_delay_ms
        self.world = world or World()

        self.state: GameState = initial_state(self._field, self._tuning)
        self._pending_overlay: Any = None

    @property
    def finished(self) -> bool:
        return self.state.actor.dead or self.state.completed

    def tick(self, inp: InputState, goal: GoalRegion) -> None:
        try:
            self.state = self.world.step(self.state, inp, goal)
        except PlayerDied as e:
            self.state = e.state
            logger.info("player died at x=%.1f", e.state.actor.x)
            self._pending_overlay = self._scheduler.call_later(self._death_delay_ms, self._fire_died)
        except LevelCompleted as e:
            self.state = e.state
            logger.info("level completed at x=%.1f", e.state.actor.x)
            self._on_level_complete()

    def run_ticks(self, count: int, sample: Callable[[], InputState], goal: GoalRegion) -> int:
        """
        Run up to ``count`` ticks, sampling input once per tick so an edge is
        only consumed by a tick that applies it. Returns how many ran.
        """
        ran = 0
        while ran < count and not self.finished:
            self.tick(sample(), goal)
            ran += 1
        return ran

    def jump(self) -> None:
        self.state = self.world.jump(self.state)

    def reset(self) -> None:
        if self._pending_overlay is not None:
            self._scheduler.cancel(self._pending_overlay)
            self._pending_overlay = None
        self.state = initial_state(self._field, self._tuning)
        logger.info("platformer reset")

    def _fire_died(self) -> None:
        self._pending_overlay = None
        self._on_died()
