from __future__ import annotations

import logging
import tkinter as tk

from minigames.app.game_loop import GameLoop, TkScheduler
from minigames.app.platformer_session import PlatformerSession
from minigames.domain.game_state import Field, Tuning
from minigames.ui.input_mapper import TkInputMapper
from minigames.ui.platformer_view import PlatformerView

logger = logging.getLogger(__name__)

FIELD_WIDTH = 800
FIELD_HEIGHT = 450
ACTOR_SIZE = 32.0


class PlatformerApp:
    def __init__(self, tuning: Tuning | None = None) -> None:
        self.root = tk.Tk()
        self.root.title("Ground Split")

        self.input = TkInputMapper(self.root)

        self.view = PlatformerView(
            self.root,
            width=FIELD_WIDTH,
            height=FIELD_HEIGHT,
            on_try_again=self._restart,
            on_next_level=self._restart,  # same level again for now
        )

        field = Field(
            width=float(FIELD_WIDTH),
            height=float(FIELD_HEIGHT),
            actor_width=ACTOR_SIZE,
            actor_height=ACTOR_SIZE,
        )
        self.session = PlatformerSession(
            field=field,
            tuning=tuning,
            scheduler=TkScheduler(self.root),
            on_died=self.view.show_game_over,
            on_level_complete=self.view.show_level_complete,
        )

        self.loop = GameLoop(
            root=self.root,
            render_fn=self._render,
            tick_fn=self._tick,
            hz=60,
        )
        self.root.protocol("WM_DELETE_WINDOW", self._on_close)

    def run(self) -> None:
        logger.info("starting platformer")
        self.loop.start()
        self.root.mainloop()

    def _restart(self) -> None:
        self.view.hide_overlays()
        self.input.clear()
        self.session.reset()

    def _tick(self, due: int) -> None:
        # The door may move with layout changes, so ask the view every frame.
        self.session.run_ticks(due, self.input.sample, self.view.goal_region())

    def _render(self) -> None:
        self.view.render_game(self.session.state)

    def _on_close(self) -> None:
        self.loop.stop()
        self.root.destroy()
