from __future__ import annotations

import logging
import random
import tkinter as tk

from minigames.app.game_loop import TkScheduler
from minigames.app.tictactoe_controller import TicTacToeController
from minigames.ui.tictactoe_view import TicTacToeView

logger = logging.getLogger(__name__)


class TicTacToeApp:
    def __init__(self, seed: int | None = None) -> None:
        self.root = tk.Tk()
        self.root.title("Tic Tac Toe")

        self.controller = TicTacToeController(
            scheduler=TkScheduler(self.root),
            rng=random.Random(seed),
            on_change=self._render,
        )
        self.view = TicTacToeView(
            self.root,
            cell_px=64,
            on_mode_selected=self.controller.select_mode,
            on_cell_clicked=self.controller.click,
            on_restart_clicked=self.controller.start,
            on_change_mode_clicked=self.controller.change_mode,
        )
        self.view.pack(fill="both", expand=True, padx=12, pady=12)
        self._render()

    def run(self) -> None:
        logger.info("starting tic-tac-toe")
        self.root.mainloop()

    def _render(self) -> None:
        self.view.render(self.controller.state)
