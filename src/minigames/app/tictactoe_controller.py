from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from minigames.app.scheduler import Scheduler
from minigames.domain.board import Board, Mark
from minigames.domain.opponent import choose_move
from minigames.domain.rng import RandomSource

logger = logging.getLogger(__name__)

COMPUTER_MOVE_DELAY_MS = 500
COMPUTER_MARK = Mark.O


class GameMode(Enum):
    ONE_PLAYER = "one-player"
    TWO_PLAYER = "two-player"


@dataclass
class TicTacToeState:
    board: Board
    turn: Mark
    mode: GameMode | None = None  # None while the mode picker is shown
    result: str | None = None     # "X's Wins!" / "O's Wins!" / "Draw!"

    @property
    def over(self) -> bool:
        return self.result is not None


class TicTacToeController:
    def __init__(
        self,
        *,
        scheduler: Scheduler,
        rng: RandomSource,
        on_change: Callable[[], None] = lambda: None,
    ) -> None:
        self._scheduler = scheduler
        self._rng = rng
        self._on_change = on_change
        self._pending_move: Any = None
        self.state = TicTacToeState(board=Board(), turn=Mark.X)

    def select_mode(self, mode: GameMode) -> None:
        logger.info("tic-tac-toe mode: %s", mode.value)
        self.state.mode = mode
        self.start()

    def change_mode(self) -> None:
        self._cancel_pending()
        self.state.mode = None
        self._on_change()

    def start(self) -> None:
        self._cancel_pending()
        self.state.board = Board()
        self.state.turn = Mark.X
        self.state.result = None
        self._on_change()

    def click(self, index: int) -> None:
        s = self.state
        if s.mode is None or s.over:
            return
        if not 0 <= index < len(s.board.cells):
            return
        if self._computer_to_move():
            # Don't let the human play for the computer.
            return
        if not s.board.is_empty(index):
            return

        self._play(index)

        if self._computer_to_move() and not s.over:
            self._pending_move = self._scheduler.call_later(COMPUTER_MOVE_DELAY_MS, self._computer_move)

    def _computer_move(self) -> None:
        self._pending_move = None
        if self.state.over or not self._computer_to_move():
            return
        move = choose_move(self.state.board, COMPUTER_MARK, self._rng)
        if move is None:
            return
        logger.debug("computer plays cell %d", move)
        self._play(move)

    def _play(self, index: int) -> None:
        s = self.state
        mark = s.turn
        s.board = s.board.place(index, mark)

        if s.board.has_won(mark):
            s.result = f"{mark.name}'s Wins!"
            logger.info("tic-tac-toe: %s", s.result)
        elif s.board.is_full():
            s.result = "Draw!"
            logger.info("tic-tac-toe: draw")
        else:
            s.turn = mark.other

        self._on_change()

    def _computer_to_move(self) -> bool:
        return self.state.mode is GameMode.ONE_PLAYER and self.state.turn is COMPUTER_MARK

    def _cancel_pending(self) -> None:
        if self._pending_move is not None:
            self._scheduler.cancel(self._pending_move)
            self._pending_move = None
