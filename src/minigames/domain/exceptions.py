from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from minigames.domain.game_state import GameState


class PlayerDied(Exception):
    """Raised by the domain when the player falls through the split and must restart."""

    def __init__(self, state: GameState) -> None:
        super().__init__("player died")
        self.state = state


class LevelCompleted(Exception):
    """Raised when the player walks into the exit door."""

    def __init__(self, state: GameState) -> None:
        super().__init__("level completed")
        self.state = state


class CellOccupied(Exception):
    """Raised when a mark is placed on a tic-tac-toe cell that is already taken."""
