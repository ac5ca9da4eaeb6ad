from __future__ import annotations

from minigames.domain.board import CENTER, CORNERS, SIDES, Board, Mark
from minigames.domain.rng import RandomSource, pick


def choose_move(board: Board, me: Mark, rng: RandomSource) -> int | None:
    """
    Greedy one-ply move selection, first rule that applies wins:
    win now, block the opponent's win, centre, random corner, random side.
    """
    move = _completing_move(board, me)
    if move is not None:
        return move

    move = _completing_move(board, me.other)
    if move is not None:
        return move

    if board.is_empty(CENTER):
        return CENTER

    for group in (CORNERS, SIDES):
        free = [i for i in group if board.is_empty(i)]
        if free:
            return pick(rng, free)

    return None


def _completing_move(board: Board, mark: Mark) -> int | None:
    for i in board.empty_cells():
        if board.place(i, mark).has_won(mark):
            return i
    return None
