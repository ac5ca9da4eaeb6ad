from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from minigames.domain.exceptions import CellOccupied


class Mark(Enum):
    X = "x"
    O = "o"

    @property
    def other(self) -> Mark:
        return Mark.O if self is Mark.X else Mark.X


WINNING_LINES: tuple[tuple[int, int, int], ...] = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)

CENTER = 4
CORNERS = (0, 2, 6, 8)
SIDES = (1, 3, 5, 7)


@dataclass(frozen=True)
class Board:
    """3x3 grid, cells indexed 0..8 row-major."""
    cells: tuple[Mark | None, ...] = (None,) * 9

    def __post_init__(self) -> None:
        if len(self.cells) != 9:
            raise ValueError("board must have exactly 9 cells")

    def place(self, index: int, mark: Mark) -> Board:
        if index < 0 or index >= 9:
            raise ValueError(f"cell index out of range: {index}")
        if self.cells[index] is not None:
            raise CellOccupied(f"cell {index} is already taken by {self.cells[index].name}")
        cells = list(self.cells)
        cells[index] = mark
        return Board(cells=tuple(cells))

    def is_empty(self, index: int) -> bool:
        return self.cells[index] is None

    def empty_cells(self) -> tuple[int, ...]:
        return tuple(i for i, c in enumerate(self.cells) if c is None)

    def has_won(self, mark: Mark) -> bool:
        return any(all(self.cells[i] is mark for i in line) for line in WINNING_LINES)

    def is_full(self) -> bool:
        return all(c is not None for c in self.cells)
