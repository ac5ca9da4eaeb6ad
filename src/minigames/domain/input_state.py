from dataclasses import dataclass
from enum import Enum


class InputAction(Enum):
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    JUMP = "jump"


@dataclass(frozen=True)
class InputState:
    left_held: bool = False
    right_held: bool = False
    jump_requested: bool = False  # true only on the tick the key is pressed
