from __future__ import annotations

from minigames.domain.input_state import InputAction, InputState


class InputTracker:
    """
    Collects key events between ticks. The loop reads a snapshot with
    ``sample()``; nothing here touches game state.
    """

    def __init__(self) -> None:
        self._held: set[InputAction] = set()
        self._jump_pressed_edge = False

    def press(self, action: InputAction) -> None:
        if action is InputAction.JUMP and InputAction.JUMP not in self._held:
            self._jump_pressed_edge = True
        self._held.add(action)

    def release(self, action: InputAction) -> None:
        self._held.discard(action)

    def clear(self) -> None:
        self._held.clear()
        self._jump_pressed_edge = False

    def sample(self) -> InputState:
        # "Pressed this tick" semantics for jump.
        pressed = self._jump_pressed_edge
        self._jump_pressed_edge = False
        return InputState(
            left_held=InputAction.MOVE_LEFT in self._held,
            right_held=InputAction.MOVE_RIGHT in self._held,
            jump_requested=pressed,
        )
