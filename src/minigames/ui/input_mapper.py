from __future__ import annotations
import tkinter as tk
from minigames.app.input_tracker import InputTracker
from minigames.domain.input_state import InputAction, InputState

# Only these keysyms are recognised; anything else is ignored.
KEY_BINDINGS: dict[str, InputAction] = {
    "Left": InputAction.MOVE_LEFT,
    "a": InputAction.MOVE_LEFT,
    "Right": InputAction.MOVE_RIGHT,
    "d": InputAction.MOVE_RIGHT,
    "space": InputAction.JUMP,
    "Up": InputAction.JUMP,
    "w": InputAction.JUMP,
}


class TkInputMapper:
    def __init__(self, root: tk.Tk) -> None:
        self._tracker = InputTracker()

        root.bind("<KeyPress>", self._on_key_down)
        root.bind("<KeyRelease>", self._on_key_up)

        # Helps ensure root gets key events.
        root.focus_set()

    def _on_key_down(self, evt: tk.Event) -> None:
        action = KEY_BINDINGS.get(evt.keysym)
        if action is not None:
            self._tracker.press(action)

    def _on_key_up(self, evt: tk.Event) -> None:
        action = KEY_BINDINGS.get(evt.keysym)
        if action is not None:
            self._tracker.release(action)

    def clear(self) -> None:
        self._tracker.clear()

    def sample(self) -> InputState:
        return self._tracker.sample()
