from __future__ import annotations

import math
import tkinter as tk
from collections.abc import Callable

from minigames.domain.game_state import GameState, GoalRegion

SKY = "#cfe8ff"
GROUND = "#5b8c3a"
DOOR = "#8b5a2b"
PLAYER = "#e04848"


class PlatformerView:
    """
    Canvas rendering for the platformer. World y grows upward from the top of
    the ground band, canvas y grows downward, so everything is flipped here.
    """

    def __init__(
        self,
        master: tk.Misc,
        *,
        width: int,
        height: int,
        on_try_again: Callable[[], None],
        on_next_level: Callable[[], None],
    ) -> None:
        self._w = width
        self._h = height
        self._ground_top = height - height / 3.0

        self._goal = GoalRegion(x=width - 90.0, width=50.0, height=80.0)

        self.canvas = tk.Canvas(master, width=width, height=height, highlightthickness=0, bg=SKY)
        self.canvas.pack(fill="both", expand=True)

        self._ground_id = self.canvas.create_rectangle(
            0, self._ground_top, width, height, outline="", fill=GROUND
        )
        self._split_id = self.canvas.create_rectangle(0, 0, 0, 0, outline="", fill=SKY)
        g = self._goal
        self._door_id = self.canvas.create_rectangle(
            g.x, self._ground_top - g.height, g.x + g.width, self._ground_top, outline="", fill=DOOR
        )
        self._player_id = self.canvas.create_polygon(0, 0, 0, 0, 0, 0, 0, 0, outline="", fill=PLAYER)
        self._text_id = self.canvas.create_text(10, 10, anchor="nw", text="", font=("TkDefaultFont", 12))

        self._game_over = self._make_overlay("Game Over", "Try Again", on_try_again)
        self._level_up = self._make_overlay("Level Complete!", "Next Level", on_next_level)

    def goal_region(self) -> GoalRegion:
        return self._goal

    def _make_overlay(self, title: str, button: str, command: Callable[[], None]) -> tk.Frame:
        frame = tk.Frame(self.canvas, bd=2, relief="ridge", padx=24, pady=16)
        tk.Label(frame, text=title, font=("TkDefaultFont", 20, "bold")).pack(pady=(0, 8))
        tk.Button(frame, text=button, command=command).pack()
        return frame

    def show_game_over(self) -> None:
        self.canvas.itemconfigure(self._player_id, state="hidden")
        self._game_over.place(relx=0.5, rely=0.4, anchor="center")

    def show_level_complete(self) -> None:
        self.canvas.itemconfigure(self._player_id, state="hidden")
        self._level_up.place(relx=0.5, rely=0.4, anchor="center")

    def hide_overlays(self) -> None:
        self._game_over.place_forget()
        self._level_up.place_forget()
        self.canvas.itemconfigure(self._player_id, state="normal")

    def render_game(self, state: GameState) -> None:
        left, right = state.hazard.span(state.field)
        if state.hazard.width > 0:
            self.canvas.coords(self._split_id, left, self._ground_top, right, self._h)
        else:
            self.canvas.coords(self._split_id, 0, 0, 0, 0)

        a = state.actor
        w = state.field.actor_width
        h = state.field.actor_height
        bottom = self._ground_top - a.y
        cx = a.x + w / 2.0
        cy = bottom - h / 2.0
        self.canvas.coords(self._player_id, *self._rotated_box(cx, cy, w, h, state.rotation))

        self.canvas.itemconfigure(
            self._text_id,
            text=f"x={a.x:.1f} y={a.y:.1f} vx={a.vx:.2f} vy={a.vy:.2f} split={state.hazard.width:.0f}",
        )

    @staticmethod
    def _rotated_box(cx: float, cy: float, w: float, h: float, degrees: float) -> list[float]:
        rad = math.radians(degrees)
        cos_r, sin_r = math.cos(rad), math.sin(rad)
        pts: list[float] = []
        for dx, dy in ((-w / 2, -h / 2), (w / 2, -h / 2), (w / 2, h / 2), (-w / 2, h / 2)):
            pts.append(cx + dx * cos_r - dy * sin_r)
            pts.append(cy + dx * sin_r + dy * cos_r)
        return pts
