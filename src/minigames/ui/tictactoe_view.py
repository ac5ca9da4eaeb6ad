from __future__ import annotations

import tkinter as tk
from collections.abc import Callable

from minigames.app.tictactoe_controller import GameMode, TicTacToeState
from minigames.domain.board import Mark

_GLYPH = {Mark.X: "X", Mark.O: "O", None: ""}


class TicTacToeView(tk.Frame):
    def __init__(
        self,
        master: tk.Misc,
        *,
        cell_px: int,
        on_mode_selected: Callable[[GameMode], None],
        on_cell_clicked: Callable[[int], None],
        on_restart_clicked: Callable[[], None],
        on_change_mode_clicked: Callable[[], None],
    ) -> None:
        super().__init__(master)

        # Mode picker
        self._mode_frame = tk.Frame(self)
        tk.Label(self._mode_frame, text="Choose a mode", font=("TkDefaultFont", 16)).pack(pady=8)
        tk.Button(
            self._mode_frame, text="One Player", command=lambda: on_mode_selected(GameMode.ONE_PLAYER)
        ).pack(fill="x", padx=24, pady=4)
        tk.Button(
            self._mode_frame, text="Two Players", command=lambda: on_mode_selected(GameMode.TWO_PLAYER)
        ).pack(fill="x", padx=24, pady=4)

        # Game
        self._game_frame = tk.Frame(self)
        self._status = tk.Label(self._game_frame, text="", font=("TkDefaultFont", 14))
        self._status.pack(side="top", pady=6)

        grid = tk.Frame(self._game_frame)
        grid.pack(side="top")
        self._cells: list[tk.Button] = []
        for i in range(9):
            b = tk.Button(
                grid,
                text="",
                width=3,
                height=1,
                font=("TkDefaultFont", cell_px // 2, "bold"),
                command=lambda i=i: on_cell_clicked(i),
            )
            b.grid(row=i // 3, column=i % 3, padx=2, pady=2)
            self._cells.append(b)

        bar = tk.Frame(self._game_frame)
        bar.pack(side="top", fill="x", pady=6)
        tk.Button(bar, text="Restart", command=on_restart_clicked).pack(side="left", padx=4)
        tk.Button(bar, text="Change Mode", command=on_change_mode_clicked).pack(side="left", padx=4)

    def render(self, state: TicTacToeState) -> None:
        if state.mode is None:
            self._game_frame.pack_forget()
            self._mode_frame.pack(fill="both", expand=True)
            return

        self._mode_frame.pack_forget()
        self._game_frame.pack(fill="both", expand=True)

        for b, mark in zip(self._cells, state.board.cells):
            b.config(text=_GLYPH[mark], state="disabled" if (mark is not None or state.over) else "normal")

        if state.result is not None:
            self._status.config(text=state.result)
        else:
            self._status.config(text=f"{state.turn.name}'s turn")
