# Tkinter window that drives the game loop and forwards key presses.
from __future__ import annotations

import logging
import time
import tkinter as tk

import numpy as np

# Support both package imports and running this file directly.
try:
    from .game_logic import GameConfig, GameState, GridElem, TickOutcome
    from .utils import FOOD_CELL, encode_board_state, make_game
except ImportError:
    from game_logic import GameConfig, GameState, GridElem, TickOutcome
    from utils import FOOD_CELL, encode_board_state, make_game


logger = logging.getLogger(__name__)

GAME_OVER_MESSAGE = "GAME OVER!"


class SnakeApp:
    """Tkinter presentation layer for GameState."""
    BOARD_BG = "#000000"
    SNAKE_COLOR = "#ffffff"
    FOOD_COLOR = "#00ff00"
    FRAME_MS = 16  # redraw/poll cadence; the game throttles ticks itself

    def __init__(self, root: tk.Tk, game: GameState) -> None:
        self.root = root
        self.game = game
        self.config = game.config
        self.after_id: str | None = None  # Tkinter timer id for the frame loop

        self.root.title("Snake")
        self.root.resizable(False, False)

        screen_w, screen_h = self.config.screen_size
        self.canvas = tk.Canvas(
            self.root,
            width=screen_w,
            height=screen_h,
            bg=self.BOARD_BG,
            highlightthickness=0,
            bd=0,
        )
        self.canvas.pack()

        self.root.bind("<KeyPress>", self._on_key_press)
        self.root.protocol("WM_DELETE_WINDOW", self.close)

    def _on_key_press(self, event: tk.Event) -> None:
        self.game.on_key(event.keysym)

    def start(self) -> None:
        self.draw()
        self.frame()

    def frame(self) -> None:
        """Single frame: let the game tick if due, redraw, reschedule."""
        self.after_id = None
        outcome = self.game.on_tick(time.monotonic())

        if outcome is TickOutcome.TERMINATED:
            print(GAME_OVER_MESSAGE)
            self.close()
            return

        if outcome is TickOutcome.ADVANCED:
            self.draw()
        self.after_id = self.root.after(self.FRAME_MS, self.frame)

    def draw(self) -> None:
        """Paint every occupied cell: snake white, food green."""
        self.canvas.delete("all")
        board = encode_board_state(self.game)

        for y, x in np.argwhere(board != 0.0):
            color = self.FOOD_COLOR if board[y, x] == FOOD_CELL else self.SNAKE_COLOR
            x1, y1, x2, y2 = GridElem(int(x), int(y)).to_rect(self.config.cell_size)
            self.canvas.create_rectangle(x1, y1, x2, y2, fill=color, outline="")

    def close(self) -> None:
        if self.after_id is not None:
            self.root.after_cancel(self.after_id)
            self.after_id = None
        logger.debug("Closing window with score %d", self.game.score)
        self.root.destroy()


def run_player_gui(config: GameConfig | None = None, seed: int | None = None) -> None:
    """Launch the Snake window and run until game over or the window closes."""
    game = make_game(config, seed=seed)
    root = tk.Tk()
    app = SnakeApp(root, game)
    app.start()
    root.mainloop()


if __name__ == "__main__":
    run_player_gui()
