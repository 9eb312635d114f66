"""
Tests for snake_gui.py - frame loop and drawing, using a fake Tk root and canvas.
"""

import os
import sys

import numpy as np
import pytest

pytest.importorskip("tkinter")

# Add repo root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import snake_gui
from game_logic import Direction, GameState, GridElem
from snake_gui import GAME_OVER_MESSAGE, SnakeApp


class FakeRoot:
    def __init__(self):
        self.scheduled = []
        self.cancelled = []
        self.destroyed = False

    def after(self, ms, callback):
        self.scheduled.append((ms, callback))
        return f"after#{len(self.scheduled)}"

    def after_cancel(self, after_id):
        self.cancelled.append(after_id)

    def destroy(self):
        self.destroyed = True


class FakeCanvas:
    def __init__(self):
        self.rectangles = []
        self.deleted = 0

    def delete(self, tag):
        self.deleted += 1
        self.rectangles.clear()

    def create_rectangle(self, x1, y1, x2, y2, **kwargs):
        self.rectangles.append(((x1, y1, x2, y2), kwargs.get("fill")))


def make_app(now=0.0):
    """Build a SnakeApp without opening a window."""
    game = GameState(np.random.default_rng(3), now=now)
    app = SnakeApp.__new__(SnakeApp)
    app.root = FakeRoot()
    app.canvas = FakeCanvas()
    app.game = game
    app.config = game.config
    app.after_id = None
    return app


class TestSnakeAppFrame:
    """Tests for the per-frame driver."""

    def test_game_over_prints_and_closes(self, monkeypatch, capsys):
        """A self-collision tick prints the message and destroys the window."""
        app = make_app()
        app.game.snake.direction = Direction.LEFT
        monkeypatch.setattr(snake_gui.time, "monotonic", lambda: 10.0)

        app.frame()

        assert GAME_OVER_MESSAGE in capsys.readouterr().out
        assert app.root.destroyed is True
        assert app.root.scheduled == []
        assert app.after_id is None

    def test_close_cancels_pending_frame(self):
        app = make_app()
        app.after_id = "after#7"
        app.close()
        assert app.root.cancelled == ["after#7"]
        assert app.root.destroyed is True

    def test_advanced_tick_redraws_and_reschedules(self, monkeypatch):
        app = make_app()
        monkeypatch.setattr(snake_gui.time, "monotonic", lambda: 10.0)

        app.frame()

        assert app.root.destroyed is False
        assert app.root.scheduled == [(SnakeApp.FRAME_MS, app.frame)]
        assert app.after_id == "after#1"
        assert app.canvas.deleted == 1
        assert ((16 * 32, 10 * 32, 17 * 32, 11 * 32), SnakeApp.SNAKE_COLOR) in app.canvas.rectangles

    def test_noop_tick_reschedules_without_redraw(self, monkeypatch):
        app = make_app(now=0.0)
        monkeypatch.setattr(snake_gui.time, "monotonic", lambda: 0.01)

        app.frame()

        assert app.root.scheduled == [(SnakeApp.FRAME_MS, app.frame)]
        assert app.canvas.deleted == 0
        assert app.game.head == GridElem(15, 10)


class TestSnakeAppDraw:
    """Tests for board painting."""

    def test_starting_board_has_three_cells(self):
        app = make_app()
        app.draw()
        assert len(app.canvas.rectangles) == 3

    def test_colors(self):
        app = make_app()
        app.draw()
        fills = dict(app.canvas.rectangles)
        assert fills[(5 * 32, 5 * 32, 6 * 32, 6 * 32)] == SnakeApp.FOOD_COLOR
        assert fills[(15 * 32, 10 * 32, 16 * 32, 11 * 32)] == SnakeApp.SNAKE_COLOR
        assert fills[(14 * 32, 10 * 32, 15 * 32, 11 * 32)] == SnakeApp.SNAKE_COLOR
