# Core Snake game state and rules, independent from GUI/window code.
from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum
import logging
import time
from typing import Iterable

import numpy as np


logger = logging.getLogger(__name__)

# Fixed startup parameters.
GRID_SIZE = (30, 20)
GRID_CELL_SIZE = (32, 32)
UPDATES_PER_SECOND = 8.0
SNAKE_START = (15, 10)
FOOD_START = (5, 5)


@dataclass(frozen=True)
class GameConfig:
    """Startup settings shared between the logic layer and GUI."""
    grid_size: tuple[int, int] = GRID_SIZE
    cell_size: tuple[int, int] = GRID_CELL_SIZE
    updates_per_second: float = UPDATES_PER_SECOND
    snake_start: tuple[int, int] = SNAKE_START
    food_start: tuple[int, int] = FOOD_START

    def __post_init__(self) -> None:
        width, height = self.grid_size
        if width <= 0 or height <= 0:
            raise ValueError("Grid size must be positive.")
        if self.cell_size[0] <= 0 or self.cell_size[1] <= 0:
            raise ValueError("Cell size must be positive.")
        if self.updates_per_second <= 0:
            raise ValueError("Updates per second must be positive.")
        for label, (x, y) in (("Snake start", self.snake_start), ("Food start", self.food_start)):
            if not (0 <= x < width and 0 <= y < height):
                raise ValueError(f"{label} must be inside the {width}x{height} grid.")

    @property
    def screen_size(self) -> tuple[int, int]:
        return self.grid_size[0] * self.cell_size[0], self.grid_size[1] * self.cell_size[1]

    @property
    def tick_interval(self) -> float:
        """Seconds between two simulation ticks."""
        return 1.0 / self.updates_per_second


class Direction(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @classmethod
    def from_keycode(cls, keycode: str) -> Direction | None:
        """Map an arrow-key symbol to a direction; anything else maps to None."""
        return _KEYCODES.get(keycode)

    def inverse(self) -> Direction:
        return _INVERSE[self]


_KEYCODES = {
    "Up": Direction.UP,
    "Down": Direction.DOWN,
    "Left": Direction.LEFT,
    "Right": Direction.RIGHT,
}
_INVERSE = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}
_OFFSETS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


@dataclass(frozen=True)
class GridElem:
    """One cell of the wrapping grid."""
    x: int
    y: int

    @classmethod
    def random(cls, rng: np.random.Generator, max_x: int, max_y: int) -> GridElem:
        return cls(int(rng.integers(0, max_x)), int(rng.integers(0, max_y)))

    def move_dir(self, direction: Direction, grid_size: tuple[int, int] = GRID_SIZE) -> GridElem:
        """Shift one tile in the given direction, wrapping around both edges."""
        dx, dy = _OFFSETS[direction]
        width, height = grid_size
        return GridElem((self.x + dx) % width, (self.y + dy) % height)

    def to_rect(self, cell_size: tuple[int, int] = GRID_CELL_SIZE) -> tuple[int, int, int, int]:
        """Pixel rectangle (x1, y1, x2, y2) covered by this cell."""
        cell_w, cell_h = cell_size
        x1, y1 = self.x * cell_w, self.y * cell_h
        return x1, y1, x1 + cell_w, y1 + cell_h


class Snake:
    """Head plus trailing body; body[0] sits right behind the head."""
    def __init__(self, start: GridElem, grid_size: tuple[int, int] = GRID_SIZE) -> None:
        self.grid_size = grid_size
        self.head = start
        self.body: deque[GridElem] = deque([start.move_dir(Direction.LEFT, grid_size)])
        self.direction = Direction.RIGHT
        self.ate = False        # head landed on food during the last update
        self.self_ate = False   # head landed on the body during the last update

    @classmethod
    def from_cells(
        cls,
        head: GridElem,
        body: Iterable[GridElem],
        direction: Direction = Direction.RIGHT,
        grid_size: tuple[int, int] = GRID_SIZE,
    ) -> Snake:
        """Build a snake with an explicit body, ordered from neck to tail."""
        snake = cls(head, grid_size)
        snake.body = deque(body)
        snake.direction = direction
        return snake

    @property
    def length(self) -> int:
        return 1 + len(self.body)

    def turn(self, direction: Direction) -> bool:
        """Change direction; reject instant 180-degree turns."""
        if direction.inverse() == self.direction:
            return False
        self.direction = direction
        return True

    def update(self, food: Food) -> None:
        """Advance one tile, tracking growth and self-collision."""
        new_head = self.head.move_dir(self.direction, self.grid_size)

        self.ate = new_head == food.elem
        self.body.appendleft(self.head)

        # The old head is already part of the body at this point.
        self.self_ate = new_head in self.body

        if not self.ate:
            self.body.pop()

        self.head = new_head


@dataclass
class Food:
    elem: GridElem


class TickOutcome(Enum):
    NOOP = "noop"
    ADVANCED = "advanced"
    TERMINATED = "terminated"


class GameState:
    """Owns the snake, the food and the RNG; advances the game at a fixed tick rate."""
    def __init__(
        self,
        rng: np.random.Generator,
        config: GameConfig | None = None,
        now: float | None = None,
    ) -> None:
        self.config = config or GameConfig()
        self.rng = rng
        self.snake = Snake(GridElem(*self.config.snake_start), self.config.grid_size)
        self.food = Food(GridElem(*self.config.food_start))
        self.last_update_time = time.monotonic() if now is None else now
        self.terminated = False

    @property
    def head(self) -> GridElem:
        return self.snake.head

    @property
    def body(self) -> tuple[GridElem, ...]:
        return tuple(self.snake.body)

    @property
    def food_position(self) -> GridElem:
        return self.food.elem

    @property
    def score(self) -> int:
        """Food eaten so far."""
        return self.snake.length - 2

    def on_tick(self, now: float) -> TickOutcome:
        """Frame hook: run one simulation step if a full tick interval has passed."""
        if self.terminated:
            return TickOutcome.TERMINATED
        if now - self.last_update_time < self.config.tick_interval:
            return TickOutcome.NOOP

        self.snake.update(self.food)

        if self.snake.ate:
            width, height = self.config.grid_size
            # Food may respawn on the snake itself.
            self.food.elem = GridElem.random(self.rng, width, height)
            logger.debug("Food eaten at %s, respawned at %s", self.snake.head, self.food.elem)

        self.last_update_time = now

        if self.snake.self_ate:
            self.terminated = True
            logger.info("Snake ran into itself at %s; final length %d", self.snake.head, self.snake.length)
            return TickOutcome.TERMINATED

        return TickOutcome.ADVANCED

    def on_key(self, keycode: str) -> None:
        """Key hook: steer the snake if the key maps to a non-reversing direction."""
        direction = Direction.from_keycode(keycode)
        if direction is not None:
            self.snake.turn(direction)
