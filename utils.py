# Shared helpers: RNG seeding and the numpy board view used for rendering.
from __future__ import annotations

import logging
import os

import numpy as np

try:
    from .game_logic import GameConfig, GameState
except ImportError:
    from game_logic import GameConfig, GameState


logger = logging.getLogger(__name__)

SEED_BYTES = 8

EMPTY_CELL = 0.0
FOOD_CELL = 0.5
BODY_CELL = -0.5
HEAD_CELL = 1.0


def seed_from_entropy() -> int:
    """Read a 64-bit seed from the OS entropy source."""
    try:
        raw = os.urandom(SEED_BYTES)
    except (NotImplementedError, OSError) as exc:
        raise RuntimeError("Could not create RNG seed") from exc
    return int.from_bytes(raw, "little")


def make_rng(seed: int | None = None) -> np.random.Generator:
    """Create the game's RNG, seeding from system entropy unless a seed is given."""
    if seed is None:
        seed = seed_from_entropy()
    logger.debug("Seeding RNG with %d", seed)
    return np.random.default_rng(seed)


def make_game(config: GameConfig | None = None, seed: int | None = None, now: float | None = None) -> GameState:
    return GameState(make_rng(seed), config=config, now=now)


def encode_board_state(state: GameState) -> np.ndarray:
    """
    Board as a (height, width) array:
    - 0.0: empty
    - 0.5: food
    - -0.5: snake body
    - 1.0: snake head
    Later layers win where cells overlap, so the head is never hidden.
    """
    width, height = state.config.grid_size
    board = np.full((height, width), EMPTY_CELL, dtype=np.float32)

    food = state.food_position
    board[food.y, food.x] = FOOD_CELL

    for elem in state.body:
        board[elem.y, elem.x] = BODY_CELL

    head = state.head
    board[head.y, head.x] = HEAD_CELL
    return board
