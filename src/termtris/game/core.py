from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Tuple

import numpy as np

from .grid import HEIGHT, WIDTH, GameGrid
from .pieces import BASE_SHAPES, Direction, Piece


# Smallest board every spawn template fits on
MIN_HEIGHT = max(shape.shape[0] for shape in BASE_SHAPES.values())
MIN_WIDTH = max(shape.shape[1] for shape in BASE_SHAPES.values())


class Action(IntEnum):
    SHIFT_LEFT = 0
    SHIFT_RIGHT = 1
    ROTATE = 2
    HARD_DROP = 3
    TICK = 4


@dataclass
class GameConfig:
    width: int = WIDTH
    height: int = HEIGHT
    random_seed: Optional[int] = None


class Game:
    """Falling-block engine: one grid, one active piece, a score and an over flag.

    Every operation is a short synchronous update. Only the constructor raises,
    for a board too small to hold every shape; the only terminal outcome is ``over`` becoming True, after which ``step`` ignores
    further actions.
    """

    def __init__(self, config: Optional[GameConfig] = None) -> None:
        self.config = config or GameConfig()
        if self.config.width < MIN_WIDTH or self.config.height < MIN_HEIGHT:
            raise ValueError(
                f"board must be at least {MIN_WIDTH}x{MIN_HEIGHT}, "
                f"got {self.config.width}x{self.config.height}"
            )
        self.rng = random.Random(self.config.random_seed)
        self.grid = GameGrid(self.config.width, self.config.height)
        self.score = 0
        self.lines_cleared_total = 0
        self.pieces_locked = 0
        self.over = False
        self.piece = Piece.spawn_random(self.grid.width, self.rng)

    def reset(self, seed: Optional[int] = None) -> None:
        if seed is not None:
            self.rng.seed(seed)
        self.grid.reset()
        self.score = 0
        self.lines_cleared_total = 0
        self.pieces_locked = 0
        self.over = False
        self.piece = Piece.spawn_random(self.grid.width, self.rng)

    def piece_touches(self) -> Tuple[bool, bool, bool]:
        """Touch flags (left, right, down) for the active piece."""
        grid = self.grid
        cells = self.piece.cells
        left = any(c == 0 or grid.is_occupied(r, c - 1) for r, c in cells)
        right = any(c == grid.width - 1 or grid.is_occupied(r, c + 1) for r, c in cells)
        down = any(r == grid.height - 1 or grid.is_occupied(r + 1, c) for r, c in cells)
        return left, right, down

    def shift(self, direction: Direction) -> None:
        left, right, down = self.piece_touches()
        touch = {Direction.LEFT: left, Direction.RIGHT: right, Direction.DOWN: down}[direction]
        if not touch:
            self.piece.shift(direction)

    def turn(self) -> None:
        candidate = self.piece.rotate()
        if candidate is not None and self.grid.can_place(candidate):
            self.piece.cells = candidate

    def hard_drop(self) -> None:
        while not self.piece_touches()[2]:
            self.shift(Direction.DOWN)

    def tick(self) -> None:
        if not self.piece_touches()[2]:
            self.shift(Direction.DOWN)
            return
        self._lock_piece()
        self.piece = Piece.spawn_random(self.grid.width, self.rng)
        self.over = any(self.grid.is_occupied(r, c) for r, c in self.piece.cells)

    def _lock_piece(self) -> int:
        for r, c in self.piece.cells:
            self.grid.set_cell(r, c, self.piece.color)
        lines = self.grid.clear_full_rows()
        self.score += lines
        self.lines_cleared_total += lines
        self.pieces_locked += 1
        return lines

    def step(self, action: Action) -> None:
        if self.over:
            return
        if action == Action.SHIFT_LEFT:
            self.shift(Direction.LEFT)
        elif action == Action.SHIFT_RIGHT:
            self.shift(Direction.RIGHT)
        elif action == Action.ROTATE:
            self.turn()
        elif action == Action.HARD_DROP:
            self.hard_drop()
        elif action == Action.TICK:
            self.tick()

    def snapshot(self) -> np.ndarray:
        """Locked cells only, as a copy."""
        return self.grid.snapshot()

    def get_state(self) -> np.ndarray:
        # Locked cells with the active piece drawn on top
        state = self.grid.snapshot()
        for r, c in self.piece.cells:
            if self.grid.is_inside(r, c):
                state[r, c] = int(self.piece.color)
        return state
