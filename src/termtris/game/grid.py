from __future__ import annotations

from typing import Iterable, Optional, Tuple

import numpy as np

from .pieces import TetrominoType


WIDTH = 10
HEIGHT = 20

Cell = Tuple[int, int]


class GameGrid:
    """Fixed-size playfield of locked cells.

    Cells are addressed as (row, col) with row 0 at the top. The array holds 0
    for an empty cell and the ``TetrominoType`` value (the color tag) of the
    piece that filled it otherwise. The active piece is never stored here.
    """

    def __init__(self, width: int = WIDTH, height: int = HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"grid dimensions must be positive, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self.grid = np.zeros((self.height, self.width), dtype=np.int8)

    def reset(self) -> None:
        self.grid.fill(0)

    def is_inside(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def is_occupied(self, row: int, col: int) -> bool:
        return self.grid[row, col] != 0

    def get_cell(self, row: int, col: int) -> Optional[TetrominoType]:
        value = int(self.grid[row, col])
        return TetrominoType(value) if value else None

    def set_cell(self, row: int, col: int, color: Optional[TetrominoType]) -> None:
        self.grid[row, col] = 0 if color is None else int(color)

    def can_place(self, cells: Iterable[Cell]) -> bool:
        for row, col in cells:
            if not self.is_inside(row, col):
                return False
            if self.grid[row, col] != 0:
                return False
        return True

    def clear_full_rows(self) -> int:
        """Remove every full row, dropping the rows above it by one.

        The scan runs top to bottom. After a clear the same index is checked
        again, since it now holds what used to be the row above.
        """
        cleared = 0
        i = 0
        while i < self.height:
            if not np.all(self.grid[i] != 0):
                i += 1
                continue
            cleared += 1
            self.grid[1 : i + 1] = self.grid[0:i].copy()
            self.grid[0].fill(0)
        return cleared

    def snapshot(self) -> np.ndarray:
        return self.grid.copy()

    def copy(self) -> "GameGrid":
        new_grid = GameGrid(self.width, self.height)
        new_grid.grid = self.grid.copy()
        return new_grid
