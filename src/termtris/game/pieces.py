from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Dict, List, Optional, Tuple

import numpy as np


class TetrominoType(IntEnum):
    I = 1
    O = 2
    T = 3
    S = 4
    Z = 5
    J = 6
    L = 7


class Direction(Enum):
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def offset(self) -> Tuple[int, int]:
        return self.value


Shape = np.ndarray
Cell = Tuple[int, int]


BASE_SHAPES = {
    TetrominoType.I: np.array([[1, 1, 1, 1]], dtype=np.int8),
    TetrominoType.O: np.array([[1, 1], [1, 1]], dtype=np.int8),
    TetrominoType.T: np.array([[1, 1, 1], [0, 1, 0]], dtype=np.int8),
    TetrominoType.S: np.array([[0, 1, 1], [1, 1, 0]], dtype=np.int8),
    TetrominoType.Z: np.array([[1, 1, 0], [0, 1, 1]], dtype=np.int8),
    TetrominoType.J: np.array([[1, 0, 0], [1, 1, 1]], dtype=np.int8),
    TetrominoType.L: np.array([[0, 0, 1], [1, 1, 1]], dtype=np.int8),
}

# Rotation centre of each shape, in template coordinates. O does not turn.
PIVOTS: Dict[TetrominoType, Optional[Cell]] = {
    TetrominoType.I: (0, 1),
    TetrominoType.O: None,
    TetrominoType.T: (0, 1),
    TetrominoType.S: (1, 1),
    TetrominoType.Z: (1, 1),
    TetrominoType.J: (1, 1),
    TetrominoType.L: (1, 1),
}


def template_cells(kind: TetrominoType) -> List[Cell]:
    return [(int(r), int(c)) for r, c in np.argwhere(BASE_SHAPES[kind])]


@dataclass
class Piece:
    """The active tetromino, held as absolute (row, col) cells."""

    kind: TetrominoType
    cells: List[Cell] = field(default_factory=list)
    pivot: Optional[int] = None  # index into cells

    @property
    def color(self) -> TetrominoType:
        return self.kind

    @classmethod
    def spawn(cls, kind: TetrominoType, width: int) -> "Piece":
        _, w = BASE_SHAPES[kind].shape
        offset = (width - w) // 2
        cells = [(r, c + offset) for r, c in template_cells(kind)]
        centre = PIVOTS[kind]
        pivot = None
        if centre is not None:
            pivot = cells.index((centre[0], centre[1] + offset))
        return cls(kind=kind, cells=cells, pivot=pivot)

    @classmethod
    def spawn_random(cls, width: int, rng: Optional[random.Random] = None) -> "Piece":
        rng = rng or random.Random()
        kind = rng.choice(list(TetrominoType))
        return cls.spawn(kind, width)

    def shift(self, direction: Direction) -> None:
        # No collision check here; the engine tests touch flags first.
        dr, dc = direction.offset
        self.cells = [(r + dr, c + dc) for r, c in self.cells]

    def rotate(self) -> Optional[List[Cell]]:
        """Return the cells after a clockwise quarter turn, or None if the shape does not turn.

        The piece itself is left untouched; committing is up to the caller.
        """
        if self.pivot is None:
            return None
        pr, pc = self.cells[self.pivot]
        return [(pr + (c - pc), pc - (r - pr)) for r, c in self.cells]
