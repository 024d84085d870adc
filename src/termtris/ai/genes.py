from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Sequence, Tuple, Union

import numpy as np

from termtris.game.grid import GameGrid


GridLike = Union[GameGrid, np.ndarray]


def _cells(grid: GridLike) -> np.ndarray:
    # Evaluators only read; a GameGrid is unwrapped, never copied into.
    return grid.grid if isinstance(grid, GameGrid) else np.asarray(grid)


def column_heights(grid: GridLike) -> List[int]:
    """Height of each column, measured from the bottom to its highest occupied cell."""
    cells = _cells(grid)
    height, width = cells.shape
    heights: List[int] = []
    for col in range(width):
        filled = np.flatnonzero(cells[:, col] != 0)
        heights.append(height - int(filled[0]) if filled.size else 0)
    return heights


class Gene(ABC):
    """A pure scoring function over a grid snapshot."""

    @abstractmethod
    def evaluate(self, grid: GridLike) -> float:
        ...


class Holes(Gene):
    """Empty cells with an occupied cell somewhere above them in the same column."""

    def evaluate(self, grid: GridLike) -> float:
        cells = _cells(grid)
        holes = 0
        for col in range(cells.shape[1]):
            seen_block = False
            for cell in cells[:, col]:
                if cell != 0:
                    seen_block = True
                elif seen_block:
                    holes += 1
        return float(holes)


class MaxHeight(Gene):
    def evaluate(self, grid: GridLike) -> float:
        return float(max(column_heights(grid), default=0))


class Bumpiness(Gene):
    def evaluate(self, grid: GridLike) -> float:
        heights = column_heights(grid)
        return float(sum(abs(a - b) for a, b in zip(heights, heights[1:])))


class WeightedFitness(Gene):
    """Weighted sum of other genes.

    Weights are usually negative for the stock genes, since fewer holes and a
    lower, flatter stack are better.
    """

    def __init__(self, genes: Sequence[Tuple[Gene, float]]) -> None:
        self.genes = list(genes)

    def evaluate(self, grid: GridLike) -> float:
        return float(sum(weight * gene.evaluate(grid) for gene, weight in self.genes))

    def breakdown(self, grid: GridLike) -> dict:
        """Raw value of each gene, keyed by (class name, position)."""
        return {(type(gene).__name__, i): gene.evaluate(grid) for i, (gene, _) in enumerate(self.genes)}
