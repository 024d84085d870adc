import numpy as np
import pytest

from termtris.ai import Bumpiness, Gene, Holes, MaxHeight, WeightedFitness, column_heights
from termtris.game import GameGrid, TetrominoType


@pytest.fixture
def grid():
    return GameGrid()


def test_empty_grid_scores_zero(grid):
    for gene in (Holes(), MaxHeight(), Bumpiness()):
        assert gene.evaluate(grid) == 0.0


def test_holes_under_single_top_cell(grid):
    grid.set_cell(0, 0, TetrominoType.I)
    assert Holes().evaluate(grid) == 19.0


def test_holes_only_count_cells_below_blocks(grid):
    grid.set_cell(17, 2, TetrominoType.T)
    grid.set_cell(19, 2, TetrominoType.T)
    grid.set_cell(19, 3, TetrominoType.T)
    assert Holes().evaluate(grid) == 1.0


def test_max_height(grid):
    grid.set_cell(0, 6, TetrominoType.S)
    assert MaxHeight().evaluate(grid) == 20.0
    other = GameGrid()
    other.set_cell(15, 1, TetrominoType.S)
    other.set_cell(19, 8, TetrominoType.S)
    assert MaxHeight().evaluate(other) == 5.0


def test_bumpiness_flat_row_is_zero(grid):
    for col in range(grid.width):
        grid.set_cell(19, col, TetrominoType.L)
    assert Bumpiness().evaluate(grid) == 0.0


def test_bumpiness_sums_neighbour_differences(grid):
    grid.set_cell(17, 0, TetrominoType.J)  # height 3
    grid.set_cell(19, 1, TetrominoType.J)  # height 1
    assert column_heights(grid)[:3] == [3, 1, 0]
    assert Bumpiness().evaluate(grid) == 3.0


def test_genes_accept_snapshots_and_do_not_mutate(grid):
    grid.set_cell(5, 5, TetrominoType.Z)
    snap = grid.snapshot()
    copy = snap.copy()
    assert Holes().evaluate(snap) == 14.0
    assert MaxHeight().evaluate(snap) == 15.0
    assert Bumpiness().evaluate(snap) == 30.0
    np.testing.assert_array_equal(snap, copy)


def test_weighted_fitness_combines_genes(grid):
    grid.set_cell(0, 0, TetrominoType.I)
    fitness = WeightedFitness([(Holes(), -1.0), (MaxHeight(), -0.5), (Bumpiness(), 2.0)])
    assert isinstance(fitness, Gene)
    assert fitness.evaluate(grid) == -19.0 - 10.0 + 40.0
    assert fitness.breakdown(grid) == {
        ("Holes", 0): 19.0,
        ("MaxHeight", 1): 20.0,
        ("Bumpiness", 2): 20.0,
    }


def test_breakdown_keeps_repeated_genes_apart(grid):
    grid.set_cell(0, 0, TetrominoType.I)
    fitness = WeightedFitness([(Holes(), -1.0), (Holes(), -0.25)])
    assert fitness.breakdown(grid) == {("Holes", 0): 19.0, ("Holes", 1): 19.0}
    assert fitness.evaluate(grid) == -19.0 - 4.75


def test_gene_is_abstract():
    with pytest.raises(TypeError):
        Gene()
