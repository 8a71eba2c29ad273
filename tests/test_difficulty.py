import pytest

from mazerace.config import DEFAULT_TIERS, DifficultyTier
from mazerace.domain.carver import carve
from mazerace.domain.connectivity import exists_path, farthest_from
from mazerace.domain.difficulty import adjust_difficulty, open_passages, seal_passages
from mazerace.domain.grid import create_grid
from mazerace.domain.types import CellType
from mazerace.utils.rng import SeededRNG


@pytest.fixture
def carved_maze():
    grid, start = carve(create_grid(21, 21), SeededRNG(5))
    finish = farthest_from(grid, start)
    grid.set(start, CellType.START)
    grid.set(finish, CellType.FINISH)
    return grid, start, finish


def passable_count(grid):
    return sum(1 for pos in grid.positions() if grid.is_passable(pos))


def test_open_passages_adds_shortcuts(carved_maze):
    grid, start, finish = carved_maze
    opened = open_passages(grid, 30, start, finish, SeededRNG(1))
    assert passable_count(opened) > passable_count(grid)
    assert passable_count(opened) <= passable_count(grid) + 30
    assert exists_path(opened, start, finish)
    assert opened.get(start) == CellType.START
    assert opened.get(finish) == CellType.FINISH
    assert all(opened.get(pos) == CellType.WALL for pos in opened.perimeter())


def test_seal_passages_keeps_route(carved_maze):
    grid, start, finish = carved_maze
    sealed = seal_passages(grid, 40, start, finish, SeededRNG(2))
    assert passable_count(sealed) < passable_count(grid)
    assert exists_path(sealed, start, finish)
    assert sealed.get(start) == CellType.START
    assert sealed.get(finish) == CellType.FINISH


def test_adjustment_does_not_mutate_input(carved_maze):
    grid, start, finish = carved_maze
    before = grid.copy()
    adjust_difficulty(grid, start, finish, DEFAULT_TIERS["extreme"], SeededRNG(3))
    adjust_difficulty(grid, start, finish, DEFAULT_TIERS["easy"], SeededRNG(3))
    assert grid == before


def test_zero_attempt_budget_changes_nothing(carved_maze):
    grid, start, finish = carved_maze
    assert open_passages(grid, 10, start, finish, SeededRNG(4), attempt_multiplier=0) == grid
    assert seal_passages(grid, 10, start, finish, SeededRNG(4), attempt_multiplier=0) == grid


@pytest.mark.parametrize("name", ["easy", "medium"])
def test_easier_tiers_only_open(carved_maze, name):
    grid, start, finish = carved_maze
    adjusted = adjust_difficulty(grid, start, finish, DEFAULT_TIERS[name], SeededRNG(8))
    assert adjusted.count(CellType.WALL) <= grid.count(CellType.WALL)


@pytest.mark.parametrize("name", ["hard", "extreme"])
def test_harder_tiers_only_seal(carved_maze, name):
    grid, start, finish = carved_maze
    adjusted = adjust_difficulty(grid, start, finish, DEFAULT_TIERS[name], SeededRNG(8))
    assert adjusted.count(CellType.WALL) >= grid.count(CellType.WALL)
    assert exists_path(adjusted, start, finish)


def test_seal_on_bare_corridor_keeps_every_cell(make_grid):
    # Every corridor cell lies on the only route, so nothing can be sealed
    grid = make_grid(
        """
        ########
        #S....F#
        ########
        """
    )
    tier = DifficultyTier("custom", "seal", 1.0)
    assert adjust_difficulty(grid, (1, 1), (1, 6), tier, SeededRNG(9)) == grid
