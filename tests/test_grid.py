import numpy as np
import pytest

from mazerace.domain.errors import OutOfBoundsError, ValidationError, OUT_OF_BOUNDS, INVALID_DIMENSIONS
from mazerace.domain.grid import Grid, create_grid
from mazerace.domain.types import CellType


def test_create_is_all_walls():
    grid = create_grid(5, 8)
    assert grid.shape == (5, 8)
    assert grid.count(CellType.WALL) == 40
    assert grid.get((4, 7)) == CellType.WALL


def test_create_rejects_non_positive_dimensions():
    with pytest.raises(ValidationError) as exc:
        Grid.create(0, 5)
    assert exc.value.kind == INVALID_DIMENSIONS


def test_get_out_of_bounds_returns_none():
    grid = create_grid(5, 5)
    assert grid.get((-1, 0)) is None
    assert grid.get((5, 2)) is None
    assert grid.get((2, 5)) is None
    assert not grid.is_passable((7, 7))


def test_set_out_of_bounds_raises():
    grid = create_grid(5, 5)
    with pytest.raises(OutOfBoundsError) as exc:
        grid.set((5, 0), CellType.EMPTY)
    assert exc.value.kind == OUT_OF_BOUNDS
    # Also usable as a plain IndexError
    with pytest.raises(IndexError):
        grid.set((0, -1), CellType.EMPTY)


def test_set_and_passability():
    grid = create_grid(5, 5)
    grid.set((2, 2), CellType.EMPTY)
    grid.set((2, 3), CellType.BONUS)
    assert grid.get((2, 2)) == CellType.EMPTY
    assert grid.is_passable((2, 2))
    assert grid.is_passable((2, 3))
    assert not grid.is_passable((1, 1))


def test_copy_is_independent():
    grid = create_grid(5, 5)
    clone = grid.copy()
    clone.set((1, 1), CellType.EMPTY)
    assert grid.get((1, 1)) == CellType.WALL
    assert grid != clone


def test_cells_view_is_read_only():
    grid = create_grid(5, 5)
    with pytest.raises(ValueError):
        grid.cells[1, 1] = 0


def test_perimeter_covers_boundary_once():
    grid = create_grid(6, 9)
    perimeter = list(grid.perimeter())
    assert len(perimeter) == len(set(perimeter)) == 2 * (6 + 9) - 4
    assert all(not grid.is_interior(pos) for pos in perimeter)


def test_interior():
    grid = create_grid(5, 5)
    assert grid.is_interior((1, 1))
    assert grid.is_interior((3, 3))
    assert not grid.is_interior((0, 2))
    assert not grid.is_interior((2, 4))


def test_find_and_lists_round_trip():
    grid = create_grid(5, 5)
    grid.set((1, 2), CellType.START)
    assert grid.find(CellType.START) == [(1, 2)]
    assert Grid.from_lists(grid.to_lists()) == grid
    assert isinstance(grid.to_lists()[0][0], int)


def test_equality_compares_contents():
    a = Grid(np.zeros((5, 5), dtype=np.int8))
    b = Grid(np.zeros((5, 5), dtype=np.int8))
    assert a == b
    assert a != Grid(np.zeros((5, 6), dtype=np.int8))
