"""Shared fixtures for maze engine tests."""

import pytest

from mazerace.domain.grid import Grid
from mazerace.domain.types import CellType

_SYMBOLS = {
    "#": CellType.WALL,
    ".": CellType.EMPTY,
    "S": CellType.START,
    "F": CellType.FINISH,
}


def grid_from_text(text: str) -> Grid:
    """Build a grid from a picture: '#' wall, '.' empty, 'S' start, 'F' finish."""
    lines = [line.strip() for line in text.strip().splitlines()]
    return Grid.from_lists([[int(_SYMBOLS[ch]) for ch in line] for line in lines])


@pytest.fixture
def make_grid():
    return grid_from_text


@pytest.fixture
def corridor_grid():
    """A single 1-wide corridor from (1,1) to (1,10)."""
    return grid_from_text(
        """
        ############
        #..........#
        ############
        """
    )


@pytest.fixture
def open_grid():
    """7x7 grid with a fully open interior."""
    return grid_from_text(
        """
        #######
        #.....#
        #.....#
        #.....#
        #.....#
        #.....#
        #######
        """
    )
