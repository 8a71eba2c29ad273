"""Difficulty adjustment of a carved maze."""

import logging
from typing import Optional

from ..config import DifficultyTier
from ..utils.rng import SeededRNG, make_rng
from .connectivity import exists_path
from .grid import Grid
from .neighbors import neighbors
from .types import CellType, Position

logger = logging.getLogger(__name__)


def _random_interior(grid: Grid, rng: SeededRNG) -> Position:
    return (rng.randint(1, grid.rows - 2), rng.randint(1, grid.cols - 2))


def open_passages(grid: Grid, count: int, start: Position, finish: Position,
                  rng: Optional[SeededRNG] = None, attempt_multiplier: int = 3) -> Grid:
    """
    Knock out interior walls that touch at least two passable cells.

    Opening a wall only adds shortcuts, so connectivity is never reduced.
    Gives up after count * attempt_multiplier random picks.
    """
    rng = make_rng(rng)
    modified = grid.copy()
    max_attempts = count * attempt_multiplier
    added = attempts = 0

    while added < count and attempts < max_attempts:
        pos = _random_interior(modified, rng)
        attempts += 1
        if pos in (start, finish) or modified.get(pos) != CellType.WALL:
            continue
        if len(neighbors(modified, pos)) >= 2:
            modified.set(pos, CellType.EMPTY)
            added += 1

    logger.debug("Opened %d of %d passages after %d attempts", added, count, attempts)
    return modified


def seal_passages(grid: Grid, count: int, start: Position, finish: Position,
                  rng: Optional[SeededRNG] = None, attempt_multiplier: int = 3) -> Grid:
    """
    Turn interior corridor cells into walls while start and finish stay connected.

    Each candidate wall is kept only if exists_path still holds, otherwise
    the cell is reverted. Gives up after count * attempt_multiplier picks.
    """
    rng = make_rng(rng)
    modified = grid.copy()
    max_attempts = count * attempt_multiplier
    added = attempts = 0

    while added < count and attempts < max_attempts:
        pos = _random_interior(modified, rng)
        attempts += 1
        if pos in (start, finish) or modified.get(pos) != CellType.EMPTY:
            continue
        modified.set(pos, CellType.WALL)
        if exists_path(modified, start, finish):
            added += 1
        else:
            modified.set(pos, CellType.EMPTY)

    logger.debug("Sealed %d of %d passages after %d attempts", added, count, attempts)
    return modified


def adjust_difficulty(grid: Grid, start: Position, finish: Position, tier: DifficultyTier,
                      rng: Optional[SeededRNG] = None, attempt_multiplier: int = 3) -> Grid:
    """
    Apply a difficulty tier to a carved maze.

    Returns a new grid; the input is never modified.
    """
    count = tier.target_count(grid.rows, grid.cols)
    logger.debug("Adjusting difficulty to %s (%s %d cells)", tier.name, tier.mode, count)
    if tier.mode == "open":
        return open_passages(grid, count, start, finish, rng, attempt_multiplier)
    return seal_passages(grid, count, start, finish, rng, attempt_multiplier)
