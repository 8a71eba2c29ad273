"""Randomized depth-first maze carving (recursive backtracking)."""

import logging
from typing import List, Optional, Tuple

from ..utils.rng import SeededRNG, make_rng
from .grid import Grid
from .neighbors import lattice_neighbors
from .types import CellType, Position

logger = logging.getLogger(__name__)


def lattice_range(dimension: int) -> range:
    """Odd coordinates usable as carving origins: 1, 3, ... up to dimension - 3."""
    return range(1, max(dimension - 2, 2), 2)


def pick_origin(grid: Grid, rng: SeededRNG) -> Position:
    """Random odd-parity cell within the safe interior."""
    return (rng.choice(lattice_range(grid.rows)), rng.choice(lattice_range(grid.cols)))


def carve(grid: Grid, rng: Optional[SeededRNG] = None,
          origin: Optional[Position] = None) -> Tuple[Grid, Position]:
    """
    Carve a perfect maze into a copy of grid.

    Corridor cells sit on the odd-parity lattice two steps apart, with the
    wall between them removed. Only cells that are still walls are visited,
    so the carved cells form a single tree. Targets are kept strictly
    inside the perimeter.

    Args:
        grid: Input grid, normally all walls; left untouched
        rng: Random source; the walk is deterministic for a fixed sequence
        origin: Optional starting cell, picked at random when omitted

    Returns:
        Tuple of (carved grid, origin)
    """
    rng = make_rng(rng)
    carved = grid.copy()
    if origin is None:
        origin = pick_origin(carved, rng)

    carved.set(origin, CellType.EMPTY)
    stack: List[Position] = [origin]
    cells_carved = 1

    while stack:
        current = stack[-1]
        candidates = [
            (target, midpoint)
            for target, midpoint in lattice_neighbors(carved, current)
            if carved.get(target) == CellType.WALL
        ]
        if not candidates:
            stack.pop()
            continue

        target, midpoint = rng.choice(candidates)
        carved.set(midpoint, CellType.EMPTY)
        carved.set(target, CellType.EMPTY)
        stack.append(target)
        cells_carved += 1

    logger.debug("Carved %d lattice cells from origin %s", cells_carved, origin)
    return carved, origin
