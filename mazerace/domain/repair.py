"""Final repair passes: start-finish route guarantee and sealed boundary."""

import logging
from typing import List, Optional

from ..config import PathfinderConfig
from .astar import AStarPathfinder
from .connectivity import exists_path
from .errors import GenerationError
from .grid import Grid
from .types import CellType, Position

logger = logging.getLogger(__name__)


def bresenham_line(start: Position, finish: Position) -> List[Position]:
    """
    Cells on the Bresenham line between two positions, both inclusive.

    Consecutive cells may touch only diagonally; use `_orthogonalize` when
    the line must be walkable.
    """
    (r0, c0), (r1, c1) = start, finish
    d_row, d_col = abs(r1 - r0), abs(c1 - c0)
    step_row = 1 if r1 >= r0 else -1
    step_col = 1 if c1 >= c0 else -1
    error = d_col - d_row

    line = []
    row, col = r0, c0
    while True:
        line.append((row, col))
        if (row, col) == (r1, c1):
            return line
        doubled = 2 * error
        if doubled > -d_row:
            error -= d_row
            col += step_col
        if doubled < d_col:
            error += d_col
            row += step_row


def _orthogonalize(line: List[Position]) -> List[Position]:
    # Fill each diagonal step with the horizontal elbow so the route is 4-connected
    result = line[:1]
    for row, col in line[1:]:
        prev_row, prev_col = result[-1]
        if prev_row != row and prev_col != col:
            result.append((prev_row, col))
        result.append((row, col))
    return result


def _carve_route(grid: Grid, route: List[Position]) -> int:
    carved = 0
    for pos in route:
        if grid.get(pos) == CellType.WALL:
            grid.set(pos, CellType.EMPTY)
            carved += 1
    return carved


def ensure_path(grid: Grid, start: Position, finish: Position,
                config: Optional[PathfinderConfig] = None) -> Grid:
    """
    Guarantee a passable route between start and finish.

    When the two are disconnected, A* is run through the interior treating
    walls as enterable and every wall on that route is carved. If A* fails,
    the straight Bresenham line between start and finish is carved instead,
    overwriting whatever walls it crosses.

    Raises:
        GenerationError: if start and finish are still disconnected afterwards
    """
    repaired = grid.copy()
    if exists_path(repaired, start, finish):
        logger.debug("Path already exists between %s and %s", start, finish)
        return repaired

    logger.warning("No path found between start and finish. Creating a path...")
    result = AStarPathfinder(config).search(repaired, start, finish, passable=repaired.is_interior)
    if result.success:
        carved = _carve_route(repaired, result.path)
        logger.info("Carved %d wall cells along a %d-step route", carved, result.length)
    else:
        logger.warning("Failed to create path using A*. Carving a straight line instead")
        _carve_route(repaired, _orthogonalize(bresenham_line(start, finish)))

    if not exists_path(repaired, start, finish):
        logger.error("Failed to create path between %s and %s", start, finish)
        raise GenerationError("Cannot ensure a path exists between start and finish",
                              module="repair",
                              data={"start": list(start), "finish": list(finish)})
    return repaired


def seal_boundary(grid: Grid) -> Grid:
    """Force every perimeter cell to WALL, overwriting anything placed there."""
    sealed = grid.copy()
    for pos in sealed.perimeter():
        sealed.set(pos, CellType.WALL)
    return sealed
