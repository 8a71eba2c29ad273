"""Neighbor generation for 4-directional grid movement."""

from typing import Callable, List, Optional, Tuple

from .grid import Grid
from .types import DIRECTION_OFFSETS, Direction, Neighbor, Position

# Predicate deciding whether a cell may be entered
PassableFn = Callable[[Position], bool]


def neighbors(grid: Grid, position: Position,
              passable: Optional[PassableFn] = None) -> List[Neighbor]:
    """
    Get the enterable neighbors of a position, tagged with their direction.

    Neighbors come back in up, down, left, right order. An out-of-bounds
    position has no neighbors.
    """
    if not grid.in_bounds(position):
        return []
    if passable is None:
        passable = grid.is_passable

    row, col = position
    result = []
    for direction, (d_row, d_col) in DIRECTION_OFFSETS.items():
        candidate = (row + d_row, col + d_col)
        if grid.in_bounds(candidate) and passable(candidate):
            result.append(Neighbor(candidate, direction))
    return result


def lattice_neighbors(grid: Grid, position: Position, step: int = 2) -> List[Tuple[Position, Position]]:
    """
    Get the cells `step` apart in each direction, paired with the midpoint.

    Only interior targets are returned so the perimeter is never touched.
    """
    row, col = position
    result = []
    for d_row, d_col in DIRECTION_OFFSETS.values():
        target = (row + d_row * step, col + d_col * step)
        if grid.is_interior(target):
            midpoint = (row + d_row * (step // 2), col + d_col * (step // 2))
            result.append((target, midpoint))
    return result


def get_direction(from_pos: Position, to_pos: Position) -> Direction:
    """Direction of a single orthogonal step."""
    offset = (to_pos[0] - from_pos[0], to_pos[1] - from_pos[1])
    for direction, delta in DIRECTION_OFFSETS.items():
        if delta == offset:
            return direction
    raise ValueError(f"Invalid movement from {from_pos} to {to_pos}")


def is_adjacent(a: Position, b: Position) -> bool:
    return abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1
