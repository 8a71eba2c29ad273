"""Path reconstruction and inspection utilities."""

from typing import Dict, List, Optional

from .grid import Grid
from .neighbors import get_direction, is_adjacent
from .types import Direction, Position


def reconstruct_path(came_from: Dict[Position, Optional[Position]], target: Position) -> List[Position]:
    """
    Walk predecessor links back from target.
    Returns the path from start to target, both inclusive.
    """
    path = []
    current: Optional[Position] = target
    while current is not None:
        path.append(current)
        current = came_from.get(current)
    path.reverse()
    return path


def path_length(path: List[Position]) -> int:
    """Number of moves along the path."""
    return max(len(path) - 1, 0)


def path_directions(path: List[Position]) -> List[Direction]:
    """Direction of each step along the path."""
    return [get_direction(path[i - 1], path[i]) for i in range(1, len(path))]


def validate_path(grid: Grid, path: List[Position]) -> bool:
    """
    Validate that a path is passable and contiguous.
    An empty path is never valid.
    """
    if not path:
        return False
    if not all(grid.is_passable(pos) for pos in path):
        return False
    return all(is_adjacent(path[i - 1], path[i]) for i in range(1, len(path)))
