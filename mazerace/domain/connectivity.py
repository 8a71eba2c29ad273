"""Breadth-first connectivity queries.

These are the authoritative reachability checks: every decision about
whether start and finish are connected goes through `exists_path`.
"""

from collections import deque
from typing import Dict, Optional, Set

from .grid import Grid
from .neighbors import neighbors
from .types import Position


def distances_from(grid: Grid, origin: Position) -> Dict[Position, int]:
    """
    Hop distance from origin to every reachable passable cell.

    Dict insertion order is BFS discovery order. Empty when origin is out
    of bounds or a wall.
    """
    if not grid.is_passable(origin):
        return {}
    distances = {origin: 0}
    queue = deque([origin])
    while queue:
        current = queue.popleft()
        for neighbor in neighbors(grid, current):
            if neighbor.position not in distances:
                distances[neighbor.position] = distances[current] + 1
                queue.append(neighbor.position)
    return distances


def reachable_from(grid: Grid, origin: Position) -> Set[Position]:
    return set(distances_from(grid, origin))


def farthest_from(grid: Grid, origin: Position) -> Optional[Position]:
    """
    The reachable cell with the greatest hop distance from origin.

    Ties go to the cell discovered first. This approximates the far end of
    the maze from a single source; it is not an exact diameter computation.
    Returns None when origin is out of bounds or a wall.
    """
    distances = distances_from(grid, origin)
    if not distances:
        return None
    farthest, best = origin, 0
    for pos, distance in distances.items():
        if distance > best:
            farthest, best = pos, distance
    return farthest


def exists_path(grid: Grid, a: Position, b: Position) -> bool:
    """Whether b is reachable from a through passable cells."""
    if not grid.is_passable(a) or not grid.is_passable(b):
        return False
    if a == b:
        return True
    visited = {a}
    queue = deque([a])
    while queue:
        current = queue.popleft()
        for neighbor in neighbors(grid, current):
            pos = neighbor.position
            if pos == b:
                return True
            if pos not in visited:
                visited.add(pos)
                queue.append(pos)
    return False
