"""A* pathfinding over the maze grid."""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set

from ..config import PathfinderConfig
from .grid import Grid
from .heuristics import manhattan_distance, weighted
from .neighbors import PassableFn, neighbors
from .path import reconstruct_path
from .priority_queue import PriorityQueue
from .types import Position

logger = logging.getLogger(__name__)


@dataclass
class PathfindingResult:
    """Result of a pathfinding operation."""
    path: List[Position] = field(default_factory=list)
    nodes_explored: int = 0
    found: bool = False
    hit_cap: bool = False

    @property
    def success(self) -> bool:
        return self.found and bool(self.path)

    @property
    def length(self) -> int:
        return max(len(self.path) - 1, 0)


class AStarPathfinder:
    """
    A* search with unit edge costs and a (optionally weighted) Manhattan heuristic.

    The search never mutates the grid. Expansion stops after the configured
    iteration cap, in which case the result is reported as not found.
    """

    def __init__(self, config: Optional[PathfinderConfig] = None):
        self.config = config or PathfinderConfig()
        self._heuristic = weighted(manhattan_distance, self.config.heuristic_weight)

    def search(self, grid: Grid, start: Position, finish: Position,
               passable: Optional[PassableFn] = None) -> PathfindingResult:
        """
        Search for a route from start to finish.

        Args:
            grid: Grid to search in
            start: Starting position
            finish: Target position
            passable: Optional override for which cells may be entered

        Returns:
            PathfindingResult; its path is empty when no route was found
        """
        if passable is None:
            passable = grid.is_passable
        if not grid.in_bounds(start) or not grid.in_bounds(finish):
            return PathfindingResult()
        if not passable(start) or not passable(finish):
            return PathfindingResult()
        if start == finish:
            return PathfindingResult(path=[start], found=True)

        max_iterations = self.config.iteration_cap(grid.rows, grid.cols)
        open_set = PriorityQueue()
        closed_set: Set[Position] = set()
        g_cost: Dict[Position, int] = {start: 0}
        came_from: Dict[Position, Optional[Position]] = {start: None}

        h_start = self._heuristic(start, finish)
        open_set.put(start, h_start, h_start)
        iterations = 0

        while not open_set.is_empty():
            if iterations >= max_iterations:
                logger.debug("A* hit iteration cap (%d) searching %s -> %s",
                             max_iterations, start, finish)
                return PathfindingResult(nodes_explored=iterations, hit_cap=True)

            current, _ = open_set.get()
            iterations += 1
            closed_set.add(current)

            if current == finish:
                return PathfindingResult(
                    path=reconstruct_path(came_from, finish),
                    nodes_explored=iterations,
                    found=True,
                )

            tentative_g = g_cost[current] + 1
            for neighbor in neighbors(grid, current, passable):
                pos = neighbor.position
                if pos in closed_set:
                    continue
                if not open_set.contains(pos) or tentative_g < g_cost[pos]:
                    g_cost[pos] = tentative_g
                    came_from[pos] = current
                    h_cost = self._heuristic(pos, finish)
                    open_set.put(pos, tentative_g + h_cost, h_cost)

        return PathfindingResult(nodes_explored=iterations)


def find_path(grid: Grid, start: Position, finish: Position,
              config: Optional[PathfinderConfig] = None) -> List[Position]:
    """
    Shortest passable route from start to finish, both inclusive.

    Returns an empty list when finish is unreachable, either endpoint is
    out of bounds or a wall, or the iteration cap is hit.
    """
    return AStarPathfinder(config).search(grid, start, finish).path
