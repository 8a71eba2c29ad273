"""Heuristic functions for A* pathfinding."""

from typing import Callable

from .types import Position

Heuristic = Callable[[Position, Position], float]


def manhattan_distance(start: Position, target: Position) -> float:
    """
    Manhattan (L1) distance heuristic.
    Admissible and consistent for 4-directional unit-cost movement.
    """
    return abs(start[0] - target[0]) + abs(start[1] - target[1])


def weighted(heuristic: Heuristic, weight: float) -> Heuristic:
    """
    Scale a heuristic by `weight`.

    Weights above 1 speed the search up but routes are no longer
    guaranteed shortest.
    """
    if weight <= 0:
        raise ValueError(f"Heuristic weight must be positive, got {weight}")
    if weight == 1:
        return heuristic

    def _scaled(start: Position, target: Position) -> float:
        return weight * heuristic(start, target)

    return _scaled
