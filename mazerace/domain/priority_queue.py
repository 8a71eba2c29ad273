"""Priority queue for the A* open set with deterministic tie-breaking."""

import heapq
import itertools
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .types import Position


@dataclass(order=True)
class PriorityItem:
    """
    Entry in the open set.

    Comparison order:
    1. f_cost (lower is better)
    2. h_cost (lower is better - favor nodes closer to the target)
    3. sequence (insertion order)
    """
    f_cost: float
    h_cost: float
    sequence: int
    position: Position = field(compare=False)
    removed: bool = field(default=False, compare=False)


class PriorityQueue:
    """
    Binary heap keyed by position with lazy deletion of stale entries.
    """

    def __init__(self):
        self._heap: List[PriorityItem] = []
        self._entry_finder: Dict[Position, PriorityItem] = {}
        self._counter = itertools.count()

    def __len__(self) -> int:
        return len(self._entry_finder)

    def is_empty(self) -> bool:
        return not self._entry_finder

    def put(self, position: Position, f_cost: float, h_cost: float) -> None:
        """
        Add a position or lower its priority.
        An existing entry with an equal or better f_cost is kept.
        """
        existing = self._entry_finder.get(position)
        if existing is not None:
            if existing.f_cost <= f_cost:
                return
            existing.removed = True

        entry = PriorityItem(f_cost, h_cost, next(self._counter), position)
        self._entry_finder[position] = entry
        heapq.heappush(self._heap, entry)

    def get(self) -> Optional[Tuple[Position, float]]:
        """Remove and return (position, f_cost) with the lowest priority, or None."""
        while self._heap:
            entry = heapq.heappop(self._heap)
            if not entry.removed:
                del self._entry_finder[entry.position]
                return entry.position, entry.f_cost
        return None

    def contains(self, position: Position) -> bool:
        return position in self._entry_finder
