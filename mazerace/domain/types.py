"""Core type definitions for the maze engine."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from typing import TYPE_CHECKING, Dict, List, Literal, Tuple

if TYPE_CHECKING:
    from .grid import Grid

# Grid position as (row, col), 0-indexed
Position = Tuple[int, int]

# Movement directions on the grid
Direction = Literal["up", "down", "left", "right"]

# Difficulty transformation modes
AdjustMode = Literal["open", "seal"]


class CellType(IntEnum):
    """Cell vocabulary. Values match the snapshot wire format."""
    EMPTY = 0
    WALL = 1
    START = 2
    FINISH = 3
    # Reserved for gameplay layers; the generator never places these
    OBSTACLE = 4
    BONUS = 5
    TRAP = 6


# Offsets in (row, col); iteration order is up, down, left, right
DIRECTION_OFFSETS: Dict[Direction, Tuple[int, int]] = {
    "up": (-1, 0),
    "down": (1, 0),
    "left": (0, -1),
    "right": (0, 1),
}


@dataclass(frozen=True)
class Neighbor:
    """A passable cell adjacent to some position."""
    position: Position
    direction: Direction


@dataclass(frozen=True)
class MazeResult:
    """
    Output of one generation run.

    Equality covers the grid, start, finish and difficulty; the creation
    timestamp is metadata only.
    """
    grid: "Grid"
    start: Position
    finish: Position
    difficulty: str = "medium"
    created_at: str = field(default_factory=lambda: datetime.now().isoformat(), compare=False)

    # Grids are mutable arrays
    __hash__ = None

    @property
    def rows(self) -> int:
        return self.grid.rows

    @property
    def cols(self) -> int:
        return self.grid.cols

    def validate(self) -> List[str]:
        """
        Check the result invariants: one START and one FINISH, an all-WALL
        perimeter with both endpoints strictly inside it, and a route between them.

        Returns a list of human-readable violations, empty when valid.
        """
        from .connectivity import exists_path

        problems = []
        grid = self.grid
        if grid.get(self.start) != CellType.START:
            problems.append(f"start {self.start} is not a START cell")
        if grid.get(self.finish) != CellType.FINISH:
            problems.append(f"finish {self.finish} is not a FINISH cell")
        if self.start == self.finish:
            problems.append("start and finish coincide")
        if grid.count(CellType.START) != 1:
            problems.append(f"expected one START cell, found {grid.count(CellType.START)}")
        if grid.count(CellType.FINISH) != 1:
            problems.append(f"expected one FINISH cell, found {grid.count(CellType.FINISH)}")
        breaches = [pos for pos in grid.perimeter() if grid.get(pos) != CellType.WALL]
        if breaches:
            problems.append(f"{len(breaches)} perimeter cells are not walls")
        for name, pos in (("start", self.start), ("finish", self.finish)):
            if not grid.is_interior(pos):
                problems.append(f"{name} {pos} is not strictly inside the boundary")
        if not problems and not exists_path(grid, self.start, self.finish):
            problems.append("no passable route between start and finish")
        return problems

    def is_valid(self) -> bool:
        """Whether every invariant holds."""
        return not self.validate()
