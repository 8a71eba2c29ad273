"""Rectangular cell grid backing every maze."""

from typing import Iterator, List, Optional, Sequence

import numpy as np

from .types import CellType, Position
from .errors import OutOfBoundsError, ValidationError, INVALID_DIMENSIONS


class Grid:
    """
    Maze grid storing one CellType per (row, col).

    Reads outside the grid return None or False; writes outside the grid
    raise OutOfBoundsError.
    """

    def __init__(self, cells: np.ndarray):
        if cells.ndim != 2:
            raise ValidationError(f"Grid must be two-dimensional, got shape {cells.shape}",
                                  kind=INVALID_DIMENSIONS, module="grid")
        self._cells = cells.astype(np.int8, copy=False)

    @classmethod
    def create(cls, rows: int, cols: int, fill: CellType = CellType.WALL) -> "Grid":
        """Create a rows x cols grid filled with `fill` (walls by default)."""
        if rows <= 0 or cols <= 0:
            raise ValidationError(f"Grid dimensions must be positive, got {rows}x{cols}",
                                  kind=INVALID_DIMENSIONS, module="grid",
                                  data={"rows": rows, "cols": cols})
        return cls(np.full((rows, cols), int(fill), dtype=np.int8))

    @classmethod
    def from_lists(cls, rows: Sequence[Sequence[int]]) -> "Grid":
        """Build a grid from nested row lists of cell values."""
        return cls(np.array(rows, dtype=np.int8))

    @property
    def rows(self) -> int:
        return int(self._cells.shape[0])

    @property
    def cols(self) -> int:
        return int(self._cells.shape[1])

    @property
    def shape(self):
        return (self.rows, self.cols)

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the underlying array."""
        view = self._cells.view()
        view.flags.writeable = False
        return view

    def in_bounds(self, pos: Position) -> bool:
        row, col = pos
        return 0 <= row < self.rows and 0 <= col < self.cols

    def is_interior(self, pos: Position) -> bool:
        """Strictly inside the perimeter."""
        row, col = pos
        return 0 < row < self.rows - 1 and 0 < col < self.cols - 1

    def get(self, pos: Position) -> Optional[CellType]:
        """Cell type at pos, or None when out of bounds."""
        if not self.in_bounds(pos):
            return None
        return CellType(int(self._cells[pos[0], pos[1]]))

    def set(self, pos: Position, cell_type: CellType) -> None:
        if not self.in_bounds(pos):
            raise OutOfBoundsError(f"Position {pos} is outside the {self.rows}x{self.cols} grid",
                                   module="grid", data={"position": list(pos)})
        self._cells[pos[0], pos[1]] = int(cell_type)

    def is_passable(self, pos: Position) -> bool:
        """Anything but a wall is passable; out of bounds is not."""
        return self.in_bounds(pos) and self._cells[pos[0], pos[1]] != CellType.WALL

    def copy(self) -> "Grid":
        return Grid(self._cells.copy())

    def positions(self) -> Iterator[Position]:
        for row in range(self.rows):
            for col in range(self.cols):
                yield (row, col)

    def perimeter(self) -> Iterator[Position]:
        """Every boundary cell exactly once, clockwise from the top-left corner."""
        last_row, last_col = self.rows - 1, self.cols - 1
        for col in range(self.cols):
            yield (0, col)
        for row in range(1, self.rows):
            yield (row, last_col)
        if last_row > 0:
            for col in range(last_col - 1, -1, -1):
                yield (last_row, col)
        if last_col > 0:
            for row in range(last_row - 1, 0, -1):
                yield (row, 0)

    def find(self, cell_type: CellType) -> List[Position]:
        rows, cols = np.nonzero(self._cells == int(cell_type))
        return [(int(r), int(c)) for r, c in zip(rows, cols)]

    def count(self, cell_type: CellType) -> int:
        return int(np.count_nonzero(self._cells == int(cell_type)))

    def to_lists(self) -> List[List[int]]:
        return self._cells.astype(int).tolist()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._cells, other._cells))

    __hash__ = None

    def __repr__(self) -> str:
        return f"Grid({self.rows}x{self.cols}, walls={self.count(CellType.WALL)})"


def create_grid(rows: int, cols: int) -> Grid:
    """Create a grid filled entirely with walls."""
    return Grid.create(rows, cols)
