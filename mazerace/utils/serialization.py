"""
Maze snapshot serialization for saving and loading mazes.
Snapshots are JSON documents carrying the grid, start, finish and metadata.
"""

import json
import logging
import os
from datetime import datetime
from typing import Any, Dict, Mapping

from ..domain.errors import SnapshotError
from ..domain.grid import Grid
from ..domain.types import CellType, MazeResult, Position

logger = logging.getLogger(__name__)

SNAPSHOT_VERSION = "1.0"
REQUIRED_FIELDS = ("grid", "start", "finish")
_CELL_VALUES = {int(cell) for cell in CellType}


def to_dict(result: MazeResult) -> Dict[str, Any]:
    """Convert a maze result to a JSON-ready dictionary."""
    return {
        "grid": result.grid.to_lists(),
        "start": list(result.start),
        "finish": list(result.finish),
        "metadata": {
            "rows": result.rows,
            "cols": result.cols,
            "difficulty": result.difficulty,
            "createdAt": result.created_at,
            "version": SNAPSHOT_VERSION,
        },
    }


def serialize(result: MazeResult) -> str:
    return json.dumps(to_dict(result))


def _parse_position(value: Any, name: str) -> Position:
    # Accept [row, col] as well as {"row": r, "col": c}
    if isinstance(value, Mapping):
        value = [value.get("row"), value.get("col")]
    if (not isinstance(value, (list, tuple)) or len(value) != 2
            or not all(isinstance(v, int) and not isinstance(v, bool) for v in value)):
        raise SnapshotError(f"Invalid {name} position: {value!r}", module="serialization")
    return (value[0], value[1])


def _parse_grid(rows: Any) -> Grid:
    if not isinstance(rows, list) or not rows or not all(isinstance(r, list) for r in rows):
        raise SnapshotError("Grid must be a non-empty list of rows", module="serialization")
    width = len(rows[0])
    if width == 0 or any(len(r) != width for r in rows):
        raise SnapshotError("Grid rows must be non-empty and of equal length", module="serialization")
    for row in rows:
        for value in row:
            if isinstance(value, bool) or not isinstance(value, int) or value not in _CELL_VALUES:
                raise SnapshotError(f"Unknown cell value {value!r}", module="serialization")
    return Grid.from_lists(rows)


def from_dict(data: Any) -> MazeResult:
    """
    Rebuild a maze result from a decoded snapshot and re-validate it.

    Raises:
        SnapshotError: on missing fields, malformed values, or a maze whose
            start/finish/route invariants do not hold
    """
    if not isinstance(data, Mapping):
        raise SnapshotError("Snapshot must be a JSON object", module="serialization")
    missing = [name for name in REQUIRED_FIELDS if not data.get(name)]
    if missing:
        raise SnapshotError(f"Invalid maze data: missing required fields {missing}",
                            module="serialization", data={"missing": missing})

    grid = _parse_grid(data["grid"])
    start = _parse_position(data["start"], "start")
    finish = _parse_position(data["finish"], "finish")

    metadata = data.get("metadata") or {}
    if not isinstance(metadata, Mapping):
        raise SnapshotError("Snapshot metadata must be an object", module="serialization")
    for key, actual in (("rows", grid.rows), ("cols", grid.cols)):
        if key in metadata and metadata[key] != actual:
            raise SnapshotError(f"Metadata {key}={metadata[key]!r} does not match grid ({actual})",
                                module="serialization")

    result = MazeResult(
        grid=grid,
        start=start,
        finish=finish,
        difficulty=metadata.get("difficulty", "medium"),
        created_at=metadata.get("createdAt") or datetime.now().isoformat(),
    )
    problems = result.validate()
    if problems:
        raise SnapshotError(f"Snapshot failed validation: {'; '.join(problems)}",
                            module="serialization", data={"problems": problems})
    return result


def deserialize(text: str) -> MazeResult:
    try:
        data = json.loads(text)
    except (TypeError, ValueError) as e:
        raise SnapshotError(f"Failed to deserialize maze: {e}", module="serialization") from e
    return from_dict(data)


def save_maze(result: MazeResult, filepath: str) -> str:
    """Save a maze snapshot to a JSON file, creating parent directories."""
    directory = os.path.dirname(filepath)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(filepath, "w") as f:
        json.dump(to_dict(result), f, indent=2)
    logger.debug("Saved maze snapshot to %s", filepath)
    return filepath


def load_maze(filepath: str) -> MazeResult:
    """Load and re-validate a maze snapshot from a JSON file."""
    try:
        with open(filepath, "r") as f:
            text = f.read()
    except OSError as e:
        raise SnapshotError(f"Error loading maze from {filepath}: {e}", module="serialization") from e
    return deserialize(text)
