"""Maze race engine - maze generation and pathfinding for the snail race game.

Builds grid mazes with a guaranteed start-to-finish route, tunable difficulty,
and exposes route and neighbor queries for the race simulation layer.
"""

__version__ = "1.0.0"
__author__ = "Maze Race Team"

from .domain.types import CellType, Direction, MazeResult, Neighbor, Position
from .domain.errors import (
    MazeError, ValidationError, GenerationError, SnapshotError, OutOfBoundsError
)
from .domain.grid import Grid, create_grid
from .domain.astar import find_path
from .domain.walk import random_walk
from .domain.neighbors import neighbors
from .domain.connectivity import exists_path, farthest_from
from .app.generator import MazeGenerator, generate
from .utils.serialization import serialize, deserialize
from .config import MazeConfig, DifficultyTier, PathfinderConfig

__all__ = [
    "CellType", "Direction", "MazeResult", "Neighbor", "Position",
    "MazeError", "ValidationError", "GenerationError", "SnapshotError",
    "OutOfBoundsError", "Grid", "create_grid", "find_path", "random_walk",
    "neighbors", "exists_path", "farthest_from", "MazeGenerator", "generate",
    "serialize", "deserialize", "MazeConfig", "DifficultyTier",
    "PathfinderConfig",
]
