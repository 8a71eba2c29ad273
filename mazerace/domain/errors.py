"""Error types raised by the maze engine."""

import time
from typing import Any, Dict, Optional

# Error kinds
INVALID_DIMENSIONS = "invalid-dimensions"
INVALID_DIFFICULTY = "invalid-difficulty"
INVALID_CONFIG = "invalid-config"
GENERATION_FAILED = "generation-failed"
OUT_OF_BOUNDS = "out-of-bounds"
MALFORMED_SNAPSHOT = "malformed-snapshot"


class MazeError(Exception):
    """
    Base class for every maze engine error.

    Attributes:
        kind: Machine-readable error kind
        module: Component that raised the error
        data: Optional extra context
        timestamp: Unix time the error was created
    """

    default_kind = "maze-error"

    def __init__(self, message: str, kind: Optional[str] = None,
                 module: str = "mazerace", data: Any = None):
        super().__init__(message)
        self.message = message
        self.kind = kind or self.default_kind
        self.module = module
        self.data = data
        self.timestamp = time.time()

    def __str__(self) -> str:
        return f"[{self.kind}] {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": type(self).__name__,
            "kind": self.kind,
            "message": self.message,
            "module": self.module,
            "data": self.data,
            "timestamp": self.timestamp,
        }


class ValidationError(MazeError):
    """Rejected input: dimensions, difficulty or configuration."""
    default_kind = INVALID_DIMENSIONS


class GenerationError(MazeError):
    """The pipeline could not produce a valid maze. Indicates a defect."""
    default_kind = GENERATION_FAILED


class SnapshotError(MazeError):
    """A serialized maze could not be decoded or failed re-validation."""
    default_kind = MALFORMED_SNAPSHOT


class OutOfBoundsError(MazeError, IndexError):
    """A write addressed a position outside the grid."""
    default_kind = OUT_OF_BOUNDS
