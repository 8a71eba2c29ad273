"""Maze generation pipeline.

Runs one maze through carving, start/finish placement, difficulty
adjustment, route repair and boundary sealing. Every stage takes a grid
and returns a new one, so no stage ever observes another's half-finished
work.
"""

import logging
import numbers
from datetime import datetime
from typing import Optional, Protocol

from ..config import MazeConfig
from ..domain.carver import carve
from ..domain.connectivity import distances_from, farthest_from
from ..domain.difficulty import adjust_difficulty
from ..domain.errors import GenerationError, ValidationError, INVALID_DIMENSIONS
from ..domain.grid import Grid, create_grid
from ..domain.repair import ensure_path, seal_boundary
from ..domain.types import CellType, MazeResult, Position
from ..utils.rng import SeededRNG, make_rng
from .fsm import STAGE_ORDER, GenerationStage, GenerationStateMachine

logger = logging.getLogger(__name__)


class GenerationObserver(Protocol):
    """Bridge for rendering or gameplay layers watching a generation run."""

    def on_stage(self, stage: GenerationStage, grid: Grid) -> None:
        """Called after each stage with a private copy of the grid."""
        ...


def validate_dimensions(rows, cols, config: MazeConfig) -> None:
    """
    Reject dimensions below the configured minimum.

    Raises:
        ValidationError: kind invalid-dimensions
    """
    for name, value in (("rows", rows), ("cols", cols)):
        if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value < config.min_size:
            raise ValidationError(
                f"Invalid {name} value: {value!r}. Must be an integer >= {config.min_size}",
                kind=INVALID_DIMENSIONS, module="generator",
                data={"rows": rows, "cols": cols},
            )
    limit = config.max_recommended_size
    if rows > limit or cols > limit:
        logger.warning("Maze size %dx%d exceeds recommended maximum (%dx%d). "
                       "Performance may be affected.", rows, cols, limit, limit)


class MazeGenerator:
    """
    Generates mazes of one size and difficulty.

    A generator is bound to its dimensions and tier; build a new one to
    change either. Each generator owns its random source.
    """

    def __init__(self, rows: int, cols: int, difficulty: Optional[str] = None,
                 config: Optional[MazeConfig] = None, rng: Optional[SeededRNG] = None,
                 seed: Optional[int] = None, observer: Optional[GenerationObserver] = None):
        self.config = config or MazeConfig()
        validate_dimensions(rows, cols, self.config)
        self.rows = int(rows)
        self.cols = int(cols)
        self.tier = self.config.resolve_tier(difficulty or self.config.default_difficulty)
        self.rng = make_rng(rng, seed)
        self.observer = observer
        logger.debug("Maze generator initialized with size %dx%d, difficulty: %s",
                     rows, cols, self.tier.name)

    @property
    def difficulty(self) -> str:
        return self.tier.name

    def generate(self) -> MazeResult:
        """
        Run the full pipeline.

        Raises:
            GenerationError: if start and finish cannot be connected
        """
        logger.info("Starting maze generation: %dx%d, difficulty=%s",
                    self.rows, self.cols, self.difficulty)
        fsm = self._build_state_machine()

        grid = create_grid(self.rows, self.cols)
        self._notify(fsm.current_stage, grid)

        grid, start = carve(grid, self.rng)
        self._advance(fsm, GenerationStage.CARVED, grid)

        grid, finish = self._place_start_and_finish(grid, start)
        self._advance(fsm, GenerationStage.START_FINISH_PLACED, grid)

        grid = adjust_difficulty(grid, start, finish, self.tier, self.rng,
                                 self.config.attempt_multiplier)
        self._advance(fsm, GenerationStage.DIFFICULTY_ADJUSTED, grid)

        grid = ensure_path(grid, start, finish, self.config.pathfinder)
        self._advance(fsm, GenerationStage.PATH_REPAIRED, grid)

        grid = seal_boundary(grid)
        self._advance(fsm, GenerationStage.BOUNDARY_SEALED, grid)

        result = MazeResult(grid=grid, start=start, finish=finish,
                            difficulty=self.difficulty,
                            created_at=datetime.now().isoformat())
        problems = result.validate()
        if problems:
            logger.error("Generated maze violates invariants: %s", "; ".join(problems))
            raise GenerationError("Generated maze violates invariants",
                                  module="generator", data={"problems": problems})

        logger.info("Maze generation completed: start=%s finish=%s distance=%d",
                    start, finish, distances_from(grid, start).get(finish, -1))
        return result

    def _place_start_and_finish(self, grid: Grid, start: Position):
        placed = grid.copy()
        finish = farthest_from(placed, start)
        if finish is None or finish == start:
            raise GenerationError("No reachable cell to place the finish on",
                                  module="generator", data={"start": list(start)})
        placed.set(start, CellType.START)
        placed.set(finish, CellType.FINISH)
        return placed, finish

    def _build_state_machine(self) -> GenerationStateMachine:
        fsm = GenerationStateMachine()
        if self.observer is not None:
            for stage in STAGE_ORDER[1:]:
                fsm.on_stage_enter(stage, lambda context, stage=stage: self._notify(stage, context["grid"]))
        return fsm

    def _advance(self, fsm: GenerationStateMachine, stage: GenerationStage, grid: Grid):
        if not fsm.transition_to(stage, {"grid": grid}):
            raise GenerationError(f"Illegal stage transition {fsm.current_stage.value} -> {stage.value}",
                                  module="generator")

    def _notify(self, stage: GenerationStage, grid: Grid):
        if self.observer is not None:
            self.observer.on_stage(stage, grid.copy())


def generate(rows: int, cols: int, difficulty: Optional[str] = None, *,
             config: Optional[MazeConfig] = None, rng: Optional[SeededRNG] = None,
             seed: Optional[int] = None) -> MazeResult:
    """Generate one maze. See MazeGenerator for the pipeline."""
    return MazeGenerator(rows, cols, difficulty, config=config, rng=rng, seed=seed).generate()
