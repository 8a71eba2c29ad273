import logging

import numpy as np
import pytest

from mazerace import generate, MazeGenerator
from mazerace.app.fsm import GenerationStage, STAGE_ORDER
from mazerace.config import MazeConfig
from mazerace.domain.connectivity import exists_path
from mazerace.domain.errors import ValidationError, INVALID_DIMENSIONS
from mazerace.domain.types import CellType
from mazerace.utils.rng import SeededRNG

DIFFICULTIES = ["easy", "medium", "hard", "extreme"]


@pytest.mark.parametrize("difficulty", DIFFICULTIES)
@pytest.mark.parametrize("rows,cols", [(5, 5), (6, 7), (12, 9), (20, 20), (25, 31)])
def test_generated_mazes_hold_invariants(rows, cols, difficulty):
    result = generate(rows, cols, difficulty, seed=rows * 31 + cols)
    assert result.validate() == []
    grid = result.grid
    assert grid.shape == (rows, cols)
    assert grid.find(CellType.START) == [result.start]
    assert grid.find(CellType.FINISH) == [result.finish]
    assert result.start != result.finish
    assert all(grid.get(pos) == CellType.WALL for pos in grid.perimeter())
    assert exists_path(grid, result.start, result.finish)
    assert result.difficulty == difficulty


def test_medium_twenty_by_twenty():
    result = generate(20, 20, "medium", seed=2024)
    assert result.grid.shape == (20, 20)
    for row, col in (result.start, result.finish):
        assert 1 <= row <= 18 and 1 <= col <= 18
    assert exists_path(result.grid, result.start, result.finish)
    assert all(result.grid.get(pos) == CellType.WALL for pos in result.grid.perimeter())


def test_rows_below_minimum_rejected():
    with pytest.raises(ValidationError) as exc:
        generate(4, 20, "easy")
    assert exc.value.kind == INVALID_DIMENSIONS


@pytest.mark.parametrize("rows,cols", [(20, 3), (5.5, 10), ("10", 10), (True, 10)])
def test_invalid_dimensions_rejected(rows, cols):
    with pytest.raises(ValidationError):
        MazeGenerator(rows, cols)


def test_numpy_integer_dimensions_accepted():
    result = generate(np.int64(9), np.int32(11), "easy", seed=6)
    assert result.grid.shape == (9, 11)
    assert result.is_valid()


def test_maze_result_is_unhashable():
    result = generate(7, 7, "easy", seed=1)
    with pytest.raises(TypeError):
        hash(result)
    assert result == generate(7, 7, "easy", seed=1)


def test_unknown_difficulty_falls_back_to_medium(caplog):
    with caplog.at_level(logging.WARNING, logger="mazerace.config"):
        generator = MazeGenerator(9, 9, "nightmare", seed=1)
    assert generator.difficulty == "medium"
    assert "nightmare" in caplog.text
    assert generator.generate().difficulty == "medium"


def test_oversized_maze_warns(caplog):
    config = MazeConfig(max_recommended_size=10)
    with caplog.at_level(logging.WARNING, logger="mazerace.app.generator"):
        result = generate(11, 7, "hard", config=config, seed=5)
    assert "exceeds recommended maximum" in caplog.text
    assert result.is_valid()


def test_same_seed_same_maze():
    assert generate(15, 15, "extreme", seed=77) == generate(15, 15, "extreme", seed=77)


def test_independent_generators_do_not_share_state():
    parent = SeededRNG(10)
    a = MazeGenerator(11, 11, "easy", rng=parent.spawn())
    b = MazeGenerator(11, 11, "easy", rng=parent.spawn())
    assert a.rng is not b.rng
    assert a.generate().is_valid()
    assert b.generate().is_valid()


def test_observer_sees_every_stage_in_order():
    class Recorder:
        def __init__(self):
            self.stages = []
            self.grids = []

        def on_stage(self, stage, grid):
            self.stages.append(stage)
            self.grids.append(grid)

    recorder = Recorder()
    result = MazeGenerator(9, 9, "hard", seed=3, observer=recorder).generate()
    assert recorder.stages == STAGE_ORDER
    assert recorder.grids[0].count(CellType.WALL) == 81
    assert recorder.stages[-1] is GenerationStage.BOUNDARY_SEALED
    assert recorder.grids[-1] == result.grid
    assert recorder.grids[-1] is not result.grid


def test_generator_is_reusable():
    generator = MazeGenerator(9, 13, "medium", seed=8)
    first = generator.generate()
    second = generator.generate()
    assert first.is_valid() and second.is_valid()
    assert first.grid is not second.grid


def test_observer_is_driven_by_stage_machine(monkeypatch):
    entered = []
    original = MazeGenerator._build_state_machine

    def tracking(self):
        fsm = original(self)
        for stage in STAGE_ORDER[1:]:
            fsm.on_stage_enter(stage, lambda context, stage=stage: entered.append((stage, context["grid"].shape)))
        return fsm

    monkeypatch.setattr(MazeGenerator, "_build_state_machine", tracking)
    seen = []

    class Recorder:
        def on_stage(self, stage, grid):
            seen.append(stage)

    MazeGenerator(7, 9, "easy", seed=2, observer=Recorder()).generate()
    assert [stage for stage, _ in entered] == STAGE_ORDER[1:]
    assert all(shape == (7, 9) for _, shape in entered)
    assert seen == STAGE_ORDER
