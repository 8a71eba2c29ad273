"""Finite state machine for the maze generation stages."""

from enum import Enum
from typing import Callable, Dict, List, Optional


class GenerationStage(Enum):
    """Stages of one generation run, in order."""
    EMPTY = "empty"
    CARVED = "carved"
    START_FINISH_PLACED = "start_finish_placed"
    DIFFICULTY_ADJUSTED = "difficulty_adjusted"
    PATH_REPAIRED = "path_repaired"
    BOUNDARY_SEALED = "boundary_sealed"


STAGE_ORDER: List[GenerationStage] = list(GenerationStage)


class GenerationStateMachine:
    """
    Linear state machine for a generation run.

    State Transitions:
    EMPTY -> CARVED -> START_FINISH_PLACED -> DIFFICULTY_ADJUSTED
          -> PATH_REPAIRED -> BOUNDARY_SEALED (terminal)

    No stage may be skipped or repeated.
    """

    def __init__(self):
        self._current_stage = GenerationStage.EMPTY
        self._stage_callbacks: Dict[GenerationStage, List[Callable[[Optional[dict]], None]]] = {}
        self._valid_transitions = self._build_transition_map()

    def _build_transition_map(self) -> Dict[GenerationStage, Optional[GenerationStage]]:
        """Each stage has exactly one successor; the last has none."""
        successors = STAGE_ORDER[1:] + [None]
        return dict(zip(STAGE_ORDER, successors))

    @property
    def current_stage(self) -> GenerationStage:
        return self._current_stage

    @property
    def next_stage(self) -> Optional[GenerationStage]:
        return self._valid_transitions[self._current_stage]

    def can_transition_to(self, target_stage: GenerationStage) -> bool:
        return self.next_stage is target_stage

    def transition_to(self, target_stage: GenerationStage, context: Optional[dict] = None) -> bool:
        """
        Attempt to advance to the target stage.

        Returns:
            True if the transition happened, False if it would skip or
            reorder a stage
        """
        if not self.can_transition_to(target_stage):
            return False
        self._current_stage = target_stage
        for callback in self._stage_callbacks.get(target_stage, []):
            callback(context)
        return True

    def on_stage_enter(self, stage: GenerationStage, callback: Callable[[Optional[dict]], None]):
        """Register a callback for entering a specific stage."""
        self._stage_callbacks.setdefault(stage, []).append(callback)

    def is_complete(self) -> bool:
        return self._current_stage is GenerationStage.BOUNDARY_SEALED

    def reset(self):
        self._current_stage = GenerationStage.EMPTY
