"""Difficulty tiers, size limits and pathfinder settings."""

import logging
import os
from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict, Mapping, Optional

from .domain.errors import ValidationError, INVALID_CONFIG, INVALID_DIFFICULTY
from .domain.types import AdjustMode

logger = logging.getLogger(__name__)

ENV_PREFIX = "MAZERACE_"


@dataclass(frozen=True)
class DifficultyTier:
    """
    A named difficulty level.

    `open` tiers add shortcuts through walls, `seal` tiers turn corridor
    cells into walls. `fraction` is the share of all grid cells to change.
    """
    name: str
    mode: AdjustMode
    fraction: float

    def __post_init__(self):
        if self.mode not in ("open", "seal"):
            raise ValidationError(f"Unknown adjustment mode {self.mode!r} for tier {self.name!r}",
                                  kind=INVALID_CONFIG, module="config")
        if not 0.0 <= self.fraction <= 1.0:
            raise ValidationError(f"Tier {self.name!r} fraction must be within [0, 1], got {self.fraction}",
                                  kind=INVALID_CONFIG, module="config")

    def target_count(self, rows: int, cols: int) -> int:
        return int(rows * cols * self.fraction)


DEFAULT_TIERS: Dict[str, DifficultyTier] = {
    "easy": DifficultyTier("easy", "open", 0.15),
    "medium": DifficultyTier("medium", "open", 0.10),
    "hard": DifficultyTier("hard", "seal", 0.05),
    "extreme": DifficultyTier("extreme", "seal", 0.10),
}

DEFAULT_DIFFICULTY = "medium"


@dataclass(frozen=True)
class PathfinderConfig:
    """
    A* settings.

    heuristic_weight of 1.0 keeps routes shortest; larger values search
    faster but may return longer routes.
    """
    heuristic_weight: float = 1.0
    iteration_factor: int = 2
    max_iterations: Optional[int] = None

    def iteration_cap(self, rows: int, cols: int) -> int:
        if self.max_iterations is not None:
            return self.max_iterations
        return self.iteration_factor * rows * cols


@dataclass(frozen=True)
class MazeConfig:
    """Generation limits and difficulty table."""
    min_size: int = 5
    max_recommended_size: int = 50
    default_difficulty: str = DEFAULT_DIFFICULTY
    tiers: Dict[str, DifficultyTier] = field(default_factory=lambda: dict(DEFAULT_TIERS))
    attempt_multiplier: int = 3
    pathfinder: PathfinderConfig = field(default_factory=PathfinderConfig)

    def resolve_tier(self, name: Optional[str]) -> DifficultyTier:
        """
        Look up a tier by name, case-insensitively.

        Unknown names fall back to the default tier with a warning.
        """
        key = (name or "").strip().lower()
        tier = self.tiers.get(key)
        if tier is not None:
            return tier
        fallback = self.tiers.get(self.default_difficulty)
        if fallback is None:
            raise ValidationError(f"Default difficulty {self.default_difficulty!r} is not a configured tier",
                                  kind=INVALID_DIFFICULTY, module="config")
        logger.warning("Invalid difficulty %r. Using %r as default.", name, fallback.name)
        return fallback

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MazeConfig":
        """
        Build a config from a plain mapping.

        `tiers` maps names to {"mode", "fraction"}; `pathfinder` maps to the
        PathfinderConfig fields. Unknown keys are rejected.
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValidationError(f"Unknown config keys: {sorted(unknown)}",
                                  kind=INVALID_CONFIG, module="config")
        kwargs: Dict[str, Any] = {k: v for k, v in data.items() if k not in ("tiers", "pathfinder")}
        if "tiers" in data:
            try:
                kwargs["tiers"] = {
                    name.lower(): DifficultyTier(name.lower(), entry["mode"], float(entry["fraction"]))
                    for name, entry in data["tiers"].items()
                }
            except (AttributeError, KeyError, TypeError, ValueError) as e:
                raise ValidationError(f"Invalid tier table: {e}", kind=INVALID_CONFIG,
                                      module="config") from e
        if "pathfinder" in data:
            try:
                kwargs["pathfinder"] = PathfinderConfig(**data["pathfinder"])
            except TypeError as e:
                raise ValidationError(f"Invalid pathfinder settings: {e}", kind=INVALID_CONFIG,
                                      module="config") from e
        return cls(**kwargs)

    def with_env(self, environ: Optional[Mapping[str, str]] = None) -> "MazeConfig":
        """Return a copy with MAZERACE_* environment overrides applied."""
        env = os.environ if environ is None else environ
        updates: Dict[str, Any] = {}
        pathfinder_updates: Dict[str, Any] = {}

        if ENV_PREFIX + "MAX_SIZE" in env:
            updates["max_recommended_size"] = _parse_env(env, "MAX_SIZE", int)
        if ENV_PREFIX + "ATTEMPT_MULTIPLIER" in env:
            updates["attempt_multiplier"] = _parse_env(env, "ATTEMPT_MULTIPLIER", int)
        if ENV_PREFIX + "DEFAULT_DIFFICULTY" in env:
            updates["default_difficulty"] = env[ENV_PREFIX + "DEFAULT_DIFFICULTY"].strip().lower()
        if ENV_PREFIX + "HEURISTIC_WEIGHT" in env:
            pathfinder_updates["heuristic_weight"] = _parse_env(env, "HEURISTIC_WEIGHT", float)
        if ENV_PREFIX + "MAX_ITERATIONS" in env:
            pathfinder_updates["max_iterations"] = _parse_env(env, "MAX_ITERATIONS", int)

        if pathfinder_updates:
            updates["pathfinder"] = replace(self.pathfinder, **pathfinder_updates)
        return replace(self, **updates) if updates else self

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "MazeConfig":
        return cls().with_env(environ)


def _parse_env(env: Mapping[str, str], key: str, cast):
    raw = env[ENV_PREFIX + key]
    try:
        value = cast(raw)
    except ValueError as e:
        raise ValidationError(f"{ENV_PREFIX}{key}={raw!r} is not a valid {cast.__name__}",
                              kind=INVALID_CONFIG, module="config") from e
    if value <= 0:
        raise ValidationError(f"{ENV_PREFIX}{key} must be positive, got {raw!r}",
                              kind=INVALID_CONFIG, module="config")
    return value
