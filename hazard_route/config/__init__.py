"""Configuration layer: constants and typed config dataclasses."""

from hazard_route.config.constants import (
    ASTAR_OUTPUT,
    BACKTRACKING_OUTPUT,
    GRID_SIZE,
    LEAP_COST,
    MAX_BATCH_BOARDS,
    MAX_GENERATION_ATTEMPTS,
    ORIGIN,
    STEP_COST,
)
from hazard_route.config.types import (
    Algorithm,
    BatchConfig,
    GoalMode,
    MovementRule,
    SearchConfig,
    TieBreak,
)

__all__ = [
    "ASTAR_OUTPUT",
    "Algorithm",
    "BACKTRACKING_OUTPUT",
    "BatchConfig",
    "GRID_SIZE",
    "GoalMode",
    "LEAP_COST",
    "MAX_BATCH_BOARDS",
    "MAX_GENERATION_ATTEMPTS",
    "MovementRule",
    "ORIGIN",
    "STEP_COST",
    "SearchConfig",
    "TieBreak",
]
