"""Configuration enums and dataclasses for searches and batch runs.

All frozen dataclasses that parameterise single searches and batch
evaluations live here.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from hazard_route.config.constants import (
    MAX_BATCH_BOARDS,
    SCENARIO_BASIC,
    SCENARIO_EXTENDED,
)

__all__ = [
    "Algorithm",
    "BatchConfig",
    "GoalMode",
    "MovementRule",
    "SearchConfig",
    "TieBreak",
]


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class MovementRule(Enum):
    """Moves available to the agent on each step."""

    BASIC = "basic"
    EXTENDED = "extended"

    @classmethod
    def from_scenario(cls, scenario: int) -> MovementRule:
        """Map an input scenario number (1 or 2) onto a movement rule."""
        if scenario == SCENARIO_BASIC:
            return cls.BASIC
        if scenario == SCENARIO_EXTENDED:
            return cls.EXTENDED
        raise ValueError(f"scenario must be {SCENARIO_BASIC} or {SCENARIO_EXTENDED}")

    @property
    def scenario(self) -> int:
        return SCENARIO_BASIC if self is MovementRule.BASIC else SCENARIO_EXTENDED


class TieBreak(Enum):
    """Ordering among candidates at equal distance to the target."""

    COLUMN_ROW = "column_row"
    ROW_COLUMN = "row_column"
    GENERATION = "generation"


class GoalMode(Enum):
    """How a search leg decides that it has arrived."""

    EXACT = "exact"
    HAZARD_ADJACENT = "hazard_adjacent"


class Algorithm(Enum):
    """Route search engine selector."""

    BACKTRACKING = "backtracking"
    ASTAR = "astar"


# ---------------------------------------------------------------------------
# Config dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SearchConfig:
    """Knobs shared by both search engines."""

    rule: MovementRule = MovementRule.BASIC
    tie_break: TieBreak = TieBreak.COLUMN_ROW


@dataclass(frozen=True)
class BatchConfig:
    """Random-board batch evaluation parameters."""

    n_boards: int = 100
    out_dir: Path = Path("data/batch")
    base_seed: int = 0
    rules: tuple[MovementRule, ...] = (MovementRule.BASIC, MovementRule.EXTENDED)
    algorithms: tuple[Algorithm, ...] = (Algorithm.BACKTRACKING, Algorithm.ASTAR)
    tie_break: TieBreak = TieBreak.COLUMN_ROW
    strict: bool = False
    verify_with_oracle: bool = False

    def __post_init__(self) -> None:
        if self.n_boards < 1:
            raise ValueError("n_boards must be >= 1")
        if self.n_boards > MAX_BATCH_BOARDS:
            raise ValueError(f"n_boards must be <= {MAX_BATCH_BOARDS}")
        if not self.rules:
            raise ValueError("rules must not be empty")
        if not self.algorithms:
            raise ValueError("algorithms must not be empty")
        if len(set(self.rules)) != len(self.rules):
            raise ValueError("rules must include distinct values")
        if len(set(self.algorithms)) != len(self.algorithms):
            raise ValueError("algorithms must include distinct values")

    def search_config(self, rule: MovementRule) -> SearchConfig:
        """Build the per-rule search config shared by every engine in the batch."""
        return SearchConfig(rule=rule, tie_break=self.tie_break)
