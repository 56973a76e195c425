"""Route candidate generation: legal next positions and their ordering.

The generator is a pure adjacency function. It applies the leap-midpoint
rule but leaves filtering by destination terrain to the calling engine.
"""

from __future__ import annotations

from dataclasses import dataclass

from hazard_route.config.constants import LEAP_COST, STEP_COST
from hazard_route.config.types import MovementRule, TieBreak
from hazard_route.domain.grid import Grid, Position


@dataclass(frozen=True)
class Step:
    """One candidate move: destination cell and its path cost."""

    position: Position
    cost: int


def generate_candidates(grid: Grid, pos: Position, rule: MovementRule) -> list[Step]:
    """Orthogonal and diagonal moves, plus safe-midpoint leaps under the extended rule."""
    steps = [Step(p, STEP_COST) for p in grid.king_neighbors(pos)]
    if rule is MovementRule.EXTENDED:
        steps.extend(Step(p, LEAP_COST) for p in grid.leap_neighbors(pos))
    return steps


def _tie_key(pos: Position, tie_break: TieBreak) -> tuple[int, int]:
    if tie_break is TieBreak.COLUMN_ROW:
        return (pos.x, pos.y)
    if tie_break is TieBreak.ROW_COLUMN:
        return (pos.y, pos.x)
    return (0, 0)


def canonical_key(pos: Position, tie_break: TieBreak) -> tuple[int, int]:
    """Total order used to pick one cell among equally cheap goal cells.

    ``TieBreak.GENERATION`` has no positional order, so it falls back to
    column-then-row.
    """
    if tie_break is TieBreak.GENERATION:
        return (pos.x, pos.y)
    return _tie_key(pos, tie_break)


def rank_candidates(steps: list[Step], target: Position, tie_break: TieBreak) -> list[Step]:
    """Sort by squared Euclidean distance to *target*, then by the tie-break policy.

    ``TieBreak.GENERATION`` keeps enumeration order among ties (stable sort).
    """
    return sorted(
        steps,
        key=lambda s: (s.position.distance_squared(target), *_tie_key(s.position, tie_break)),
    )
