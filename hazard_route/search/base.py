"""Shared search-leg contract for the route engines."""

from __future__ import annotations

from enum import Enum
from typing import Protocol

from hazard_route.config.types import GoalMode, SearchConfig
from hazard_route.domain.board import Board
from hazard_route.domain.grid import Position
from hazard_route.domain.snapshot import Snapshot


class LegState(Enum):
    """Lifecycle of one start-to-target search."""

    IDLE = "idle"
    SEARCHING = "searching"
    FOUND = "found"
    EXHAUSTED = "exhausted"


class RouteEngine(Protocol):
    """A search engine that finds a cheapest route for one leg.

    ``search`` works on its own copy of *board* and returns ``None`` when
    the leg has no feasible route.
    """

    config: SearchConfig
    state: LegState

    def search(
        self,
        board: Board,
        start: Position,
        target: Position,
        mode: GoalMode = GoalMode.EXACT,
    ) -> Snapshot | None: ...


def arrived(board: Board, pos: Position, target: Position, mode: GoalMode) -> bool:
    """Goal test shared by both engines."""
    if mode is GoalMode.HAZARD_ADJACENT:
        return board.is_hazard_adjacent(pos)
    return pos == target
