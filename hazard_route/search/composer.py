"""Route composition: direct route versus the three-leg hazard route.

Every leg runs on its own board copy. The hazard is removed only on the
copy handed to the last composite leg, so the direct route never observes
it.
"""

from __future__ import annotations

import time
from dataclasses import dataclass

from hazard_route.config.types import Algorithm, GoalMode, SearchConfig
from hazard_route.domain.board import Board
from hazard_route.domain.snapshot import Snapshot, concatenate
from hazard_route.search.astar import AStarEngine
from hazard_route.search.backtracking import BacktrackingEngine
from hazard_route.search.base import RouteEngine


@dataclass(frozen=True)
class Candidates:
    """Both route candidates for one board; either may be infeasible."""

    direct: Snapshot | None
    composite: Snapshot | None

    def best(self) -> Snapshot | None:
        """Cheaper feasible candidate; the direct route wins ties."""
        if self.direct is None:
            return self.composite
        if self.composite is None or self.direct.cost <= self.composite.cost:
            return self.direct
        return self.composite


class RouteComposer:
    """Choose between a direct route and a waypoint/hazard composite route."""

    def __init__(self, engine: RouteEngine) -> None:
        self.engine = engine

    def direct(self, board: Board) -> Snapshot | None:
        if board.agent is None or board.goal is None:
            return None
        return self.engine.search(board.copy(), board.agent, board.goal)

    def composite(self, board: Board) -> Snapshot | None:
        """Agent -> waypoint -> hazard-adjacent cell -> (hazard removed) -> goal."""
        if board.agent is None or board.goal is None:
            return None
        if board.waypoint is None or board.hazard is None:
            return None

        to_waypoint = self.engine.search(board.copy(), board.agent, board.waypoint)
        if to_waypoint is None:
            return None

        to_hazard = self.engine.search(
            to_waypoint.board.copy(), board.waypoint, board.hazard, GoalMode.HAZARD_ADJACENT
        )
        if to_hazard is None:
            return None

        cleared = to_hazard.board.copy()
        cleared.remove_hazard()
        to_goal = self.engine.search(cleared, to_hazard.end, board.goal)
        if to_goal is None:
            return None

        return concatenate([to_waypoint, to_hazard, to_goal], board=to_goal.board)

    def compose_both(self, board: Board) -> Candidates:
        return Candidates(direct=self.direct(board), composite=self.composite(board))

    def compose(self, board: Board) -> Snapshot | None:
        """Cheapest feasible route for *board* stamped with elapsed time, or ``None``."""
        started = time.perf_counter()
        best = self.compose_both(board).best()
        elapsed_ms = (time.perf_counter() - started) * 1000.0
        return best.with_elapsed(elapsed_ms) if best is not None else None


def build_engine(algorithm: Algorithm, config: SearchConfig | None = None) -> RouteEngine:
    if algorithm is Algorithm.BACKTRACKING:
        return BacktrackingEngine(config)
    return AStarEngine(config)


def solve(
    board: Board,
    algorithm: Algorithm = Algorithm.BACKTRACKING,
    config: SearchConfig | None = None,
) -> Snapshot | None:
    """Run one complete evaluation of *board* with a fresh engine."""
    return RouteComposer(build_engine(algorithm, config)).compose(board)
