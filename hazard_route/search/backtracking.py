"""Depth-first backtracking with branch-and-bound and dominance pruning.

Candidates are explored nearest-first (squared Euclidean distance to the
leg target). A branch is cut when:

- the cell is lethal;
- its arrival cost exceeds the best complete route, or matches it without
  completing a route (bound);
- a strictly cheaper arrival at the cell is known (dominance), or the cell
  was already expanded at an equal or lower cost.

In hazard-adjacent mode several ring cells can tie on cost; the one first
in ``canonical_key`` order is kept so that both engines hand the same cell
to the next leg.

Before recursing, every candidate's best-known cost is lowered to the cost
of reaching it from the current cell. Pruning only discards branches that
cannot beat the best route, so the last recorded route is the optimum for
the leg, not a greedy first hit.
"""

from __future__ import annotations

import math

from hazard_route.config.types import GoalMode, SearchConfig
from hazard_route.domain.board import Board
from hazard_route.domain.grid import Position
from hazard_route.domain.snapshot import Snapshot
from hazard_route.search.base import LegState, arrived
from hazard_route.search.candidates import (
    canonical_key,
    generate_candidates,
    rank_candidates,
)


class BacktrackingEngine:
    """Exhaustive bounded search producing the cheapest route of a leg."""

    def __init__(self, config: SearchConfig | None = None) -> None:
        self.config = config or SearchConfig()
        self.state = LegState.IDLE
        self._board = Board()
        self._start = Position(0, 0)
        self._target = Position(0, 0)
        self._mode = GoalMode.EXACT
        self._path: list[Position] = []
        self._reach: list[list[float]] = []
        self._expanded: list[list[float]] = []
        self._best_cost = math.inf
        self._best: Snapshot | None = None
        self.expansions = 0

    def _reset(self, board: Board, start: Position, target: Position, mode: GoalMode) -> None:
        size = board.grid.size
        self._board = board
        self._start = start
        self._target = target
        self._mode = mode
        self._path = []
        self._reach = [[math.inf] * size for _ in range(size)]
        self._expanded = [[math.inf] * size for _ in range(size)]
        self._best_cost = math.inf
        self._best = None
        self.expansions = 0

    def search(
        self,
        board: Board,
        start: Position,
        target: Position,
        mode: GoalMode = GoalMode.EXACT,
    ) -> Snapshot | None:
        """Return the cheapest route from *start* to *target*, or ``None``."""
        self._reset(board.copy(), start, target, mode)
        self.state = LegState.SEARCHING
        if not self._board.is_lethal(start):
            self._reach[start.y][start.x] = 0
            self._visit(start, 0)
        self.state = LegState.FOUND if self._best is not None else LegState.EXHAUSTED
        return self._best

    def _visit(self, pos: Position, cost: int) -> None:
        if self._board.is_lethal(pos):
            return
        if cost > self._best_cost:
            return
        if self._reach[pos.y][pos.x] < cost or self._expanded[pos.y][pos.x] <= cost:
            return
        self._reach[pos.y][pos.x] = cost
        self._expanded[pos.y][pos.x] = cost
        self.expansions += 1

        self._path.append(pos)
        try:
            if arrived(self._board, pos, self._target, self._mode):
                self._offer(pos, cost)
                return
            # Every move costs at least one, so nothing below can match best_cost.
            if cost >= self._best_cost:
                return
            steps = [
                s
                for s in generate_candidates(self._board.grid, pos, self.config.rule)
                if not self._board.is_lethal(s.position)
            ]
            ranked = rank_candidates(steps, self._target, self.config.tie_break)
            for step in ranked:
                p = step.position
                self._reach[p.y][p.x] = min(self._reach[p.y][p.x], cost + step.cost)
            for step in ranked:
                self._visit(step.position, cost + step.cost)
        finally:
            self._path.pop()

    def _offer(self, pos: Position, cost: int) -> None:
        """Keep the cheaper route; among equal hazard-ring routes keep the canonical end."""
        if cost < self._best_cost:
            self._record(cost)
        elif (
            self._mode is GoalMode.HAZARD_ADJACENT
            and self._best is not None
            and canonical_key(pos, self.config.tie_break)
            < canonical_key(self._best.end, self.config.tie_break)
        ):
            self._record(cost)

    def _record(self, cost: int) -> None:
        # The path stack starts with the leg's start cell, which is not a step.
        self._best = Snapshot(
            steps=tuple(self._path[1:]),
            cost=cost,
            board=self._board,
            start=self._start,
        )
        self._best_cost = cost
