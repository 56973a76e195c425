"""Best-first (A*) route search with a Chebyshev-distance heuristic.

Chebyshev distance is admissible and consistent for 8-directional unit
moves and for two-cell leaps of cost 2, so the first time a goal cell is
closed its cost is optimal. In hazard-adjacent mode the goal set is the
ring around the hazard, and the heuristic is lowered by one to match.
"""

from __future__ import annotations

import heapq
import itertools
import math
from dataclasses import dataclass

from hazard_route.config.constants import GRID_SIZE
from hazard_route.config.types import GoalMode, SearchConfig
from hazard_route.domain.board import Board
from hazard_route.domain.grid import Position
from hazard_route.domain.snapshot import Snapshot
from hazard_route.search.base import LegState, arrived
from hazard_route.search.candidates import canonical_key, generate_candidates


@dataclass(eq=False)
class SearchNode:
    """Per-cell search record: accumulated cost and back-pointer."""

    position: Position
    parent: SearchNode | None = None
    g: float = math.inf
    closed: bool = False

    def reset(self) -> None:
        self.parent = None
        self.g = math.inf
        self.closed = False


def chebyshev_heuristic(pos: Position, target: Position, mode: GoalMode) -> int:
    h = pos.chebyshev(target)
    if mode is GoalMode.HAZARD_ADJACENT:
        return max(h - 1, 0)
    return h


class AStarEngine:
    """Priority-queue search producing the cheapest route of a leg."""

    def __init__(self, config: SearchConfig | None = None, size: int = GRID_SIZE) -> None:
        self.config = config or SearchConfig()
        self.state = LegState.IDLE
        self._nodes: dict[Position, SearchNode] = {
            Position(x, y): SearchNode(Position(x, y)) for y in range(size) for x in range(size)
        }
        self.expansions = 0

    def _reset_nodes(self) -> None:
        for node in self._nodes.values():
            node.reset()
        self.expansions = 0

    def search(
        self,
        board: Board,
        start: Position,
        target: Position,
        mode: GoalMode = GoalMode.EXACT,
    ) -> Snapshot | None:
        """Return the cheapest route from *start* to *target*, or ``None``."""
        board = board.copy()
        self._reset_nodes()
        self.state = LegState.SEARCHING
        goal = self._run(board, start, target, mode) if not board.is_lethal(start) else None
        snapshot = None
        if goal is not None:
            steps = self._reconstruct(goal, start)
            if steps is not None and self._anchored(board, start, steps):
                snapshot = Snapshot(steps=steps, cost=int(goal.g), board=board, start=start)
        self.state = LegState.FOUND if snapshot is not None else LegState.EXHAUSTED
        return snapshot

    def _run(
        self, board: Board, start: Position, target: Position, mode: GoalMode
    ) -> SearchNode | None:
        counter = itertools.count()
        start_node = self._nodes[start]
        start_node.g = 0
        open_heap: list[tuple[float, int, Position]] = [
            (chebyshev_heuristic(start, target, mode), next(counter), start)
        ]
        best: SearchNode | None = None
        while open_heap:
            f, _, pos = heapq.heappop(open_heap)
            if best is not None and f > best.g:
                break
            node = self._nodes[pos]
            if node.closed:
                continue
            node.closed = True
            self.expansions += 1
            if arrived(board, pos, target, mode):
                if mode is GoalMode.EXACT:
                    return node
                # Drain the open set at the optimal cost to collect every ring cell.
                key = canonical_key(pos, self.config.tie_break)
                if best is None or key < canonical_key(best.position, self.config.tie_break):
                    best = node
                continue
            for step in generate_candidates(board.grid, pos, self.config.rule):
                if board.is_lethal(step.position):
                    continue
                neighbor = self._nodes[step.position]
                if neighbor.closed:
                    continue
                g = node.g + step.cost
                if g < neighbor.g:
                    neighbor.g = g
                    neighbor.parent = node
                    priority = g + chebyshev_heuristic(step.position, target, mode)
                    heapq.heappush(open_heap, (priority, next(counter), step.position))
        return best

    def _reconstruct(self, goal: SearchNode, start: Position) -> tuple[Position, ...] | None:
        steps: list[Position] = []
        node: SearchNode | None = goal
        while node is not None and node.position != start:
            steps.append(node.position)
            node = node.parent
        if node is None:
            return None
        steps.reverse()
        return tuple(steps)

    def _anchored(self, board: Board, start: Position, steps: tuple[Position, ...]) -> bool:
        """Reject a route whose first step is not a legal move from *start*."""
        if not steps:
            return True
        legal = {s.position for s in generate_candidates(board.grid, start, self.config.rule)}
        return steps[0] in legal
