"""Tests for hazard_route.search.backtracking."""

from __future__ import annotations

from hazard_route.config.types import GoalMode, MovementRule, SearchConfig
from hazard_route.domain.board import Board
from hazard_route.domain.grid import Position
from hazard_route.domain.terrain import Terrain
from hazard_route.search.backtracking import BacktrackingEngine
from hazard_route.search.base import LegState

P = Position


class TestBacktrackingSearch:
    def test_single_step(self, open_board: Board) -> None:
        engine = BacktrackingEngine()
        result = engine.search(open_board, P(0, 0), P(0, 1))
        assert result is not None
        assert result.cost == 1
        assert result.steps == (P(0, 1),)
        assert engine.state is LegState.FOUND

    def test_unique_diagonal_route(self) -> None:
        board = Board.empty(P(0, 0), P(3, 3))
        result = BacktrackingEngine().search(board, P(0, 0), P(3, 3))
        assert result is not None
        assert result.steps == (P(1, 1), P(2, 2), P(3, 3))

    def test_start_equals_target(self, open_board: Board) -> None:
        result = BacktrackingEngine().search(open_board, P(0, 0), P(0, 0))
        assert result is not None
        assert result.cost == 0
        assert result.steps == ()

    def test_finds_optimum_not_first_hit(self) -> None:
        # The nearest-first descent runs into the wall; the optimum goes around it.
        board = Board.empty(P(0, 4), P(8, 4))
        for y in range(1, 9):
            assert board.place(Terrain.OBSTACLE, P(4, y), exclusions=frozenset())
        result = BacktrackingEngine().search(board, P(0, 4), P(8, 4))
        assert result is not None
        assert result.cost == 8
        assert P(4, 0) in result.steps

    def test_sealed_start_exhausts(self, sealed_board: Board) -> None:
        engine = BacktrackingEngine()
        assert engine.search(sealed_board, P(0, 0), P(8, 8)) is None
        assert engine.state is LegState.EXHAUSTED

    def test_lethal_start_exhausts(self, sealed_board: Board) -> None:
        assert BacktrackingEngine().search(sealed_board, P(0, 1), P(0, 0)) is None

    def test_leap_over_danger_rejected(self, leap_trap_board: Board) -> None:
        engine = BacktrackingEngine(SearchConfig(rule=MovementRule.EXTENDED))
        assert engine.search(leap_trap_board, P(0, 0), P(2, 0)) is None
        assert engine.search(leap_trap_board, P(0, 0), P(0, 2)) is None

    def test_does_not_mutate_input(self, hazard_gate_board: Board) -> None:
        before = hazard_gate_board.copy()
        result = BacktrackingEngine().search(
            hazard_gate_board, P(1, 0), P(1, 3), GoalMode.HAZARD_ADJACENT
        )
        assert result is not None
        assert hazard_gate_board == before
        assert result.board is not hazard_gate_board


class TestHazardAdjacentMode:
    def test_stops_next_to_hazard(self, hazard_gate_board: Board) -> None:
        result = BacktrackingEngine().search(
            hazard_gate_board, P(1, 0), P(1, 3), GoalMode.HAZARD_ADJACENT
        )
        assert result is not None
        assert result.cost == 2
        assert result.end == P(0, 2)

    def test_start_on_ring_is_empty_route(self, hazard_gate_board: Board) -> None:
        result = BacktrackingEngine().search(
            hazard_gate_board, P(0, 2), P(1, 3), GoalMode.HAZARD_ADJACENT
        )
        assert result is not None
        assert result.steps == ()

    def test_equal_ring_cells_pick_canonical(self) -> None:
        board = Board()
        board.place(Terrain.HAZARD, P(4, 4))
        result = BacktrackingEngine().search(board, P(4, 1), P(4, 4), GoalMode.HAZARD_ADJACENT)
        assert result is not None
        assert result.cost == 2
        assert result.end == P(3, 3)
