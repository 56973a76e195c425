"""Tests for hazard_route.domain.board."""

from __future__ import annotations

import pytest

from hazard_route.domain.board import Board, InvalidBoardError
from hazard_route.domain.grid import Position
from hazard_route.domain.terrain import Terrain

P = Position


def _enemy_only_danger(enemy: Position) -> set[Position]:
    board = Board()
    assert board.place(Terrain.ENEMY, enemy)
    return board.danger_cells()


class TestPlacement:
    def test_enemy_projects_king_danger(self) -> None:
        board = Board()
        assert board.place(Terrain.ENEMY, P(4, 4))
        expected = {P(x, y) for x in range(3, 6) for y in range(3, 6)} - {P(4, 4)}
        assert board.danger_cells() == expected
        assert board.enemy == P(4, 4)

    def test_hazard_projects_orthogonal_danger(self) -> None:
        board = Board()
        assert board.place(Terrain.HAZARD, P(0, 0))
        assert board.danger_cells() == {P(1, 0), P(0, 1)}
        assert board.cell_at(P(1, 1)) is Terrain.FREE

    def test_danger_never_overwrites_entities(self) -> None:
        board = Board()
        assert board.place(Terrain.GOAL, P(4, 5))
        assert board.place(Terrain.ENEMY, P(4, 4))
        assert board.cell_at(P(4, 5)) is Terrain.GOAL

    def test_goal_rejected_on_danger(self) -> None:
        board = Board()
        board.place(Terrain.ENEMY, P(4, 4))
        result = board.place(Terrain.GOAL, P(5, 5))
        assert not result
        assert "DANGER" in (result.reason or "")

    def test_hazard_on_obstacle_combines(self) -> None:
        board = Board()
        assert board.place(Terrain.OBSTACLE, P(2, 2))
        assert board.place(Terrain.HAZARD, P(2, 2))
        assert board.cell_at(P(2, 2)) is Terrain.OBSTACLE_HAZARD

    def test_obstacle_on_hazard_combines(self) -> None:
        board = Board()
        assert board.place(Terrain.HAZARD, P(2, 2))
        assert board.place(Terrain.OBSTACLE, P(2, 2))
        assert board.cell_at(P(2, 2)) is Terrain.OBSTACLE_HAZARD
        assert board.obstacle == board.hazard == P(2, 2)

    def test_agent_may_start_on_waypoint(self) -> None:
        board = Board()
        assert board.place(Terrain.WAYPOINT, P(3, 3))
        assert board.place(Terrain.AGENT, P(3, 3))
        assert board.cell_at(P(3, 3)) is Terrain.WAYPOINT
        assert board.agent == P(3, 3)

    def test_out_of_bounds_rejected(self) -> None:
        assert not Board().place(Terrain.GOAL, P(9, 0))

    def test_danger_is_not_placeable(self) -> None:
        assert not Board().place(Terrain.DANGER, P(1, 1))

    def test_custom_exclusions_override_defaults(self) -> None:
        board = Board()
        board.place(Terrain.ENEMY, P(4, 4))
        assert board.place(Terrain.GOAL, P(5, 5), exclusions=frozenset())
        assert board.cell_at(P(5, 5)) is Terrain.GOAL


class TestFromPositions:
    def test_valid_board(self) -> None:
        board = Board.from_positions(
            agent=P(0, 0),
            enemy=P(3, 1),
            hazard=P(1, 3),
            obstacle=P(8, 8),
            goal=P(0, 8),
            waypoint=P(1, 0),
        )
        assert board.cell_at(P(0, 0)) is Terrain.AGENT
        assert board.cell_at(P(1, 3)) is Terrain.HAZARD
        assert board.cell_at(P(1, 2)) is Terrain.DANGER

    def test_goal_on_enemy_danger_raises(self) -> None:
        with pytest.raises(InvalidBoardError, match="cannot place goal"):
            Board.from_positions(
                agent=P(0, 0),
                enemy=P(4, 4),
                hazard=P(8, 0),
                obstacle=P(8, 1),
                goal=P(5, 4),
                waypoint=P(0, 8),
            )

    def test_agent_on_danger_raises(self) -> None:
        with pytest.raises(InvalidBoardError, match="cannot place agent"):
            Board.from_positions(
                agent=P(0, 0),
                enemy=P(1, 1),
                hazard=P(8, 0),
                obstacle=P(8, 1),
                goal=P(0, 8),
                waypoint=P(5, 5),
            )

    def test_copy_is_independent(self) -> None:
        board = Board.empty(P(0, 0), P(8, 8))
        clone = board.copy()
        clone.place(Terrain.ENEMY, P(4, 4))
        assert board.enemy is None
        assert board.danger_cells() == set()
        assert board != clone


class TestRemoveHazard:
    def test_clears_hazard_and_its_danger(self) -> None:
        board = Board()
        board.place(Terrain.HAZARD, P(4, 4))
        board.remove_hazard()
        assert board.hazard is None
        assert board.cell_at(P(4, 4)) is Terrain.FREE
        assert board.danger_cells() == set()

    def test_absent_hazard_is_noop(self) -> None:
        board = Board.empty(P(0, 0), P(8, 8))
        before = board.copy()
        board.remove_hazard()
        assert board == before

    def test_second_removal_is_noop(self) -> None:
        board = Board()
        board.place(Terrain.ENEMY, P(2, 2))
        board.place(Terrain.HAZARD, P(6, 6))
        board.remove_hazard()
        once = board.copy()
        board.remove_hazard()
        assert board == once

    def test_combined_cell_keeps_obstacle(self) -> None:
        board = Board()
        board.place(Terrain.OBSTACLE, P(2, 2))
        board.place(Terrain.HAZARD, P(2, 2))
        board.remove_hazard()
        assert board.cell_at(P(2, 2)) is Terrain.OBSTACLE
        assert board.is_lethal(P(2, 2))
        assert board.cell_at(P(2, 3)) is Terrain.FREE

    def test_restores_shared_enemy_danger(self) -> None:
        board = Board()
        board.place(Terrain.ENEMY, P(4, 4))
        # Hazard sits on an enemy danger cell; two of its danger cells are shared.
        board.place(Terrain.HAZARD, P(5, 5))
        board.remove_hazard()
        assert board.danger_cells() == _enemy_only_danger(P(4, 4))
        assert board.cell_at(P(5, 5)) is Terrain.DANGER
        assert board.cell_at(P(6, 5)) is Terrain.FREE

    def test_hazard_adjacency(self) -> None:
        board = Board()
        board.place(Terrain.HAZARD, P(4, 4))
        assert board.is_hazard_adjacent(P(3, 3))
        assert not board.is_hazard_adjacent(P(4, 4))
        assert not board.is_hazard_adjacent(P(4, 6))
        board.remove_hazard()
        assert not board.is_hazard_adjacent(P(3, 3))
