"""Hand-built boards shared by the search tests.

Coordinates are ``(x, y)`` with ``y`` growing downwards, as in the text
rendering.
"""

from __future__ import annotations

import pytest

from hazard_route.domain.board import Board
from hazard_route.domain.grid import Position

P = Position


@pytest.fixture
def sealed_board() -> Board:
    """Agent boxed into {(0,0), (1,0)} by enemy danger and hazard danger."""
    return Board.from_positions(
        agent=P(0, 0),
        enemy=P(1, 2),
        hazard=P(3, 0),
        obstacle=P(8, 0),
        goal=P(8, 8),
        waypoint=P(5, 5),
    )


@pytest.fixture
def leap_trap_board() -> Board:
    """Agent in the corner; both leaps out cross a hazard danger cell."""
    return Board.from_positions(
        agent=P(0, 0),
        enemy=P(6, 6),
        hazard=P(1, 1),
        obstacle=P(4, 1),
        goal=P(8, 8),
        waypoint=P(3, 3),
    )


@pytest.fixture
def unreachable_ring_board() -> Board:
    """Hazard in a corner whose three neighbors are all lethal; direct route costs 8."""
    return Board.from_positions(
        agent=P(0, 0),
        enemy=P(6, 2),
        hazard=P(8, 0),
        obstacle=P(4, 6),
        goal=P(0, 8),
        waypoint=P(2, 2),
    )


@pytest.fixture
def hazard_gate_board() -> Board:
    """Only the composite route escapes: 1 (waypoint) + 2 (ring cell (0,2)) + 6 (goal)."""
    return Board.from_positions(
        agent=P(0, 0),
        enemy=P(3, 1),
        hazard=P(1, 3),
        obstacle=P(8, 8),
        goal=P(0, 8),
        waypoint=P(1, 0),
    )


@pytest.fixture
def open_board() -> Board:
    return Board.empty(P(0, 0), P(0, 1))
