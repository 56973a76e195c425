"""Immutable search results.

A ``Snapshot`` bundles the chosen route with the board it finished on. It
is replaced rather than mutated when a cheaper route is found.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from hazard_route.domain.board import Board
from hazard_route.domain.grid import Position

Route = tuple[Position, ...]
"""Positions from (exclusive) start to (inclusive) end of a route."""


@dataclass(frozen=True)
class Snapshot:
    """Route, cost, final board and elapsed wall time of one search."""

    steps: Route
    cost: int
    board: Board = field(hash=False)
    start: Position
    elapsed_ms: float = 0.0

    @property
    def end(self) -> Position:
        """Last cell of the route; the start cell for an empty route."""
        return self.steps[-1] if self.steps else self.start

    def with_elapsed(self, elapsed_ms: float) -> Snapshot:
        return replace(self, elapsed_ms=elapsed_ms)


def concatenate(legs: list[Snapshot], board: Board) -> Snapshot:
    """Join consecutive legs into one snapshot that finishes on *board*."""
    if not legs:
        raise ValueError("legs must not be empty")
    steps: list[Position] = []
    for leg in legs:
        steps.extend(leg.steps)
    return Snapshot(
        steps=tuple(steps),
        cost=sum(leg.cost for leg in legs),
        board=board,
        start=legs[0].start,
    )
