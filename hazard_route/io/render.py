"""Plain-text rendering of routes and result files."""

from __future__ import annotations

from collections.abc import Iterable

from hazard_route.config.constants import GRID_SIZE
from hazard_route.domain.grid import Position
from hazard_route.domain.snapshot import Snapshot

_RULE = "-" * (2 * GRID_SIZE + 1)


def render_grid(route: Iterable[Position], start: Position, size: int = GRID_SIZE) -> str:
    """Grid with ``*`` on the start cell and every route cell, ``_`` elsewhere."""
    marked = {start, *route}
    lines = [_RULE, "  " + " ".join(str(x) for x in range(size))]
    for y in range(size):
        cells = ("*" if Position(x, y) in marked else "_" for x in range(size))
        lines.append(f"{y} " + " ".join(cells))
    lines.append(_RULE)
    return "\n".join(lines)


def format_steps(route: Iterable[Position]) -> str:
    return " ".join(str(p) for p in route)


def format_result(snapshot: Snapshot | None) -> str:
    """Result file body: ``Lose`` or the cost, steps, grid and elapsed time."""
    if snapshot is None:
        return "Lose\n"
    grid = render_grid(snapshot.steps, snapshot.start, snapshot.board.grid.size)
    elapsed = int(round(snapshot.elapsed_ms))
    return f"Win\n{snapshot.cost}\n{format_steps(snapshot.steps)}\n{grid}\n{elapsed} ms\n"
