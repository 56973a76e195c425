"""Hazard placement engine: entity placement with derived danger zones.

Placement invariants:

- ``place`` never raises for a rejected cell. It returns a failed
  ``PlacementResult`` so random generation can retry with new coordinates
  and validated construction can abort with ``InvalidBoardError``.
- Danger is only ever projected onto air cells (FREE or DANGER); cells that
  hold an entity keep their tag.
- Removing the hazard clears its danger footprint and then re-projects the
  enemy's footprint, so enemy danger cells shared with the hazard survive.
"""

from __future__ import annotations

from dataclasses import dataclass

from hazard_route.config.constants import GRID_SIZE
from hazard_route.domain.grid import Grid, Position
from hazard_route.domain.terrain import Terrain

_ENTITIES = frozenset(
    {
        Terrain.AGENT,
        Terrain.ENEMY,
        Terrain.HAZARD,
        Terrain.OBSTACLE,
        Terrain.OBSTACLE_HAZARD,
        Terrain.GOAL,
        Terrain.WAYPOINT,
    }
)

DEFAULT_EXCLUSIONS: dict[Terrain, frozenset[Terrain]] = {
    Terrain.ENEMY: _ENTITIES,
    Terrain.HAZARD: _ENTITIES - {Terrain.OBSTACLE},
    Terrain.OBSTACLE: _ENTITIES - {Terrain.HAZARD},
    Terrain.GOAL: _ENTITIES | {Terrain.DANGER},
    Terrain.WAYPOINT: (_ENTITIES - {Terrain.AGENT}) | {Terrain.DANGER},
    Terrain.AGENT: (_ENTITIES - {Terrain.WAYPOINT}) | {Terrain.DANGER},
}
"""Tags each placeable entity may not be placed on."""


class InvalidBoardError(ValueError):
    """Raised when supplied coordinates violate the placement rules."""


@dataclass(frozen=True)
class PlacementResult:
    """Outcome of a single ``Board.place`` call."""

    ok: bool
    reason: str | None = None

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls) -> PlacementResult:
        return cls(ok=True)

    @classmethod
    def failed(cls, reason: str) -> PlacementResult:
        return cls(ok=False, reason=reason)


class Board:
    """Grid plus the recorded positions of the six entities."""

    def __init__(self, grid: Grid | None = None) -> None:
        self.grid = grid if grid is not None else Grid(GRID_SIZE)
        self.agent: Position | None = None
        self.enemy: Position | None = None
        self.hazard: Position | None = None
        self.obstacle: Position | None = None
        self.goal: Position | None = None
        self.waypoint: Position | None = None

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_positions(
        cls,
        agent: Position,
        enemy: Position,
        hazard: Position,
        obstacle: Position,
        goal: Position,
        waypoint: Position,
    ) -> Board:
        """Build a validated board or raise ``InvalidBoardError``.

        Entities are placed enemy first and agent last, so every later
        placement sees the danger already derived from the hazards.
        """
        board = cls()
        steps = (
            ("enemy", Terrain.ENEMY, enemy),
            ("hazard", Terrain.HAZARD, hazard),
            ("obstacle", Terrain.OBSTACLE, obstacle),
            ("goal", Terrain.GOAL, goal),
            ("waypoint", Terrain.WAYPOINT, waypoint),
            ("agent", Terrain.AGENT, agent),
        )
        for name, tag, pos in steps:
            result = board.place(tag, pos)
            if not result:
                raise InvalidBoardError(f"cannot place {name} at {pos}: {result.reason}")
        return board

    @classmethod
    def empty(cls, agent: Position, goal: Position) -> Board:
        """Board with only an agent and a goal; no hazards and no waypoint."""
        board = cls()
        for name, tag, pos in (("goal", Terrain.GOAL, goal), ("agent", Terrain.AGENT, agent)):
            result = board.place(tag, pos)
            if not result:
                raise InvalidBoardError(f"cannot place {name} at {pos}: {result.reason}")
        return board

    def copy(self) -> Board:
        """Independently owned deep copy; no state is shared with ``self``."""
        clone = Board(self.grid.copy())
        clone.agent = self.agent
        clone.enemy = self.enemy
        clone.hazard = self.hazard
        clone.obstacle = self.obstacle
        clone.goal = self.goal
        clone.waypoint = self.waypoint
        return clone

    # ------------------------------------------------------------------
    # Placement
    # ------------------------------------------------------------------

    def cell_at(self, pos: Position) -> Terrain | None:
        return self.grid.cell_at(pos)

    def place(
        self,
        tag: Terrain,
        pos: Position,
        exclusions: frozenset[Terrain] | None = None,
    ) -> PlacementResult:
        """Place *tag* at *pos* unless the cell currently holds an excluded tag."""
        if tag not in DEFAULT_EXCLUSIONS:
            return PlacementResult.failed(f"{tag.name} is not placeable")
        current = self.grid.cell_at(pos)
        if current is None:
            return PlacementResult.failed("out of bounds")
        blocked = DEFAULT_EXCLUSIONS[tag] if exclusions is None else exclusions
        if current in blocked:
            return PlacementResult.failed(f"cell holds {current.name}")

        if tag is Terrain.ENEMY:
            self.grid.set_cell(pos, Terrain.ENEMY)
            self.enemy = pos
            self._project_danger(pos, diagonal=True)
        elif tag is Terrain.HAZARD:
            combined = current is Terrain.OBSTACLE
            self.grid.set_cell(pos, Terrain.OBSTACLE_HAZARD if combined else Terrain.HAZARD)
            self.hazard = pos
            self._project_danger(pos, diagonal=False)
        elif tag is Terrain.OBSTACLE:
            combined = current.is_hazard
            self.grid.set_cell(pos, Terrain.OBSTACLE_HAZARD if combined else Terrain.OBSTACLE)
            self.obstacle = pos
        elif tag is Terrain.GOAL:
            self.grid.set_cell(pos, Terrain.GOAL)
            self.goal = pos
        elif tag is Terrain.WAYPOINT:
            self.grid.set_cell(pos, Terrain.WAYPOINT)
            self.waypoint = pos
        else:
            # The agent may start on the waypoint; the cell keeps its waypoint tag.
            if current is not Terrain.WAYPOINT:
                self.grid.set_cell(pos, Terrain.AGENT)
            self.agent = pos
        return PlacementResult.success()

    def _project_danger(self, pos: Position, diagonal: bool) -> None:
        neighbors = self.grid.orthogonal_neighbors(pos)
        if diagonal:
            neighbors += self.grid.diagonal_neighbors(pos)
        for neighbor in neighbors:
            cell = self.grid.cell_at(neighbor)
            if cell is not None and cell.is_air:
                self.grid.set_cell(neighbor, Terrain.DANGER)

    def remove_hazard(self) -> None:
        """Neutralize the removable hazard; a no-op when it is already gone."""
        if self.hazard is None:
            return
        pos = self.hazard
        current = self.grid.cell_at(pos)
        if current is Terrain.OBSTACLE_HAZARD:
            self.grid.set_cell(pos, Terrain.OBSTACLE)
        elif current is Terrain.HAZARD:
            self.grid.set_cell(pos, Terrain.FREE)
        for neighbor in self.grid.orthogonal_neighbors(pos):
            if self.grid.cell_at(neighbor) is Terrain.DANGER:
                self.grid.set_cell(neighbor, Terrain.FREE)
        self.hazard = None
        # Restore enemy danger cleared above, including the old hazard cell itself.
        if self.enemy is not None:
            self._project_danger(self.enemy, diagonal=True)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def is_lethal(self, pos: Position) -> bool:
        return self.grid.is_lethal(pos)

    def is_hazard_adjacent(self, pos: Position) -> bool:
        """True when the hazard is among the king-move neighbors of *pos*."""
        return self.hazard is not None and pos.is_adjacent(self.hazard)

    def danger_cells(self) -> set[Position]:
        return {p for p in self.grid.positions() if self.grid.cell_at(p) is Terrain.DANGER}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self.grid == other.grid
            and self.agent == other.agent
            and self.enemy == other.enemy
            and self.hazard == other.hazard
            and self.obstacle == other.obstacle
            and self.goal == other.goal
            and self.waypoint == other.waypoint
        )

    def __repr__(self) -> str:
        return (
            f"Board(agent={self.agent}, enemy={self.enemy}, hazard={self.hazard}, "
            f"obstacle={self.obstacle}, goal={self.goal}, waypoint={self.waypoint})"
        )
