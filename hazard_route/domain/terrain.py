"""Terrain tags carried by each board cell.

Every cell holds exactly one tag. Danger cells are derived from the enemy
and hazard footprints and are never placed directly.
"""

from __future__ import annotations

from enum import Enum


class Terrain(Enum):
    """Closed set of cell tags with their movement predicates."""

    FREE = "_"
    DANGER = "x"
    AGENT = "A"
    ENEMY = "E"
    HAZARD = "H"
    OBSTACLE = "O"
    OBSTACLE_HAZARD = "Q"
    WAYPOINT = "W"
    GOAL = "G"

    @property
    def is_lethal(self) -> bool:
        """True when entering the cell ends the run."""
        return self in _LETHAL

    @property
    def is_safe(self) -> bool:
        return not self.is_lethal

    @property
    def is_hazard(self) -> bool:
        """True for the removable hazard, alone or sharing a cell with the obstacle."""
        return self is Terrain.HAZARD or self is Terrain.OBSTACLE_HAZARD

    @property
    def is_air(self) -> bool:
        """True for cells that hold no entity and may receive derived danger."""
        return self is Terrain.FREE or self is Terrain.DANGER


_LETHAL = frozenset(
    {
        Terrain.DANGER,
        Terrain.ENEMY,
        Terrain.HAZARD,
        Terrain.OBSTACLE,
        Terrain.OBSTACLE_HAZARD,
    }
)
