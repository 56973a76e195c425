"""Domain layer: terrain, grid, hazard placement, generation and snapshots."""

from hazard_route.domain.board import (
    DEFAULT_EXCLUSIONS,
    Board,
    InvalidBoardError,
    PlacementResult,
)
from hazard_route.domain.generation import BoardGenerator
from hazard_route.domain.grid import Grid, Position
from hazard_route.domain.snapshot import Route, Snapshot, concatenate
from hazard_route.domain.terrain import Terrain

__all__ = [
    "Board",
    "BoardGenerator",
    "DEFAULT_EXCLUSIONS",
    "Grid",
    "InvalidBoardError",
    "PlacementResult",
    "Position",
    "Route",
    "Snapshot",
    "Terrain",
    "concatenate",
]
