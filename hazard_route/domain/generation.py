"""Seeded random board generation.

Each ``BoardGenerator`` owns its own ``random.Random`` so that parallel or
repeated runs stay independent and reproducible from a seed.
"""

from __future__ import annotations

from random import Random

from hazard_route.config.constants import GRID_SIZE, MAX_GENERATION_ATTEMPTS, ORIGIN
from hazard_route.domain.board import Board
from hazard_route.domain.grid import Position
from hazard_route.domain.terrain import Terrain

# Random draws allowed per entity before the whole board is restarted.
_DRAWS_PER_ENTITY = GRID_SIZE * GRID_SIZE * 4

_PLACEMENT_ORDER: tuple[Terrain, ...] = (
    Terrain.ENEMY,
    Terrain.HAZARD,
    Terrain.OBSTACLE,
    Terrain.GOAL,
    Terrain.WAYPOINT,
)


class BoardGenerator:
    """Produce valid random boards with the agent at the origin."""

    def __init__(self, rng: Random, agent: Position | None = None) -> None:
        self.rng = rng
        self.agent = agent if agent is not None else Position(*ORIGIN)

    @classmethod
    def from_seed(cls, seed: int) -> BoardGenerator:
        return cls(Random(seed))

    def random_position(self) -> Position:
        return Position(self.rng.randrange(GRID_SIZE), self.rng.randrange(GRID_SIZE))

    def generate(self) -> Board:
        """Return a valid board, restarting whenever a placement cannot be satisfied."""
        for _ in range(MAX_GENERATION_ATTEMPTS):
            board = self._try_generate()
            if board is not None:
                return board
        raise RuntimeError(
            f"could not generate a valid board in {MAX_GENERATION_ATTEMPTS} attempts"
        )

    def _try_generate(self) -> Board | None:
        board = Board()
        for tag in _PLACEMENT_ORDER:
            if not self._place_randomly(board, tag):
                return None
        if not board.place(Terrain.AGENT, self.agent):
            return None
        return board

    def _place_randomly(self, board: Board, tag: Terrain) -> bool:
        for _ in range(_DRAWS_PER_ENTITY):
            if board.place(tag, self.random_position()):
                return True
        return False
