"""Fixed-size square grid of terrain tags with bounded neighbor queries.

Neighbor queries never raise for edge cells: out-of-bounds candidates are
dropped, so an interior cell has four orthogonal and four diagonal
neighbors while a corner cell has two and one.
"""

from __future__ import annotations

from dataclasses import dataclass

from hazard_route.config.constants import GRID_SIZE
from hazard_route.domain.terrain import Terrain

_ORTHOGONAL_OFFSETS: tuple[tuple[int, int], ...] = ((0, 1), (0, -1), (1, 0), (-1, 0))
_DIAGONAL_OFFSETS: tuple[tuple[int, int], ...] = ((1, 1), (1, -1), (-1, 1), (-1, -1))
_LEAP_OFFSETS: tuple[tuple[int, int], ...] = ((0, 2), (0, -2), (2, 0), (-2, 0))


@dataclass(frozen=True, order=True)
class Position:
    """Immutable cell coordinate; orders column-first (x, then y)."""

    x: int
    y: int

    def __str__(self) -> str:
        return f"[{self.x},{self.y}]"

    def offset(self, dx: int, dy: int) -> Position:
        return Position(self.x + dx, self.y + dy)

    def midpoint(self, other: Position) -> Position:
        """Cell halfway between two positions on the same axis, two cells apart."""
        return Position((self.x + other.x) // 2, (self.y + other.y) // 2)

    def chebyshev(self, other: Position) -> int:
        return max(abs(self.x - other.x), abs(self.y - other.y))

    def distance_squared(self, other: Position) -> int:
        return (self.x - other.x) ** 2 + (self.y - other.y) ** 2

    def is_adjacent(self, other: Position) -> bool:
        """True for the eight king-move neighbors (never for the cell itself)."""
        return self != other and self.chebyshev(other) == 1


class Grid:
    """Square array of terrain tags, indexed ``cells[y][x]``."""

    def __init__(self, size: int = GRID_SIZE, cells: list[list[Terrain]] | None = None) -> None:
        self.size = size
        if cells is None:
            cells = [[Terrain.FREE] * size for _ in range(size)]
        self._cells = cells

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def cell_at(self, pos: Position) -> Terrain | None:
        """Return the tag at *pos*, or ``None`` when *pos* is off the board."""
        if not self.in_bounds(pos.x, pos.y):
            return None
        return self._cells[pos.y][pos.x]

    def set_cell(self, pos: Position, terrain: Terrain) -> None:
        if not self.in_bounds(pos.x, pos.y):
            raise ValueError(f"position out of bounds: {pos}")
        self._cells[pos.y][pos.x] = terrain

    def is_lethal(self, pos: Position) -> bool:
        """Off-board cells count as lethal."""
        cell = self.cell_at(pos)
        return cell is None or cell.is_lethal

    def _offsets(self, pos: Position, offsets: tuple[tuple[int, int], ...]) -> list[Position]:
        result: list[Position] = []
        for dx, dy in offsets:
            if self.in_bounds(pos.x + dx, pos.y + dy):
                result.append(pos.offset(dx, dy))
        return result

    def orthogonal_neighbors(self, pos: Position) -> list[Position]:
        return self._offsets(pos, _ORTHOGONAL_OFFSETS)

    def diagonal_neighbors(self, pos: Position) -> list[Position]:
        return self._offsets(pos, _DIAGONAL_OFFSETS)

    def king_neighbors(self, pos: Position) -> list[Position]:
        """Orthogonal neighbors followed by diagonal neighbors."""
        return self.orthogonal_neighbors(pos) + self.diagonal_neighbors(pos)

    def leap_neighbors(self, pos: Position) -> list[Position]:
        """Two-cell leaps along one axis whose midpoint cell is non-lethal."""
        return [
            target
            for target in self._offsets(pos, _LEAP_OFFSETS)
            if not self.is_lethal(pos.midpoint(target))
        ]

    def positions(self) -> list[Position]:
        """All cells, row by row."""
        return [Position(x, y) for y in range(self.size) for x in range(self.size)]

    def copy(self) -> Grid:
        return Grid(self.size, [list(row) for row in self._cells])

    def rows(self) -> list[tuple[Terrain, ...]]:
        return [tuple(row) for row in self._cells]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.size == other.size and self._cells == other._cells

    def __repr__(self) -> str:
        body = "\n".join("".join(cell.value for cell in row) for row in self._cells)
        return f"Grid(size={self.size})\n{body}"
