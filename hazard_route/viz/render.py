"""Matplotlib rendering of a board and the chosen route."""

from __future__ import annotations

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.colors import BoundaryNorm, ListedColormap
from matplotlib.image import AxesImage
from matplotlib.lines import Line2D
from matplotlib.patches import Patch

from hazard_route.domain.board import Board
from hazard_route.domain.grid import Position
from hazard_route.domain.terrain import Terrain
from hazard_route.viz.theme import DEFAULT_THEME, Theme

_TERRAIN_CODES: dict[Terrain, int] = {terrain: i for i, terrain in enumerate(Terrain)}

_TERRAIN_LABELS: dict[Terrain, str] = {
    Terrain.FREE: "Free",
    Terrain.DANGER: "Danger",
    Terrain.AGENT: "Agent",
    Terrain.ENEMY: "Enemy",
    Terrain.HAZARD: "Hazard",
    Terrain.OBSTACLE: "Obstacle",
    Terrain.OBSTACLE_HAZARD: "Obstacle + hazard",
    Terrain.WAYPOINT: "Waypoint",
    Terrain.GOAL: "Goal",
}

# ---------------------------------------------------------------------------
# Cell-fill helpers
# ---------------------------------------------------------------------------


def _build_terrain_array(board: Board) -> np.ndarray:
    """Return (H, W) int array of terrain codes, indexed ``[y, x]``."""
    size = board.grid.size
    grid = np.zeros((size, size), dtype=int)
    for y, row in enumerate(board.grid.rows()):
        for x, terrain in enumerate(row):
            grid[y, x] = _TERRAIN_CODES[terrain]
    return grid


def _terrain_cmap(theme: Theme) -> tuple[ListedColormap, BoundaryNorm]:
    """Discrete colormap with one color per terrain tag."""
    cmap = ListedColormap([theme.color_of(terrain) for terrain in Terrain])
    bounds = [i - 0.5 for i in range(len(_TERRAIN_CODES) + 1)]
    norm = BoundaryNorm(bounds, cmap.N)
    return cmap, norm


def _build_legend_handles(theme: Theme, present: set[Terrain]) -> list[Patch | Line2D]:
    handles: list[Patch | Line2D] = [
        Patch(facecolor=theme.color_of(t), edgecolor="gray", label=_TERRAIN_LABELS[t])
        for t in Terrain
        if t in present
    ]
    handles.append(Line2D([0], [0], color=theme.route_color, linewidth=2, label="Route"))
    return handles


def _draw_cell_grid(ax: plt.Axes, grid: np.ndarray, theme: Theme) -> AxesImage:
    """imshow with subtle grid lines and coordinate ticks on *ax*."""
    cmap, norm = _terrain_cmap(theme)
    img = ax.imshow(grid, cmap=cmap, norm=norm, origin="upper", aspect="equal")
    h, w = grid.shape
    for x in range(w + 1):
        ax.axvline(x - 0.5, color=theme.grid_line_color, linewidth=0.5)
    for y in range(h + 1):
        ax.axhline(y - 0.5, color=theme.grid_line_color, linewidth=0.5)
    ax.set_xticks(range(w))
    ax.set_yticks(range(h))
    return img


# ---------------------------------------------------------------------------
# Public renderers
# ---------------------------------------------------------------------------


def render_board_figure(
    board: Board,
    route: tuple[Position, ...],
    output_path: Path,
    start: Position | None = None,
    theme: Theme = DEFAULT_THEME,
    title: str | None = None,
) -> Path:
    """Render *board* with *route* drawn from *start* and save it as an image."""
    grid = _build_terrain_array(board)
    fig, ax = plt.subplots(figsize=(5, 5))
    _draw_cell_grid(ax, grid, theme)

    origin = start if start is not None else board.agent
    points = ([origin] if origin is not None else []) + list(route)
    if points:
        xs = [p.x for p in points]
        ys = [p.y for p in points]
        ax.plot(xs, ys, color=theme.route_color, linewidth=2, marker="o", markersize=4)

    present = {terrain for row in board.grid.rows() for terrain in row}
    ax.legend(
        handles=_build_legend_handles(theme, present),
        loc="upper left",
        bbox_to_anchor=(1.02, 1.0),
        fontsize=8,
    )
    if title:
        ax.set_title(title)

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.tight_layout()
    fig.savefig(output_path, dpi=200)
    plt.close(fig)
    return output_path
