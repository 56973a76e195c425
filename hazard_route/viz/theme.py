"""Color presets for board figures.

Themes are frozen dataclasses that group the terrain palette and grid
styling, so a figure can be re-rendered with another palette by name.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from hazard_route.domain.terrain import Terrain


def _default_terrain_colors() -> dict[Terrain, str]:
    return {
        Terrain.FREE: "#F0F0F0",
        Terrain.DANGER: "#F8BBD0",
        Terrain.AGENT: "#2196F3",
        Terrain.ENEMY: "#B71C1C",
        Terrain.HAZARD: "#FF5722",
        Terrain.OBSTACLE: "#616161",
        Terrain.OBSTACLE_HAZARD: "#8D6E63",
        Terrain.WAYPOINT: "#FFC107",
        Terrain.GOAL: "#4CAF50",
    }


@dataclass(frozen=True)
class Theme:
    """Terrain palette and overlay styling for ``render_board_figure``."""

    terrain_colors: dict[Terrain, str] = field(default_factory=_default_terrain_colors)
    route_color: str = "#0D47A1"
    grid_line_color: str = "#CCCCCC"

    def color_of(self, terrain: Terrain) -> str:
        return self.terrain_colors[terrain]


DEFAULT_THEME = Theme()

PAPER_THEME = Theme(
    terrain_colors={
        Terrain.FREE: "#FFFFFF",
        Terrain.DANGER: "#FDDBC7",
        Terrain.AGENT: "#1f77b4",
        Terrain.ENEMY: "#67001F",
        Terrain.HAZARD: "#d62728",
        Terrain.OBSTACLE: "#7f7f7f",
        Terrain.OBSTACLE_HAZARD: "#8c564b",
        Terrain.WAYPOINT: "#ff7f0e",
        Terrain.GOAL: "#2ca02c",
    },
    route_color="#000000",
    grid_line_color="#E0E0E0",
)

REGISTERED_THEMES: dict[str, Theme] = {
    "default": DEFAULT_THEME,
    "paper": PAPER_THEME,
}


def get_theme(name: str) -> Theme:
    """Look up a theme by name (case-insensitive)."""
    key = name.lower()
    if key not in REGISTERED_THEMES:
        valid = ", ".join(sorted(REGISTERED_THEMES))
        raise ValueError(f"Unknown theme {name!r}; available: {valid}")
    return REGISTERED_THEMES[key]
