"""Visualization layer: board and route figures."""

from hazard_route.viz.render import render_board_figure
from hazard_route.viz.theme import DEFAULT_THEME, PAPER_THEME, REGISTERED_THEMES, Theme, get_theme

__all__ = [
    "DEFAULT_THEME",
    "PAPER_THEME",
    "REGISTERED_THEMES",
    "Theme",
    "get_theme",
    "render_board_figure",
]
