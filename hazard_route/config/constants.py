"""Centralized domain constants for route planning and batch evaluation.

All magic numbers that appear across multiple modules are defined here.
Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

GRID_SIZE = 9
"""Width and height of the square board in cells."""

ORIGIN: tuple[int, int] = (0, 0)
"""Agent start cell used for randomly generated boards."""

STEP_COST = 1
"""Path cost of one orthogonal or diagonal move."""

LEAP_COST = 2
"""Path cost of one two-cell leap (extended movement rule only)."""

SCENARIO_BASIC = 1
"""Input scenario number selecting the basic movement rule."""

SCENARIO_EXTENDED = 2
"""Input scenario number selecting the extended (leap) movement rule."""

ENTITY_ORDER: tuple[str, ...] = ("agent", "enemy", "hazard", "obstacle", "goal", "waypoint")
"""Order of the six coordinates on the first input line."""

BACKTRACKING_OUTPUT = "outputBacktracking.txt"
"""Default result filename for the backtracking engine."""

ASTAR_OUTPUT = "outputAStar.txt"
"""Default result filename for the A* engine."""

DEFAULT_INPUT = "input.txt"
"""Default input filename for the ``solve`` command."""

MAX_GENERATION_ATTEMPTS = 1_000
"""Restarts allowed before random board generation gives up."""

MAX_BATCH_BOARDS = 1_000_000
"""Safety cap on the number of boards in a single batch run."""

PROGRESS_INTERVAL = 100
"""Log batch progress every N boards."""
