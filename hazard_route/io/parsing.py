"""Input file parsing and validation.

The input is two lines: six ``[x,y]`` coordinates in the order agent,
enemy, hazard, obstacle, goal, waypoint, then the scenario number
(``1`` basic movement, ``2`` extended movement).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from hazard_route.config.constants import ENTITY_ORDER, GRID_SIZE
from hazard_route.config.types import MovementRule
from hazard_route.domain.board import Board
from hazard_route.domain.grid import Position

_TOKEN = re.compile(r"\[(\d),(\d)\]")


class InputFormatError(ValueError):
    """Raised when input text does not follow the two-line input format."""


@dataclass(frozen=True)
class RunInput:
    """Parsed entity positions and the movement rule of one run."""

    agent: Position
    enemy: Position
    hazard: Position
    obstacle: Position
    goal: Position
    waypoint: Position
    rule: MovementRule

    def positions(self) -> dict[str, Position]:
        return {name: getattr(self, name) for name in ENTITY_ORDER}

    def to_board(self) -> Board:
        """Build the board; placement conflicts raise ``InvalidBoardError``."""
        return Board.from_positions(
            agent=self.agent,
            enemy=self.enemy,
            hazard=self.hazard,
            obstacle=self.obstacle,
            goal=self.goal,
            waypoint=self.waypoint,
        )


def _parse_positions(line: str) -> list[Position]:
    tokens = line.split()
    if len(tokens) != len(ENTITY_ORDER):
        raise InputFormatError(
            f"expected {len(ENTITY_ORDER)} coordinates on the first line, got {len(tokens)}"
        )
    positions: list[Position] = []
    for name, token in zip(ENTITY_ORDER, tokens):
        match = _TOKEN.fullmatch(token)
        if match is None:
            raise InputFormatError(f"{name} coordinate must look like [x,y]: {token!r}")
        x, y = int(match.group(1)), int(match.group(2))
        if not (0 <= x < GRID_SIZE and 0 <= y < GRID_SIZE):
            raise InputFormatError(f"{name} coordinate out of range: {token}")
        positions.append(Position(x, y))
    return positions


def _parse_rule(line: str) -> MovementRule:
    try:
        return MovementRule.from_scenario(int(line.strip()))
    except ValueError as exc:
        raise InputFormatError(f"scenario must be 1 or 2, got {line.strip()!r}") from exc


def _check_distinct(named: dict[str, Position]) -> None:
    names = list(named)
    for i, first in enumerate(names):
        for second in names[i + 1 :]:
            if {first, second} == {"hazard", "obstacle"}:
                continue
            if named[first] == named[second]:
                raise InputFormatError(f"{first} and {second} share cell {named[first]}")


def parse_input(text: str) -> RunInput:
    """Parse input text into a ``RunInput``; raise ``InputFormatError`` on bad input."""
    lines = [line for line in text.splitlines() if line.strip()]
    if len(lines) != 2:
        raise InputFormatError(f"expected 2 non-empty lines, got {len(lines)}")
    positions = _parse_positions(lines[0])
    rule = _parse_rule(lines[1])
    named = dict(zip(ENTITY_ORDER, positions))
    _check_distinct(named)
    return RunInput(rule=rule, **named)


def read_input(path: Path) -> RunInput:
    """Read and parse an input file."""
    return parse_input(Path(path).read_text())
