"""Tests for hazard_route.config.types."""

from __future__ import annotations

from pathlib import Path

import pytest

from hazard_route.config.types import (
    Algorithm,
    BatchConfig,
    MovementRule,
    SearchConfig,
    TieBreak,
)


class TestMovementRule:
    def test_from_scenario(self) -> None:
        assert MovementRule.from_scenario(1) is MovementRule.BASIC
        assert MovementRule.from_scenario(2) is MovementRule.EXTENDED

    def test_scenario_round_trip(self) -> None:
        for rule in MovementRule:
            assert MovementRule.from_scenario(rule.scenario) is rule

    @pytest.mark.parametrize("scenario", [0, 3, -1])
    def test_unknown_scenario_rejected(self, scenario: int) -> None:
        with pytest.raises(ValueError, match="scenario"):
            MovementRule.from_scenario(scenario)


class TestSearchConfig:
    def test_defaults(self) -> None:
        config = SearchConfig()
        assert config.rule is MovementRule.BASIC
        assert config.tie_break is TieBreak.COLUMN_ROW

    def test_frozen(self) -> None:
        config = SearchConfig()
        with pytest.raises(AttributeError):
            config.rule = MovementRule.EXTENDED  # type: ignore[misc]


class TestBatchConfig:
    def test_defaults_are_valid(self) -> None:
        config = BatchConfig()
        assert config.n_boards == 100
        assert config.out_dir == Path("data/batch")
        assert config.algorithms == (Algorithm.BACKTRACKING, Algorithm.ASTAR)

    def test_rejects_zero_boards(self) -> None:
        with pytest.raises(ValueError, match="n_boards must be >= 1"):
            BatchConfig(n_boards=0)

    def test_rejects_too_many_boards(self) -> None:
        with pytest.raises(ValueError, match="n_boards must be <="):
            BatchConfig(n_boards=10**9)

    def test_rejects_empty_rules(self) -> None:
        with pytest.raises(ValueError, match="rules must not be empty"):
            BatchConfig(rules=())

    def test_rejects_duplicate_algorithms(self) -> None:
        with pytest.raises(ValueError, match="distinct"):
            BatchConfig(algorithms=(Algorithm.ASTAR, Algorithm.ASTAR))

    def test_search_config_carries_tie_break(self) -> None:
        config = BatchConfig(tie_break=TieBreak.ROW_COLUMN)
        search = config.search_config(MovementRule.EXTENDED)
        assert search == SearchConfig(rule=MovementRule.EXTENDED, tie_break=TieBreak.ROW_COLUMN)
