"""Tests for hazard_route.experiments.cli."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import matplotlib

matplotlib.use("Agg")

import pytest  # noqa: E402

from hazard_route.config.types import Algorithm, MovementRule  # noqa: E402
from hazard_route.domain.grid import Position  # noqa: E402
from hazard_route.domain.terrain import Terrain  # noqa: E402
from hazard_route.experiments.cli import (  # noqa: E402
    _parse_algorithm_list,
    _parse_rule_list,
    main,
)

GATE_INPUT = "[0,0] [3,1] [1,3] [8,8] [0,8] [1,0]\n1\n"
SEALED_INPUT = "[0,0] [1,2] [3,0] [8,0] [8,8] [5,5]\n2\n"


class TestParsers:
    def test_rule_names_and_numbers(self) -> None:
        assert _parse_rule_list("basic, 2") == (MovementRule.BASIC, MovementRule.EXTENDED)

    def test_rule_list_rejects_duplicates(self) -> None:
        with pytest.raises(ValueError, match="distinct"):
            _parse_rule_list("basic,1")

    def test_rule_list_rejects_unknown(self) -> None:
        with pytest.raises(ValueError, match="invalid rule"):
            _parse_rule_list("diagonal")

    def test_algorithm_list(self) -> None:
        assert _parse_algorithm_list("astar") == (Algorithm.ASTAR,)
        with pytest.raises(ValueError, match="must not be empty"):
            _parse_algorithm_list(" , ")


class TestSolveCommand:
    def test_writes_both_outputs(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        input_path = tmp_path / "input.txt"
        input_path.write_text(GATE_INPUT)
        main(["solve", "--input", str(input_path), "--out-dir", str(tmp_path)])

        for name in ("outputBacktracking.txt", "outputAStar.txt"):
            lines = (tmp_path / name).read_text().splitlines()
            assert lines[0] == "Win"
            assert lines[1] == "9"
            assert lines[-1].endswith(" ms")

        summary = json.loads(capsys.readouterr().out)
        assert summary["backtracking"]["cost"] == 9
        assert summary["astar"]["won"] is True

    def test_lose(self, tmp_path: Path) -> None:
        input_path = tmp_path / "input.txt"
        input_path.write_text(SEALED_INPUT)
        main(["solve", "--input", str(input_path), "--out-dir", str(tmp_path)])
        assert (tmp_path / "outputAStar.txt").read_text() == "Lose\n"
        assert (tmp_path / "outputBacktracking.txt").read_text() == "Lose\n"

    def test_figure_flag(self, tmp_path: Path) -> None:
        input_path = tmp_path / "input.txt"
        input_path.write_text(GATE_INPUT)
        main(["solve", "--input", str(input_path), "--out-dir", str(tmp_path), "--figure"])
        assert (tmp_path / "route_backtracking.png").exists()
        assert (tmp_path / "route_astar.png").exists()

    def test_figure_uses_final_board(self, tmp_path: Path) -> None:
        input_path = tmp_path / "input.txt"
        input_path.write_text(GATE_INPUT)
        with patch("hazard_route.experiments.cli.render_board_figure") as render:
            main(["solve", "--input", str(input_path), "--out-dir", str(tmp_path), "--figure"])

        assert render.call_count == 2
        for call in render.call_args_list:
            board, route = call.args[0], call.args[1]
            assert board.hazard is None
            assert board.cell_at(Position(1, 3)) is Terrain.FREE
            assert not [pos for pos in route if board.is_lethal(pos)]

    def test_invalid_input_exits(self, tmp_path: Path) -> None:
        input_path = tmp_path / "input.txt"
        input_path.write_text("[0,0]\n1\n")
        with pytest.raises(SystemExit) as exc_info:
            main(["solve", "--input", str(input_path), "--out-dir", str(tmp_path)])
        assert exc_info.value.code == 2

    def test_missing_input_exits(self, tmp_path: Path) -> None:
        with pytest.raises(SystemExit):
            main(["solve", "--input", str(tmp_path / "absent.txt")])


class TestBatchCommand:
    def test_prints_summary(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(
            [
                "--verbose",
                "batch",
                "--n-boards",
                "3",
                "--seed",
                "7",
                "--rules",
                "basic,extended",
                "--out-dir",
                str(tmp_path),
                "--strict",
                "--verify",
            ]
        )
        summary = json.loads(capsys.readouterr().out)
        assert summary["mode"] == "batch"
        assert summary["total_runs"] == 12
        assert summary["wins"] + summary["losses"] == 12
        assert summary["disagreements"] == 0
        assert (tmp_path / "logs" / "batch_runs.parquet").exists()

    def test_bad_algorithm_exits(self, tmp_path: Path) -> None:
        with pytest.raises(SystemExit):
            main(["batch", "--algorithms", "dijkstra", "--out-dir", str(tmp_path)])

    def test_no_command_exits(self) -> None:
        with pytest.raises(SystemExit):
            main([])
