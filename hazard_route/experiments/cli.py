"""CLI entrypoint for solving input files and running random-board batches.

This module owns argument parsing and mode dispatch. Domain logic lives in:

- ``hazard_route.io``           – input parsing and result files
- ``hazard_route.search``       – leg engines and route composition
- ``hazard_route.experiments``  – batch orchestration and summaries
- ``hazard_route.viz``          – route figures
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from hazard_route.config.constants import ASTAR_OUTPUT, BACKTRACKING_OUTPUT, DEFAULT_INPUT
from hazard_route.config.types import (
    Algorithm,
    BatchConfig,
    MovementRule,
    SearchConfig,
    TieBreak,
)
from hazard_route.experiments.batch import EngineDisagreementError, run_batch
from hazard_route.io.parsing import read_input
from hazard_route.io.paths import figure_path
from hazard_route.io.results import write_result
from hazard_route.search.composer import solve
from hazard_route.viz.render import render_board_figure

logger = logging.getLogger(__name__)

_OUTPUT_FILES: dict[Algorithm, str] = {
    Algorithm.BACKTRACKING: BACKTRACKING_OUTPUT,
    Algorithm.ASTAR: ASTAR_OUTPUT,
}

# ---------------------------------------------------------------------------
# CLI parsing helpers
# ---------------------------------------------------------------------------


def _parse_rule_list(raw_rules: str) -> tuple[MovementRule, ...]:
    """Parse comma-delimited movement rules (``basic``/``extended`` or ``1``/``2``)."""
    parts = [part.strip().lower() for part in raw_rules.split(",") if part.strip()]
    if not parts:
        raise ValueError("rules must not be empty")
    rules: list[MovementRule] = []
    for part in parts:
        try:
            rule = MovementRule.from_scenario(int(part)) if part.isdigit() else MovementRule(part)
        except ValueError as exc:
            valid = ", ".join(rule.value for rule in MovementRule)
            raise ValueError(f"invalid rule {part!r}; must be one of {valid}") from exc
        rules.append(rule)
    if len(set(rules)) != len(rules):
        raise ValueError("rules must include distinct values")
    return tuple(rules)


def _parse_algorithm_list(raw_algorithms: str) -> tuple[Algorithm, ...]:
    """Parse comma-delimited algorithm names."""
    parts = [part.strip().lower() for part in raw_algorithms.split(",") if part.strip()]
    if not parts:
        raise ValueError("algorithms must not be empty")
    algorithms: list[Algorithm] = []
    for part in parts:
        try:
            algorithms.append(Algorithm(part))
        except ValueError as exc:
            valid = ", ".join(algorithm.value for algorithm in Algorithm)
            raise ValueError(f"invalid algorithm {part!r}; must be one of {valid}") from exc
    if len(set(algorithms)) != len(algorithms):
        raise ValueError("algorithms must include distinct values")
    return tuple(algorithms)


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(description="Plan hazard-aware routes on a 9x9 board")
    parser.add_argument("--verbose", action="store_true", help="Enable INFO logging")
    parser.add_argument(
        "--tie-break",
        type=str,
        choices=[tie_break.value for tie_break in TieBreak],
        default=TieBreak.COLUMN_ROW.value,
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    solve_parser = subparsers.add_parser("solve", help="Solve one input file with both engines")
    solve_parser.add_argument("--input", type=Path, default=Path(DEFAULT_INPUT))
    solve_parser.add_argument("--out-dir", type=Path, default=Path("."))
    solve_parser.add_argument(
        "--figure", action="store_true", help="Also render a PNG of each route"
    )

    batch_parser = subparsers.add_parser("batch", help="Evaluate seeded random boards")
    batch_parser.add_argument("--n-boards", type=int, default=100)
    batch_parser.add_argument("--seed", type=int, default=0)
    batch_parser.add_argument("--rules", type=str, default="basic,extended")
    batch_parser.add_argument("--algorithms", type=str, default="backtracking,astar")
    batch_parser.add_argument("--out-dir", type=Path, default=Path("data/batch"))
    batch_parser.add_argument(
        "--strict", action="store_true", help="Fail on the first engine disagreement"
    )
    batch_parser.add_argument(
        "--verify", action="store_true", help="Cross-check every board with the graph oracle"
    )
    return parser


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def _run_solve(args: argparse.Namespace, parser: argparse.ArgumentParser) -> dict[str, object]:
    try:
        run_input = read_input(args.input)
        board = run_input.to_board()
    except FileNotFoundError:
        parser.error(f"Input file not found: {args.input}")
    except ValueError as exc:
        parser.error(f"Invalid input {args.input}: {exc}")

    config = SearchConfig(rule=run_input.rule, tie_break=TieBreak(args.tie_break))
    out_dir = Path(args.out_dir)
    summary: dict[str, object] = {"mode": "solve", "rule": run_input.rule.value}
    for algorithm, filename in _OUTPUT_FILES.items():
        snapshot = solve(board, algorithm, config)
        path = write_result(out_dir / filename, snapshot)
        logger.info("Wrote %s result to %s", algorithm.value, path)
        summary[algorithm.value] = {
            "won": snapshot is not None,
            "cost": None if snapshot is None else snapshot.cost,
            "output": str(path),
        }
        if args.figure and snapshot is not None:
            render_board_figure(
                snapshot.board,
                snapshot.steps,
                figure_path(out_dir, algorithm.value),
                start=snapshot.start,
                title=f"{algorithm.value} (cost {snapshot.cost})",
            )
    return summary


def _run_batch(args: argparse.Namespace, parser: argparse.ArgumentParser) -> dict[str, object]:
    try:
        config = BatchConfig(
            n_boards=args.n_boards,
            out_dir=args.out_dir,
            base_seed=args.seed,
            rules=_parse_rule_list(args.rules),
            algorithms=_parse_algorithm_list(args.algorithms),
            tie_break=TieBreak(args.tie_break),
            strict=args.strict,
            verify_with_oracle=args.verify,
        )
    except ValueError as exc:
        parser.error(str(exc))

    try:
        results = run_batch(config)
    except EngineDisagreementError as exc:
        parser.exit(1, f"engine disagreement: {exc}\n")

    return {
        "mode": "batch",
        "n_boards": config.n_boards,
        "rules": [rule.value for rule in config.rules],
        "algorithms": [algorithm.value for algorithm in config.algorithms],
        "total_runs": len(results),
        "wins": sum(1 for r in results if r.won),
        "losses": sum(1 for r in results if not r.won),
        "disagreements": sum(1 for r in results if not r.agreed),
    }


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint; prints a JSON summary of the executed command."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "solve":
        summary = _run_solve(args, parser)
    else:
        summary = _run_batch(args, parser)
    print(json.dumps(summary, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
