"""Random-board batch evaluation of the route engines.

Each board is generated from its own seed, solved by every requested
algorithm under every requested movement rule, and cross-checked: the
engines must agree on win/lose and on cost, and with ``verify_with_oracle``
they must also match the networkx oracle.
"""

from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pyarrow as pa
import pyarrow.parquet as pq

from hazard_route.config.constants import PROGRESS_INTERVAL
from hazard_route.config.types import Algorithm, BatchConfig, MovementRule
from hazard_route.domain.board import Board
from hazard_route.domain.generation import BoardGenerator
from hazard_route.domain.snapshot import Snapshot
from hazard_route.experiments.summaries import build_batch_summary
from hazard_route.io.paths import (
    batch_runs_path,
    batch_summary_json_path,
    batch_summary_path,
    logs_dir,
)
from hazard_route.io.schemas import (
    BATCH_RUNS_SCHEMA,
    BATCH_SCHEMA_VERSION,
    BATCH_SUMMARY_SCHEMA,
)
from hazard_route.search.composer import solve
from hazard_route.search.reachability import oracle_best_cost

logger = logging.getLogger(__name__)


class EngineDisagreementError(RuntimeError):
    """Raised in strict mode when engines (or the oracle) disagree on a board."""


@dataclass(frozen=True)
class BatchRunResult:
    """Outcome of one algorithm on one board under one movement rule."""

    board_index: int
    seed: int
    algorithm: Algorithm
    rule: MovementRule
    won: bool
    cost: int | None
    route_length: int | None
    elapsed_ms: float
    oracle_cost: int | None = None
    agreed: bool = True


def _solve_group(
    board: Board,
    board_index: int,
    seed: int,
    rule: MovementRule,
    config: BatchConfig,
) -> list[BatchRunResult]:
    search_config = config.search_config(rule)
    expected = (
        oracle_best_cost(board, rule, config.tie_break) if config.verify_with_oracle else None
    )
    outcomes: list[tuple[Algorithm, Snapshot | None]] = []
    timings: dict[Algorithm, float] = {}
    for algorithm in config.algorithms:
        started = time.perf_counter()
        snapshot = solve(board, algorithm, search_config)
        timings[algorithm] = (time.perf_counter() - started) * 1000.0
        outcomes.append((algorithm, snapshot))

    costs = {None if snapshot is None else snapshot.cost for _, snapshot in outcomes}
    agreed = len(costs) == 1
    if config.verify_with_oracle:
        agreed = agreed and costs == {expected}
    if not agreed:
        detail = ", ".join(
            f"{algorithm.value}={None if s is None else s.cost}" for algorithm, s in outcomes
        )
        message = f"board {board_index} (seed {seed}, {rule.value}): {detail}"
        if config.verify_with_oracle:
            message += f", oracle={expected}"
        if config.strict:
            raise EngineDisagreementError(message)
        logger.warning("Engine disagreement on %s", message)

    return [
        BatchRunResult(
            board_index=board_index,
            seed=seed,
            algorithm=algorithm,
            rule=rule,
            won=snapshot is not None,
            cost=None if snapshot is None else snapshot.cost,
            route_length=None if snapshot is None else len(snapshot.steps),
            elapsed_ms=timings[algorithm],
            oracle_cost=expected,
            agreed=agreed,
        )
        for algorithm, snapshot in outcomes
    ]


def _to_row(result: BatchRunResult) -> dict[str, Any]:
    return {
        "schema_version": BATCH_SCHEMA_VERSION,
        "board_index": result.board_index,
        "seed": result.seed,
        "algorithm": result.algorithm.value,
        "rule": result.rule.value,
        "won": result.won,
        "cost": result.cost,
        "route_length": result.route_length,
        "elapsed_ms": result.elapsed_ms,
        "oracle_cost": result.oracle_cost,
        "agreed": result.agreed,
    }


def run_batch(config: BatchConfig) -> list[BatchRunResult]:
    """Evaluate ``config.n_boards`` seeded random boards and persist Parquet/JSON logs."""
    out_dir = Path(config.out_dir)
    logs_dir(out_dir).mkdir(parents=True, exist_ok=True)

    results: list[BatchRunResult] = []
    for i in range(config.n_boards):
        seed = config.base_seed + i
        board = BoardGenerator.from_seed(seed).generate()
        for rule in config.rules:
            results.extend(_solve_group(board, i, seed, rule, config))
        if (i + 1) % PROGRESS_INTERVAL == 0:
            logger.info("Evaluated %d/%d boards", i + 1, config.n_boards)

    run_rows = [_to_row(result) for result in results]
    summaries = build_batch_summary(
        run_rows,
        algorithms=[algorithm.value for algorithm in config.algorithms],
        rules=[rule.value for rule in config.rules],
    )
    pq.write_table(
        pa.Table.from_pylist(run_rows, schema=BATCH_RUNS_SCHEMA), batch_runs_path(out_dir)
    )
    pq.write_table(
        pa.Table.from_pylist(summaries, schema=BATCH_SUMMARY_SCHEMA), batch_summary_path(out_dir)
    )
    batch_summary_json_path(out_dir).write_text(json.dumps(summaries, ensure_ascii=False, indent=2))
    logger.info(
        "Batch finished: %d boards, %d runs, %d disagreements",
        config.n_boards,
        len(results),
        sum(1 for result in results if not result.agreed),
    )
    return results
