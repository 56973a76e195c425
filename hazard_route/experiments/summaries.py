"""Per-(algorithm, rule) summary builders for batch evaluation.

Functions here turn the per-run rows produced by ``run_batch`` into the
win/lose counts and elapsed-time statistics persisted as Parquet/JSON.
"""

from __future__ import annotations

import statistics
from typing import Any

import numpy as np

from hazard_route.io.schemas import BATCH_SCHEMA_VERSION


def _elapsed_values(rows: list[dict[str, Any]]) -> list[float]:
    values: list[float] = []
    for row in rows:
        value = row.get("elapsed_ms")
        if value is None:
            continue
        numeric = float(value)
        if numeric != numeric:
            continue
        values.append(numeric)
    return values


def elapsed_mode(values: list[float]) -> float | None:
    """Most frequent elapsed time at whole-millisecond resolution; smallest on ties."""
    if not values:
        return None
    return float(min(statistics.multimode(int(round(v)) for v in values)))


def build_group_summary(
    algorithm: str, rule: str, rows: list[dict[str, Any]]
) -> dict[str, int | float | str | None]:
    """Summarize the runs of one (algorithm, rule) pair."""
    boards = len(rows)
    wins = sum(1 for row in rows if bool(row["won"]))
    elapsed = np.asarray(_elapsed_values(rows), dtype=float)
    return {
        "schema_version": BATCH_SCHEMA_VERSION,
        "algorithm": algorithm,
        "rule": rule,
        "boards": boards,
        "wins": wins,
        "losses": boards - wins,
        "win_rate": (wins / boards) if boards else 0.0,
        "elapsed_mean_ms": float(np.mean(elapsed)) if elapsed.size else None,
        "elapsed_median_ms": float(np.median(elapsed)) if elapsed.size else None,
        "elapsed_mode_ms": elapsed_mode(elapsed.tolist()),
        "elapsed_stdev_ms": float(np.std(elapsed, ddof=1)) if elapsed.size > 1 else None,
    }


def build_batch_summary(
    run_rows: list[dict[str, Any]],
    algorithms: list[str],
    rules: list[str],
) -> list[dict[str, int | float | str | None]]:
    """One summary row per (algorithm, rule), in the requested order."""
    summaries: list[dict[str, int | float | str | None]] = []
    for algorithm in algorithms:
        for rule in rules:
            group = [
                row for row in run_rows if row["algorithm"] == algorithm and row["rule"] == rule
            ]
            summaries.append(build_group_summary(algorithm, rule, group))
    return summaries
