"""Parquet schema definitions for batch evaluation artifacts.

Every column written by ``hazard_route.experiments.batch`` is declared here
so that readers and writers share the same contract.
"""

from __future__ import annotations

import pyarrow as pa

# ---------------------------------------------------------------------------
# Schema version constants
# ---------------------------------------------------------------------------

BATCH_SCHEMA_VERSION = 1

# ---------------------------------------------------------------------------
# Batch schemas
# ---------------------------------------------------------------------------

BATCH_RUNS_SCHEMA = pa.schema(
    [
        ("schema_version", pa.int64()),
        ("board_index", pa.int64()),
        ("seed", pa.int64()),
        ("algorithm", pa.string()),
        ("rule", pa.string()),
        ("won", pa.bool_()),
        ("cost", pa.int64()),
        ("route_length", pa.int64()),
        ("elapsed_ms", pa.float64()),
        ("oracle_cost", pa.int64()),
        ("agreed", pa.bool_()),
    ]
)

BATCH_SUMMARY_SCHEMA = pa.schema(
    [
        ("schema_version", pa.int64()),
        ("algorithm", pa.string()),
        ("rule", pa.string()),
        ("boards", pa.int64()),
        ("wins", pa.int64()),
        ("losses", pa.int64()),
        ("win_rate", pa.float64()),
        ("elapsed_mean_ms", pa.float64()),
        ("elapsed_median_ms", pa.float64()),
        ("elapsed_mode_ms", pa.float64()),
        ("elapsed_stdev_ms", pa.float64()),
    ]
)
