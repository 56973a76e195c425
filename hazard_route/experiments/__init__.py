"""Experiment orchestration: random-board batches, summaries and the CLI."""

from hazard_route.experiments.batch import BatchRunResult, EngineDisagreementError, run_batch
from hazard_route.experiments.summaries import build_batch_summary, build_group_summary

__all__ = [
    "BatchRunResult",
    "EngineDisagreementError",
    "build_batch_summary",
    "build_group_summary",
    "run_batch",
]
