"""Path construction helpers for batch output directories."""

from __future__ import annotations

from pathlib import Path


def logs_dir(out_dir: Path) -> Path:
    """Return path to the logs subdirectory within an output directory."""
    return out_dir / "logs"


def batch_runs_path(out_dir: Path) -> Path:
    """Return path to the per-run batch Parquet file."""
    return logs_dir(out_dir) / "batch_runs.parquet"


def batch_summary_path(out_dir: Path) -> Path:
    """Return path to the batch summary Parquet file."""
    return logs_dir(out_dir) / "batch_summary.parquet"


def batch_summary_json_path(out_dir: Path) -> Path:
    """Return path to the batch summary JSON file."""
    return logs_dir(out_dir) / "batch_summary.json"


def figure_path(out_dir: Path, algorithm: str) -> Path:
    """Return path to the route figure rendered for *algorithm*."""
    return out_dir / f"route_{algorithm}.png"
