"""Result file persistence."""

from __future__ import annotations

from pathlib import Path

from hazard_route.domain.snapshot import Snapshot
from hazard_route.io.render import format_result


def write_result(path: Path, snapshot: Snapshot | None) -> Path:
    """Write the formatted result for *snapshot* to *path* and return the path."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(format_result(snapshot))
    return path
