"""Pydantic v2 models for dungeon metrics.

Per-dungeon measurements and batch aggregates, all serializable to and
from JSON via ``model_dump`` / ``model_validate``.
"""

from __future__ import annotations

from pydantic import BaseModel


class DungeonMetrics(BaseModel):
    """Measurements of a single generated (or hand-written) dungeon."""

    rows: int
    cols: int
    open_cells: int
    """Passable tiles, markers/keys/doors included."""
    wall_cells: int
    has_start: bool
    has_exit: bool
    path_length: int
    """Cells on the door-agnostic shortest path, 0 when there is none."""
    key_path_length: int
    """Cells on the key-aware shortest path, 0 when there is none."""
    reachable_keys: int
    solvable: bool
    """True when the key-aware search reaches the exit."""
    fully_connected: bool
    """Every passable tile is reachable from the start, doors ignored."""
    seed: int | None = None


class BatchSummary(BaseModel):
    """Aggregate statistics over many sampled dungeons."""

    samples: int
    solvable: int
    solvable_rate: float
    fully_connected_rate: float
    avg_path_length: float
    """Mean over samples that have a path; pathless samples are excluded."""
    min_path_length: int
    max_path_length: int
    avg_open_cells: float
