"""Metric computation for dungeons and batches of dungeons.

``compute_metrics`` and ``summarize`` are pure.  ``sample_dungeons``
builds dungeons from a config, giving each sample its own forked RNG so
that any single sample can be regenerated from its recorded seed.
"""

from __future__ import annotations

import logging

from keymaze.analysis.models import BatchSummary, DungeonMetrics
from keymaze.core.grid import EXIT, NOT_FOUND, START, WALL, GridLike
from keymaze.core.rng import DungeonRNG
from keymaze.generation.config import GeneratorConfig
from keymaze.generation.generator import DungeonGenerator
from keymaze.solver.search import (
    count_reachable_keys,
    find_position,
    reachable_cells,
    shortest_path,
    shortest_path_with_keys,
)

logger = logging.getLogger(__name__)


def compute_metrics(grid: GridLike, seed: int | None = None) -> DungeonMetrics:
    """Measure *grid*; *seed* is recorded as-is for later regeneration."""
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    walls = sum(1 for row in grid for tile in row if tile == WALL)
    total = sum(len(row) for row in grid)

    start = find_position(grid, START)
    has_start = start != NOT_FOUND
    has_exit = find_position(grid, EXIT) != NOT_FOUND

    path = shortest_path(grid)
    key_path = shortest_path_with_keys(grid)
    connected = has_start and len(reachable_cells(grid, start)) == total - walls

    return DungeonMetrics(
        rows=rows,
        cols=cols,
        open_cells=total - walls,
        wall_cells=walls,
        has_start=has_start,
        has_exit=has_exit,
        path_length=len(path),
        key_path_length=len(key_path),
        reachable_keys=count_reachable_keys(grid),
        solvable=bool(key_path),
        fully_connected=connected,
        seed=seed,
    )


def sample_dungeons(
    config: GeneratorConfig,
    count: int,
    base_seed: int = 42,
) -> list[DungeonMetrics]:
    """Generate *count* dungeons from *config* and measure each one.

    ``config.seed`` takes precedence over *base_seed* when set.
    """
    master = DungeonRNG(config.seed if config.seed is not None else base_seed)
    results: list[DungeonMetrics] = []
    for i in range(count):
        rng = master.fork(f"dungeon:{i}")
        grid = DungeonGenerator(rng).generate(config.rows, config.cols, config.room_rate)
        results.append(compute_metrics(grid, seed=rng.seed))

    logger.debug("Sampled %d dungeons (master seed=%d)", count, master.seed)
    return results


def summarize(metrics: list[DungeonMetrics]) -> BatchSummary:
    """Aggregate per-dungeon metrics.

    Path-length statistics cover only samples that have a path; they are
    all 0 when no sample does.
    """
    total = len(metrics)
    if total == 0:
        return BatchSummary(
            samples=0, solvable=0, solvable_rate=0.0,
            fully_connected_rate=0.0, avg_path_length=0.0,
            min_path_length=0, max_path_length=0, avg_open_cells=0.0,
        )

    solvable = sum(1 for m in metrics if m.solvable)
    lengths = [m.path_length for m in metrics if m.path_length > 0]

    return BatchSummary(
        samples=total,
        solvable=solvable,
        solvable_rate=solvable / total,
        fully_connected_rate=sum(1 for m in metrics if m.fully_connected) / total,
        avg_path_length=sum(lengths) / len(lengths) if lengths else 0.0,
        min_path_length=min(lengths, default=0),
        max_path_length=max(lengths, default=0),
        avg_open_cells=sum(m.open_cells for m in metrics) / total,
    )
