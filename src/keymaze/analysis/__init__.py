"""Dungeon analysis: per-dungeon metrics, batch sampling, and reports."""

from keymaze.analysis.metrics import compute_metrics, sample_dungeons, summarize
from keymaze.analysis.models import BatchSummary, DungeonMetrics
from keymaze.analysis.report import generate_text_report

__all__ = [
    "BatchSummary",
    "DungeonMetrics",
    "compute_metrics",
    "generate_text_report",
    "sample_dungeons",
    "summarize",
]
