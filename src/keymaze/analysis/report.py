"""Human-readable report for a batch of sampled dungeons."""

from __future__ import annotations

from keymaze.analysis.models import BatchSummary
from keymaze.generation.config import GeneratorConfig


def generate_text_report(summary: BatchSummary, config: GeneratorConfig | None = None) -> str:
    """Render *summary* as a short plain-text block."""
    lines: list[str] = []

    lines.append("=" * 60)
    lines.append("Dungeon Sample Report")
    if config is not None:
        rows, cols = config.normalized_shape()
        lines.append(f"Shape: {rows}x{cols} | Room rate: {config.room_rate}%")
    lines.append(f"Samples: {summary.samples:,}")
    lines.append("=" * 60)

    lines.append("")
    lines.append("## Solvability")
    lines.append(
        f"  Solvable:        {summary.solvable_rate:.1%}"
        f" ({summary.solvable}/{summary.samples})"
    )
    lines.append(f"  Fully connected: {summary.fully_connected_rate:.1%}")

    lines.append("")
    lines.append("## Layout")
    lines.append(
        f"  Path length:     avg={summary.avg_path_length:.1f}"
        f"  min={summary.min_path_length}  max={summary.max_path_length}"
    )
    lines.append(f"  Avg open cells:  {summary.avg_open_cells:.1f}")

    return "\n".join(lines)
