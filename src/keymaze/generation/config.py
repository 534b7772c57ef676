"""Pydantic v2 configuration model for dungeon generation."""

from __future__ import annotations

from pydantic import BaseModel, Field

from keymaze.core.grid import normalize_side


class GeneratorConfig(BaseModel):
    """Parameters for a single dungeon build."""

    rows: int = Field(default=21, ge=1)
    """Requested row count; even values grow by one, small values clamp to 5."""

    cols: int = Field(default=21, ge=1)
    """Requested column count, normalised the same way as ``rows``."""

    room_rate: int = 20
    """Percentage of a quarter of the cell count to open as extra rooms.

    Not range-checked: values above 100 punch proportionally more rooms and
    negative values punch none.
    """

    seed: int | None = None
    """Seed for the generator's RNG, or None for OS entropy."""

    def normalized_shape(self) -> tuple[int, int]:
        """Return the (rows, cols) the generator will actually build."""
        return normalize_side(self.rows), normalize_side(self.cols)
