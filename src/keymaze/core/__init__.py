"""Core primitives: tiles, coordinates, and the seeded RNG."""

from keymaze.core.grid import (
    DOORS,
    EXIT,
    FLOOR,
    KEYS,
    MIN_SIDE,
    NOT_FOUND,
    START,
    WALL,
    Cell,
    Grid,
    InvalidArgumentError,
    MutableGrid,
)
from keymaze.core.rng import DungeonRNG

__all__ = [
    # rng
    "DungeonRNG",
    # grid
    "Cell",
    "Grid",
    "MutableGrid",
    "InvalidArgumentError",
    "NOT_FOUND",
    "MIN_SIDE",
    "WALL",
    "FLOOR",
    "START",
    "EXIT",
    "KEYS",
    "DOORS",
]
