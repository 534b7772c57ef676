"""Tile alphabet, coordinates, and small grid helpers.

A dungeon is a rectangle of single-character tiles:

- ``#`` wall (impassable)
- `` `` open floor
- ``S`` start, ``E`` exit
- ``a``-``f`` collectible keys
- ``A``-``F`` locked doors (passable with the matching key)

The generator hands out grids as ``list[str]``.  While a grid is being
built it is held as ``list[list[str]]`` so tiles can be written in place.
"""

from __future__ import annotations

from typing import NamedTuple, Sequence

WALL = "#"
FLOOR = " "
START = "S"
EXIT = "E"
KEYS = "abcdef"
DOORS = "ABCDEF"

MIN_SIDE = 5

Grid = list[str]
MutableGrid = list[list[str]]
GridLike = Sequence[Sequence[str]]


class InvalidArgumentError(ValueError):
    """Raised when a caller breaks an operation's input contract."""


class Cell(NamedTuple):
    """A (row, column) coordinate."""

    row: int
    col: int


NOT_FOUND = Cell(-1, -1)


def normalize_side(n: int) -> int:
    """Round *n* up to the next odd number, then clamp to ``MIN_SIDE``."""
    if n % 2 == 0:
        n += 1
    return max(n, MIN_SIDE)


def new_grid(rows: int, cols: int, fill: str = WALL) -> MutableGrid:
    return [[fill] * cols for _ in range(rows)]


def freeze(grid: GridLike) -> Grid:
    """Convert any row representation into a list of strings."""
    return ["".join(row) for row in grid]


def in_bounds(grid: GridLike, row: int, col: int) -> bool:
    return 0 <= row < len(grid) and 0 <= col < len(grid[row])


def is_passable(grid: GridLike, row: int, col: int) -> bool:
    """True when (row, col) is inside the grid and is not a wall."""
    return in_bounds(grid, row, col) and grid[row][col] != WALL


def set_tile(grid: list, row: int, col: int, tile: str) -> None:
    """Write *tile* at (row, col) for either list-of-lists or list-of-str rows."""
    if not in_bounds(grid, row, col):
        raise InvalidArgumentError(
            f"({row}, {col}) is outside a {len(grid)}-row grid"
        )
    line = grid[row]
    if isinstance(line, str):
        grid[row] = line[:col] + tile + line[col + 1:]
    else:
        line[col] = tile
