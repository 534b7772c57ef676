"""Maze-with-rooms dungeon generator.

Builds an odd-sized grid in three passes:

1. Carve a perfect maze with randomized depth-first backtracking over the
   odd-coordinate lattice, starting at (1, 1).  Walls between lattice
   cells are the removable edges, so the result is a spanning tree.
2. Punch extra wall cells open to form rooms and cycles.
3. Mark the first open interior cell (row-major) as ``S`` and the last as
   ``E``.

Carving uses an explicit stack and consumes random numbers in exactly the
order a recursive backtracker would.
"""

from __future__ import annotations

import logging
from typing import Iterator

from keymaze.core.grid import (
    EXIT,
    FLOOR,
    START,
    WALL,
    Cell,
    Grid,
    InvalidArgumentError,
    MutableGrid,
    freeze,
    in_bounds,
    new_grid,
    normalize_side,
    set_tile,
)
from keymaze.core.rng import DungeonRNG
from keymaze.generation.config import GeneratorConfig

logger = logging.getLogger(__name__)

# North, East, South, West -- two steps, from lattice cell to lattice cell
CARVE_DIRECTIONS: tuple[tuple[int, int], ...] = ((-2, 0), (0, 2), (2, 0), (0, -2))

_START_CELL = Cell(1, 1)


def carve_passage(
    grid: list,
    from_row: int,
    from_col: int,
    to_row: int,
    to_col: int,
) -> None:
    """Open (to_row, to_col) and the wall cell halfway back to (from_row, from_col).

    Both cells must lie inside the grid exactly two apart on one axis.
    Works on ``list[str]`` and ``list[list[str]]`` grids alike.
    """
    if not in_bounds(grid, from_row, from_col) or not in_bounds(grid, to_row, to_col):
        raise InvalidArgumentError(
            f"carve_passage: ({from_row}, {from_col}) -> ({to_row}, {to_col}) "
            "is out of bounds"
        )
    d_row, d_col = abs(to_row - from_row), abs(to_col - from_col)
    if sorted((d_row, d_col)) != [0, 2]:
        raise InvalidArgumentError(
            f"carve_passage: ({from_row}, {from_col}) and ({to_row}, {to_col}) "
            "must be exactly two cells apart on one axis"
        )
    set_tile(grid, to_row, to_col, FLOOR)
    set_tile(grid, (from_row + to_row) // 2, (from_col + to_col) // 2, FLOOR)


def _is_carved(grid: MutableGrid, cell: Cell) -> bool:
    return grid[cell.row][cell.col] == FLOOR


def _unvisited_neighbors(grid: MutableGrid, cell: Cell) -> list[Cell]:
    neighbors: list[Cell] = []
    for d_row, d_col in CARVE_DIRECTIONS:
        nxt = Cell(cell.row + d_row, cell.col + d_col)
        if in_bounds(grid, nxt.row, nxt.col) and not _is_carved(grid, nxt):
            neighbors.append(nxt)
    return neighbors


def _shuffled_neighbors(grid: MutableGrid, cell: Cell, rng: DungeonRNG) -> Iterator[Cell]:
    neighbors = _unvisited_neighbors(grid, cell)
    rng.shuffle(neighbors)
    return iter(neighbors)


def carve_maze(grid: MutableGrid, rng: DungeonRNG, start: Cell = _START_CELL) -> None:
    """Carve a perfect maze into an all-wall *grid*, starting from *start*.

    Each stack frame holds a cell and the remaining shuffled neighbours
    it has not tried yet.  A neighbour opened by a deeper branch since the
    shuffle is skipped, as in the recursive formulation.
    """
    set_tile(grid, start.row, start.col, FLOOR)
    stack: list[tuple[Cell, Iterator[Cell]]] = [
        (start, _shuffled_neighbors(grid, start, rng)),
    ]
    while stack:
        cell, pending = stack[-1]
        nxt = next(pending, None)
        if nxt is None:
            stack.pop()
            continue
        if _is_carved(grid, nxt):
            continue
        carve_passage(grid, cell.row, cell.col, nxt.row, nxt.col)
        stack.append((nxt, _shuffled_neighbors(grid, nxt, rng)))


def rooms_to_add(rows: int, cols: int, room_rate: int) -> int:
    """Number of room-punch attempts for a grid of this size."""
    total_walls = (rows * cols) // 4
    return max(0, (total_walls * room_rate) // 100)


def add_random_rooms(grid: MutableGrid, room_rate: int, rng: DungeonRNG) -> int:
    """Open random interior wall cells; return how many were actually opened.

    Picks may repeat or land on open floor, in which case they do nothing.
    """
    rows, cols = len(grid), len(grid[0])
    opened = 0
    for _ in range(rooms_to_add(rows, cols, room_rate)):
        row = rng.random_int(2, rows - 3)
        col = rng.random_int(2, cols - 3)
        if grid[row][col] == WALL:
            grid[row][col] = FLOOR
            opened += 1
    return opened


def place_start_and_exit(grid: MutableGrid) -> bool:
    """Mark the first and last open interior cells as start and exit.

    Returns False, leaving the grid unmarked, when fewer than two open
    cells exist.
    """
    rows, cols = len(grid), len(grid[0]) if grid else 0
    open_cells = [
        Cell(r, c)
        for r in range(1, rows - 1)
        for c in range(1, cols - 1)
        if grid[r][c] == FLOOR
    ]
    if len(open_cells) < 2:
        logger.warning(
            "Not enough open cells for start/exit placement (found %d)",
            len(open_cells),
        )
        return False

    first, last = open_cells[0], open_cells[-1]
    grid[first.row][first.col] = START
    grid[last.row][last.col] = EXIT
    return True


class DungeonGenerator:
    """Builds maze-with-rooms dungeons from an injected RNG.

    Parameters
    ----------
    rng:
        Random source for carving and room punching.  A fresh entropy-seeded
        ``DungeonRNG`` is created when omitted.
    """

    def __init__(self, rng: DungeonRNG | None = None) -> None:
        self.rng = rng if rng is not None else DungeonRNG()

    def generate(self, rows: int, cols: int, room_rate: int = 20) -> Grid:
        """Generate a dungeon of (at least) *rows* x *cols* tiles."""
        rows, cols = normalize_side(rows), normalize_side(cols)
        grid = new_grid(rows, cols, WALL)

        carve_maze(grid, self.rng)
        opened = add_random_rooms(grid, room_rate, self.rng)
        place_start_and_exit(grid)

        logger.debug(
            "Generated %dx%d dungeon (seed=%d, room_rate=%d, rooms_opened=%d)",
            rows, cols, self.rng.seed, room_rate, opened,
        )
        return freeze(grid)

    def generate_from_config(self, config: GeneratorConfig) -> Grid:
        """Generate from *config*; a set ``config.seed`` replaces this generator's RNG."""
        if config.seed is not None:
            self.rng = DungeonRNG(config.seed)
        return self.generate(config.rows, config.cols, config.room_rate)


def generate_dungeon(
    rows: int,
    cols: int,
    room_rate: int = 20,
    rng: DungeonRNG | None = None,
) -> Grid:
    """Generate a dungeon; see :class:`DungeonGenerator`."""
    return DungeonGenerator(rng).generate(rows, cols, room_rate)
