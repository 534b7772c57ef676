"""Breadth-first queries over a generated dungeon grid.

All functions are read-only and accept any sequence of rows (``list[str]``
or ``list[list[str]]``).  Neighbours are always expanded in the order up,
down, left, right; among equally short paths the one returned is the
first that order discovers.

- :func:`shortest_path` treats every non-wall tile as passable.
- :func:`shortest_path_with_keys` searches over (position, key mask)
  states so that doors only open once their key has been picked up.
- :func:`count_reachable_keys` reports the distinct keys in the start's
  connected component, ignoring doors entirely.
"""

from __future__ import annotations

from collections import deque
from typing import Hashable, Mapping, TypeVar

from keymaze.core.grid import EXIT, NOT_FOUND, START, Cell, GridLike, is_passable
from keymaze.solver.keys import KeyState, can_pass_door, collect_key, count_keys

N = TypeVar("N", bound=Hashable)

# Up, down, left, right
DIRECTIONS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


def find_position(grid: GridLike, target: str) -> Cell:
    """First cell holding *target* in row-major order, or ``NOT_FOUND``."""
    for r, row in enumerate(grid):
        for c, tile in enumerate(row):
            if tile == target:
                return Cell(r, c)
    return NOT_FOUND


def _reconstruct(parents: Mapping[N, N], start: N, goal: N) -> list[N]:
    path = [goal]
    current = goal
    while current != start:
        current = parents[current]
        path.append(current)
    path.reverse()
    return path


def _neighbors(grid: GridLike, cell: Cell) -> list[Cell]:
    result: list[Cell] = []
    for d_row, d_col in DIRECTIONS:
        r, c = cell.row + d_row, cell.col + d_col
        if is_passable(grid, r, c):
            result.append(Cell(r, c))
    return result


def shortest_path(grid: GridLike) -> list[Cell]:
    """Shortest path from ``S`` to ``E`` ignoring doors.

    Returns an empty list when either marker is missing or ``E`` cannot
    be reached.
    """
    start = find_position(grid, START)
    goal = find_position(grid, EXIT)
    if start == NOT_FOUND or goal == NOT_FOUND:
        return []

    queue: deque[Cell] = deque([start])
    visited: set[Cell] = {start}
    parents: dict[Cell, Cell] = {}

    while queue:
        current = queue.popleft()
        if current == goal:
            return _reconstruct(parents, start, goal)
        for neighbor in _neighbors(grid, current):
            if neighbor in visited:
                continue
            visited.add(neighbor)
            parents[neighbor] = current
            queue.append(neighbor)

    return []


def shortest_path_with_keys(grid: GridLike) -> list[Cell]:
    """Shortest ``S`` to ``E`` path that only crosses doors whose key is held.

    Stepping onto a key tile adds it to the mask carried forward.  The
    search stops the first time the exit position is dequeued, whatever
    keys are held at that point.
    """
    start = find_position(grid, START)
    goal = find_position(grid, EXIT)
    if start == NOT_FOUND or goal == NOT_FOUND:
        return []

    start_state = KeyState(start.row, start.col, 0)
    queue: deque[KeyState] = deque([start_state])
    visited: set[KeyState] = {start_state}
    parents: dict[KeyState, KeyState] = {}

    while queue:
        current = queue.popleft()
        if current.cell == goal:
            return [state.cell for state in _reconstruct(parents, start_state, current)]

        for neighbor in _neighbors(grid, current.cell):
            tile = grid[neighbor.row][neighbor.col]
            if not can_pass_door(tile, current.keys):
                continue
            nxt = KeyState(neighbor.row, neighbor.col, collect_key(tile, current.keys))
            if nxt in visited:
                continue
            visited.add(nxt)
            parents[nxt] = current
            queue.append(nxt)

    return []


def reachable_cells(grid: GridLike, start: Cell) -> set[Cell]:
    """Every passable cell connected to *start*, doors treated as open."""
    if not is_passable(grid, start.row, start.col):
        return set()

    queue: deque[Cell] = deque([start])
    visited: set[Cell] = {start}
    while queue:
        current = queue.popleft()
        for neighbor in _neighbors(grid, current):
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append(neighbor)
    return visited


def count_reachable_keys(grid: GridLike) -> int:
    """Number of distinct keys connected to ``S``, ignoring door locks.

    This is an upper bound on what a player could collect, not a
    door-gated answer; :func:`shortest_path_with_keys` is the gated one.
    """
    start = find_position(grid, START)
    if start == NOT_FOUND:
        return 0

    keys = 0
    for cell in reachable_cells(grid, start):
        keys = collect_key(grid[cell.row][cell.col], keys)
    return count_keys(keys)
