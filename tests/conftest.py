"""Shared fixtures and helpers for dungeon tests."""

from __future__ import annotations

import pytest

from keymaze.core.grid import Cell, GridLike


@pytest.fixture
def corridor() -> list[str]:
    """Straight three-cell corridor, ``.`` standing in for open floor."""
    return [
        "#####",
        "#S.E#",
        "#####",
    ]


@pytest.fixture
def key_detour() -> list[str]:
    """Exit behind door ``A``; key ``a`` sits in a dead end below the start."""
    return [
        "#######",
        "#S A E#",
        "# #####",
        "#a#####",
        "#######",
    ]


def assert_valid_path(grid: GridLike, path: list[Cell]) -> None:
    """Path starts on S, ends on E, and every step is one orthogonal move."""
    assert path, "expected a non-empty path"
    assert grid[path[0].row][path[0].col] == "S"
    assert grid[path[-1].row][path[-1].col] == "E"
    for prev, cur in zip(path, path[1:]):
        assert abs(prev.row - cur.row) + abs(prev.col - cur.col) == 1, (prev, cur)
        assert grid[cur.row][cur.col] != "#", cur


def open_cells(grid: GridLike) -> set[Cell]:
    return {
        Cell(r, c)
        for r, row in enumerate(grid)
        for c, tile in enumerate(row)
        if tile != "#"
    }
