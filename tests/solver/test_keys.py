"""Tests for key/door bitmask helpers."""

import pytest

from keymaze.core.grid import Cell
from keymaze.solver.keys import (
    KeyState,
    can_pass_door,
    collect_key,
    count_keys,
    door_requirement,
    key_bit,
)


class TestKeyBits:
    @pytest.mark.parametrize("tile,bit", [("a", 1), ("b", 2), ("f", 32)])
    def test_key_bit(self, tile, bit):
        assert key_bit(tile) == bit

    @pytest.mark.parametrize("tile", ["g", "A", " ", "#", "S", ""])
    def test_non_keys_have_no_bit(self, tile):
        assert key_bit(tile) == 0

    def test_door_requirement_matches_key(self):
        for key, door in zip("abcdf", "ABCDF"):
            assert door_requirement(door) == key_bit(key)

    def test_exit_is_not_a_door(self):
        assert door_requirement("E") == 0
        assert can_pass_door("E", 0)

    def test_collect_key_is_idempotent(self):
        mask = collect_key("c", 0)
        assert collect_key("c", mask) == mask == 0b100

    def test_collect_non_key_leaves_mask(self):
        assert collect_key(" ", 0b11) == 0b11

    def test_count_keys(self):
        assert count_keys(0) == 0
        assert count_keys(0b101011) == 4


class TestCanPassDoor:
    def test_locked_without_key(self):
        assert not can_pass_door("B", 0)
        assert not can_pass_door("B", key_bit("a"))

    def test_open_with_key(self):
        assert can_pass_door("B", key_bit("b") | key_bit("a"))

    @pytest.mark.parametrize("tile", ["G", "Z", " ", "a", "E"])
    def test_other_tiles_never_block(self, tile):
        assert can_pass_door(tile, 0)


class TestKeyState:
    def test_distinct_masks_are_distinct_states(self):
        assert KeyState(1, 1, 0) != KeyState(1, 1, 1)
        assert len({KeyState(1, 1, 0), KeyState(1, 1, 1), KeyState(1, 1, 0)}) == 2

    def test_cell(self):
        assert KeyState(2, 3, 5).cell == Cell(2, 3)
