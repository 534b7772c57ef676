"""Key and door bookkeeping for inventory-aware search.

Each key letter ``a``-``f`` owns one bit of a 6-bit mask.  Door ``X``
opens only when the bit for lowercase ``x`` is set; any character outside
``A``-``F`` never blocks movement.  The letter ``E`` is reserved for the
exit marker, so door ``E`` cannot appear and key ``e`` opens nothing.
"""

from __future__ import annotations

from typing import NamedTuple

from keymaze.core.grid import DOORS, EXIT, KEYS, Cell


class KeyState(NamedTuple):
    """A search node: a position plus the keys collected on the way there."""

    row: int
    col: int
    keys: int = 0

    @property
    def cell(self) -> Cell:
        return Cell(self.row, self.col)


def key_bit(tile: str) -> int:
    """Mask bit for key *tile*, or 0 when *tile* is not a key."""
    if tile in KEYS and len(tile) == 1:
        return 1 << KEYS.index(tile)
    return 0


def door_requirement(tile: str) -> int:
    """Mask bit a door needs, or 0 when *tile* is not a door.

    ``E`` is always the exit, never door ``E``.
    """
    if tile == EXIT:
        return 0
    if tile in DOORS and len(tile) == 1:
        return 1 << DOORS.index(tile)
    return 0


def can_pass_door(tile: str, keys: int) -> bool:
    required = door_requirement(tile)
    return (keys & required) == required


def collect_key(tile: str, keys: int) -> int:
    """Return *keys* with *tile*'s bit set (unchanged if not a key)."""
    return keys | key_bit(tile)


def count_keys(keys: int) -> int:
    return bin(keys & ((1 << len(KEYS)) - 1)).count("1")
