"""Dungeon solving -- marker lookup, BFS paths, key-aware search."""

from keymaze.solver.keys import (
    KeyState,
    can_pass_door,
    collect_key,
    count_keys,
    door_requirement,
    key_bit,
)
from keymaze.solver.search import (
    count_reachable_keys,
    find_position,
    reachable_cells,
    shortest_path,
    shortest_path_with_keys,
)

__all__ = [
    "KeyState",
    "can_pass_door",
    "collect_key",
    "count_keys",
    "count_reachable_keys",
    "door_requirement",
    "find_position",
    "key_bit",
    "reachable_cells",
    "shortest_path",
    "shortest_path_with_keys",
]
