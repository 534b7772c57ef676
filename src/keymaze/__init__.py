"""keymaze -- maze-with-rooms dungeon generation and key/door-aware pathfinding."""

from keymaze.core.grid import NOT_FOUND, Cell, Grid, InvalidArgumentError
from keymaze.core.rng import DungeonRNG
from keymaze.generation.config import GeneratorConfig
from keymaze.generation.generator import DungeonGenerator, carve_passage, generate_dungeon
from keymaze.solver.search import (
    count_reachable_keys,
    find_position,
    shortest_path,
    shortest_path_with_keys,
)

__all__ = [
    "Cell",
    "DungeonGenerator",
    "DungeonRNG",
    "GeneratorConfig",
    "Grid",
    "InvalidArgumentError",
    "NOT_FOUND",
    "carve_passage",
    "count_reachable_keys",
    "find_position",
    "generate_dungeon",
    "shortest_path",
    "shortest_path_with_keys",
]
