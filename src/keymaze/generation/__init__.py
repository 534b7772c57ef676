"""Dungeon generation -- maze carving, room punching, marker placement."""

from keymaze.generation.config import GeneratorConfig
from keymaze.generation.generator import (
    DungeonGenerator,
    add_random_rooms,
    carve_maze,
    carve_passage,
    generate_dungeon,
    place_start_and_exit,
)

__all__ = [
    "DungeonGenerator",
    "GeneratorConfig",
    "add_random_rooms",
    "carve_maze",
    "carve_passage",
    "generate_dungeon",
    "place_start_and_exit",
]
