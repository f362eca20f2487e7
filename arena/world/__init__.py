"""
World module - terrain, the arena and its game modes.

Provides:
- Tiles with per-mover crossability
- The abstract Arena turn orchestrator
- Concrete game modes
"""

from arena.world.tiles import Tile, Grass, Water, Bush
from arena.world.arena import Arena, GameStatus
from arena.world.modes import ExterminationArena, RiverArena

__all__ = [
    # Tiles
    "Tile",
    "Grass",
    "Water",
    "Bush",
    # Arena
    "Arena",
    "GameStatus",
    # Modes
    "ExterminationArena",
    "RiverArena",
]
