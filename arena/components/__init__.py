"""
Arena components - data attached to fighters.

Components are pydantic models; turn logic lives in the systems and
the arena.
"""

from arena.components.transform import (
    Direction,
    GridPosition,
    Movable,
    Flying,
)
from arena.components.character import (
    FighterStats,
    Health,
    Experience,
    MAX_LIFE,
)
from arena.components.equipment import (
    Equipable,
    Weapon,
    Shield,
    Shovel,
    Equipment,
)

__all__ = [
    # Transform
    "Direction",
    "GridPosition",
    "Movable",
    "Flying",
    # Character
    "FighterStats",
    "Health",
    "Experience",
    "MAX_LIFE",
    # Equipment
    "Equipable",
    "Weapon",
    "Shield",
    "Shovel",
    "Equipment",
]
