"""
Arena - a turn-based grid RPG built on arena_engine.

A hero and monsters share a square grid, step one tile per turn in a
cardinal direction and trade blows when within range:

    from arena import ExterminationArena, create_hero, create_monster, Weapon

    hero = create_hero(0, 0, weapon=Weapon(name="Sword", damage=10))
    lion = create_monster("Lion", 1, 0, experience=500)
    arena = ExterminationArena(hero, [lion])
    arena.battle(0)
"""

from arena.components import (
    Direction,
    Equipable,
    Shield,
    Shovel,
    Weapon,
)
from arena.fighters import Fighter, Hero, Monster, create_hero, create_monster
from arena.systems import BattleResult
from arena.world import (
    Arena,
    Bush,
    ExterminationArena,
    GameStatus,
    Grass,
    RiverArena,
    Tile,
    Water,
)

__all__ = [
    "Direction",
    "Equipable",
    "Weapon",
    "Shield",
    "Shovel",
    "Fighter",
    "Hero",
    "Monster",
    "create_hero",
    "create_monster",
    "BattleResult",
    "Arena",
    "GameStatus",
    "ExterminationArena",
    "RiverArena",
    "Tile",
    "Grass",
    "Water",
    "Bush",
]
