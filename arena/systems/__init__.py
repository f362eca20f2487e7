"""
Arena systems - the turn logic behind the arena's actions.
"""

from arena.systems.movement import MovementSystem, WanderSystem
from arena.systems.battle import BattleSystem, BattleResult

__all__ = [
    "MovementSystem",
    "WanderSystem",
    "BattleSystem",
    "BattleResult",
]
