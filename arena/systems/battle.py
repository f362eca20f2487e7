"""
Battle system - one hero/monster exchange per call.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from arena_engine.core import ArenaEvent, BattleError, BattleFailure, UnknownMonsterError

if TYPE_CHECKING:
    from arena.world.arena import Arena

logger = logging.getLogger(__name__)


@dataclass
class BattleResult:
    """Outcome of a battle exchange."""
    monster_id: int
    damage_dealt: int = 0
    damage_taken: int = 0
    retaliated: bool = False
    monster_slain: bool = False
    experience_gained: int = 0
    hero_slain: bool = False


class BattleSystem:
    """
    Resolves exchanges between the hero and a monster.

    The hero strikes first when the monster is within the hero's range.
    A slain monster hands its experience to the hero and leaves the
    arena; a surviving one strikes back when the hero is within its
    own range.
    """

    def __init__(self, arena: Arena):
        self.arena = arena

    def resolve(self, monster_id: int) -> BattleResult:
        """
        Run one exchange against the monster registered under an id.

        Raises:
            UnknownMonsterError: If no monster has this id
            BattleError: If the monster is out of the hero's range
                (nothing happened), or the hero is out of the monster's
                range (the hero's strike landed, see ``error.result``)
        """
        arena = self.arena
        hero = arena.hero
        try:
            monster = arena.monsters[monster_id]
        except KeyError:
            raise UnknownMonsterError(f"No monster with id {monster_id}", {"id": monster_id}) from None

        if not arena.touchable(hero, monster):
            logger.debug("%s is out of %s's range", monster.name, hero.name)
            raise BattleError(
                BattleFailure.ATTACKER_OUT_OF_RANGE,
                details={"distance": arena.get_distance(hero, monster), "range": hero.range},
            )

        result = BattleResult(monster_id=monster_id)
        result.damage_dealt = hero.fight(monster, arena.rng)
        arena.events.publish(ArenaEvent.ATTACK, attacker=hero, defender=monster, damage=result.damage_dealt)

        if not monster.is_alive:
            result.monster_slain = True
            result.experience_gained = monster.experience
            hero.gain_experience(monster.experience)
            arena.remove_monster(monster_id)
            logger.info(
                "%s slays %s and gains %d experience (total %d)",
                hero.name, monster.name, monster.experience, hero.experience,
            )
            arena.events.publish(
                ArenaEvent.MONSTER_SLAIN,
                monster=monster,
                monster_id=monster_id,
                experience=monster.experience,
            )
            return result

        if not arena.touchable(monster, hero):
            logger.debug("%s is out of %s's range", hero.name, monster.name)
            raise BattleError(
                BattleFailure.DEFENDER_OUT_OF_RANGE,
                result=result,
                details={"distance": arena.get_distance(monster, hero), "range": monster.range},
            )

        result.retaliated = True
        result.damage_taken = monster.fight(hero, arena.rng)
        arena.events.publish(ArenaEvent.ATTACK, attacker=monster, defender=hero, damage=result.damage_taken)

        if not hero.is_alive:
            result.hero_slain = True
            logger.info("%s is slain by %s", hero.name, monster.name)
            arena.events.publish(ArenaEvent.HERO_SLAIN, hero=hero, monster=monster)

        return result
