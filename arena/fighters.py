"""
Fighters - the hero and the monsters.

A fighter is an Entity with a fixed set of components (position,
stats, health, experience, equipment). The classes below only add
convenient accessors and the combat rules on top of that data.
"""

from __future__ import annotations

import logging
from random import Random

from arena_engine.core.entity import Entity
from arena.components import (
    Equipable,
    Equipment,
    Experience,
    FighterStats,
    Flying,
    GridPosition,
    Health,
    MAX_LIFE,
    Movable,
    Shield,
    Weapon,
)

logger = logging.getLogger(__name__)


class Fighter(Entity):
    """Any combat-capable entity standing on the grid."""

    def __init__(
        self,
        name: str,
        x: int = 0,
        y: int = 0,
        strength: int = 10,
        dexterity: int = 5,
        range: float = 1.0,
        life: int = MAX_LIFE,
        experience: int = 0,
        sprite_id: str = "",
    ):
        super().__init__(name)
        self.sprite_id = sprite_id
        self.add(GridPosition(x=x, y=y))
        self.add(FighterStats(strength=strength, dexterity=dexterity, range=range))
        self.add(Health(current=life, max_hp=max(life, MAX_LIFE)))
        self.add(Experience(points=experience))
        self.add(Equipment())

    # Position

    @property
    def x(self) -> int:
        return self.get(GridPosition).x

    @property
    def y(self) -> int:
        return self.get(GridPosition).y

    @property
    def position(self) -> tuple[int, int]:
        return self.get(GridPosition).position

    # Stats

    @property
    def strength(self) -> int:
        return self.get(FighterStats).strength

    @property
    def dexterity(self) -> int:
        return self.get(FighterStats).dexterity

    @property
    def equipment(self) -> Equipment:
        return self.get(Equipment)

    @property
    def damage(self) -> int:
        """Strength plus weapon damage."""
        return self.strength + self.equipment.damage_bonus

    @property
    def defense(self) -> int:
        """Dexterity plus shield protection."""
        return self.dexterity + self.equipment.protection_bonus

    @property
    def range(self) -> float:
        """Base range plus weapon reach."""
        return self.get(FighterStats).range + self.equipment.range_bonus

    # Life and experience

    @property
    def life(self) -> int:
        return self.get(Health).current

    @property
    def is_alive(self) -> bool:
        return not self.get(Health).is_dead

    @property
    def experience(self) -> int:
        return self.get(Experience).points

    @property
    def is_movable(self) -> bool:
        return self.has(Movable)

    @property
    def can_fly(self) -> bool:
        return self.has(Flying)

    def distance_to(self, other: Fighter) -> float:
        """Euclidean distance to another fighter."""
        return self.get(GridPosition).distance_to(other.get(GridPosition))

    def fight(self, defender: Fighter, rng: Random) -> int:
        """
        Strike a defender once.

        The roll is uniform in [1, damage]; the defender's defense is
        subtracted and the result floored at zero.

        Returns:
            Life actually removed from the defender
        """
        roll = rng.randint(1, self.damage) if self.damage > 0 else 0
        dealt = defender.get(Health).take_damage(max(0, roll - defender.defense))
        logger.debug(
            "%s hits %s for %d (roll %d, defense %d), %d life left",
            self.name, defender.name, dealt, roll, defender.defense, defender.life,
        )
        return dealt


class Hero(Fighter):
    """The player-controlled fighter."""

    def __init__(
        self,
        name: str = "Heracles",
        x: int = 0,
        y: int = 0,
        strength: int = 20,
        dexterity: int = 6,
        range: float = 1.0,
        life: int = MAX_LIFE,
        sprite_id: str = "heracles",
    ):
        super().__init__(
            name, x, y,
            strength=strength,
            dexterity=dexterity,
            range=range,
            life=life,
            sprite_id=sprite_id,
        )
        self.add(Movable())
        self.add_tag("hero")

    @property
    def weapon(self) -> Weapon | None:
        return self.equipment.weapon

    @property
    def shield(self) -> Shield | None:
        return self.equipment.shield

    @property
    def second_hand(self) -> Equipable | None:
        return self.equipment.second_hand

    def equip(self, item: Equipable) -> Equipable | None:
        """
        Equip an item in its natural slot.

        Weapons go to the weapon slot, shields to the shield slot and
        anything else to the second hand.

        Returns:
            The item previously held in that slot, if any
        """
        equipment = self.equipment
        if isinstance(item, Weapon):
            previous, equipment.weapon = equipment.weapon, item
        elif isinstance(item, Shield):
            previous, equipment.shield = equipment.shield, item
        else:
            previous, equipment.second_hand = equipment.second_hand, item
        logger.debug("%s equips %s", self.name, item.name or type(item).__name__)
        return previous

    def gain_experience(self, amount: int) -> int:
        """Add experience. Returns the new total."""
        return self.get(Experience).add_exp(amount)


class Monster(Fighter):
    """
    A hostile fighter.

    Its experience is the reward granted to the hero that slays it.
    """

    def __init__(self, name: str, x: int = 0, y: int = 0, **kwargs):
        super().__init__(name, x, y, **kwargs)
        self.add_tag("monster")


def create_hero(
    x: int = 0,
    y: int = 0,
    name: str = "Heracles",
    weapon: Weapon | None = None,
    shield: Shield | None = None,
    second_hand: Equipable | None = None,
) -> Hero:
    """
    Create a hero, optionally equipped.

    Args:
        x: Starting column
        y: Starting row
        name: Display name
        weapon: Weapon to equip
        shield: Shield to equip
        second_hand: Tool to hold in the second hand
    """
    hero = Hero(name=name, x=x, y=y)
    for item in (weapon, shield, second_hand):
        if item is not None:
            hero.equip(item)
    return hero


def create_monster(
    name: str,
    x: int,
    y: int,
    strength: int = 10,
    dexterity: int = 5,
    range: float = 1.0,
    life: int = MAX_LIFE,
    experience: int = 100,
    movable: bool = True,
    flying: bool = False,
    sprite_id: str = "",
) -> Monster:
    """
    Create a monster.

    Args:
        name: Display name
        x: Starting column
        y: Starting row
        strength: Damage roll upper bound
        dexterity: Defense
        range: Reach in tiles
        life: Starting life
        experience: Reward granted on death
        movable: Whether the monster wanders each turn
        flying: Whether the monster crosses water
        sprite_id: Display sprite name
    """
    monster = Monster(
        name, x, y,
        strength=strength,
        dexterity=dexterity,
        range=range,
        life=life,
        experience=experience,
        sprite_id=sprite_id or name.lower(),
    )
    if movable:
        monster.add(Movable())
    if flying:
        monster.add(Flying())
    return monster
