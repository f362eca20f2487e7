"""
Equipment components - equipable items and the slots that hold them.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from arena_engine.core.component import Component, register_component


class Equipable(BaseModel):
    """Anything a fighter can hold."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    sprite_id: str = ""


class Weapon(Equipable):
    """
    A weapon.

    Attributes:
        damage: Added to the wielder's strength
        range: Added to the wielder's base range
    """
    damage: int = Field(default=10, ge=0)
    range: float = Field(default=0.0, ge=0)


class Shield(Equipable):
    """
    A shield.

    Attributes:
        protection: Added to the bearer's dexterity
    """
    protection: int = Field(default=10, ge=0)


class Shovel(Equipable):
    """Digging tool, held in the second hand."""
    name: str = "Shovel"
    sprite_id: str = "shovel"


@register_component
class Equipment(Component):
    """
    Equipped items.

    Attributes:
        weapon: Main hand weapon
        shield: Off hand shield
        second_hand: Any other held item (tools)
    """
    weapon: Weapon | None = None
    shield: Shield | None = None
    second_hand: Equipable | None = None

    @property
    def damage_bonus(self) -> int:
        return self.weapon.damage if self.weapon else 0

    @property
    def protection_bonus(self) -> int:
        return self.shield.protection if self.shield else 0

    @property
    def range_bonus(self) -> float:
        return self.weapon.range if self.weapon else 0.0

    def holds(self, item_type: type[Equipable]) -> bool:
        """Check whether any slot holds an item of the given type."""
        return any(
            isinstance(item, item_type)
            for item in (self.weapon, self.shield, self.second_hand)
        )
