"""
Character components - base stats, health, experience.
"""

from __future__ import annotations

from pydantic import Field

from arena_engine.core.component import Component, register_component

MAX_LIFE = 100


@register_component
class FighterStats(Component):
    """
    Base fighting statistics, before equipment.

    Attributes:
        strength: Upper bound of the damage roll
        dexterity: Damage subtracted from every hit taken
        range: Reach in tiles (Euclidean)
    """
    strength: int = Field(default=10, ge=0)
    dexterity: int = Field(default=5, ge=0)
    range: float = Field(default=1.0, ge=0)


@register_component
class Health(Component):
    """
    Life points tracking.

    Attributes:
        current: Current life, never below 0
        max_hp: Maximum life
    """
    current: int = MAX_LIFE
    max_hp: int = MAX_LIFE

    def model_post_init(self, __context) -> None:
        self.current = max(0, min(self.current, self.max_hp))

    @property
    def is_dead(self) -> bool:
        return self.current <= 0

    def take_damage(self, amount: int) -> int:
        """
        Lose life.

        Returns:
            Actual damage taken
        """
        actual = min(max(0, amount), self.current)
        self.current -= actual
        return actual


@register_component
class Experience(Component):
    """
    Experience points.

    For monsters this is the reward granted to whoever slays them.
    """
    points: int = Field(default=0, ge=0)

    def add_exp(self, amount: int) -> int:
        """Add experience. Returns the new total."""
        self.points += amount
        return self.points
