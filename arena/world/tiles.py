"""
Terrain tiles.

Each tile occupies one grid cell and decides, per mover, whether it
can be entered. Tiles carry a sprite name only; drawing them is left
to whatever presentation layer wraps the arena.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from arena.fighters import Fighter


@dataclass(eq=False)
class Tile:
    """
    A single grid cell.

    Tiles compare by identity: two grass tiles at the same coordinates
    are still different tiles.
    """
    x: int
    y: int
    sprite_id: str = ""

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)

    def is_crossable(self, fighter: Fighter) -> bool:
        """Check whether a fighter may step onto this tile."""
        return True

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.x}, {self.y})"


@dataclass(eq=False, repr=False)
class Grass(Tile):
    """Open ground. Can be dug into a hole."""
    sprite_id: str = "grass"
    dug: bool = field(default=False)

    def dig(self) -> None:
        """Dig a hole. Digging an existing hole changes nothing."""
        self.dug = True
        self.sprite_id = "hole"


@dataclass(eq=False, repr=False)
class Water(Tile):
    """Open water. Only flyers cross it."""
    sprite_id: str = "water"

    def is_crossable(self, fighter: Fighter) -> bool:
        return fighter.can_fly


@dataclass(eq=False, repr=False)
class Bush(Tile):
    """Dense vegetation. Blocks everyone."""
    sprite_id: str = "bush"

    def is_crossable(self, fighter: Fighter) -> bool:
        return False
