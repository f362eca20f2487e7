"""
Game modes - concrete arenas with their own victory rule.
"""

from __future__ import annotations

import logging
from typing import Any

from arena_engine.core import ArenaEvent, MissingToolError, MoveBlock, MoveError
from arena.components import Direction, GridPosition, Shovel
from arena.world.arena import Arena
from arena.world.tiles import Grass, Tile, Water

logger = logging.getLogger(__name__)


class ExterminationArena(Arena):
    """Won once every monster is slain."""

    def is_victory(self) -> bool:
        return not self.monsters


class RiverArena(Arena):
    """
    The stables of Augeas.

    The hero, shovel in hand, digs a trench through the grass. Every
    hole touching water floods, and the flood runs along connected
    holes. The stables are clean once the river reaches the target
    cell.

    Args:
        target: Coordinates the water must reach
        *args, **kwargs: Forwarded to Arena
    """

    def __init__(self, *args: Any, target: tuple[int, int], **kwargs: Any):
        super().__init__(*args, **kwargs)
        if not self.in_bounds(*target):
            raise ValueError(f"Target {target} is outside the arena")
        self.target = target

    def is_victory(self) -> bool:
        return isinstance(self.get_tile(*self.target), Water)

    def dig(self, direction: Direction | str) -> Tile:
        """
        Dig the grass tile next to the hero, then let the water in.

        Returns:
            The tile now lying in the dug cell (a hole, or water if it
            flooded straight away)

        Raises:
            MissingToolError: If the hero holds no shovel
            MoveError: If the cell is off the map (OUT_OF_MAP), is not
                grass (NOT_DIGGABLE) or has a fighter on it (OCCUPIED)
        """
        direction = Direction.parse(direction)
        if not self.hero.equipment.holds(Shovel):
            raise MissingToolError(f"{self.hero.name} needs a shovel to dig")

        x, y = self.hero.get(GridPosition).step(direction)
        if not self.in_bounds(x, y):
            raise MoveError(MoveBlock.OUT_OF_MAP, {"destination": (x, y)})

        tile = self.get_tile(x, y)
        if not isinstance(tile, Grass):
            raise MoveError(MoveBlock.NOT_DIGGABLE, {"destination": (x, y)})
        if self.fighter_at(x, y) is not None:
            raise MoveError(MoveBlock.OCCUPIED, {"destination": (x, y)})

        tile.dig()
        logger.debug("%s digs at (%d, %d)", self.hero.name, x, y)
        self.events.publish(ArenaEvent.TILE_DUG, tile=tile, hero=self.hero)

        self.flood()
        self._announce_victory()
        return self.get_tile(x, y)

    def flood(self) -> list[Tile]:
        """
        Turn every hole connected to water into water.

        Fighters standing on a flooding hole stay put, even those that
        could not have walked onto water.

        Returns:
            The new water tiles, in flooding order
        """
        flooded: list[Tile] = []
        spreading = True
        while spreading:
            spreading = False
            for tile in self.tiles:
                if isinstance(tile, Grass) and tile.dug and self._touches_water(tile):
                    flooded.append(self.replace_tile(tile))
                    spreading = True

        if flooded:
            logger.info("Water floods %d hole(s)", len(flooded))
        return flooded

    def _touches_water(self, tile: Tile) -> bool:
        for direction in Direction:
            dx, dy = direction.vector
            if isinstance(self.get_tile(tile.x + dx, tile.y + dy), Water):
                return True
        return False
