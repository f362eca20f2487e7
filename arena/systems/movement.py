"""
Movement systems - validated grid steps and monster wandering.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from arena_engine.core import ArenaEvent, MoveBlock, MoveError, NotMovableError, System
from arena_engine.core.entity import Entity
from arena.components import Direction, GridPosition, Movable

if TYPE_CHECKING:
    from arena.fighters import Fighter
    from arena.world.arena import Arena

logger = logging.getLogger(__name__)


class MovementSystem:
    """
    Moves fighters one tile at a time.

    A step is refused when it leaves the map, when the destination
    tile cannot be crossed by this fighter, or when another fighter
    already stands there. A refused step leaves the fighter in place.
    """

    def __init__(self, arena: Arena):
        self.arena = arena

    def move(self, fighter: Fighter, direction: Direction | str) -> tuple[int, int]:
        """
        Step a fighter in a cardinal direction.

        Returns:
            The fighter's new coordinates

        Raises:
            NotMovableError: If the fighter lacks the Movable capability
            MoveError: If the step is blocked
        """
        direction = Direction.parse(direction)
        if not fighter.has(Movable):
            raise NotMovableError(f"{fighter.name} cannot move")

        position = fighter.get(GridPosition)
        dest_x, dest_y = position.step(direction)

        reason = self._blocked_by(fighter, dest_x, dest_y)
        if reason is not None:
            logger.debug(
                "%s blocked moving %s to (%d, %d): %s",
                fighter.name, direction.name, dest_x, dest_y, reason.value,
            )
            self.arena.events.publish(
                ArenaEvent.MOVE_BLOCKED,
                fighter=fighter,
                direction=direction,
                destination=(dest_x, dest_y),
                reason=reason,
            )
            raise MoveError(reason, {"fighter": fighter.name, "destination": (dest_x, dest_y)})

        origin = position.position
        position.move_to(dest_x, dest_y)
        logger.debug("%s moved %s from %s to %s", fighter.name, direction.name, origin, position.position)
        self.arena.events.publish(
            ArenaEvent.FIGHTER_MOVED,
            fighter=fighter,
            direction=direction,
            origin=origin,
            destination=position.position,
        )
        return position.position

    def _blocked_by(self, fighter: Fighter, x: int, y: int) -> MoveBlock | None:
        if not self.arena.in_bounds(x, y):
            return MoveBlock.OUT_OF_MAP

        tile = self.arena.get_tile(x, y)
        if tile is not None and not tile.is_crossable(fighter):
            return MoveBlock.NOT_CROSSABLE

        occupant = self.arena.fighter_at(x, y)
        if occupant is not None and occupant is not fighter:
            return MoveBlock.OCCUPIED

        return None


class WanderSystem(System):
    """
    Takes every movable monster one step in a random direction.

    Blocked steps are simply skipped; a monster that cannot move this
    turn stays where it is.
    """

    required_components = [GridPosition, Movable]

    def __init__(self, arena: Arena, movement: MovementSystem):
        super().__init__(arena)
        self.movement = movement

    def process_entity(self, entity: Entity, turn: int) -> None:
        if entity.has_tag("hero"):
            return

        direction = self.world.rng.choice(list(Direction))
        try:
            self.movement.move(entity, direction)
        except MoveError as e:
            logger.debug("Turn %d: %s stays put (%s)", turn, entity.name, e.reason.value)
