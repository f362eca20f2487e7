"""
Arena - the grid and its turn orchestration.

The arena owns the tiles, the hero and the monsters. Every action is
synchronous and mutates that state in place:

    arena = ExterminationArena(hero, [cerberus, hydra], tiles)
    arena.arena_move("N")     # hero steps north, monsters wander
    arena.battle(0)           # hero and monster 0 exchange blows
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import Enum, auto
from random import Random
from typing import Iterable, Iterator, Mapping

from arena_engine.core import ArenaConfig, ArenaEvent, EventBus
from arena_engine.core.component import Component
from arena.components import Direction
from arena.fighters import Fighter, Hero, Monster
from arena.systems import BattleResult, BattleSystem, MovementSystem, WanderSystem
from arena.world.tiles import Tile, Water

logger = logging.getLogger(__name__)


class GameStatus(Enum):
    """Where the game stands."""
    ONGOING = auto()
    VICTORY = auto()
    DEFEAT = auto()


class Arena(ABC):
    """
    Base arena. Subclasses define the victory condition.

    Actions do not check the game status: a fallen hero can still move
    and fight, and callers decide when to stop playing.

    Args:
        hero: The player-controlled fighter
        monsters: Monsters keyed by id, or a sequence numbered from 0
        tiles: Terrain tiles; cells without a tile are open ground
        config: Grid size, seed and wandering behavior
        rng: Random generator (overrides config.seed)
        events: Event bus to publish on (a private one by default)
    """

    def __init__(
        self,
        hero: Hero,
        monsters: Mapping[int, Monster] | Iterable[Monster] = (),
        tiles: Iterable[Tile] = (),
        config: ArenaConfig | None = None,
        rng: Random | None = None,
        events: EventBus | None = None,
    ):
        self.config = config or ArenaConfig()
        self.rng = rng or Random(self.config.seed)
        self.events = events or EventBus()
        self.turn = 0
        self._victory_announced = False

        self._hero = hero
        if isinstance(monsters, Mapping):
            self._monsters: dict[int, Monster] = dict(monsters)
        else:
            self._monsters = dict(enumerate(monsters))

        self._tiles: list[Tile] = []
        for tile in tiles:
            self.add_tile(tile)

        self._check_placement()

        self.movement = MovementSystem(self)
        self.wander = WanderSystem(self, self.movement)
        self.wander.enabled = self.config.monsters_wander
        self.battles = BattleSystem(self)

    @abstractmethod
    def is_victory(self) -> bool:
        """Check whether the hero has won."""

    def is_defeat(self) -> bool:
        """Check whether the hero has fallen."""
        return not self._hero.is_alive

    @property
    def status(self) -> GameStatus:
        if self.is_defeat():
            return GameStatus.DEFEAT
        if self.is_victory():
            return GameStatus.VICTORY
        return GameStatus.ONGOING

    # Accessors

    @property
    def size(self) -> int:
        return self.config.size

    @property
    def hero(self) -> Hero:
        return self._hero

    @property
    def monsters(self) -> dict[int, Monster]:
        """Live monsters by id. A copy; mutate through the arena."""
        return dict(self._monsters)

    @property
    def tiles(self) -> list[Tile]:
        return list(self._tiles)

    @property
    def fighters(self) -> Iterator[Fighter]:
        """The hero, then the monsters in id order."""
        yield self._hero
        yield from self._monsters.values()

    def get_entities_with(self, *component_types: type[Component]) -> Iterator[Fighter]:
        """Fighters carrying every given component type."""
        return (f for f in self.fighters if f.has(*component_types))

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def get_tile(self, x: int, y: int) -> Tile | None:
        for tile in self._tiles:
            if tile.x == x and tile.y == y:
                return tile
        return None

    def fighter_at(self, x: int, y: int) -> Fighter | None:
        for fighter in self.fighters:
            if fighter.x == x and fighter.y == y:
                return fighter
        return None

    def get_monster_id(self, monster: Monster) -> int | None:
        for monster_id, candidate in self._monsters.items():
            if candidate is monster:
                return monster_id
        return None

    # Movement

    def move(self, fighter: Fighter, direction: Direction | str) -> tuple[int, int]:
        """
        Step a fighter one tile.

        Raises:
            NotMovableError: If the fighter lacks the Movable capability
            MoveError: If the destination is out of the map, not
                crossable or occupied; the fighter stays in place
        """
        return self.movement.move(fighter, direction)

    def arena_move(self, direction: Direction | str) -> tuple[int, int]:
        """
        Play a movement turn.

        The hero steps first; a blocked hero ends the turn right there
        with a MoveError. Then every movable monster steps in a random
        direction, skipping blocked steps.

        Returns:
            The hero's new coordinates
        """
        position = self.move(self._hero, direction)
        self.turn += 1
        self.wander.update(self.turn)
        self.events.publish(ArenaEvent.TURN_ENDED, turn=self.turn)
        self._announce_victory()
        return position

    # Combat

    def get_distance(self, start: Fighter, end: Fighter) -> float:
        """Euclidean distance between two fighters."""
        return start.distance_to(end)

    def touchable(self, attacker: Fighter, defender: Fighter) -> bool:
        """Check whether the defender is within the attacker's range."""
        return self.get_distance(attacker, defender) <= attacker.range

    def battle(self, monster_id: int) -> BattleResult:
        """
        Exchange blows between the hero and a monster.

        Raises:
            UnknownMonsterError: If no monster has this id
            BattleError: If either side is out of the other's range
        """
        result = self.battles.resolve(monster_id)
        self._announce_victory()
        return result

    def remove_monster(self, monster_id: int) -> Monster:
        """Take a monster off the arena."""
        return self._monsters.pop(monster_id)

    # Terrain

    def add_tile(self, tile: Tile) -> Tile:
        """
        Lay a tile on the grid.

        Raises:
            ValueError: If the tile is off the map or its cell is taken
        """
        if not self.in_bounds(tile.x, tile.y):
            raise ValueError(f"Tile {tile!r} is outside a {self.size}x{self.size} arena")
        if self.get_tile(tile.x, tile.y) is not None:
            raise ValueError(f"Cell ({tile.x}, {tile.y}) already has a tile")
        self._tiles.append(tile)
        return tile

    def remove_tile(self, tile: Tile) -> None:
        """Lift a tile off the grid. Unknown tiles are ignored."""
        self._tiles = [t for t in self._tiles if t is not tile]

    def replace_tile(self, tile: Tile, replacement: Tile | None = None) -> Tile:
        """
        Swap a tile for another at the same coordinates.

        The replacement defaults to water, which is how consumed
        terrain (a flooded hole) is modelled.

        Returns:
            The tile now occupying the cell

        Raises:
            ValueError: If the tile is not on the grid, or the
                replacement sits on another cell
        """
        if not any(t is tile for t in self._tiles):
            raise ValueError(f"{tile!r} is not part of this arena")
        if replacement is None:
            replacement = Water(tile.x, tile.y)
        elif replacement.position != tile.position:
            raise ValueError(f"{replacement!r} does not sit on {tile!r}")

        self.remove_tile(tile)
        self.add_tile(replacement)
        logger.debug("Replaced %r with %r", tile, replacement)
        self.events.publish(ArenaEvent.TILE_REPLACED, old=tile, new=replacement)
        return replacement

    # Internals

    def _check_placement(self) -> None:
        seen: dict[tuple[int, int], Fighter] = {}
        for fighter in self.fighters:
            if not self.in_bounds(fighter.x, fighter.y):
                raise ValueError(f"{fighter.name} stands outside the arena at {fighter.position}")
            if fighter.position in seen:
                raise ValueError(
                    f"{fighter.name} and {seen[fighter.position].name} share cell {fighter.position}"
                )
            seen[fighter.position] = fighter

    def _announce_victory(self) -> None:
        if not self._victory_announced and self.status is GameStatus.VICTORY:
            self._victory_announced = True
            logger.info("%s is victorious after %d turns", self._hero.name, self.turn)
            self.events.publish(ArenaEvent.VICTORY, hero=self._hero, turn=self.turn)
