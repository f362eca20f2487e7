import pytest

from arena_engine.core import ArenaConfig, ArenaEvent, MissingToolError, MoveBlock, MoveError
from arena.components import Shovel
from arena.fighters import create_hero, create_monster
from arena.world.arena import Arena, GameStatus
from arena.world.modes import ExterminationArena, RiverArena
from arena.world.tiles import Bush, Grass, Water


def make_river(hero, tiles, target=(4, 0), monsters=()):
    return RiverArena(
        hero,
        monsters,
        tiles,
        config=ArenaConfig(size=5, monsters_wander=False),
        target=target,
    )


def grass_row(y, xs):
    return [Grass(x, y) for x in xs]


def test_extermination_victory(make_arena, hero):
    assert make_arena(hero).is_victory()
    assert not make_arena(create_hero(0, 0), [create_monster("Lion", 1, 1)]).is_victory()


def test_river_target_must_be_on_map():
    with pytest.raises(ValueError):
        make_river(create_hero(0, 1), [], target=(5, 0))


def test_dig_requires_shovel():
    hero = create_hero(0, 1)
    arena = make_river(hero, [Water(0, 0), Grass(1, 1)])

    with pytest.raises(MissingToolError):
        arena.dig("E")
    assert not arena.get_tile(1, 1).dug


def test_dig_grass_without_water_leaves_hole():
    hero = create_hero(0, 1, second_hand=Shovel())
    grass = Grass(1, 1)
    arena = make_river(hero, [grass])
    dug = []
    arena.events.subscribe(ArenaEvent.TILE_DUG, dug.append, weak=False)

    tile = arena.dig("E")

    assert tile is grass
    assert grass.dug
    assert grass.sprite_id == "hole"
    assert dug[0]["tile"] is grass


def test_dig_refusals():
    hero = create_hero(0, 1, second_hand=Shovel())
    lion = create_monster("Lion", 0, 2)
    arena = make_river(hero, [Bush(1, 1), Grass(0, 2)], monsters=[lion])

    with pytest.raises(MoveError) as excinfo:
        arena.dig("W")
    assert excinfo.value.reason is MoveBlock.OUT_OF_MAP

    with pytest.raises(MoveError) as excinfo:
        arena.dig("E")
    assert excinfo.value.reason is MoveBlock.NOT_DIGGABLE

    with pytest.raises(MoveError) as excinfo:
        arena.dig("N")
    assert excinfo.value.reason is MoveBlock.NOT_DIGGABLE

    with pytest.raises(MoveError) as excinfo:
        arena.dig("S")
    assert excinfo.value.reason is MoveBlock.OCCUPIED


def test_hole_next_to_water_floods():
    hero = create_hero(1, 1, second_hand=Shovel())
    arena = make_river(hero, [Water(0, 0), Grass(1, 0)])

    tile = arena.dig("N")

    assert isinstance(tile, Water)
    assert isinstance(arena.get_tile(1, 0), Water)


def test_flood_runs_along_connected_holes():
    hero = create_hero(0, 1, second_hand=Shovel())
    row = grass_row(0, range(1, 5))
    arena = make_river(hero, [Water(0, 0), *row])

    # Dig the far end first: nothing floods yet
    for hole in row[1:]:
        hole.dig()
    assert arena.flood() == []

    row[0].dig()
    flooded = arena.flood()

    assert len(flooded) == 4
    assert all(isinstance(arena.get_tile(x, 0), Water) for x in range(5))
    assert arena.is_victory()


def test_river_victory_by_digging():
    hero = create_hero(1, 1, second_hand=Shovel())
    tiles = [Water(0, 0), *grass_row(0, range(1, 5)), *grass_row(1, [0, 2, 3, 4])]
    arena = make_river(hero, tiles, target=(3, 0))
    victories = []
    arena.events.subscribe(ArenaEvent.VICTORY, victories.append, weak=False)

    arena.dig("N")                       # (1, 0) floods from (0, 0)
    assert arena.status is GameStatus.ONGOING

    arena.arena_move("E")                # hero to (2, 1)
    arena.dig("N")                       # (2, 0) floods
    arena.arena_move("E")                # hero to (3, 1)
    arena.dig("N")                       # (3, 0) floods: target reached

    assert arena.is_victory()
    assert arena.status is GameStatus.VICTORY
    assert len(victories) == 1


def test_unconnected_hole_does_not_flood():
    hero = create_hero(2, 1, second_hand=Shovel())
    arena = make_river(hero, [Water(0, 0), Grass(2, 0)])

    tile = arena.dig("N")

    assert isinstance(tile, Grass)
    assert tile.dug
    assert not arena.is_victory()


def test_modes_are_arenas():
    assert issubclass(ExterminationArena, Arena)
    assert issubclass(RiverArena, Arena)


def test_flood_leaves_monster_standing_in_water():
    hero = create_hero(0, 1, second_hand=Shovel())
    lion = create_monster("Lion", 1, 0)
    hole = Grass(1, 0)
    hole.dig()
    arena = make_river(hero, [Grass(0, 0), hole, Water(2, 0)], monsters=[lion])

    flooded = arena.flood()

    assert len(flooded) == 1
    assert isinstance(arena.get_tile(1, 0), Water)
    assert lion.position == (1, 0)
    assert not arena.get_tile(1, 0).is_crossable(lion)
