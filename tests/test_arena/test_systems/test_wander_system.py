from unittest.mock import MagicMock

from arena.components import Direction
from arena.fighters import create_monster


def test_wander_moves_only_movable_monsters(make_arena, hero, max_rng):
    lion = create_monster("Lion", 3, 3)
    hydra = create_monster("Hydra", 7, 7, movable=False)
    arena = make_arena(hero, [lion, hydra], wander=True)

    arena.wander.update(1)

    assert lion.position == (3, 2)
    assert hydra.position == (7, 7)
    assert hero.position == (5, 5)
    max_rng.choice.assert_called_once_with(list(Direction))


def test_wander_swallows_blocked_steps(make_arena, hero, max_rng):
    a = create_monster("A", 3, 0)
    b = create_monster("B", 3, 2)
    c = create_monster("C", 3, 3)
    arena = make_arena(hero, [a, b, c], wander=True)

    arena.wander.update(1)

    assert a.position == (3, 0)   # out of map
    assert b.position == (3, 1)
    assert c.position == (3, 2)   # freed by b


def test_disabled_wander_does_nothing(make_arena, hero):
    lion = create_monster("Lion", 3, 3)
    arena = make_arena(hero, [lion], wander=False)
    arena.movement.move = MagicMock()

    arena.wander.update(1)

    arena.movement.move.assert_not_called()
