import os
import sys
from random import Random
from unittest.mock import MagicMock

import pytest

# Ensure packages can be imported without installation
sys.path.append(os.getcwd())


@pytest.fixture
def event_bus():
    """Fresh EventBus for each test."""
    from arena_engine.core.events import EventBus
    return EventBus()


@pytest.fixture
def max_rng():
    """
    Random stand-in that always rolls the maximum and picks the first choice.

    Makes damage deterministic: a hit deals damage - defense.
    """
    rng = MagicMock(spec=Random)
    rng.randint.side_effect = lambda a, b: b
    rng.choice.side_effect = lambda seq: seq[0]
    return rng


@pytest.fixture
def hero():
    from arena.fighters import create_hero
    return create_hero(5, 5)


@pytest.fixture
def make_arena(max_rng):
    """Factory for an ExterminationArena with wandering disabled by default."""
    from arena_engine.core.config import ArenaConfig
    from arena.world.modes import ExterminationArena

    def _make(hero, monsters=(), tiles=(), size=10, wander=False, rng=None):
        config = ArenaConfig(size=size, monsters_wander=wander)
        return ExterminationArena(hero, monsters, tiles, config=config, rng=rng or max_rng)

    return _make
