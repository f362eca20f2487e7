"""
Arena Engine

Generic building blocks for small turn-based grid games.

Quick Start:
    from arena_engine.core import Entity, Component, EventBus

    class Position(Component):
        x: int = 0
        y: int = 0

    hero = Entity("Hero")
    hero.add(Position(x=1, y=2))
"""

__version__ = "0.1.0"

from arena_engine.core import (
    ArenaConfig,
    ArenaError,
    ArenaEvent,
    Component,
    Entity,
    Event,
    EventBus,
    System,
    register_component,
)

__all__ = [
    # ECS
    "Entity",
    "Component",
    "register_component",
    "System",
    # Events
    "EventBus",
    "Event",
    "ArenaEvent",
    # Config / errors
    "ArenaConfig",
    "ArenaError",
]
