"""
Core engine module.

Exports:
- Entity: Entity container
- Component, register_component: Component base and registration
- System: Turn-driven system base class
- EventBus, Event, ArenaEvent: Event system
- ArenaConfig: Validated arena configuration
- ArenaError and friends: Recoverable, reasoned failures
"""

from arena_engine.core.component import Component, register_component, get_component_type
from arena_engine.core.entity import Entity
from arena_engine.core.system import System
from arena_engine.core.events import EventBus, Event, ArenaEvent
from arena_engine.core.config import ArenaConfig
from arena_engine.core.errors import (
    ArenaError,
    MoveError,
    MoveBlock,
    NotMovableError,
    BattleError,
    BattleFailure,
    UnknownMonsterError,
    MissingToolError,
)

__all__ = [
    # ECS
    "Entity",
    "Component",
    "register_component",
    "get_component_type",
    "System",
    # Events
    "EventBus",
    "Event",
    "ArenaEvent",
    # Config
    "ArenaConfig",
    # Errors
    "ArenaError",
    "MoveError",
    "MoveBlock",
    "NotMovableError",
    "BattleError",
    "BattleFailure",
    "UnknownMonsterError",
    "MissingToolError",
]
