"""
System base class for turn logic.

Systems process, once per turn, every entity carrying a given set of
components. The container they run against only needs to offer
``get_entities_with(*component_types)``; the Arena does.

Usage:
    class WanderSystem(System):
        required_components = [GridPosition, Movable]

        def process_entity(self, entity: Entity, turn: int) -> None:
            ...
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar, Iterator

from arena_engine.core.component import Component

if TYPE_CHECKING:
    from arena_engine.core.entity import Entity


class System(ABC):
    """
    Base class for all systems.

    Override required_components to choose which entities to process.
    Override process_entity to define the per-entity logic.
    """

    required_components: ClassVar[list[type[Component]]] = []

    def __init__(self, world: Any = None):
        self._world = world
        self.enabled = True

    @property
    def world(self) -> Any:
        """The entity container this system runs against."""
        if self._world is None:
            raise RuntimeError(f"System {self.__class__.__name__} not attached to a world")
        return self._world

    def get_entities(self) -> Iterator[Entity]:
        """Get entities that carry every required component."""
        if self._world is None:
            return iter([])
        return self._world.get_entities_with(*self.required_components)

    def update(self, turn: int) -> None:
        """
        Run the system for one turn.

        The entity list is snapshotted first so processing may add or
        remove entities safely.
        """
        if not self.enabled:
            return

        for entity in list(self.get_entities()):
            self.process_entity(entity, turn)

    @abstractmethod
    def process_entity(self, entity: Entity, turn: int) -> None:
        """Process a single entity for the given turn."""

    def __repr__(self) -> str:
        required = ", ".join(c.__name__ for c in self.required_components)
        return f"{self.__class__.__name__}(requires=[{required}])"
