"""
Component base class for data components.

Components hold the state of a fighter: where it stands, how hard it
hits, what it carries. Entities are just bags of components, so a
capability such as "can be moved" is expressed by attaching a
marker component rather than by subclassing.

Usage:
    class GridPosition(Component):
        x: int = 0
        y: int = 0

    @register_component
    class Movable(Component):
        pass
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, ConfigDict


class Component(BaseModel):
    """
    Base class for all components.

    Pydantic gives every component validation on construction and on
    assignment, so a health bar can never silently become a string.
    Small helper methods are fine; turn logic belongs in Systems.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        validate_assignment=True,
        extra='forbid',
    )

    # Component type name (used for lookups and serialization)
    _type_name: ClassVar[str] = ""

    # Owning entity id, set by Entity.add
    _entity_id: int | None = None

    @classmethod
    def get_type_name(cls) -> str:
        """Get the component type name."""
        return cls._type_name or cls.__name__

    @property
    def entity_id(self) -> int | None:
        """Id of the entity this component is attached to."""
        return self._entity_id


_component_registry: dict[str, type[Component]] = {}


def register_component(cls: type[Component]) -> type[Component]:
    """
    Decorator to register a component type by name.

    Usage:
        @register_component
        class Flying(Component):
            pass
    """
    _component_registry[cls.get_type_name()] = cls
    return cls


def get_component_type(type_name: str) -> type[Component] | None:
    """Get component class by type name."""
    return _component_registry.get(type_name)
