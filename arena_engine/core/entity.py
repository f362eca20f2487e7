"""
Entity class - a named container for components.

Usage:
    hero = Entity("Hero")
    hero.add(GridPosition(x=0, y=0))
    hero.add(Movable())

    if hero.has(Movable):
        position = hero.get(GridPosition)
"""

from __future__ import annotations

import itertools
from typing import Iterator, TypeVar

from arena_engine.core.component import Component


C = TypeVar('C', bound=Component)


class Entity:
    """
    A container for components.

    Entities carry a unique id, a display name, a set of tags and at
    most one component per component type.
    """

    _id_counter = itertools.count(1)

    def __init__(self, name: str = ""):
        self._id = next(Entity._id_counter)
        self._name = name or f"Entity_{self._id}"
        self._components: dict[type[Component], Component] = {}
        self._tags: set[str] = set()

    @property
    def id(self) -> int:
        """Unique entity identifier."""
        return self._id

    @property
    def name(self) -> str:
        """Entity name (for logs and messages)."""
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = value

    def add(self, component: C) -> C:
        """
        Add a component to this entity.

        Returns:
            The added component (for chaining)

        Raises:
            ValueError: If entity already has this component type
        """
        comp_type = type(component)
        if comp_type in self._components:
            raise ValueError(
                f"Entity {self._name} already has component {comp_type.__name__}"
            )

        component._entity_id = self._id
        self._components[comp_type] = component
        return component

    def remove(self, component_type: type[C]) -> C | None:
        """Remove a component by type. Returns it, or None if absent."""
        component = self._components.pop(component_type, None)
        if component is not None:
            component._entity_id = None
        return component  # type: ignore[return-value]

    def get(self, component_type: type[C]) -> C:
        """
        Get a component by type.

        Raises:
            KeyError: If component not found
        """
        if component_type not in self._components:
            raise KeyError(
                f"Entity {self._name} does not have component {component_type.__name__}"
            )
        return self._components[component_type]  # type: ignore[return-value]

    def try_get(self, component_type: type[C]) -> C | None:
        """Get a component by type, or None if absent."""
        return self._components.get(component_type)  # type: ignore[return-value]

    def has(self, *component_types: type[Component]) -> bool:
        """Check if entity has all specified component types."""
        return all(ct in self._components for ct in component_types)

    @property
    def components(self) -> Iterator[Component]:
        """Iterate over all components."""
        return iter(self._components.values())

    # Tags

    def add_tag(self, tag: str) -> None:
        self._tags.add(tag)

    def remove_tag(self, tag: str) -> None:
        self._tags.discard(tag)

    def has_tag(self, tag: str) -> bool:
        return tag in self._tags

    @property
    def tags(self) -> frozenset[str]:
        return frozenset(self._tags)

    def __repr__(self) -> str:
        components = ", ".join(c.__name__ for c in self._components)
        return f"{type(self).__name__}({self._name}, id={self._id}, components=[{components}])"

    def __hash__(self) -> int:
        return hash(self._id)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Entity):
            return self._id == other._id
        return False
