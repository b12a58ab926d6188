"""Scenes holding entities and the components attached to them."""

from __future__ import annotations

import itertools
from collections.abc import Iterator
from typing import Any, TypeVar

from candle.components import IDComponent, TagComponent, TransformComponent
from candle.ids import UUID

C = TypeVar("C")


class Entity:
    """A handle to an entity in a scene; the default handle is null and falsy."""

    __slots__ = ("_handle", "_scene")

    def __init__(self, handle: int | None = None, scene: Scene | None = None) -> None:
        self._handle = handle
        self._scene = scene

    @property
    def handle(self) -> int | None:
        return self._handle

    @property
    def scene(self) -> Scene | None:
        return self._scene

    def _components(self) -> dict[type, Any]:
        if self._scene is None or self._handle is None:
            raise ValueError("null entity has no components")
        return self._scene._components_of(self._handle)

    def add_component(self, component: C) -> C:
        """Attach ``component``; raises ValueError if one of its type is present."""
        components = self._components()
        kind = type(component)
        if kind in components:
            raise ValueError(f"entity already has a {kind.__name__}")
        components[kind] = component
        return component

    def add_or_replace_component(self, component: C) -> C:
        """Attach ``component``, replacing one of the same type."""
        self._components()[type(component)] = component
        return component

    def get_component(self, component_type: type[C]) -> C:
        try:
            return self._components()[component_type]
        except KeyError:
            raise KeyError(f"entity does not have a {component_type.__name__}") from None

    def has_component(self, component_type: type) -> bool:
        return component_type in self._components()

    def remove_component(self, component_type: type) -> None:
        try:
            del self._components()[component_type]
        except KeyError:
            raise KeyError(f"entity does not have a {component_type.__name__}") from None

    def uuid(self) -> UUID:
        return self.get_component(IDComponent).id

    def name(self) -> str:
        return self.get_component(TagComponent).tag

    def __bool__(self) -> bool:
        return self._handle is not None

    def __int__(self) -> int:
        if self._handle is None:
            raise ValueError("null entity has no handle")
        return self._handle

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        return self._handle == other._handle and self._scene is other._scene

    def __hash__(self) -> int:
        return hash((self._handle, id(self._scene)))

    def __repr__(self) -> str:
        return f"Entity({self._handle!r})"


class Scene:
    """A registry of entities, each with an ID, a transform and a tag."""

    def __init__(self) -> None:
        self._registry: dict[int, dict[type, Any]] = {}
        self._entity_map: dict[UUID, int] = {}
        self._handles = itertools.count()

    def _components_of(self, handle: int) -> dict[type, Any]:
        try:
            return self._registry[handle]
        except KeyError:
            raise ValueError(f"entity {handle} is not alive in this scene") from None

    def create_entity(self, name: str = "") -> Entity:
        return self.create_entity_with_uuid(UUID(), name)

    def create_entity_with_uuid(self, uuid: int, name: str = "") -> Entity:
        """Create an entity with a given ID; an empty name becomes ``Entity``."""
        identifier = UUID(uuid)
        handle = next(self._handles)
        self._registry[handle] = {}
        entity = Entity(handle, self)
        entity.add_component(IDComponent(identifier))
        entity.add_component(TransformComponent())
        entity.add_component(TagComponent(name or "Entity"))
        self._entity_map[identifier] = handle
        return entity

    def destroy_entity(self, entity: Entity) -> None:
        if entity.scene is not self or entity.handle not in self._registry:
            raise ValueError(f"{entity!r} is not alive in this scene")
        self._entity_map.pop(entity.uuid(), None)
        del self._registry[entity.handle]

    def get_entity_by_name(self, name: str) -> Entity:
        """An entity tagged ``name``, most recently created first; null if none."""
        for handle in reversed(self._registry):
            tag = self._registry[handle].get(TagComponent)
            if tag is not None and tag.tag == name:
                return Entity(handle, self)
        return Entity()

    def get_entity_by_uuid(self, uuid: int) -> Entity:
        try:
            return Entity(self._entity_map[UUID(uuid)], self)
        except KeyError:
            raise KeyError(f"entity does not exist: {uuid}") from None

    def __len__(self) -> int:
        return len(self._registry)

    def __iter__(self) -> Iterator[Entity]:
        return (Entity(handle, self) for handle in list(self._registry))