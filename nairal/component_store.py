"""Per-type component storage and component type registration."""

from __future__ import annotations

from typing import Any, Generic, Iterator, TypeVar

from nairal.entities import MAX_COMPONENTS, Entity

T = TypeVar("T")


class ComponentArray(Generic[T]):
    """Holds at most one component of a single type per entity."""

    def __init__(self) -> None:
        self._data: dict[Entity, T] = {}

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, entity: object) -> bool:
        return entity in self._data

    def __iter__(self) -> Iterator[Entity]:
        return iter(self._data)

    def insert(self, entity: Entity, component: T) -> None:
        if entity in self._data:
            raise ValueError(f"component added to entity {entity} more than once")
        self._data[entity] = component

    def remove(self, entity: Entity) -> None:
        try:
            del self._data[entity]
        except KeyError:
            raise KeyError(f"entity {entity} has no such component") from None

    def get(self, entity: Entity) -> T:
        try:
            return self._data[entity]
        except KeyError:
            raise KeyError(f"entity {entity} has no such component") from None

    def entity_destroyed(self, entity: Entity) -> None:
        self._data.pop(entity, None)


class ComponentManager:
    """Registers component types and routes components to their arrays."""

    def __init__(self) -> None:
        self._types: dict[type, int] = {}
        self._arrays: dict[type, ComponentArray[Any]] = {}

    def _array(self, component_type: type) -> ComponentArray[Any]:
        try:
            return self._arrays[component_type]
        except KeyError:
            raise KeyError(
                f"component {component_type.__name__} not registered before use"
            ) from None

    def register_component(self, component_type: type) -> None:
        if component_type in self._types:
            raise ValueError(
                f"component {component_type.__name__} registered more than once"
            )
        if len(self._types) >= MAX_COMPONENTS:
            raise ValueError(f"no more than {MAX_COMPONENTS} component types")
        self._types[component_type] = len(self._types)
        self._arrays[component_type] = ComponentArray()

    def get_component_type(self, component_type: type) -> int:
        """The bit index of a registered component type."""
        try:
            return self._types[component_type]
        except KeyError:
            raise KeyError(
                f"component {component_type.__name__} not registered before use"
            ) from None

    def add_component(self, entity: Entity, component: Any) -> None:
        self._array(type(component)).insert(entity, component)

    def remove_component(self, entity: Entity, component_type: type) -> None:
        self._array(component_type).remove(entity)

    def get_component(self, entity: Entity, component_type: type[T]) -> T:
        return self._array(component_type).get(entity)

    def entity_destroyed(self, entity: Entity) -> None:
        for array in self._arrays.values():
            array.entity_destroyed(entity)