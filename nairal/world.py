"""The world: one facade over entities, components and systems."""

from __future__ import annotations

from typing import Any, TypeVar

from nairal.component_store import ComponentManager
from nairal.entities import Entity, EntityManager, Signature
from nairal.systems import System, SystemManager

T = TypeVar("T")
S = TypeVar("S", bound=System)


class World:
    """Coordinates entity, component and system managers."""

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Drop every entity, component registration and system."""
        self._components = ComponentManager()
        self._entities = EntityManager()
        self._systems = SystemManager()

    def create_entity(self) -> Entity:
        return self._entities.create_entity()

    def destroy_entity(self, entity: Entity) -> None:
        self._entities.destroy_entity(entity)
        self._components.entity_destroyed(entity)
        self._systems.entity_destroyed(entity)

    def register_component(self, component_type: type) -> None:
        self._components.register_component(component_type)

    def _update_signature(self, entity: Entity, component_type: type, present: bool) -> None:
        bit = 1 << self._components.get_component_type(component_type)
        signature = self._entities.get_signature(entity)
        signature = signature | bit if present else signature & ~bit
        self._entities.set_signature(entity, signature)
        self._systems.entity_signature_changed(entity, signature)

    def add_component(self, entity: Entity, component: Any) -> None:
        self._components.add_component(entity, component)
        self._update_signature(entity, type(component), True)

    def remove_component(self, entity: Entity, component_type: type) -> None:
        self._components.remove_component(entity, component_type)
        self._update_signature(entity, component_type, False)

    def get_component(self, entity: Entity, component_type: type[T]) -> T:
        return self._components.get_component(entity, component_type)

    def get_component_type(self, component_type: type) -> int:
        return self._components.get_component_type(component_type)

    def register_system(self, system_type: type[S]) -> S:
        return self._systems.register_system(system_type)

    def set_system_signature(self, system_type: type, signature: Signature) -> None:
        self._systems.set_signature(system_type, signature)

    def has_component(self, entity: Entity, component_type: type) -> bool:
        try:
            self._components.get_component(entity, component_type)
        except KeyError:
            return False
        return True