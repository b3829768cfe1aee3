"""Systems and the bookkeeping of which entities each system sees."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from nairal.entities import Entity, Signature

if TYPE_CHECKING:
    from nairal.world import World


class System:
    """Base for systems; holds the entities whose signatures match."""

    def __init__(self) -> None:
        self.entities: set[Entity] = set()
        self.world: World | None = None

    def set_world(self, world: World | None) -> None:
        self.world = world


S = TypeVar("S", bound=System)


class SystemManager:
    """Keeps one instance per system type and updates their entity sets."""

    def __init__(self) -> None:
        self._signatures: dict[type, Signature] = {}
        self._systems: dict[type, System] = {}

    def register_system(self, system_type: type[S]) -> S:
        if system_type in self._systems:
            raise ValueError(f"system {system_type.__name__} registered more than once")
        system = system_type()
        self._systems[system_type] = system
        return system

    def set_signature(self, system_type: type, signature: Signature) -> None:
        """Give a system its required signature; the first one given is kept."""
        if system_type not in self._systems:
            raise KeyError(f"system {system_type.__name__} used before registered")
        self._signatures.setdefault(system_type, signature)

    def entity_destroyed(self, entity: Entity) -> None:
        for system in self._systems.values():
            system.entities.discard(entity)

    def entity_signature_changed(self, entity: Entity, signature: Signature) -> None:
        for system_type, system in self._systems.items():
            required = self._signatures.get(system_type, 0)
            if signature & required == required:
                system.entities.add(entity)
            else:
                system.entities.discard(entity)