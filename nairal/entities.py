"""Entity id allocation and per-entity component signatures."""

from __future__ import annotations

from collections import deque

Entity = int
Signature = int

MAX_ENTITIES = 5000
MAX_COMPONENTS = 32

_SIGNATURE_LIMIT = 1 << MAX_COMPONENTS


class EntityManager:
    """Hands out entity ids and keeps each entity's component signature."""

    def __init__(self, max_entities: int = MAX_ENTITIES) -> None:
        self._max_entities = max_entities
        self._available: deque[Entity] = deque(range(max_entities))
        self._signatures: list[Signature] = [0] * max_entities
        self._living_count = 0

    @property
    def living_count(self) -> int:
        """Number of entities currently in existence."""
        return self._living_count

    def _check(self, entity: Entity) -> None:
        if not 0 <= entity < self._max_entities:
            raise ValueError(f"entity {entity} out of range")

    def create_entity(self) -> Entity:
        """Take the next free id; ids freed earlier come back in FIFO order."""
        if self._living_count >= self._max_entities:
            raise RuntimeError("too many entities in existence")
        entity = self._available.popleft()
        self._living_count += 1
        return entity

    def destroy_entity(self, entity: Entity) -> None:
        """Clear the entity's signature and return its id to the pool."""
        self._check(entity)
        self._signatures[entity] = 0
        self._available.append(entity)
        self._living_count -= 1

    def set_signature(self, entity: Entity, signature: Signature) -> None:
        self._check(entity)
        if not 0 <= signature < _SIGNATURE_LIMIT:
            raise ValueError(f"signature {signature:#x} does not fit in {MAX_COMPONENTS} bits")
        self._signatures[entity] = signature

    def get_signature(self, entity: Entity) -> Signature:
        self._check(entity)
        return self._signatures[entity]