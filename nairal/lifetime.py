"""Timed destruction of entities."""

from __future__ import annotations

from nairal.components import Lifetime
from nairal.entities import Entity
from nairal.systems import System


class LifetimeSystem(System):
    """Counts down lifetimes and destroys entities whose time has run out."""

    def update(self, dt: float) -> list[Entity]:
        """Count down by ``dt`` seconds; return the entities destroyed."""
        world = self.world
        if world is None:
            return []

        expired: list[Entity] = []
        for entity in sorted(self.entities):
            if not world.has_component(entity, Lifetime):
                continue
            lifetime = world.get_component(entity, Lifetime)
            lifetime.remaining_time -= dt
            if lifetime.remaining_time <= 0.0 and lifetime.destroy_on_timeout:
                expired.append(entity)

        for entity in expired:
            world.destroy_entity(entity)
        return expired