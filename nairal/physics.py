"""Integration of velocity and position, with gravity."""

from __future__ import annotations

from nairal.components import Physics, Transform
from nairal.systems import System


class PhysicsSystem(System):
    """Moves every entity that has both a Transform and Physics."""

    GRAVITY = 980.0  # pixels per second squared

    def update(self, dt: float) -> None:
        """Advance every entity by ``dt`` seconds of explicit Euler steps."""
        world = self.world
        if world is None:
            raise RuntimeError("physics system has no world")
        for entity in sorted(self.entities):
            transform = world.get_component(entity, Transform)
            physics = world.get_component(entity, Physics)

            if physics.affected_by_gravity:
                physics.acceleration.y = self.GRAVITY

            physics.velocity.x += physics.acceleration.x * dt
            physics.velocity.y += physics.acceleration.y * dt

            transform.position.x += physics.velocity.x * dt
            transform.position.y += physics.velocity.y * dt

            physics.acceleration.x = 0.0
            physics.acceleration.y = 0.0