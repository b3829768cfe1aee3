"""Axis-aligned collision between colliders and the player's reactions to it."""

from __future__ import annotations

import logging
from itertools import combinations
from typing import Callable

from nairal.components import Collider, Obstacle, ObstacleType, Physics, Player, Transform
from nairal.entities import Entity
from nairal.systems import System

logger = logging.getLogger(__name__)


def _bounds(transform: Transform, collider: Collider) -> tuple[float, float, float, float]:
    x = transform.position.x + collider.offset.x
    y = transform.position.y + collider.offset.y
    x2 = x + collider.size.x
    y2 = y + collider.size.y
    return min(x, x2), min(y, y2), max(x, x2), max(y, y2)


class CollisionSystem(System):
    """Detects overlapping colliders and reacts when the player is involved."""

    def __init__(self) -> None:
        super().__init__()
        self.player: Entity = 0
        self.on_player_hit: Callable[[], None] | None = None

    def set_player(self, player: Entity) -> None:
        self.player = player

    def update(self) -> None:
        """Test every pair of entities once and handle each collision."""
        if self.world is None or not self.entities:
            return
        for a, b in combinations(sorted(self.entities), 2):
            try:
                if self.check_collision(a, b):
                    self.handle_collision(a, b)
            except Exception:
                logger.exception("exception during collision check of %d and %d", a, b)

    def check_collision(self, a: Entity, b: Entity) -> bool:
        """Whether the collider rectangles of two entities overlap."""
        world = self.world
        if world is None:
            return False
        for entity in (a, b):
            if not (
                world.has_component(entity, Transform)
                and world.has_component(entity, Collider)
            ):
                return False
        left_a, top_a, right_a, bottom_a = _bounds(
            world.get_component(a, Transform), world.get_component(a, Collider)
        )
        left_b, top_b, right_b, bottom_b = _bounds(
            world.get_component(b, Transform), world.get_component(b, Collider)
        )
        return max(left_a, left_b) < min(right_a, right_b) and max(top_a, top_b) < min(
            bottom_a, bottom_b
        )

    def handle_collision(self, a: Entity, b: Entity) -> None:
        """React to a collision between the player and an obstacle."""
        world = self.world
        if world is None:
            return
        if a == self.player and world.has_component(b, Obstacle):
            other = b
        elif b == self.player and world.has_component(a, Obstacle):
            other = a
        else:
            return

        obstacle = world.get_component(other, Obstacle)
        if obstacle.kind is ObstacleType.GROUND:
            self.handle_ground_collision(self.player, other)
        elif obstacle.deadly and self.on_player_hit is not None:
            self.on_player_hit()

    def handle_ground_collision(self, player: Entity, ground: Entity) -> None:
        """Land a falling player on top of the ground."""
        world = self.world
        if world is None:
            return
        required = (
            (player, Transform),
            (player, Physics),
            (player, Player),
            (player, Collider),
            (ground, Transform),
            (ground, Collider),
        )
        if not all(world.has_component(entity, kind) for entity, kind in required):
            logger.error("missing component for ground collision")
            return

        player_transform = world.get_component(player, Transform)
        player_physics = world.get_component(player, Physics)
        player_state = world.get_component(player, Player)
        player_collider = world.get_component(player, Collider)
        ground_transform = world.get_component(ground, Transform)

        if (
            player_physics.velocity.y > 0
            and player_transform.position.y < ground_transform.position.y
        ):
            player_transform.position.y = ground_transform.position.y - player_collider.size.y
            player_physics.velocity.y = 0.0
            player_state.is_grounded = True