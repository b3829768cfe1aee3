"""Player movement driven by the held movement keys."""

from __future__ import annotations

from typing import Any

from nairal.components import Physics, Player, Renderable, Transform
from nairal.systems import System

SCREEN_RIGHT_LIMIT = 768.0  # screen width minus the player's width


class InputSystem(System):
    """Applies left, right and jump input to every player entity."""

    def __init__(self) -> None:
        super().__init__()
        self.left_pressed = False
        self.right_pressed = False
        self.jump_pressed = False

    def update(self, left: bool, right: bool, jump: bool) -> None:
        """Apply the current key state to every player."""
        world = self.world
        if world is None:
            return

        self.left_pressed = bool(left)
        self.right_pressed = bool(right)
        self.jump_pressed = bool(jump)

        for entity in sorted(self.entities):
            player = world.get_component(entity, Player)
            physics = world.get_component(entity, Physics)
            transform = world.get_component(entity, Transform)
            render = (
                world.get_component(entity, Renderable)
                if world.has_component(entity, Renderable)
                else None
            )

            physics.velocity.x = 0.0
            if self.left_pressed:
                physics.velocity.x = -player.speed
                if render is not None:
                    render.flip_x = True
            if self.right_pressed:
                physics.velocity.x = player.speed
                if render is not None:
                    render.flip_x = False

            idle = not self.left_pressed and not self.right_pressed
            if render is not None and (not player.is_grounded or idle):
                render.current_frame = 1

            if self.jump_pressed and player.is_grounded and player.can_jump:
                physics.velocity.y = -player.jump_force
                player.is_grounded = False
                player.can_jump = False

            if not self.jump_pressed:
                player.can_jump = True

            if transform.position.x < 0:
                transform.position.x = 0.0
            elif transform.position.x > SCREEN_RIGHT_LIMIT:
                transform.position.x = SCREEN_RIGHT_LIMIT

    def handle_event(self, event: Any) -> bool:
        """Report whether a discrete event was consumed.

        Movement is read from held keys in :meth:`update`, so no event is.
        """
        return False