"""Sprite-sheet frame stepping."""

from __future__ import annotations

from nairal.components import Renderable, TextureRect
from nairal.systems import System


class AnimationSystem(System):
    """Advances animated renderables through the frames of their sheet."""

    def update(self, dt: float) -> None:
        world = self.world
        if world is None:
            return
        for entity in sorted(self.entities):
            renderable = world.get_component(entity, Renderable)
            if not renderable.animated or renderable.total_frames <= 1:
                continue

            renderable.time_since_last_frame += dt
            if renderable.time_since_last_frame >= renderable.frame_time:
                renderable.current_frame = (
                    renderable.current_frame + 1
                ) % renderable.total_frames
                renderable.texture_rect = TextureRect(
                    renderable.current_frame * renderable.frame_width,
                    0,
                    renderable.frame_width,
                    renderable.frame_height,
                )
                renderable.time_since_last_frame = 0.0