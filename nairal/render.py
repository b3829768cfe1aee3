"""Drawing of renderable entities onto a surface."""

from __future__ import annotations

import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from nairal.components import Renderable, Transform  # noqa: E402
from nairal.systems import System  # noqa: E402


def _source_image(renderable: Renderable) -> pygame.Surface | None:
    texture = renderable.texture
    if texture is None:
        swatch = pygame.Surface((1, 1), pygame.SRCALPHA)
        swatch.fill(renderable.color)
        return swatch
    if renderable.animated:
        rect = renderable.texture_rect
        area = pygame.Rect(rect.left, rect.top, rect.width, rect.height).clip(
            texture.get_rect()
        )
        if area.width <= 0 or area.height <= 0:
            return None
        return texture.subsurface(area)
    if texture.get_width() == 0 or texture.get_height() == 0:
        return None
    return texture


class RenderSystem(System):
    """Draws every visible entity with a Transform and a Renderable."""

    def update(self, surface: pygame.Surface) -> None:
        world = self.world
        if world is None:
            raise RuntimeError("render system has no world")
        for entity in sorted(self.entities):
            transform = world.get_component(entity, Transform)
            renderable = world.get_component(entity, Renderable)
            if not renderable.visible:
                continue

            source = _source_image(renderable)
            if source is None:
                continue

            width = round(renderable.size.x * abs(transform.scale.x))
            height = round(renderable.size.y * abs(transform.scale.y))
            if width <= 0 or height <= 0:
                continue

            image = pygame.transform.scale(source, (width, height))
            mirror_x = renderable.flip_x != (transform.scale.x < 0)
            mirror_y = transform.scale.y < 0
            if mirror_x or mirror_y:
                image = pygame.transform.flip(image, mirror_x, mirror_y)
            if transform.rotation:
                image = pygame.transform.rotate(image, -transform.rotation)

            surface.blit(image, (round(transform.position.x), round(transform.position.y)))