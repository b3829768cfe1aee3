"""Plain data components attached to entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator

Color = tuple[int, int, int, int]

WHITE: Color = (255, 255, 255, 255)


@dataclass
class Vec2:
    """A mutable 2D vector of floats."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __mul__(self, factor: float) -> Vec2:
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


@dataclass
class TextureRect:
    """A sub-rectangle of a texture, in pixels."""

    left: int = 0
    top: int = 0
    width: int = 0
    height: int = 0


@dataclass
class Transform:
    position: Vec2 = field(default_factory=Vec2)
    scale: Vec2 = field(default_factory=lambda: Vec2(1.0, 1.0))
    rotation: float = 0.0


@dataclass
class Physics:
    velocity: Vec2 = field(default_factory=Vec2)
    acceleration: Vec2 = field(default_factory=Vec2)
    mass: float = 1.0
    affected_by_gravity: bool = True


@dataclass
class Collider:
    size: Vec2 = field(default_factory=Vec2)
    offset: Vec2 = field(default_factory=Vec2)
    is_trigger: bool = False


@dataclass
class Lifetime:
    remaining_time: float = 5.0
    destroy_on_timeout: bool = True


class ObstacleType(Enum):
    GROUND = 0
    MOVING = 1
    METEOR = 2
    CANNONBALL = 3


@dataclass
class Obstacle:
    kind: ObstacleType = ObstacleType.GROUND
    damage: float = 1.0
    deadly: bool = False


@dataclass
class Player:
    speed: float = 200.0
    jump_force: float = 400.0
    is_grounded: bool = True
    can_jump: bool = True


@dataclass
class Renderable:
    size: Vec2 = field(default_factory=lambda: Vec2(32.0, 32.0))
    color: Color = WHITE
    visible: bool = True
    texture: Any = None
    texture_rect: TextureRect = field(default_factory=TextureRect)
    animated: bool = False
    frame_width: int = 0
    frame_height: int = 0
    current_frame: int = 0
    total_frames: int = 0
    frame_time: float = 0.3
    time_since_last_frame: float = 0.0
    flip_x: bool = False