import pytest

from nairal.animation import AnimationSystem
from nairal.components import Renderable, TextureRect
from nairal.world import World


def _setup():
    world = World()
    world.register_component(Renderable)
    system = world.register_system(AnimationSystem)
    system.set_world(world)
    world.set_system_signature(AnimationSystem, 1 << world.get_component_type(Renderable))
    return world, system


def _sprite(world, **fields):
    entity = world.create_entity()
    world.add_component(entity, Renderable(**fields))
    return world.get_component(entity, Renderable)


def test_frame_holds_until_frame_time():
    world, system = _setup()
    sprite = _sprite(
        world, animated=True, total_frames=4, frame_width=10, frame_height=12, frame_time=0.3
    )
    system.update(0.1)
    assert sprite.current_frame == 0
    assert sprite.time_since_last_frame == pytest.approx(0.1)


def test_frame_advances_and_updates_rect():
    world, system = _setup()
    sprite = _sprite(
        world, animated=True, total_frames=4, frame_width=10, frame_height=12, frame_time=0.3
    )
    system.update(0.3)
    assert sprite.current_frame == 1
    assert sprite.texture_rect == TextureRect(10, 0, 10, 12)
    assert sprite.time_since_last_frame == 0.0


def test_frame_wraps_around():
    world, system = _setup()
    sprite = _sprite(
        world,
        animated=True,
        total_frames=4,
        current_frame=3,
        frame_width=10,
        frame_height=12,
        frame_time=0.3,
    )
    system.update(0.5)
    assert sprite.current_frame == 0
    assert sprite.texture_rect == TextureRect(0, 0, 10, 12)


@pytest.mark.parametrize(
    "fields",
    [
        {"animated": False, "total_frames": 4},
        {"animated": True, "total_frames": 1},
        {"animated": True, "total_frames": 0},
    ],
)
def test_static_sprites_are_untouched(fields):
    world, system = _setup()
    sprite = _sprite(world, frame_width=10, frame_height=12, **fields)
    system.update(5.0)
    assert sprite.current_frame == 0
    assert sprite.time_since_last_frame == 0.0
    assert sprite.texture_rect == TextureRect()


def test_without_world_nothing_happens():
    system = AnimationSystem()
    system.entities.add(0)
    system.update(1.0)
    assert system.entities == {0}