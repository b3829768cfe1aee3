import pytest

from nairal.components import Lifetime, Physics, Transform, Vec2
from nairal.systems import System
from nairal.world import World


class MotionSystem(System):
    pass


@pytest.fixture
def world():
    w = World()
    w.register_component(Transform)
    w.register_component(Physics)
    w.register_component(Lifetime)
    system = w.register_system(MotionSystem)
    signature = (1 << w.get_component_type(Transform)) | (1 << w.get_component_type(Physics))
    w.set_system_signature(MotionSystem, signature)
    w.motion = system
    return w


def test_entity_joins_system_when_signature_complete(world):
    entity = world.create_entity()
    world.add_component(entity, Transform())
    assert entity not in world.motion.entities
    world.add_component(entity, Physics())
    assert entity in world.motion.entities


def test_remove_component_leaves_system(world):
    entity = world.create_entity()
    world.add_component(entity, Transform())
    world.add_component(entity, Physics())
    world.remove_component(entity, Physics)
    assert entity not in world.motion.entities
    assert not world.has_component(entity, Physics)
    assert world.has_component(entity, Transform)


def test_get_component_returns_stored_object(world):
    entity = world.create_entity()
    transform = Transform(Vec2(3.0, 4.0))
    world.add_component(entity, transform)
    world.get_component(entity, Transform).position.x = 8.0
    assert transform.position.x == 8.0


def test_destroy_entity_clears_everything(world):
    entity = world.create_entity()
    world.add_component(entity, Transform())
    world.add_component(entity, Physics())
    world.destroy_entity(entity)
    assert entity not in world.motion.entities
    assert not world.has_component(entity, Transform)
    assert not world.has_component(entity, Physics)


def test_recycled_entity_starts_with_empty_signature(world):
    entity = world.create_entity()
    world.add_component(entity, Transform())
    world.add_component(entity, Physics())
    world.destroy_entity(entity)
    world.add_component(entity, Lifetime())
    assert entity not in world.motion.entities


def test_has_component_false_for_unregistered_type(world):
    entity = world.create_entity()

    class Unknown:
        pass

    assert world.has_component(entity, Unknown) is False


def test_duplicate_component_raises(world):
    entity = world.create_entity()
    world.add_component(entity, Lifetime())
    with pytest.raises(ValueError):
        world.add_component(entity, Lifetime())


def test_reset_forgets_registrations(world):
    world.reset()
    with pytest.raises(KeyError):
        world.get_component_type(Transform)
    world.register_component(Transform)
    assert world.get_component_type(Transform) == 0
    assert isinstance(world.register_system(MotionSystem), MotionSystem)