import logging

from nairal.collision import CollisionSystem
from nairal.components import (
    Collider,
    Lifetime,
    Obstacle,
    ObstacleType,
    Physics,
    Player,
    Renderable,
    Transform,
    Vec2,
)
from nairal.world import World

_TYPES = (Transform, Physics, Renderable, Collider, Player, Obstacle, Lifetime)


def _setup():
    world = World()
    for kind in _TYPES:
        world.register_component(kind)
    system = world.register_system(CollisionSystem)
    system.set_world(world)
    signature = (1 << world.get_component_type(Transform)) | (
        1 << world.get_component_type(Collider)
    )
    world.set_system_signature(CollisionSystem, signature)
    return world, system


def _box(world, x, y, w, h):
    entity = world.create_entity()
    world.add_component(entity, Transform(Vec2(x, y)))
    world.add_component(entity, Collider(Vec2(w, h)))
    return entity


def _player(world, system, x=0.0, y=0.0, vy=0.0):
    entity = _box(world, x, y, 10.0, 20.0)
    world.add_component(entity, Physics(Vec2(0.0, vy), Vec2(), 1.0, True))
    world.add_component(entity, Player(is_grounded=False))
    system.set_player(entity)
    return entity


def test_overlapping_boxes_collide():
    world, system = _setup()
    a = _box(world, 0.0, 0.0, 10.0, 10.0)
    b = _box(world, 5.0, 5.0, 10.0, 10.0)
    assert system.check_collision(a, b) is True
    assert system.check_collision(b, a) is True


def test_touching_edges_do_not_collide():
    world, system = _setup()
    a = _box(world, 0.0, 0.0, 10.0, 10.0)
    b = _box(world, 10.0, 0.0, 10.0, 10.0)
    assert system.check_collision(a, b) is False


def test_offset_moves_the_collider():
    world, system = _setup()
    a = _box(world, 0.0, 0.0, 10.0, 10.0)
    b = _box(world, 5.0, 5.0, 10.0, 10.0)
    world.get_component(b, Collider).offset = Vec2(20.0, 0.0)
    assert system.check_collision(a, b) is False


def test_missing_collider_never_collides():
    world, system = _setup()
    a = _box(world, 0.0, 0.0, 10.0, 10.0)
    b = world.create_entity()
    world.add_component(b, Transform(Vec2(1.0, 1.0)))
    assert system.check_collision(a, b) is False


def test_deadly_obstacle_calls_hit_callback():
    world, system = _setup()
    player = _player(world, system)
    meteor = _box(world, 2.0, 2.0, 5.0, 5.0)
    world.add_component(meteor, Obstacle(ObstacleType.METEOR, 1.0, True))
    hits = []
    system.on_player_hit = lambda: hits.append(True)
    system.handle_collision(meteor, player)
    assert hits == [True]


def test_harmless_obstacle_does_not_call_callback():
    world, system = _setup()
    player = _player(world, system)
    thing = _box(world, 2.0, 2.0, 5.0, 5.0)
    world.add_component(thing, Obstacle(ObstacleType.MOVING, 1.0, False))
    hits = []
    system.on_player_hit = lambda: hits.append(True)
    system.handle_collision(player, thing)
    assert hits == []


def test_collision_without_player_is_ignored():
    world, system = _setup()
    _player(world, system, x=100.0)
    a = _box(world, 0.0, 0.0, 5.0, 5.0)
    b = _box(world, 1.0, 1.0, 5.0, 5.0)
    world.add_component(b, Obstacle(ObstacleType.METEOR, 1.0, True))
    hits = []
    system.on_player_hit = lambda: hits.append(True)
    system.handle_collision(a, b)
    assert hits == []


def test_falling_player_lands_on_ground():
    world, system = _setup()
    player = _player(world, system, y=100.0, vy=50.0)
    ground = _box(world, 0.0, 110.0, 100.0, 10.0)
    world.add_component(ground, Obstacle(ObstacleType.GROUND, 0.0, False))
    system.handle_collision(player, ground)
    assert world.get_component(player, Transform).position.y == 90.0
    assert world.get_component(player, Physics).velocity.y == 0.0
    assert world.get_component(player, Player).is_grounded is True


def test_rising_player_passes_ground():
    world, system = _setup()
    player = _player(world, system, y=100.0, vy=-50.0)
    ground = _box(world, 0.0, 110.0, 100.0, 10.0)
    system.handle_ground_collision(player, ground)
    assert world.get_component(player, Transform).position.y == 100.0
    assert world.get_component(player, Physics).velocity.y == -50.0
    assert world.get_component(player, Player).is_grounded is False


def test_ground_collision_with_missing_component_logs(caplog):
    world, system = _setup()
    player = _box(world, 0.0, 100.0, 10.0, 20.0)
    ground = _box(world, 0.0, 110.0, 100.0, 10.0)
    with caplog.at_level(logging.ERROR, logger="nairal.collision"):
        system.handle_ground_collision(player, ground)
    assert "missing component" in caplog.text
    assert world.get_component(player, Transform).position.y == 100.0


def test_update_detects_pairs():
    world, system = _setup()
    player = _player(world, system)
    meteor = _box(world, 2.0, 2.0, 5.0, 5.0)
    world.add_component(meteor, Obstacle(ObstacleType.METEOR, 1.0, True))
    far = _box(world, 500.0, 500.0, 5.0, 5.0)
    world.add_component(far, Obstacle(ObstacleType.METEOR, 1.0, True))
    hits = []
    system.on_player_hit = lambda: hits.append(True)
    system.update()
    assert hits == [True]
    assert {player, meteor, far} <= system.entities


def test_update_logs_callback_errors(caplog):
    world, system = _setup()
    _player(world, system)
    meteor = _box(world, 2.0, 2.0, 5.0, 5.0)
    world.add_component(meteor, Obstacle(ObstacleType.METEOR, 1.0, True))

    def boom():
        raise ValueError("boom")

    system.on_player_hit = boom
    with caplog.at_level(logging.ERROR, logger="nairal.collision"):
        system.update()
    assert "boom" in caplog.text