import pytest

from gameball.objects import GameObject, Obstacle, Unit
from gameball.player import Player
from gameball.world import World


class _Counter(GameObject):
    def __init__(self, world):
        super().__init__(world)
        self.ticks = 0

    def update_tick(self):
        self.ticks += 1


class _Post(Obstacle):
    def __init__(self, world, height, label="post"):
        super().__init__(world)
        self.height = height
        self.label = label


@pytest.fixture
def world():
    return World()


def test_initial_version_and_tick_length(world):
    assert world.version == 1
    assert world.tick_delta_t == 1.0 / 64.0


def test_register_returns_increasing_ids(world):
    assert world.register_player(object()) == 1
    assert world.register_player(object()) == 2
    assert world.register_object(object()) == 1


def test_unregister_unknown_id_is_harmless(world):
    world.unregister_object(99)
    world.unregister_unit(99)
    world.unregister_obstacle(99)
    world.unregister_player(99)
    assert world.get_object(99) is None


def test_getters_return_none_for_missing(world):
    assert world.get_object(1) is None
    assert world.get_unit(1) is None
    assert world.get_obstacle(1) is None
    assert world.get_player(1) is None


def test_create_player(world):
    player = world.create_player()
    assert isinstance(player, Player)
    assert world.get_player(player.player_id) is player


def test_create_unit_passes_world_and_player(world):
    unit = world.create_unit(Unit, 5)
    assert unit.player_id == 5
    assert unit.world is world
    assert world.get_unit(unit.unit_id) is unit


def test_create_obstacle_forwards_arguments(world):
    post = world.create_obstacle(_Post, 3.0, label="tall")
    assert post.height == 3.0
    assert post.label == "tall"
    assert world.get_obstacle(post.obstacle_id) is post


def test_remove_player(world):
    player = world.create_player()
    assert world.remove_player(player.player_id) is True
    assert world.get_player(player.player_id) is None
    assert world.remove_player(player.player_id) is False


def test_remove_unit(world):
    unit = world.create_unit(Unit, 1)
    assert world.remove_unit(unit.unit_id) is True
    assert world.get_object(unit.object_id) is None
    assert world.remove_unit(unit.unit_id) is False


def test_remove_obstacle(world):
    obstacle = world.create_obstacle(Obstacle)
    assert world.remove_obstacle(obstacle.obstacle_id) is True
    assert world.get_object(obstacle.object_id) is None
    assert world.remove_obstacle(obstacle.obstacle_id) is False


def test_push_event_queues_without_running(world):
    ran = []
    world.push_event(lambda: ran.append(True))
    assert ran == []
    assert len(world.events) == 1
    world.events.popleft()()
    assert ran == [True]


def test_update_tick_calls_objects_and_bumps_version(world):
    first = _Counter(world)
    second = _Counter(world)
    world.update_tick()
    world.update_tick()
    assert first.ticks == 2
    assert second.ticks == 2
    assert world.version == 3


def test_update_tick_applies_gravity_to_physics(world):
    sphere_id = world.physics_world.create_sphere()
    sphere = world.physics_world.get_sphere(sphere_id)
    world.update_tick()
    assert sphere.velocity[1] < 0.0
    assert sphere.position[1] < 0.0