import pytest

from gameball.objects import GameObject, Obstacle, Unit
from gameball.world import World


@pytest.fixture
def world():
    return World()


def test_object_ids_are_shared_between_kinds(world):
    plain = GameObject(world)
    unit = Unit(world, player_id=3)
    obstacle = Obstacle(world)
    assert [plain.object_id, unit.object_id, obstacle.object_id] == [1, 2, 3]
    assert world.get_object(2) is unit


def test_unit_and_obstacle_ids_are_separate(world):
    unit = Unit(world, player_id=1)
    obstacle = Obstacle(world)
    assert unit.unit_id == 1
    assert obstacle.obstacle_id == 1
    assert world.get_unit(1) is unit
    assert world.get_obstacle(1) is obstacle


def test_unit_keeps_player_id(world):
    unit = Unit(world, player_id=42)
    assert unit.player_id == 42


def test_unit_destroy_unregisters_everywhere(world):
    unit = Unit(world, player_id=1)
    unit.destroy()
    assert world.get_unit(unit.unit_id) is None
    assert world.get_object(unit.object_id) is None


def test_obstacle_destroy_unregisters_everywhere(world):
    obstacle = Obstacle(world)
    obstacle.destroy()
    assert world.get_obstacle(obstacle.obstacle_id) is None
    assert world.get_object(obstacle.object_id) is None


def test_new_object_needs_actor_initialization(world):
    plain = GameObject(world)
    assert plain.actor_initialize is True