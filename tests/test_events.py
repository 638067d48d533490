import pytest

from gameball.events import (
    event_create_obstacle,
    event_create_player,
    event_create_unit,
    event_remove_obstacle,
    event_remove_player,
    event_remove_unit,
)
from gameball.objects import Obstacle, Unit
from gameball.world import World


class _Wall(Obstacle):
    def __init__(self, world, width):
        super().__init__(world)
        self.width = width


@pytest.fixture
def world():
    return World()


def _run_all(world):
    results = []
    while world.events:
        results.append(world.events.popleft()())
    return results


def test_remove_player_is_deferred(world):
    player = world.create_player()
    event_remove_player(world, player.player_id)
    assert world.get_player(player.player_id) is player
    assert _run_all(world) == [True]
    assert world.get_player(player.player_id) is None


def test_remove_unit_is_deferred(world):
    unit = world.create_unit(Unit, 1)
    event_remove_unit(world, unit.unit_id)
    assert world.get_unit(unit.unit_id) is unit
    assert _run_all(world) == [True]
    assert world.get_unit(unit.unit_id) is None


def test_remove_obstacle_missing_reports_false(world):
    event_remove_obstacle(world, 12)
    assert _run_all(world) == [False]


def test_remove_obstacle_is_deferred(world):
    obstacle = world.create_obstacle(Obstacle)
    event_remove_obstacle(world, obstacle.obstacle_id)
    _run_all(world)
    assert world.get_obstacle(obstacle.obstacle_id) is None


def test_create_player_is_deferred(world):
    event_create_player(world)
    assert world.get_player(1) is None
    (player,) = _run_all(world)
    assert world.get_player(1) is player


def test_create_unit_is_deferred(world):
    event_create_unit(world, Unit, 4)
    assert world.get_unit(1) is None
    (unit,) = _run_all(world)
    assert unit.player_id == 4
    assert world.get_unit(1) is unit


def test_create_obstacle_forwards_arguments(world):
    event_create_obstacle(world, _Wall, width=2.5)
    (wall,) = _run_all(world)
    assert wall.width == 2.5
    assert world.get_obstacle(wall.obstacle_id) is wall


def test_events_keep_order(world):
    event_create_player(world)
    event_remove_player(world, 1)
    results = _run_all(world)
    assert results[1] is True
    assert world.get_player(1) is None