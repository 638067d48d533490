"""Deferred world actions queued through World.push_event."""

from __future__ import annotations

from typing import Any

from gameball.objects import Obstacle, Unit
from gameball.world import World


def event_remove_player(world: World, player_id: int) -> None:
    world.push_event(lambda: world.remove_player(player_id))


def event_remove_unit(world: World, unit_id: int) -> None:
    world.push_event(lambda: world.remove_unit(unit_id))


def event_remove_obstacle(world: World, obstacle_id: int) -> None:
    world.push_event(lambda: world.remove_obstacle(obstacle_id))


def event_create_player(world: World) -> None:
    world.push_event(world.create_player)


def event_create_unit(
    world: World, unit_type: type[Unit], player_id: int, *args: Any, **kwargs: Any
) -> None:
    world.push_event(lambda: world.create_unit(unit_type, player_id, *args, **kwargs))


def event_create_obstacle(
    world: World, obstacle_type: type[Obstacle], *args: Any, **kwargs: Any
) -> None:
    world.push_event(lambda: world.create_obstacle(obstacle_type, *args, **kwargs))