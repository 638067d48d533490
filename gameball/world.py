"""The logic world: players, units and obstacles over a physics world."""

from __future__ import annotations

from collections import deque
from typing import Any, Callable, TypeVar

from gameball.objects import GameObject, Obstacle, Unit
from gameball.physics_world import PhysicsWorld
from gameball.player import Player

_UnitT = TypeVar("_UnitT", bound=Unit)
_ObstacleT = TypeVar("_ObstacleT", bound=Obstacle)

TICK_DELTA_T = 1.0 / 64.0


class World:
    """Registry of game entities that advances in fixed ticks."""

    def __init__(self, physics_world: PhysicsWorld | None = None) -> None:
        self.physics_world = physics_world if physics_world is not None else PhysicsWorld()
        self._objects: dict[int, GameObject] = {}
        self._units: dict[int, Unit] = {}
        self._obstacles: dict[int, Obstacle] = {}
        self._players: dict[int, Player] = {}
        self._next_object_id = 1
        self._next_unit_id = 1
        self._next_obstacle_id = 1
        self._next_player_id = 1
        self.version = 1
        self.events: deque[Callable[[], Any]] = deque()

    @property
    def tick_delta_t(self) -> float:
        """Length of one logic tick in seconds."""
        return TICK_DELTA_T

    def register_object(self, obj: GameObject) -> int:
        """Store an object and return its new id."""
        object_id = self._next_object_id
        self._next_object_id += 1
        self._objects[object_id] = obj
        return object_id

    def unregister_object(self, object_id: int) -> None:
        self._objects.pop(object_id, None)

    def register_unit(self, unit: Unit) -> int:
        """Store a unit and return its new id."""
        unit_id = self._next_unit_id
        self._next_unit_id += 1
        self._units[unit_id] = unit
        return unit_id

    def unregister_unit(self, unit_id: int) -> None:
        self._units.pop(unit_id, None)

    def register_obstacle(self, obstacle: Obstacle) -> int:
        """Store an obstacle and return its new id."""
        obstacle_id = self._next_obstacle_id
        self._next_obstacle_id += 1
        self._obstacles[obstacle_id] = obstacle
        return obstacle_id

    def unregister_obstacle(self, obstacle_id: int) -> None:
        self._obstacles.pop(obstacle_id, None)

    def register_player(self, player: Player) -> int:
        """Store a player and return its new id."""
        player_id = self._next_player_id
        self._next_player_id += 1
        self._players[player_id] = player
        return player_id

    def unregister_player(self, player_id: int) -> None:
        self._players.pop(player_id, None)

    def get_object(self, object_id: int) -> GameObject | None:
        return self._objects.get(object_id)

    def get_unit(self, unit_id: int) -> Unit | None:
        return self._units.get(unit_id)

    def get_obstacle(self, obstacle_id: int) -> Obstacle | None:
        return self._obstacles.get(obstacle_id)

    def get_player(self, player_id: int) -> Player | None:
        return self._players.get(player_id)

    def create_unit(
        self, unit_type: type[_UnitT], player_id: int, *args: Any, **kwargs: Any
    ) -> _UnitT:
        """Build a unit of the given type owned by the given player."""
        return unit_type(self, player_id, *args, **kwargs)

    def create_obstacle(
        self, obstacle_type: type[_ObstacleT], *args: Any, **kwargs: Any
    ) -> _ObstacleT:
        """Build an obstacle of the given type."""
        return obstacle_type(self, *args, **kwargs)

    def create_player(self) -> Player:
        return Player(self)

    def remove_player(self, player_id: int) -> bool:
        """Destroy a player; return False if there is no such player."""
        player = self.get_player(player_id)
        if player is None:
            return False
        player.destroy()
        return True

    def remove_unit(self, unit_id: int) -> bool:
        """Destroy a unit; return False if there is no such unit."""
        unit = self.get_unit(unit_id)
        if unit is None:
            return False
        unit.destroy()
        return True

    def remove_obstacle(self, obstacle_id: int) -> bool:
        """Destroy an obstacle; return False if there is no such obstacle."""
        obstacle = self.get_obstacle(obstacle_id)
        if obstacle is None:
            return False
        obstacle.destroy()
        return True

    def push_event(self, event: Callable[[], Any]) -> None:
        """Queue a deferred action on this world."""
        self.events.append(event)

    def update_tick(self) -> None:
        """Run physics and every object's logic for one tick."""
        dt = self.tick_delta_t
        self.physics_world.apply_gravity(dt)
        self.physics_world.solve_collisions()
        for obj in list(self._objects.values()):
            obj.update_tick()
        self.physics_world.solve_collisions()
        self.physics_world.update(dt)
        self.version += 1