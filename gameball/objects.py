"""Game objects that live in a logic world: units and obstacles."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gameball.world import World


class GameObject:
    """Anything in the logic world; it is given an object id on creation."""

    def __init__(self, world: World) -> None:
        self.world = world
        self.actor_initialize = True
        self.ticks = 0
        self.object_id = world.register_object(self)

    def update_tick(self) -> None:
        """Advance this object's logic by one world tick.

        The base object has no behaviour of its own beyond counting the
        ticks it has seen; subclasses override this with their logic.
        """
        self.ticks += 1

    def destroy(self) -> None:
        """Remove this object from its world."""
        self.world.unregister_object(self.object_id)


class Unit(GameObject):
    """An object owned by a player."""

    def __init__(self, world: World, player_id: int) -> None:
        super().__init__(world)
        self.player_id = player_id
        self.unit_id = world.register_unit(self)

    def destroy(self) -> None:
        """Remove this unit from its world."""
        self.world.unregister_unit(self.unit_id)
        super().destroy()


class Obstacle(GameObject):
    """An object that belongs to no player."""

    def __init__(self, world: World) -> None:
        super().__init__(world)
        self.obstacle_id = world.register_obstacle(self)

    def destroy(self) -> None:
        """Remove this obstacle from its world."""
        self.world.unregister_obstacle(self.obstacle_id)
        super().destroy()