"""Players and the input they send to their primary unit."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from gameball.world import World


@dataclass(eq=False)
class PlayerInput:
    """One frame of player controls and the direction the player faces."""

    move_forward: bool = False
    move_backward: bool = False
    move_left: bool = False
    move_right: bool = False
    brake: bool = False
    orientation: np.ndarray = field(default_factory=lambda: np.array([0.0, 0.0, 1.0]))

    def __post_init__(self) -> None:
        self.orientation = np.array(self.orientation, dtype=float)


class Player:
    """A player registered with a world; it owns a primary unit by id."""

    def __init__(self, world: World) -> None:
        self.world = world
        self.primary_unit_id = 0
        self._input = PlayerInput()
        self.player_id = world.register_player(self)

    @property
    def player_input(self) -> PlayerInput:
        """A copy of the input currently held."""
        return dataclasses.replace(self._input)

    def set_primary_unit(self, unit_id: int) -> None:
        """Choose the unit that this player's input drives."""
        self.primary_unit_id = unit_id

    def set_input(self, player_input: PlayerInput) -> None:
        """Store a copy of the given input."""
        self._input = dataclasses.replace(player_input)

    def take_player_input(self) -> PlayerInput:
        """Return the held input and reset it to the defaults."""
        taken = self._input
        self._input = PlayerInput()
        return taken

    def destroy(self) -> None:
        """Remove this player from its world."""
        self.world.unregister_player(self.player_id)