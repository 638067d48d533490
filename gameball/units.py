"""Player-controlled units."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

import numpy as np

from gameball.objects import Unit
from gameball.player import PlayerInput
from gameball.rigid_body import Sphere

if TYPE_CHECKING:
    from gameball.world import World

_UP = np.array([0.0, 1.0, 0.0])
_ANGULAR_ACCELERATION = math.radians(2880.0)
_VELOCITY_DECAY = 0.5
_SPIN_DECAY = 0.2


def _normalize(vector: np.ndarray) -> np.ndarray:
    return vector / np.linalg.norm(vector)


class RegularBall(Unit):
    """A rolling ball backed by a physics sphere and steered by its owner's input."""

    def __init__(
        self,
        world: World,
        player_id: int,
        position,
        radius: float = 1.0,
        mass: float = 1.0,
    ) -> None:
        super().__init__(world, player_id)
        self._radius = float(radius)
        self._mass = float(mass)
        self._position = np.array(position, dtype=float)
        self._velocity = np.zeros(3)
        self._orientation = np.eye(3)
        self._angular_momentum = np.zeros(3)

        self.sphere_id = world.physics_world.create_sphere()
        sphere = self.sphere
        sphere.position = self._position.copy()
        sphere.set_radius_mass(self._radius, self._mass)
        sphere.orientation = self._orientation.copy()
        sphere.velocity = self._velocity.copy()
        sphere.angular_velocity = np.zeros(3)
        sphere.elasticity = 1.0
        sphere.friction = 10.0
        sphere.gravity = np.array([0.0, -9.8, 0.0])

    @property
    def sphere(self) -> Sphere:
        """The physics sphere that carries this ball."""
        return self.world.physics_world.get_sphere(self.sphere_id)

    @property
    def radius(self) -> float:
        return self._radius

    @property
    def mass(self) -> float:
        return self._mass

    @property
    def position(self) -> np.ndarray:
        return self._position.copy()

    @property
    def velocity(self) -> np.ndarray:
        return self._velocity.copy()

    @property
    def orientation(self) -> np.ndarray:
        return self._orientation.copy()

    @property
    def angular_momentum(self) -> np.ndarray:
        return self._angular_momentum.copy()

    @staticmethod
    def _steer(sphere: Sphere, player_input: PlayerInput, delta_time: float) -> None:
        forward = _normalize(np.asarray(player_input.orientation, dtype=float))
        right = _normalize(np.cross(forward, _UP))

        direction = np.zeros(3)
        if player_input.move_forward:
            direction = direction - right
        if player_input.move_backward:
            direction = direction + right
        if player_input.move_left:
            direction = direction - forward
        if player_input.move_right:
            direction = direction + forward

        if np.linalg.norm(direction) > 0.0:
            direction = _normalize(direction)
            sphere.angular_velocity = (
                sphere.angular_velocity
                + direction * _ANGULAR_ACCELERATION * delta_time
            )

        if player_input.brake:
            sphere.angular_velocity = np.zeros(3)

    def update_tick(self) -> None:
        """Apply the owner's input, damp motion and read back the sphere state."""
        delta_time = self.world.tick_delta_t
        sphere = self.sphere

        owner = self.world.get_player(self.player_id)
        if owner is not None and self.unit_id == owner.primary_unit_id:
            self._steer(sphere, owner.take_player_input(), delta_time)

        sphere.velocity = sphere.velocity * _VELOCITY_DECAY**delta_time
        sphere.angular_velocity = sphere.angular_velocity * _SPIN_DECAY**delta_time

        self._position = sphere.position.copy()
        self._velocity = sphere.velocity.copy()
        self._orientation = sphere.orientation.copy()
        self._angular_momentum = sphere.inertia @ sphere.angular_velocity

    def set_mass(self, mass: float) -> None:
        self.sphere.set_radius_mass(self._radius, mass)
        self._mass = float(mass)

    def set_gravity(self, gravity) -> None:
        self.sphere.gravity = np.array(gravity, dtype=float)

    def set_radius(self, radius: float) -> None:
        self.sphere.set_radius_mass(radius, self._mass)
        self._radius = float(radius)

    def set_motion(
        self,
        position=None,
        velocity=None,
        orientation=None,
        angular_momentum=None,
    ) -> None:
        """Place the ball; omitted values default to rest at the origin."""
        position = np.zeros(3) if position is None else np.array(position, dtype=float)
        velocity = np.zeros(3) if velocity is None else np.array(velocity, dtype=float)
        orientation = (
            np.eye(3) if orientation is None else np.array(orientation, dtype=float)
        )
        angular_momentum = (
            np.zeros(3)
            if angular_momentum is None
            else np.array(angular_momentum, dtype=float)
        )

        sphere = self.sphere
        sphere.position = position.copy()
        sphere.velocity = velocity.copy()
        sphere.orientation = orientation.copy()
        sphere.angular_velocity = sphere.inertia_inv @ angular_momentum

        self._position = position
        self._velocity = velocity
        self._orientation = orientation
        self._angular_momentum = angular_momentum