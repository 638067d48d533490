"""Rigid bodies: the generic body plus sphere and cube shapes."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np


def _rotation_matrix(rotation_vector: np.ndarray) -> np.ndarray:
    """Rotation matrix for an axis-angle vector (axis times angle in radians)."""
    vector = np.asarray(rotation_vector, dtype=float)
    angle = float(np.linalg.norm(vector))
    if angle == 0.0:
        return np.eye(3)
    x, y, z = vector / angle
    skew = np.array([[0.0, -z, y], [z, 0.0, -x], [-y, x, 0.0]])
    return np.eye(3) + math.sin(angle) * skew + (1.0 - math.cos(angle)) * (skew @ skew)


def _diagonal(value: float) -> np.ndarray:
    return np.diag([float(value)] * 3)


@dataclass(eq=False)
class RigidBody:
    """A body with mass, inertia and linear and angular motion."""

    mass: float = 1.0
    inertia: np.ndarray = field(default_factory=lambda: np.eye(3))
    inertia_inv: np.ndarray = field(default_factory=lambda: np.eye(3))
    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    velocity: np.ndarray = field(default_factory=lambda: np.zeros(3))
    angular_velocity: np.ndarray = field(default_factory=lambda: np.zeros(3))
    orientation: np.ndarray = field(default_factory=lambda: np.eye(3))
    gravity: np.ndarray = field(default_factory=lambda: np.array([0.0, -9.8, 0.0]))
    friction: float = 0.0
    elasticity: float = 0.0

    def __post_init__(self) -> None:
        for name in (
            "inertia",
            "inertia_inv",
            "position",
            "velocity",
            "angular_velocity",
            "orientation",
            "gravity",
        ):
            setattr(self, name, np.array(getattr(self, name), dtype=float))

    def update(self, delta_time: float) -> None:
        """Advance position and orientation by one time step."""
        self.position = self.position + self.velocity * delta_time
        self.orientation = (
            _rotation_matrix(self.angular_velocity * delta_time) @ self.orientation
        )


class Sphere(RigidBody):
    """A solid sphere."""

    def __init__(self, radius: float = 1.0, mass: float = 1.0) -> None:
        super().__init__()
        self.radius = 1.0
        self.set_radius_mass(radius, mass)

    def set_radius_mass(self, radius: float = 1.0, mass: float = 1.0) -> None:
        """Set radius and mass and recompute the inertia tensor."""
        self.radius = radius
        self.mass = mass
        self.inertia = _diagonal(0.4 * mass * radius * radius)
        self.inertia_inv = np.linalg.inv(self.inertia)


class Cube(RigidBody):
    """A solid cube; an infinite mass makes it immovable."""

    def __init__(self, side_length: float = 1.0, mass: float = 1.0) -> None:
        super().__init__()
        self.side_length = 1.0
        self.set_side_length_mass(side_length, mass)

    def set_side_length_mass(self, side_length: float = 1.0, mass: float = 1.0) -> None:
        """Set side length and mass and recompute the inertia tensor."""
        self.side_length = side_length
        self.mass = mass
        if math.isinf(mass):
            self.inertia = _diagonal(mass)
            self.inertia_inv = np.zeros((3, 3))
        else:
            self.inertia = _diagonal(mass * side_length * side_length / 6.0)
            self.inertia_inv = np.linalg.inv(self.inertia)