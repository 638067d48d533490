"""A physics world holding spheres and cubes."""

from __future__ import annotations

import random

from gameball.collision import (
    Collision,
    detect_sphere_cube,
    detect_sphere_sphere,
    solve_collision,
)
from gameball.rigid_body import Cube, RigidBody, Sphere


class PhysicsWorld:
    """Spheres and cubes keyed by id, with gravity, motion and collisions."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._spheres: dict[int, Sphere] = {}
        self._cubes: dict[int, Cube] = {}
        self._next_sphere_id = 1
        self._next_cube_id = 1
        self._rng = rng if rng is not None else random.Random()

    def update(self, delta_time: float) -> None:
        """Advance every body by one time step."""
        for sphere in self._spheres.values():
            sphere.update(delta_time)
        for cube in self._cubes.values():
            cube.update(delta_time)

    def create_sphere(self, radius: float = 1.0, mass: float = 1.0) -> int:
        """Add a sphere and return its id."""
        sphere_id = self._next_sphere_id
        self._next_sphere_id += 1
        self._spheres[sphere_id] = Sphere(radius, mass)
        return sphere_id

    def create_cube(self, side_length: float = 1.0, mass: float = 1.0) -> int:
        """Add a cube and return its id."""
        cube_id = self._next_cube_id
        self._next_cube_id += 1
        self._cubes[cube_id] = Cube(side_length, mass)
        return cube_id

    def get_sphere(self, sphere_id: int) -> Sphere:
        """Return the sphere with this id; raise KeyError if there is none."""
        return self._spheres[sphere_id]

    def get_cube(self, cube_id: int) -> Cube:
        """Return the cube with this id; raise KeyError if there is none."""
        return self._cubes[cube_id]

    def _contacts(self) -> list[tuple[RigidBody, RigidBody, Collision]]:
        contacts: list[tuple[RigidBody, RigidBody, Collision]] = []
        for first_id, first in self._spheres.items():
            for second_id, second in self._spheres.items():
                if first_id >= second_id:
                    continue
                collision = detect_sphere_sphere(first, second)
                if collision is not None:
                    contacts.append((first, second, collision))
            for cube in self._cubes.values():
                collision = detect_sphere_cube(first, cube)
                if collision is not None:
                    contacts.append((first, cube, collision))
        return contacts

    def solve_collisions(self) -> None:
        """Resolve all current contacts, in random order, until none is approaching."""
        contacts = self._contacts()
        self._rng.shuffle(contacts)
        solved = True
        while solved:
            solved = False
            for first, second, collision in contacts:
                if solve_collision(first, second, collision):
                    solved = True

    def apply_gravity(self, delta_time: float) -> None:
        """Accelerate every body by its own gravity."""
        for sphere in self._spheres.values():
            sphere.velocity = sphere.velocity + sphere.gravity * delta_time
        for cube in self._cubes.values():
            cube.velocity = cube.velocity + cube.gravity * delta_time