import math

import numpy as np
import pytest

from gameball.collision import (
    Collision,
    detect_sphere_cube,
    detect_sphere_sphere,
    solve_collision,
)
from gameball.rigid_body import Cube, Sphere


def _sphere(position, velocity=(0.0, 0.0, 0.0), radius=1.0, mass=1.0):
    sphere = Sphere(radius, mass)
    sphere.position = np.array(position, dtype=float)
    sphere.velocity = np.array(velocity, dtype=float)
    return sphere


def test_separated_spheres_do_not_collide():
    assert detect_sphere_sphere(_sphere([0, 0, 0]), _sphere([3, 0, 0])) is None


def test_overlapping_spheres_collide():
    first = _sphere([0, 0, 0])
    second = _sphere([0, 1.5, 0])
    collision = detect_sphere_sphere(first, second)
    assert np.allclose(collision.normal, [0.0, 1.0, 0.0])
    assert collision.penetration == pytest.approx(2.0 - 1.5)
    assert 0.0 < collision.point[1] < 1.5


def test_coincident_spheres_use_default_normal():
    collision = detect_sphere_sphere(_sphere([2, 2, 2]), _sphere([2, 2, 2]))
    assert np.allclose(collision.normal, [1.0, 0.0, 0.0])
    assert np.allclose(collision.point, [2.0, 2.0, 2.0])


def test_sphere_far_from_cube():
    cube = Cube(2.0, 1.0)
    assert detect_sphere_cube(_sphere([0, 5, 0]), cube) is None


def test_sphere_resting_on_cube():
    cube = Cube(20.0, math.inf)
    cube.position = np.array([0.0, -10.0, 0.0])
    collision = detect_sphere_cube(_sphere([0, 0.9, 0]), cube)
    assert np.allclose(collision.normal, [0.0, -1.0, 0.0])
    assert collision.penetration == pytest.approx(1.0 - 0.9)


def test_sphere_cube_normal_is_unit():
    cube = Cube(2.0, 1.0)
    collision = detect_sphere_cube(_sphere([1.5, 1.5, 0.2]), cube)
    assert np.linalg.norm(collision.normal) == pytest.approx(1.0)
    assert collision.penetration >= 0.0


def test_separating_bodies_are_not_solved():
    first = _sphere([0, 0, 0], velocity=[-1, 0, 0])
    second = _sphere([1.5, 0, 0], velocity=[1, 0, 0])
    collision = detect_sphere_sphere(first, second)
    assert solve_collision(first, second, collision) is False
    assert np.allclose(first.velocity, [-1.0, 0.0, 0.0])


def test_elastic_head_on_swaps_velocities():
    first = _sphere([0, 0, 0], velocity=[1, 0, 0])
    second = _sphere([1.5, 0, 0], velocity=[-1, 0, 0])
    first.elasticity = second.elasticity = 1.0
    collision = detect_sphere_sphere(first, second)
    assert solve_collision(first, second, collision) is True
    assert np.allclose(first.velocity, [-1.0, 0.0, 0.0])
    assert np.allclose(second.velocity, [1.0, 0.0, 0.0])


def test_momentum_is_conserved():
    first = _sphere([0, 0, 0], velocity=[2, 0.5, 0], mass=2.0)
    second = _sphere([1.2, 0.8, 0], velocity=[-1, 0, 0.3], mass=3.0)
    first.friction = second.friction = 0.5
    before = first.mass * first.velocity + second.mass * second.velocity
    collision = detect_sphere_sphere(first, second)
    assert solve_collision(first, second, collision) is True
    after = first.mass * first.velocity + second.mass * second.velocity
    assert np.allclose(before, after)


def test_infinite_mass_body_does_not_move():
    cube = Cube(20.0, math.inf)
    cube.position = np.array([0.0, -10.0, 0.0])
    sphere = _sphere([0, 1.0, 0], velocity=[0, -1, 0])
    collision = detect_sphere_cube(sphere, cube)
    assert solve_collision(sphere, cube, collision) is True
    assert np.allclose(cube.velocity, np.zeros(3))
    assert abs(sphere.velocity[1]) < 1e-9


def test_collision_holds_fields():
    collision = Collision(np.zeros(3), np.array([0.0, 1.0, 0.0]), 0.25)
    assert collision.penetration == 0.25
    assert np.allclose(collision.normal, [0.0, 1.0, 0.0])