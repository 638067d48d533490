"""Collision detection between spheres and cubes, and impulse resolution."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from gameball.rigid_body import Cube, RigidBody, Sphere

_EPSILON = 0.0001


@dataclass(eq=False)
class Collision:
    """Contact point, unit normal from the first body to the second, and depth."""

    point: np.ndarray
    normal: np.ndarray
    penetration: float


def detect_sphere_sphere(sphere1: Sphere, sphere2: Sphere) -> Collision | None:
    """Return the contact between two spheres, or None if they do not touch."""
    distance = sphere2.position - sphere1.position
    distance_length = float(np.linalg.norm(distance))
    penetration = sphere1.radius + sphere2.radius - distance_length
    if penetration < 0.0:
        return None
    if distance_length < _EPSILON:
        return Collision(
            point=sphere1.position.copy(),
            normal=np.array([1.0, 0.0, 0.0]),
            penetration=penetration,
        )
    point = (
        sphere1.position
        + distance * (sphere1.radius - penetration / 2.0) / distance_length
    )
    return Collision(
        point=point, normal=distance / distance_length, penetration=penetration
    )


def detect_sphere_cube(sphere: Sphere, cube: Cube) -> Collision | None:
    """Return the contact between a sphere and a cube, or None."""
    cube_to_sphere = sphere.position - cube.position
    closest_point = cube.position.copy()
    half = cube.side_length / 2.0
    for axis in cube.orientation.T:
        extent = min(max(float(np.dot(cube_to_sphere, axis)), -half), half)
        closest_point = closest_point + extent * axis

    offset = closest_point - sphere.position
    distance = float(np.linalg.norm(offset))
    penetration = sphere.radius - distance
    if penetration < 0.0:
        return None
    if distance < _EPSILON:
        return Collision(
            point=sphere.position.copy(),
            normal=np.array([1.0, 0.0, 0.0]),
            penetration=penetration,
        )
    point = sphere.position + offset * (sphere.radius - penetration / 2.0) / distance
    return Collision(point=point, normal=offset / distance, penetration=penetration)


def _apply_impulse(
    body1: RigidBody,
    body2: RigidBody,
    impulse: np.ndarray,
    r1: np.ndarray,
    r2: np.ndarray,
    inverse_inertia1: np.ndarray,
    inverse_inertia2: np.ndarray,
) -> None:
    body1.velocity = body1.velocity - impulse / body1.mass
    body1.angular_velocity = body1.angular_velocity - inverse_inertia1 @ np.cross(
        r1, impulse
    )
    body2.velocity = body2.velocity + impulse / body2.mass
    body2.angular_velocity = body2.angular_velocity + inverse_inertia2 @ np.cross(
        r2, impulse
    )


def solve_collision(body1: RigidBody, body2: RigidBody, collision: Collision) -> bool:
    """Apply contact and friction impulses; return False if the bodies separate."""
    normal = collision.normal
    r1 = collision.point - body1.position
    r2 = collision.point - body2.position
    relative_velocity = (
        body2.velocity
        + np.cross(body2.angular_velocity, r2)
        - body1.velocity
        - np.cross(body1.angular_velocity, r1)
    )
    velocity_along_normal = float(np.dot(relative_velocity, normal))
    if velocity_along_normal > -_EPSILON:
        return False

    inverse_inertia1 = body1.orientation @ body1.inertia_inv @ body1.orientation.T
    inverse_inertia2 = body2.orientation @ body2.inertia_inv @ body2.orientation.T

    alpha = 0.0
    if not math.isinf(body1.mass):
        alpha += 1.0 / body1.mass
    if not math.isinf(body2.mass):
        alpha += 1.0 / body2.mass

    def effective(direction: np.ndarray) -> np.float64:
        return alpha + np.dot(
            direction,
            np.cross(inverse_inertia1 @ np.cross(r1, direction), r1)
            + np.cross(inverse_inertia2 @ np.cross(r2, direction), r2),
        )

    elasticity = min(body1.elasticity, body2.elasticity)
    j = -(1.0 + elasticity) * velocity_along_normal / effective(normal)
    _apply_impulse(
        body1, body2, j * normal, r1, r2, inverse_inertia1, inverse_inertia2
    )

    friction = math.sqrt(body1.friction**2 + body2.friction**2)
    tangent = relative_velocity - np.dot(relative_velocity, normal) * normal
    tangent_length = float(np.linalg.norm(tangent))
    if tangent_length > _EPSILON:
        tangent = tangent / tangent_length
        jt = -np.dot(relative_velocity, tangent) / effective(tangent)
        limit = j * friction
        if jt > limit:
            jt = limit
        elif jt < -limit:
            jt = -limit
        _apply_impulse(
            body1, body2, jt * tangent, r1, r2, inverse_inertia1, inverse_inertia2
        )

    return True