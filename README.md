# gameball

A small simulation core for a game of rolling balls: rigid-body physics
(spheres and cubes, collision detection and impulse-based resolution), a
tick-driven game world of players, units and obstacles, and a smoothed
third-person camera controller. All vectors and matrices are `numpy` arrays.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Physics

`gameball.rigid_body` provides `RigidBody` (mass, inertia tensor and its
inverse, position, velocity, angular velocity, orientation, per-body gravity,
friction and elasticity), `Sphere(radius, mass)` and `Cube(side_length, mass)`.
A cube with an infinite mass has a zero inverse inertia and cannot be moved by
collisions.

`gameball.collision` provides `detect_sphere_sphere` and `detect_sphere_cube`,
each returning a `Collision` (contact point, unit normal, penetration depth) or
`None`, and `solve_collision(body1, body2, collision)`, which applies a contact
impulse and a friction impulse and returns `False` when the bodies are already
separating.

`gameball.physics_world.PhysicsWorld` owns spheres and cubes, identified by
integer ids starting at 1. Contacts are resolved in a shuffled order; pass a
`random.Random` as `rng` to make that order reproducible.

```python
from gameball.physics_world import PhysicsWorld

physics = PhysicsWorld()
ball_id = physics.create_sphere(radius=1.0, mass=1.0)
floor_id = physics.create_cube(side_length=20.0, mass=float("inf"))

ball = physics.get_sphere(ball_id)
ball.position[:] = (0.0, 12.0, 0.0)
physics.get_cube(floor_id).gravity[:] = 0.0

for _ in range(64):
    physics.apply_gravity(1 / 64)
    physics.solve_collisions()
    physics.update(1 / 64)
```

`get_sphere` and `get_cube` raise `KeyError` for an unknown id.

## Game logic

`gameball.world.World` advances the game at a fixed tick of 1/64 s
(`World.tick_delta_t`); each `update_tick` applies gravity, resolves
collisions, runs every object's `update_tick`, resolves collisions again,
moves the bodies and increments `World.version`.

Players (`gameball.player.Player`) steer their primary unit through a
`PlayerInput` (forward, backward, left, right, brake and a facing direction).
`gameball.units.RegularBall` is a ball unit backed by a physics sphere;
`gameball.obstacles.Block` is a cube obstacle, immovable and unaffected by
gravity unless told otherwise. Both derive from the classes in
`gameball.objects`.

```python
from gameball.player import PlayerInput
from gameball.world import World
from gameball.units import RegularBall
from gameball.obstacles import Block

world = World()
player = world.create_player()
ball = world.create_unit(RegularBall, player.player_id, (0.0, 1.0, 0.0), 1.0, 1.0)
player.set_primary_unit(ball.unit_id)
world.create_obstacle(Block, (0.0, -50.0, 0.0), float("inf"), False, 100.0)

for _ in range(200):
    player.set_input(PlayerInput(move_forward=True))
    world.update_tick()

print(ball.position)
```

Lookups (`get_player`, `get_unit`, `get_obstacle`, `get_object`) return
`None` for unknown ids, and `remove_player`, `remove_unit` and
`remove_obstacle` return `False` when there is nothing to remove.

Changes can be deferred with the helpers in `gameball.events`
(`event_create_player`, `event_create_unit`, `event_create_obstacle`,
`event_remove_player`, `event_remove_unit`, `event_remove_obstacle`). They
only queue callables on `World.events` through `World.push_event`;
`update_tick` does not run them, so the caller drains the queue:

```python
while world.events:
    world.events.popleft()()
```

## Camera

`gameball.camera.CameraControllerThirdPerson(camera, aspect)` orbits a centre
point. `set_center`, `set_pitch_yaw`, `set_distance` and `set_fov_y` set the
target; the getters blend from the stored state towards it by
`interpolation_factor`, turning pitch and yaw the short way round.
`update(delta_time)` raises the factor by twice the elapsed time (clamped to
1), then computes `view_matrix` and a perspective `projection_matrix` (depth
in [0, 1], near 0.1, far 100) and, if `camera` is a callable, calls it with
both. `cursor_move(x, y)` turns the target by 0.1 degree per unit, keeping
pitch within ±89 degrees. `store_current_state` makes the current blend the
new starting point.

## What this package does not do

It has no window, renderer, asset loading or keyboard and mouse handling, and
no command to run: it simulates the game state and computes camera matrices,
and the caller supplies input and draws the results.