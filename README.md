# quadsim

Game logic you can run without a window. quadsim holds the simulation side of
small 2D games: collision physics, particle systems and the rules of a few arcade
games. You step the state forward, read it back and draw it however you like.

## Installation

```
pip install quadsim
```

To run the test suite:

```
pip install "quadsim[test]"
pytest
```

## What is inside

- `quadsim.geometry`: `Vec2`, `Rect` and `polar_to_cartesian`.
- `quadsim.platformer`: pixel-stepped platformer physics. A `World` holds static
  tile layers (`Tile.SOLID`, `Tile.JUMP_THROUGH`, ...), moving solids and actors.
  The handles are `Solid` and `Actor`. Actors move with `move_h` and `move_v`,
  which return `False` when the actor is blocked. Solids carry riding actors and
  push other actors through `solid_move`. An actor pushed into a wall is marked
  as squished, which `squished` reports.
- `quadsim.particle_config`: the settings of an emitter in `EmitterConfig`.
  These cover emission shapes (`PointEmission`, `RectEmission`, `SphereEmission`)
  and particle shapes (`RectangleParticle`, `CircleParticle`,
  `CustomMeshParticle`), each with a `mesh()` that returns its vertices and
  indices. They also cover size curves (`Curve`, `BatchedCurve`), a `ColorCurve`,
  sprite-sheet atlases (`AtlasConfig.from_range`) and a `BlendMode`. A `Curve`
  only supports linear interpolation. Asking a `Curve` to batch with
  `Interpolation.BEZIER` raises `ValueError`.
- `quadsim.emitter`: `Emitter` spawns particles, ages, moves, colours and
  animates them, and removes dead ones. `Emitter.step(pos, dt)` returns the live
  `Particle` objects. `EmittersCache` runs many short-lived copies of one emitter
  and takes back those that have stopped emitting.
- `quadsim.life`: Conway's Game of Life on a bounded grid (`Life`, `next_state`).
- `quadsim.snake`: `SnakeGame`, a snake game on a square board, 16×16 by default.
- `quadsim.arkanoid`: `Arkanoid`, with a ball, a paddle and a 10×10 wall of blocks.
- `quadsim.asteroids`: `AsteroidsGame`, with a ship, bullets and asteroids that
  split when hit. `ship_triangle` gives the outline of the ship.
- `quadsim.angles`: shortest-path angle interpolation (`short_angle_dist`,
  `angle_lerp`) and `CameraControls`, a 2D camera driven by the mouse wheel.
- `quadsim.fps_camera`: `FirstPersonCamera`, driven by yaw and pitch, and a
  small `Vec3`.
- `quadsim.letterbox`: scaling, placement and mouse mapping for a fixed-size
  virtual screen.
- `quadsim.fitting`: a shop, an inventory and equipment slots. Drag and drop
  produces `Fit`, `Unfit` and `Refit` commands, which `Fitting.apply` carries out.
- `quadsim.bouncers`: sprites that bounce off the edges of the screen.

## Platformer example

```python
from quadsim.geometry import Vec2
from quadsim.platformer import Tile, World

world = World()
# One row of empty tiles above a solid row, 8x8 pixel tiles, 4 tiles wide.
world.add_static_tiled_layer([Tile.EMPTY] * 4 + [Tile.SOLID] * 4, 8.0, 8.0, 4, 1)

player = world.add_actor(Vec2(0.0, 0.0), 8, 8)
print(world.move_v(player, 10.0))  # False: the floor is right below
print(world.actor_pos(player))     # Vec2(x=0.0, y=0.0)
print(world.collide_check(player, world.actor_pos(player) + Vec2(0.0, 1.0)))  # True
```

## Particles example

```python
import random

from quadsim.emitter import Emitter
from quadsim.geometry import Vec2
from quadsim.particle_config import EmitterConfig

emitter = Emitter(EmitterConfig(amount=10, lifetime=0.5), rng=random.Random(1))
for _ in range(30):
    particles = emitter.step(Vec2(100.0, 100.0), 1 / 60)
print(len(particles))
```

Everything random can take a `random.Random`, so a seeded generator gives the
same run each time.

## What it does not do

quadsim draws nothing and reads no input. It has no window, renderer, textures,
shaders, sound or user-interface widgets, and it has no command to run. The
games take the keys held in a frame as plain arguments, such as `Controls` or
booleans. Emitters compute particle positions, colours, sizes and atlas UVs, and
particle shapes produce mesh data, but nothing here sends them to a graphics
device. The `texture` and `material` settings of `EmitterConfig` are stored and
not used.