"""Asteroids game logic: ship flight, shooting, splitting rocks and win/lose state."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import Optional

from quadsim.geometry import Vec2

SHIP_HEIGHT = 25.0
SHIP_BASE = 22.0
MAX_SPEED = 5.0
FRICTION = 100.0
THRUST = 3.0
TURN_STEP = 5.0
SHOT_COOLDOWN = 0.5
BULLET_SPEED = 7.0
BULLET_LIFETIME = 1.5
ASTEROID_COUNT = 10
SPLIT_RATIO = 0.8


def wrap_around(pos: Vec2, width: float, height: float) -> Vec2:
    """Move a point that left the screen to the opposite edge."""
    x, y = pos.x, pos.y
    if x > width:
        x = 0.0
    if x < 0.0:
        x = width
    if y > height:
        y = 0.0
    if y < 0.0:
        y = height
    return Vec2(x, y)


@dataclass
class Ship:
    """The player's ship; rot is in degrees, clockwise from pointing up."""

    pos: Vec2
    rot: float = 0.0
    vel: Vec2 = field(default_factory=Vec2)


@dataclass
class Bullet:
    pos: Vec2
    vel: Vec2
    shot_at: float
    collided: bool = False


@dataclass
class Asteroid:
    pos: Vec2
    vel: Vec2
    size: float
    sides: int
    rot: float = 0.0
    rot_speed: float = 0.0
    collided: bool = False


@dataclass(frozen=True)
class Controls:
    """Keys held during one frame."""

    up: bool = False
    left: bool = False
    right: bool = False
    shoot: bool = False
    restart: bool = False


def _heading(rot_degrees: float) -> Vec2:
    rotation = math.radians(rot_degrees)
    return Vec2(math.sin(rotation), -math.cos(rotation))


def ship_triangle(ship: Ship) -> tuple[Vec2, Vec2, Vec2]:
    """Corners of the ship outline: nose, then the two rear corners."""
    rotation = math.radians(ship.rot)
    sin_r, cos_r = math.sin(rotation), math.cos(rotation)
    x, y = ship.pos.x, ship.pos.y
    half_h = SHIP_HEIGHT / 2.0
    half_b = SHIP_BASE / 2.0
    nose = Vec2(x + sin_r * half_h, y - cos_r * half_h)
    left = Vec2(
        x - cos_r * half_b - sin_r * half_h,
        y - sin_r * half_b + cos_r * half_h,
    )
    right = Vec2(
        x + cos_r * half_b - sin_r * half_h,
        y + sin_r * half_b + cos_r * half_h,
    )
    return nose, left, right


class AsteroidsGame:
    """One game of asteroids on a width x height screen."""

    def __init__(
        self,
        width: float = 800.0,
        height: float = 600.0,
        rng: Optional[random.Random] = None,
        start_time: float = 0.0,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("screen dimensions must be positive")
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else random.Random()
        self.ship = self._new_ship()
        self.bullets: list[Bullet] = []
        self.asteroids: list[Asteroid] = []
        self.game_over = False
        self.last_shot = start_time

    @property
    def center(self) -> Vec2:
        return Vec2(self.width / 2.0, self.height / 2.0)

    @property
    def won(self) -> bool:
        """True once every asteroid has been destroyed."""
        return self.game_over and not self.asteroids

    def _new_ship(self) -> Ship:
        return Ship(pos=self.center)

    def _random_direction(self) -> Vec2:
        while True:
            candidate = Vec2(self.rng.uniform(-1.0, 1.0), self.rng.uniform(-1.0, 1.0))
            if candidate.length() > 0.0:
                return candidate.normalize()

    def reset(self) -> None:
        """Start a new round with a fresh ship and a ring of asteroids."""
        self.ship = self._new_ship()
        self.bullets = []
        self.game_over = False
        short_side = min(self.width, self.height)
        self.asteroids = [
            Asteroid(
                pos=self.center + self._random_direction() * short_side / 2.0,
                vel=Vec2(self.rng.uniform(-1.0, 1.0), self.rng.uniform(-1.0, 1.0)),
                rot=0.0,
                rot_speed=self.rng.uniform(-2.0, 2.0),
                size=short_side / 10.0,
                sides=self.rng.randrange(3, 8),
            )
            for _ in range(ASTEROID_COUNT)
        ]

    def _fragment(self, parent: Asteroid, direction: Vec2) -> Asteroid:
        return Asteroid(
            pos=parent.pos,
            vel=direction.normalize() * self.rng.uniform(1.0, 3.0),
            rot=self.rng.uniform(0.0, 360.0),
            rot_speed=self.rng.uniform(-2.0, 2.0),
            size=parent.size * SPLIT_RATIO,
            sides=parent.sides - 1,
        )

    def update(self, controls: Controls, time: float) -> None:
        """Advance one frame at the given clock time (seconds)."""
        if self.game_over:
            if controls.restart:
                self.reset()
            return

        ship = self.ship
        heading = _heading(ship.rot)

        acc = -ship.vel / FRICTION
        if controls.up:
            acc = heading / THRUST

        if controls.shoot and time - self.last_shot > SHOT_COOLDOWN:
            self.bullets.append(
                Bullet(
                    pos=ship.pos + heading * SHIP_HEIGHT / 2.0,
                    vel=heading * BULLET_SPEED,
                    shot_at=time,
                )
            )
            self.last_shot = time

        if controls.right:
            ship.rot += TURN_STEP
        elif controls.left:
            ship.rot -= TURN_STEP

        ship.vel = ship.vel + acc
        if ship.vel.length() > MAX_SPEED:
            ship.vel = ship.vel.normalize() * MAX_SPEED
        ship.pos = wrap_around(ship.pos + ship.vel, self.width, self.height)

        for bullet in self.bullets:
            bullet.pos = bullet.pos + bullet.vel
        for asteroid in self.asteroids:
            asteroid.pos = wrap_around(asteroid.pos + asteroid.vel, self.width, self.height)
            asteroid.rot += asteroid.rot_speed

        self.bullets = [b for b in self.bullets if b.shot_at + BULLET_LIFETIME > time]

        fragments: list[Asteroid] = []
        for asteroid in self.asteroids:
            if (asteroid.pos - ship.pos).length() < asteroid.size + SHIP_HEIGHT / 3.0:
                self.game_over = True
                break
            for bullet in self.bullets:
                if (asteroid.pos - bullet.pos).length() < asteroid.size:
                    asteroid.collided = True
                    bullet.collided = True
                    if asteroid.sides > 3:
                        fragments.append(
                            self._fragment(asteroid, Vec2(bullet.vel.y, -bullet.vel.x))
                        )
                        fragments.append(
                            self._fragment(asteroid, Vec2(-bullet.vel.y, bullet.vel.x))
                        )
                    break

        self.bullets = [
            b for b in self.bullets if b.shot_at + BULLET_LIFETIME > time and not b.collided
        ]
        self.asteroids = [a for a in self.asteroids if not a.collided]
        self.asteroids.extend(fragments)

        if not self.asteroids:
            self.game_over = True