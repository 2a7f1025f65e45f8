"""Particle emitters: spawning, ageing, animating and recycling particles."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, replace
from typing import Optional

from quadsim.geometry import Vec2
from quadsim.particle_config import BatchedCurve, BlendMode, EmitterConfig, Mesh


@dataclass
class Particle:
    """One live particle: what is drawn and what drives its motion."""

    x: float
    y: float
    rotation: float
    size: float
    uv: tuple[float, float, float, float]
    spawn_index: float
    life_fraction: float
    color: tuple[float, float, float, float]
    velocity: Vec2
    angular_velocity: float
    lived: float
    lifetime: float
    frame: int
    initial_size: float

    @property
    def position(self) -> Vec2:
        return Vec2(self.x, self.y)


def _mix(
    a: tuple[float, ...], b: tuple[float, ...], t: float
) -> tuple[float, float, float, float]:
    r, g, bl, al = (p * (1.0 - t) + q * t for p, q in zip(a, b))
    return (r, g, bl, al)


def _rotate(direction: Vec2, angle: float) -> Vec2:
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    return Vec2(
        direction.x * cos_a - direction.y * sin_a,
        direction.x * sin_a + direction.y * cos_a,
    )


class Emitter:
    """A particle emitter simulated on the CPU."""

    MAX_PARTICLES = 10000

    def __init__(self, config: EmitterConfig, rng: Optional[random.Random] = None) -> None:
        self.config = config
        self.rng = rng if rng is not None else random.Random()
        self.particles: list[Particle] = []
        self.last_emit_time = 0.0
        self.time_passed = 0.0
        self.particles_current_cycle = 0
        self.particles_spawned = 0
        self.position = Vec2(0.0, 0.0)
        self.batched_size_curve: Optional[BatchedCurve] = (
            config.size_curve.batch() if config.size_curve is not None else None
        )
        self.blend_mode: BlendMode = config.blend_mode
        self.mesh: Mesh = config.shape.mesh()
        self.mesh_dirty = False

    def reset(self) -> None:
        """Drop all particles and restart the emission cycle."""
        self.particles.clear()
        self.last_emit_time = 0.0
        self.time_passed = 0.0
        self.particles_spawned = 0
        self.particles_current_cycle = 0

    def rebuild_size_curve(self) -> None:
        """Resample the size curve after the configuration changed."""
        curve = self.config.size_curve
        self.batched_size_curve = curve.batch() if curve is not None else None

    def update_particle_mesh(self) -> None:
        """Rebuild the particle mesh from the configured shape on the next update."""
        self.mesh_dirty = True

    def _random_ratio(self, upper: float) -> float:
        return self.rng.uniform(0.0, upper)

    def _emit_particle(self, offset: Vec2) -> None:
        if len(self.particles) >= self.MAX_PARTICLES:
            raise ValueError(f"an emitter holds at most {self.MAX_PARTICLES} particles")
        cfg = self.config
        offset = offset + cfg.emission_shape.gen_random_point(self.rng)

        size = cfg.size - cfg.size * self._random_ratio(cfg.size_randomness)
        rotation = cfg.initial_rotation - cfg.initial_rotation * self._random_ratio(
            cfg.initial_rotation_randomness
        )
        origin = offset if cfg.local_coords else self.position + offset

        spread = cfg.initial_direction_spread
        angle = self.rng.uniform(-spread / 2.0, spread / 2.0)
        speed = cfg.initial_velocity - cfg.initial_velocity * self._random_ratio(
            cfg.initial_velocity_randomness
        )
        velocity = _rotate(cfg.initial_direction, angle) * speed
        angular_velocity = (
            cfg.initial_angular_velocity
            - cfg.initial_angular_velocity
            * self._random_ratio(cfg.initial_angular_velocity_randomness)
        )
        lifetime = cfg.lifetime - cfg.lifetime * self._random_ratio(cfg.lifetime_randomness)

        self.particles.append(
            Particle(
                x=origin.x,
                y=origin.y,
                rotation=rotation,
                size=size,
                uv=(1.0, 1.0, 0.0, 0.0),
                spawn_index=float(self.particles_spawned),
                life_fraction=0.0,
                color=cfg.colors_curve.start.to_tuple(),
                velocity=velocity,
                angular_velocity=angular_velocity,
                lived=0.0,
                lifetime=lifetime,
                frame=0,
                initial_size=size,
            )
        )
        self.particles_spawned += 1
        self.particles_current_cycle += 1

    def emit(self, pos: Vec2, n: int) -> None:
        """Emit n particles at once, ignoring the emitting flag and amount."""
        for _ in range(n):
            self._emit_particle(pos)
            self.particles_spawned += 1

    def _spawn_amount(self) -> int:
        cfg = self.config
        if cfg.amount <= 0:
            return 0
        gap = (cfg.lifetime / cfg.amount) * (1.0 - cfg.explosiveness)
        if gap < 0.001:
            return cfg.amount
        return max(0, int((self.time_passed - self.last_emit_time) / gap))

    def update(self, dt: float) -> None:
        """Advance the simulation by dt seconds."""
        cfg = self.config
        if self.mesh_dirty:
            self.mesh = cfg.shape.mesh()
            self.mesh_dirty = False

        if cfg.emitting:
            self.time_passed += dt
            for _ in range(self._spawn_amount()):
                self.last_emit_time = self.time_passed
                if self.particles_spawned < cfg.amount:
                    self._emit_particle(Vec2(0.0, 0.0))
                if len(self.particles) >= cfg.amount:
                    break

        if cfg.one_shot and self.particles_current_cycle >= cfg.amount:
            self.time_passed = 0.0
            self.last_emit_time = 0.0
            self.particles_current_cycle = 0
            cfg.emitting = False

        start = cfg.colors_curve.start.to_tuple()
        mid = cfg.colors_curve.mid.to_tuple()
        end = cfg.colors_curve.end.to_tuple()

        for p in self.particles:
            p.velocity = p.velocity + p.velocity * (cfg.linear_accel * dt)
            p.angular_velocity += p.angular_velocity * cfg.angular_accel * dt
            p.angular_velocity *= 1.0 - cfg.angular_damping

            t = p.lived / p.lifetime if p.lifetime != 0.0 else 1.0
            if t < 0.5:
                p.color = _mix(start, mid, t * 2.0)
            else:
                p.color = _mix(mid, end, (t - 0.5) * 2.0)

            p.x += p.velocity.x * dt
            p.y += p.velocity.y * dt
            p.rotation += p.angular_velocity * dt

            scale = self.batched_size_curve.get(t) if self.batched_size_curve else 1.0
            p.size = p.initial_size * scale

            if p.lifetime != 0.0:
                p.life_fraction = t

            p.lived += dt
            p.velocity = p.velocity + cfg.gravity * dt

            atlas = cfg.atlas
            if atlas is not None:
                if p.lifetime != 0.0:
                    span = atlas.end_index - atlas.start_index
                    p.frame = max(0, int(p.lived / p.lifetime * span)) + atlas.start_index
                column, row = p.frame % atlas.n, p.frame // atlas.n
                p.uv = (column / atlas.n, row / atlas.m, 1.0 / atlas.n, 1.0 / atlas.m)
            else:
                p.uv = (0.0, 0.0, 1.0, 1.0)

        survivors: list[Particle] = []
        for p in self.particles:
            if p.lived >= p.lifetime or p.lived > cfg.lifetime:
                if p.lived != p.lifetime:
                    self.particles_spawned -= 1
            else:
                survivors.append(p)
        self.particles = survivors

    def step(self, pos: Vec2, dt: float) -> list[Particle]:
        """Move the emitter to pos, advance by dt and return the live particles."""
        self.position = pos
        self.update(dt)
        self.blend_mode = self.config.blend_mode
        return self.particles


class EmittersCache:
    """Many short-lived copies of one emitter, recycled once they stop emitting."""

    CACHE_DEFAULT_SIZE = 10

    def __init__(self, config: EmitterConfig, rng: Optional[random.Random] = None) -> None:
        self.config = config
        self.rng = rng if rng is not None else random.Random()
        self.cached: list[Emitter] = [
            Emitter(replace(config, emitting=False), self.rng)
            for _ in range(self.CACHE_DEFAULT_SIZE)
        ]
        self.active: list[tuple[Emitter, Vec2]] = []

    def spawn(self, pos: Vec2) -> Emitter:
        """Start a fresh emission at pos, reusing a cached emitter if one is free."""
        emitter = self.cached.pop() if self.cached else Emitter(replace(self.config), self.rng)
        emitter.mesh_dirty = True
        emitter.config.emitting = True
        emitter.reset()
        self.active.append((emitter, pos))
        return emitter

    def step(self, dt: float) -> None:
        """Advance every active emitter and return finished ones to the cache."""
        still_active: list[tuple[Emitter, Vec2]] = []
        for emitter, pos in self.active:
            emitter.position = pos
            emitter.update(dt)
            if emitter.config.emitting:
                still_active.append((emitter, pos))
            else:
                self.cached.append(emitter)
        self.active = still_active