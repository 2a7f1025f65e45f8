"""Configuration types for particle emitters: curves, colours, shapes and atlases."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union

from quadsim.geometry import Vec2, polar_to_cartesian


class Interpolation(Enum):
    LINEAR = "linear"
    BEZIER = "bezier"


@dataclass(frozen=True)
class BatchedCurve:
    """A curve sampled at evenly spaced steps, ready for fast lookup."""

    points: tuple[float, ...]

    def get(self, t: float) -> float:
        """Value of the curve at t in 0..1, interpolating between samples."""
        if not self.points:
            raise ValueError("cannot sample an empty curve")
        last = len(self.points) - 1
        t_scaled = t * len(self.points)
        previous_ix = min(max(int(t_scaled), 0), last)
        next_ix = min(previous_ix + 1, last)
        previous = self.points[previous_ix]
        following = self.points[next_ix]
        return previous + (following - previous) * (t_scaled - previous_ix)


@dataclass
class Curve:
    """A curve through key points (x, value), built by linear interpolation."""

    points: list[tuple[float, float]] = field(default_factory=list)
    interpolation: Interpolation = Interpolation.LINEAR
    resolution: int = 20

    def batch(self) -> BatchedCurve:
        """Sample the curve at 1/resolution steps along x."""
        if self.interpolation is Interpolation.BEZIER:
            raise ValueError("bezier interpolation is not supported, use linear")
        step = 1.0 / self.resolution
        x = 0.0
        samples: list[float] = []
        for (start_x, start_y), (end_x, end_y) in zip(self.points, self.points[1:]):
            while x <= end_x:
                t = (x - start_x) / (end_x - start_x)
                samples.append(start_y + (end_y - start_y) * t)
                x += step
        return BatchedCurve(tuple(samples))


@dataclass(frozen=True)
class Color:
    """An RGBA colour with components in 0..1."""

    r: float
    g: float
    b: float
    a: float = 1.0

    def to_tuple(self) -> tuple[float, float, float, float]:
        return (self.r, self.g, self.b, self.a)


WHITE = Color(1.0, 1.0, 1.0, 1.0)


@dataclass(frozen=True)
class ColorCurve:
    """Colours a particle passes through from birth to death."""

    start: Color = WHITE
    mid: Color = WHITE
    end: Color = WHITE


@dataclass(frozen=True)
class PointEmission:
    """Particles spawn exactly at the emitter position."""

    def gen_random_point(self, rng: random.Random) -> Vec2:
        return Vec2(0.0, 0.0)


@dataclass(frozen=True)
class RectEmission:
    """Particles spawn inside a rectangle centred on the emitter."""

    width: float
    height: float

    def gen_random_point(self, rng: random.Random) -> Vec2:
        return Vec2(
            rng.uniform(-self.width / 2.0, self.width / 2.0),
            rng.uniform(-self.height / 2.0, self.height / 2.0),
        )


@dataclass(frozen=True)
class SphereEmission:
    """Particles spawn uniformly inside a disc centred on the emitter."""

    radius: float

    def gen_random_point(self, rng: random.Random) -> Vec2:
        rho = math.sqrt(rng.uniform(0.0, self.radius * self.radius))
        phi = rng.uniform(0.0, math.pi * 2.0)
        return polar_to_cartesian(rho, phi)


EmissionShape = Union[PointEmission, RectEmission, SphereEmission]

Mesh = tuple[list[float], list[int]]


@dataclass(frozen=True)
class RectangleParticle:
    """A quad particle; vertices are position(3), uv(2), colour(4)."""

    aspect_ratio: float = 1.0

    def mesh(self) -> Mesh:
        a = self.aspect_ratio
        vertices = [
            -a, -1.0, 0.0, 0.0, 0.0, 1.0, 1.0, 1.0, 1.0,
            a, -1.0, 0.0, 1.0, 0.0, 1.0, 1.0, 1.0, 1.0,
            a, 1.0, 0.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0,
            -a, 1.0, 0.0, 0.0, 1.0, 1.0, 1.0, 1.0, 1.0,
        ]
        return vertices, [0, 1, 2, 0, 2, 3]


@dataclass(frozen=True)
class CircleParticle:
    """A triangle-fan disc particle."""

    subdivisions: int

    def mesh(self) -> Mesh:
        vertices = [0.0, 0.0, 0.0, 0.0, 0.0, 1.0, 1.0, 1.0, 1.0]
        indices: list[int] = []
        for i in range(self.subdivisions + 1):
            angle = i / self.subdivisions * math.pi * 2.0
            rx, ry = math.cos(angle), math.sin(angle)
            vertices.extend([rx, ry, 0.0, rx, ry, 1.0, 1.0, 1.0, 1.0])
            if i != self.subdivisions:
                indices.extend([0, i + 1, i + 2])
        return vertices, indices


@dataclass(frozen=True)
class CustomMeshParticle:
    """A particle built from caller-supplied vertices and indices."""

    vertices: tuple[float, ...]
    indices: tuple[int, ...]

    def mesh(self) -> Mesh:
        return list(self.vertices), list(self.indices)


ParticleShape = Union[RectangleParticle, CircleParticle, CustomMeshParticle]


class BlendMode(Enum):
    ALPHA = "alpha"
    ADDITIVE = "additive"


@dataclass(frozen=True)
class ParticleMaterial:
    """Custom shader sources used to shade each particle."""

    vertex: str
    fragment: str


@dataclass(frozen=True)
class PostProcessing:
    """Marker asking for particles to be rendered through an offscreen pass."""


@dataclass(frozen=True)
class AtlasConfig:
    """An n x m spritesheet animated over frames start_index..end_index."""

    n: int
    m: int
    start_index: int
    end_index: int

    @classmethod
    def from_range(cls, n: int, m: int, start: Optional[int], end: Optional[int]) -> AtlasConfig:
        """Build from a half-open frame range; None means the sheet's first or past-last frame."""
        if n <= 0 or m <= 0:
            raise ValueError("atlas dimensions must be positive")
        start_index = 0 if start is None else start
        end_index = n * m if end is None else end
        if start_index < 0 or end_index < 0:
            raise ValueError("atlas frame indices must not be negative")
        return cls(n, m, start_index, end_index)


@dataclass
class EmitterConfig:
    """Every tunable of a particle emitter, with the stock defaults."""

    local_coords: bool = False
    emission_shape: EmissionShape = field(default_factory=PointEmission)
    one_shot: bool = False
    lifetime: float = 1.0
    lifetime_randomness: float = 0.0
    explosiveness: float = 0.0
    amount: int = 8
    shape: ParticleShape = field(default_factory=RectangleParticle)
    emitting: bool = True
    initial_direction: Vec2 = Vec2(0.0, -1.0)
    initial_direction_spread: float = 0.0
    initial_velocity: float = 50.0
    initial_velocity_randomness: float = 0.0
    linear_accel: float = 0.0
    initial_rotation: float = 0.0
    initial_rotation_randomness: float = 0.0
    initial_angular_velocity: float = 0.0
    initial_angular_velocity_randomness: float = 0.0
    angular_accel: float = 0.0
    angular_damping: float = 0.0
    size: float = 10.0
    size_randomness: float = 0.0
    size_curve: Optional[Curve] = None
    blend_mode: BlendMode = BlendMode.ALPHA
    colors_curve: ColorCurve = field(default_factory=ColorCurve)
    gravity: Vec2 = Vec2(0.0, 0.0)
    texture: Any = None
    atlas: Optional[AtlasConfig] = None
    material: Optional[ParticleMaterial] = None
    post_processing: Optional[PostProcessing] = None