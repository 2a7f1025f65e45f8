"""A first-person camera steered by mouse look and arrow keys."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

MOVE_SPEED = 0.1
LOOK_SPEED = 0.1
PITCH_LIMIT = 1.5
SWAY_STEP = 0.04
SWAY_BOUNDS = 8.0


@dataclass(frozen=True)
class Vec3:
    """An immutable three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vec3:
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def cross(self, other: Vec3) -> Vec3:
        """Right-handed cross product."""
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def normalize(self) -> Vec3:
        """Unit vector pointing the same way; a zero vector has no direction."""
        norm = self.length()
        if norm == 0.0 or not math.isfinite(norm):
            raise ValueError("cannot normalize a zero-length or non-finite vector")
        return Vec3(self.x / norm, self.y / norm, self.z / norm)


WORLD_UP = Vec3(0.0, 1.0, 0.0)


@dataclass
class FirstPersonCamera:
    """Yaw/pitch camera with its derived front, right and up axes."""

    yaw: float = 1.18
    pitch: float = 0.0
    position: Vec3 = field(default_factory=lambda: Vec3(0.0, 1.0, 0.0))
    world_up: Vec3 = WORLD_UP
    grabbed: bool = True
    sway: float = 0.0
    sway_forward: bool = False

    def __post_init__(self) -> None:
        self._update_axes()

    def _update_axes(self) -> None:
        self.front = Vec3(
            math.cos(self.yaw) * math.cos(self.pitch),
            math.sin(self.pitch),
            math.sin(self.yaw) * math.cos(self.pitch),
        ).normalize()
        self.right = self.front.cross(self.world_up).normalize()
        self.up = self.right.cross(self.front).normalize()

    @property
    def target(self) -> Vec3:
        """Point the camera looks at."""
        return self.position + self.front

    def look(self, dx: float, dy: float, delta: float) -> None:
        """Turn by a mouse movement over a frame of delta seconds, if the mouse is grabbed."""
        if not self.grabbed:
            return
        self.yaw += dx * delta * LOOK_SPEED
        self.pitch += dy * delta * -LOOK_SPEED
        self.pitch = max(-PITCH_LIMIT, min(PITCH_LIMIT, self.pitch))
        self._update_axes()

        self.sway += SWAY_STEP if self.sway_forward else -SWAY_STEP
        if self.sway >= SWAY_BOUNDS or self.sway <= -SWAY_BOUNDS:
            self.sway_forward = not self.sway_forward

    def apply_keys(self, up: bool, down: bool, left: bool, right: bool) -> None:
        """Walk along the front and right axes for the arrow keys held."""
        if up:
            self.position = self.position + self.front * MOVE_SPEED
        if down:
            self.position = self.position - self.front * MOVE_SPEED
        if left:
            self.position = self.position - self.right * MOVE_SPEED
        if right:
            self.position = self.position + self.right * MOVE_SPEED