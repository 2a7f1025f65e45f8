"""Angle helpers and the state of an interactive 2D camera."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from quadsim.geometry import Vec2

FULL_TURN = 360.0
ROTATION_STEP = 10.0
ZOOM_FACTOR = 1.1
SMOOTHING = 0.1


def short_angle_dist(a0: float, a1: float) -> float:
    """Signed shortest angular distance in degrees from a0 to a1."""
    da = math.fmod(a1 - a0, FULL_TURN)
    return math.fmod(2.0 * da, FULL_TURN) - da


def angle_lerp(a0: float, a1: float, t: float) -> float:
    """Interpolate from a0 towards a1 along the shortest arc."""
    return a0 + short_angle_dist(a0, a1) * t


def wrap_rotation(angle: float) -> float:
    """Bring an angle that went at most one turn out of range back into 0..360."""
    if angle >= FULL_TURN:
        return angle - FULL_TURN
    if angle < 0.0:
        return angle + FULL_TURN
    return angle


@dataclass
class CameraControls:
    """Camera target, zoom, rotation and offset driven by user input."""

    target: Vec2 = field(default_factory=Vec2)
    zoom: float = 1.0
    rotation: float = 0.0
    smooth_rotation: float = 0.0
    offset: Vec2 = field(default_factory=Vec2)

    def apply_wheel(self, y: float, zoom_modifier: bool) -> None:
        """Zoom (with the modifier held) or rotate by a mouse wheel delta."""
        if y == 0.0:
            return
        if zoom_modifier:
            self.zoom *= ZOOM_FACTOR**y
        else:
            self.rotation = wrap_rotation(self.rotation + ROTATION_STEP * y)

    def update(self) -> None:
        """Ease the displayed rotation towards the requested one."""
        self.smooth_rotation = angle_lerp(self.smooth_rotation, self.rotation, SMOOTHING)