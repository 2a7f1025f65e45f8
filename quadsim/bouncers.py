"""Sprites bouncing around the screen, spawned in bursts at a point."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional

from quadsim.geometry import Vec2

SPEED_RANGE = 250.0
FRAME_RATE = 60.0


@dataclass
class Bouncer:
    """A sprite with a position, a per-frame speed and an RGBA byte colour."""

    pos: Vec2
    speed: Vec2
    color: tuple[int, int, int, int]

    def step(self, width: float, height: float, sprite_w: float, sprite_h: float) -> None:
        """Move one frame and reverse direction when the sprite centre leaves the screen."""
        self.pos = self.pos + self.speed
        sx, sy = self.speed.x, self.speed.y
        centre_x = self.pos.x + sprite_w / 2.0
        centre_y = self.pos.y + sprite_h / 2.0
        if centre_x > width or centre_x < 0.0:
            sx = -sx
        if centre_y > height or centre_y < 0.0:
            sy = -sy
        self.speed = Vec2(sx, sy)


def spawn_bouncers(pos: Vec2, count: int, rng: Optional[random.Random] = None) -> list[Bouncer]:
    """Create count bouncers at pos with random speeds and colours."""
    if count < 0:
        raise ValueError("count must not be negative")
    rng = rng if rng is not None else random.Random()
    return [
        Bouncer(
            pos=pos,
            speed=Vec2(
                rng.uniform(-SPEED_RANGE, SPEED_RANGE) / FRAME_RATE,
                rng.uniform(-SPEED_RANGE, SPEED_RANGE) / FRAME_RATE,
            ),
            color=(
                rng.randrange(50, 240),
                rng.randrange(80, 240),
                rng.randrange(100, 240),
                255,
            ),
        )
        for _ in range(count)
    ]