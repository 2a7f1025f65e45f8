"""Breakout game logic in a 20 x 20 world with a 10 x 10 wall of blocks."""

from __future__ import annotations

from dataclasses import dataclass, field

from quadsim.geometry import Rect

BLOCKS_W = 10
BLOCKS_H = 10
SCR_W = 20.0
SCR_H = 20.0
WALL_HEIGHT = 7.0
BLOCK_GAP = 0.05
PLATFORM_WIDTH = 5.0
PLATFORM_HEIGHT = 0.2
PLATFORM_SPEED = 3.0


def block_rect(i: int, j: int) -> Rect:
    """Hit area of block column i, row j."""
    if not (0 <= i < BLOCKS_W and 0 <= j < BLOCKS_H):
        raise ValueError(f"no block at column {i}, row {j}")
    block_w = SCR_W / BLOCKS_W
    block_h = WALL_HEIGHT / BLOCKS_H
    return Rect(i * block_w + BLOCK_GAP, j * block_h + BLOCK_GAP, block_w, block_h)


def _full_wall() -> list[list[bool]]:
    return [[True] * BLOCKS_W for _ in range(BLOCKS_H)]


@dataclass
class Arkanoid:
    """Ball, paddle and the remaining blocks; blocks[j][i] is row j, column i."""

    blocks: list[list[bool]] = field(default_factory=_full_wall)
    ball_x: float = 12.0
    ball_y: float = 7.0
    dx: float = 3.5
    dy: float = -3.5
    platform_x: float = 10.0
    stick: bool = True

    def update(self, delta: float, left: bool, right: bool, launch: bool) -> None:
        """Advance by delta seconds given the paddle and launch controls."""
        half = PLATFORM_WIDTH / 2.0
        if right and self.platform_x < SCR_W - half:
            self.platform_x += PLATFORM_SPEED * delta
        if left and self.platform_x > half:
            self.platform_x -= PLATFORM_SPEED * delta

        if not self.stick:
            self.ball_x += self.dx * delta
            self.ball_y += self.dy * delta
        else:
            self.ball_x = self.platform_x
            self.ball_y = SCR_H - 0.5
            self.stick = not launch

        if self.ball_x <= 0.0 or self.ball_x > SCR_W:
            self.dx = -self.dx
        on_paddle = (
            self.ball_y > SCR_H - PLATFORM_HEIGHT - 0.15 / 2.0
            and self.platform_x - half <= self.ball_x <= self.platform_x + half
        )
        if self.ball_y <= 0.0 or on_paddle:
            self.dy = -self.dy
        if self.ball_y >= SCR_H:
            self.ball_y = 10.0
            self.dy = -abs(self.dy)
            self.stick = True

        for j, row in enumerate(self.blocks):
            for i, present in enumerate(row):
                if present and self._ball_in(block_rect(i, j)):
                    self.dy = -self.dy
                    row[i] = False

    def _ball_in(self, rect: Rect) -> bool:
        return (
            rect.left <= self.ball_x < rect.right
            and rect.top <= self.ball_y < rect.bottom
        )

    def remaining_blocks(self) -> int:
        """Number of blocks still standing."""
        return sum(sum(row) for row in self.blocks)