"""Grid snake game logic: steering, movement, fruit and collisions."""

from __future__ import annotations

import random
from collections import deque
from typing import Optional

SQUARES = 16
INITIAL_SPEED = 0.3
FRUIT_SCORE = 100
SPEEDUP = 0.9

Point = tuple[int, int]

UP: Point = (0, -1)
DOWN: Point = (0, 1)
RIGHT: Point = (1, 0)
LEFT: Point = (-1, 0)

_OPPOSITE = {UP: DOWN, DOWN: UP, LEFT: RIGHT, RIGHT: LEFT}


class SnakeGame:
    """State of one snake game; `speed` is the seconds between ticks."""

    def __init__(self, rng: Optional[random.Random] = None, squares: int = SQUARES) -> None:
        if squares <= 0:
            raise ValueError("the board needs at least one square")
        self.rng = rng if rng is not None else random.Random()
        self.squares = squares
        self.restart()

    def _random_point(self) -> Point:
        return (self.rng.randrange(0, self.squares), self.rng.randrange(0, self.squares))

    def restart(self) -> None:
        """Start a new game from the top-left corner heading right."""
        self.head: Point = (0, 0)
        self.direction: Point = RIGHT
        self.body: deque[Point] = deque()
        self.fruit: Point = self._random_point()
        self.score = 0
        self.speed = INITIAL_SPEED
        self.navigation_lock = False
        self.game_over = False

    def steer(self, direction: Point) -> bool:
        """Turn the snake; refused when reversing or already turned this tick."""
        if direction not in _OPPOSITE:
            raise ValueError(f"not a direction: {direction!r}")
        if self.game_over or self.navigation_lock:
            return False
        if self.direction == _OPPOSITE[direction]:
            return False
        self.direction = direction
        self.navigation_lock = True
        return True

    def tick(self) -> None:
        """Move the snake one square, eating fruit and detecting crashes."""
        if self.game_over:
            return
        self.body.appendleft(self.head)
        self.head = (self.head[0] + self.direction[0], self.head[1] + self.direction[1])
        if self.head == self.fruit:
            self.fruit = self._random_point()
            self.score += FRUIT_SCORE
            self.speed *= SPEEDUP
        else:
            self.body.pop()

        x, y = self.head
        if not (0 <= x < self.squares and 0 <= y < self.squares):
            self.game_over = True
        if self.head in self.body:
            self.game_over = True
        self.navigation_lock = False