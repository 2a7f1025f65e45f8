"""Conway's Game of Life on a bounded grid."""

from __future__ import annotations

import random as _random
from enum import Enum
from typing import Iterable, Optional

_NEIGHBOR_OFFSETS = tuple(
    (dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1) if (dx, dy) != (0, 0)
)


class CellState(Enum):
    ALIVE = "alive"
    DEAD = "dead"


def next_state(cell: CellState, neighbors: int) -> CellState:
    """State of a cell in the next generation given its live neighbour count."""
    if cell is CellState.ALIVE:
        # Survival needs two or three neighbours; otherwise under- or overpopulation.
        return CellState.ALIVE if neighbors in (2, 3) else CellState.DEAD
    if neighbors == 3:
        return CellState.ALIVE
    return cell


class Life:
    """A width x height grid of cells; cells outside the grid count as dead."""

    def __init__(
        self, width: int, height: int, cells: Optional[Iterable[CellState]] = None
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("grid dimensions must be positive")
        self.width = width
        self.height = height
        if cells is None:
            self.cells = [CellState.DEAD] * (width * height)
        else:
            self.cells = list(cells)
            if len(self.cells) != width * height:
                raise ValueError(
                    f"expected {width * height} cells, got {len(self.cells)}"
                )

    @classmethod
    def random(
        cls, width: int, height: int, rng: Optional[_random.Random] = None
    ) -> Life:
        """A grid where each cell is alive with probability one in five."""
        rng = rng if rng is not None else _random.Random()
        cells = [
            CellState.ALIVE if rng.randrange(0, 5) == 0 else CellState.DEAD
            for _ in range(width * height)
        ]
        return cls(width, height, cells)

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def __getitem__(self, pos: tuple[int, int]) -> CellState:
        x, y = pos
        if not self._in_bounds(x, y):
            raise IndexError(f"cell {pos} is outside the grid")
        return self.cells[y * self.width + x]

    def count_neighbors(self, x: int, y: int) -> int:
        """Number of live cells among the eight around (x, y)."""
        if not self._in_bounds(x, y):
            raise IndexError(f"cell {(x, y)} is outside the grid")
        return sum(
            1
            for dx, dy in _NEIGHBOR_OFFSETS
            if self._in_bounds(x + dx, y + dy)
            and self.cells[(y + dy) * self.width + x + dx] is CellState.ALIVE
        )

    def step(self) -> None:
        """Advance the whole grid by one generation."""
        self.cells = [
            next_state(self.cells[y * self.width + x], self.count_neighbors(x, y))
            for y in range(self.height)
            for x in range(self.width)
        ]

    def alive_cells(self) -> set[tuple[int, int]]:
        """Coordinates (x, y) of every live cell."""
        return {
            (index % self.width, index // self.width)
            for index, cell in enumerate(self.cells)
            if cell is CellState.ALIVE
        }