from __future__ import annotations

import random
from collections.abc import Collection

from snake_arcade.errors import BoardFullError
from snake_arcade.grid import Grid
from snake_arcade.types import Position


def free_cells(grid: Grid, occupied: Collection[Position]) -> list[Position]:
    taken = set(occupied)
    return [p for p in grid.cells() if p not in taken]


def place_food(
    grid: Grid,
    occupied: Collection[Position],
    rng: random.Random,
) -> Position:
    """Pick a uniformly random cell not covered by ``occupied``.

    Cells are drawn independently and redrawn while they land on the snake.
    A full board raises ``BoardFullError`` rather than sampling forever.
    """
    taken = set(occupied)
    if len(taken) >= grid.size and not free_cells(grid, taken):
        raise BoardFullError(f"no free cell on a {grid.tile_count}x{grid.tile_count} grid")

    while True:
        candidate = Position(rng.randrange(grid.tile_count), rng.randrange(grid.tile_count))
        if candidate not in taken:
            return candidate
