from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from snake_arcade.types import TILE_COUNT, Position


@dataclass(frozen=True, slots=True)
class Grid:
    tile_count: int = TILE_COUNT

    def __post_init__(self) -> None:
        if self.tile_count < 1:
            raise ValueError("tile_count must be >= 1")

    @property
    def size(self) -> int:
        return self.tile_count * self.tile_count

    def contains(self, pos: Position) -> bool:
        return 0 <= pos.x < self.tile_count and 0 <= pos.y < self.tile_count

    def center(self) -> Position:
        c = self.tile_count // 2
        return Position(c, c)

    def cells(self) -> Iterator[Position]:
        for y in range(self.tile_count):
            for x in range(self.tile_count):
                yield Position(x, y)
