from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

TILE_COUNT = 20
INITIAL_LENGTH = 3
SCORE_PER_FOOD = 10
SPEED_UP_EVERY = 50
INITIAL_SPEED_MS = 100
SPEED_STEP_MS = 10
MIN_SPEED_MS = 50


@dataclass(frozen=True, slots=True)
class Position:
    x: int
    y: int

    def moved(self, direction: Direction) -> Position:
        dx, dy = direction.delta
        return Position(self.x + dx, self.y + dy)


class Direction(str, Enum):
    UP = "U"
    DOWN = "D"
    LEFT = "L"
    RIGHT = "R"

    @property
    def delta(self) -> tuple[int, int]:
        return _DELTAS[self]

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    @classmethod
    def from_str(cls, raw: str) -> Direction:
        value = str(raw).strip().upper()
        if value in cls.__members__:
            return cls[value]
        try:
            return cls(value)
        except ValueError as e:
            raise ValueError(f"invalid direction: {raw!r}") from e


# Screen orientation: y grows downwards.
_DELTAS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Phase(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    OVER = "over"


class TickOutcome(str, Enum):
    ADVANCED = "advanced"
    ATE_FOOD = "ate_food"
    WALL_COLLISION = "wall_collision"
    SELF_COLLISION = "self_collision"
    BOARD_FULL = "board_full"
    IGNORED = "ignored"

    @property
    def ends_game(self) -> bool:
        return self in (
            TickOutcome.WALL_COLLISION,
            TickOutcome.SELF_COLLISION,
            TickOutcome.BOARD_FULL,
        )


@dataclass(frozen=True, slots=True)
class GameSnapshot:
    tile_count: int
    snake: tuple[Position, ...]  # head first
    direction: Direction
    food: Position | None
    phase: Phase
    score: int
    speed_ms: int
    ticks: int
    outcome: TickOutcome | None = None

    @property
    def head(self) -> Position:
        return self.snake[0]
