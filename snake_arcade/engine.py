from __future__ import annotations

import random
from collections.abc import Iterable

from snake_arcade.errors import BoardFullError
from snake_arcade.food import place_food
from snake_arcade.grid import Grid
from snake_arcade.types import (
    INITIAL_LENGTH,
    INITIAL_SPEED_MS,
    MIN_SPEED_MS,
    SCORE_PER_FOOD,
    SPEED_STEP_MS,
    SPEED_UP_EVERY,
    TILE_COUNT,
    Direction,
    GameSnapshot,
    Phase,
    Position,
    TickOutcome,
)


def next_speed(score: int, speed_ms: int) -> int:
    if score > 0 and score % SPEED_UP_EVERY == 0 and speed_ms > MIN_SPEED_MS:
        return max(MIN_SPEED_MS, speed_ms - SPEED_STEP_MS)
    return speed_ms


class GameState:
    """State machine for a single game session.

    The engine is deterministic apart from food placement, which draws from the
    injected ``rng``. It never performs I/O and never raises for game
    conditions: collisions move the session to ``Phase.OVER``, and mutators
    called in the wrong phase are no-ops.
    """

    def __init__(
        self,
        *,
        grid: Grid,
        snake: Iterable[Position],
        direction: Direction,
        food: Position | None,
        rng: random.Random,
        score: int = 0,
        speed_ms: int = INITIAL_SPEED_MS,
        phase: Phase = Phase.IDLE,
    ) -> None:
        body = tuple(snake)
        if not body:
            raise ValueError("snake must have at least one segment")
        if len(set(body)) != len(body):
            raise ValueError("snake segments must be distinct")
        for p in body:
            if not grid.contains(p):
                raise ValueError(f"snake segment out of bounds: {p}")
        if food is not None and (not grid.contains(food) or food in body):
            raise ValueError(f"invalid food position: {food}")

        self._grid = grid
        self._rng = rng
        self._snake: list[Position] = list(body)
        self._direction = direction
        self._next_direction = direction
        self._food = food
        self._score = score
        self._speed_ms = speed_ms
        self._phase = phase
        self._ticks = 0
        self._outcome: TickOutcome | None = None

    @classmethod
    def new(
        cls,
        *,
        rng: random.Random | None = None,
        tile_count: int = TILE_COUNT,
    ) -> GameState:
        grid = Grid(tile_count)
        rng = rng if rng is not None else random.Random()
        c = grid.center()
        snake = [Position(c.x - i, c.y) for i in range(INITIAL_LENGTH)]
        food = place_food(grid, snake, rng)
        return cls(grid=grid, snake=snake, direction=Direction.RIGHT, food=food, rng=rng)

    def reset(self) -> GameState:
        # A fresh instance; this one is left untouched.
        return GameState.new(rng=self._rng, tile_count=self._grid.tile_count)

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def score(self) -> int:
        return self._score

    @property
    def speed_ms(self) -> int:
        return self._speed_ms

    @property
    def direction(self) -> Direction:
        return self._direction

    @property
    def next_direction(self) -> Direction:
        return self._next_direction

    @property
    def snake(self) -> tuple[Position, ...]:
        return tuple(self._snake)

    @property
    def food(self) -> Position | None:
        return self._food

    @property
    def ticks(self) -> int:
        return self._ticks

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            tile_count=self._grid.tile_count,
            snake=tuple(self._snake),
            direction=self._direction,
            food=self._food,
            phase=self._phase,
            score=self._score,
            speed_ms=self._speed_ms,
            ticks=self._ticks,
            outcome=self._outcome,
        )

    def start(self) -> bool:
        if self._phase != Phase.IDLE:
            return False
        self._phase = Phase.RUNNING
        return True

    def pause(self) -> bool:
        if self._phase != Phase.RUNNING:
            return False
        self._phase = Phase.PAUSED
        return True

    def resume(self) -> bool:
        if self._phase != Phase.PAUSED:
            return False
        self._phase = Phase.RUNNING
        return True

    def toggle_pause(self) -> bool:
        if self._phase == Phase.RUNNING:
            return self.pause()
        return self.resume()

    def set_direction(self, direction: Direction) -> bool:
        if self._phase != Phase.RUNNING:
            return False
        # Guard against the committed direction, not the buffered one, so two
        # quick presses between ticks cannot fold the snake back on itself.
        if direction == self._direction.opposite:
            return False
        self._next_direction = direction
        return True

    def tick(self) -> TickOutcome:
        if self._phase != Phase.RUNNING:
            return TickOutcome.IGNORED

        self._direction = self._next_direction
        self._ticks += 1
        head = self._snake[0].moved(self._direction)

        if not self._grid.contains(head):
            return self._game_over(TickOutcome.WALL_COLLISION)
        if head in self._snake:
            return self._game_over(TickOutcome.SELF_COLLISION)

        self._snake.insert(0, head)

        if head != self._food:
            self._snake.pop()
            self._outcome = TickOutcome.ADVANCED
            return self._outcome

        self._score += SCORE_PER_FOOD
        self._speed_ms = next_speed(self._score, self._speed_ms)
        try:
            self._food = place_food(self._grid, self._snake, self._rng)
        except BoardFullError:
            self._food = None
            return self._game_over(TickOutcome.BOARD_FULL)
        self._outcome = TickOutcome.ATE_FOOD
        return self._outcome

    def _game_over(self, outcome: TickOutcome) -> TickOutcome:
        self._phase = Phase.OVER
        self._outcome = outcome
        return outcome
