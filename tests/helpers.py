from __future__ import annotations

import random
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from snake_arcade.engine import GameState
from snake_arcade.grid import Grid
from snake_arcade.types import Direction, Phase, Position


@dataclass
class FakeHandle:
    when: float
    callback: Callable[..., Any]
    args: tuple[Any, ...]
    cancelled: bool = False

    def cancel(self) -> None:
        self.cancelled = True


@dataclass
class FakeScheduler:
    """Deterministic stand-in for ``loop.call_later``."""

    now: float = 0.0
    handles: list[FakeHandle] = field(default_factory=list)

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> FakeHandle:
        handle = FakeHandle(when=self.now + delay, callback=callback, args=args)
        self.handles.append(handle)
        return handle

    @property
    def pending(self) -> list[FakeHandle]:
        return [h for h in self.handles if not h.cancelled]

    def run_next(self) -> FakeHandle:
        pending = sorted(self.pending, key=lambda h: h.when)
        assert pending, "nothing scheduled"
        handle = pending[0]
        self.handles.remove(handle)
        self.now = handle.when
        handle.callback(*handle.args)
        return handle


def make_game(
    *,
    snake: list[tuple[int, int]],
    direction: Direction = Direction.RIGHT,
    food: tuple[int, int] | None = (0, 0),
    tile_count: int = 20,
    score: int = 0,
    speed_ms: int = 100,
    seed: int = 0,
    running: bool = True,
) -> GameState:
    game = GameState(
        grid=Grid(tile_count),
        snake=[Position(x, y) for x, y in snake],
        direction=direction,
        food=Position(*food) if food is not None else None,
        rng=random.Random(seed),
        score=score,
        speed_ms=speed_ms,
    )
    if running:
        game.start()
        assert game.phase == Phase.RUNNING
    return game
