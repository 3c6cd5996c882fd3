from __future__ import annotations

import random
from collections.abc import Callable
from typing import Any, Protocol

from snake_arcade.engine import GameState
from snake_arcade.highscore import HighScoreTracker
from snake_arcade.types import Direction, GameSnapshot, Phase, TickOutcome


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Single-threaded timer source. ``asyncio.AbstractEventLoop`` fits."""

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> TimerHandle: ...


Listener = Callable[[GameSnapshot, TickOutcome | None], None]


class GameSession:
    """Host for one game at a time.

    Owns the engine instance, drives ``tick()`` from the scheduler at the
    engine's current speed, and forwards scores to the high-score tracker.
    At most one tick is pending at any time; pause, reset and game over leave
    none pending.
    """

    def __init__(
        self,
        *,
        scheduler: Scheduler,
        tracker: HighScoreTracker,
        rng: random.Random | None = None,
        game: GameState | None = None,
    ) -> None:
        self._scheduler = scheduler
        self.tracker = tracker
        self._rng = rng if rng is not None else random.Random()
        self._game = game if game is not None else GameState.new(rng=self._rng)
        self._pending: TimerHandle | None = None
        self._generation = 0
        self._listeners: list[Listener] = []

    @property
    def game(self) -> GameState:
        return self._game

    @property
    def phase(self) -> Phase:
        return self._game.phase

    @property
    def high_score(self) -> int:
        return self.tracker.high_score

    @property
    def tick_pending(self) -> bool:
        return self._pending is not None

    def snapshot(self) -> GameSnapshot:
        return self._game.snapshot()

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def start(self) -> bool:
        if not self._game.start():
            return False
        self._schedule()
        self._notify(None)
        return True

    def pause(self) -> bool:
        if not self._game.pause():
            return False
        self._cancel()
        self._notify(None)
        return True

    def resume(self) -> bool:
        if not self._game.resume():
            return False
        self._schedule()
        self._notify(None)
        return True

    def toggle_pause(self) -> bool:
        if self._game.phase == Phase.RUNNING:
            return self.pause()
        return self.resume()

    def reset(self) -> None:
        self._cancel()
        self._game = GameState.new(rng=self._rng, tile_count=self._game.grid.tile_count)
        self._notify(None)

    def restart(self) -> bool:
        self.reset()
        return self.start()

    def set_direction(self, direction: Direction) -> bool:
        return self._game.set_direction(direction)

    def _schedule(self) -> None:
        self._cancel()
        self._pending = self._scheduler.call_later(
            self._game.speed_ms / 1000.0, self._on_tick, self._generation
        )

    def _cancel(self) -> None:
        self._generation += 1
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    def _on_tick(self, generation: int) -> None:
        # A callback that outlived its cancellation must not touch the session.
        if generation != self._generation:
            return
        self._pending = None
        outcome = self._game.tick()
        if outcome == TickOutcome.IGNORED:
            return
        if outcome == TickOutcome.ATE_FOOD or outcome.ends_game:
            self.tracker.observe(self._game.score)
        if self._game.phase == Phase.RUNNING:
            self._schedule()
        self._notify(outcome)

    def _notify(self, outcome: TickOutcome | None) -> None:
        snap = self._game.snapshot()
        for listener in list(self._listeners):
            listener(snap, outcome)
