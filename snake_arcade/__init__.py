from __future__ import annotations

from snake_arcade.engine import GameState
from snake_arcade.errors import BoardFullError, ReplayError, SnakeArcadeError, StorageUnavailableError
from snake_arcade.food import place_food
from snake_arcade.grid import Grid
from snake_arcade.highscore import HighScoreTracker, JsonFileStore, KeyValueStore, MemoryStore
from snake_arcade.render import render_ascii
from snake_arcade.replay import Replay, load_replay, run_replay
from snake_arcade.session import GameSession
from snake_arcade.types import Direction, GameSnapshot, Phase, Position, TickOutcome

__all__ = [
    "BoardFullError",
    "Direction",
    "GameSession",
    "GameSnapshot",
    "GameState",
    "Grid",
    "HighScoreTracker",
    "JsonFileStore",
    "KeyValueStore",
    "MemoryStore",
    "Phase",
    "Position",
    "Replay",
    "ReplayError",
    "SnakeArcadeError",
    "StorageUnavailableError",
    "TickOutcome",
    "load_replay",
    "place_food",
    "render_ascii",
    "run_replay",
]
