from __future__ import annotations

import random
from dataclasses import dataclass
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from snake_arcade.engine import GameState
from snake_arcade.errors import ReplayError
from snake_arcade.types import Direction, GameSnapshot, Phase


class ReplayFile(BaseModel):
    seed: int
    moves: list[str | None] = Field(default_factory=list)

    @field_validator("moves")
    @classmethod
    def _known_directions(cls, v: list[str | None]) -> list[str | None]:
        for raw in v:
            if raw is not None:
                Direction.from_str(raw)
        return v


@dataclass(frozen=True, slots=True)
class Replay:
    seed: int
    moves: list[Direction | None]


def parse_replay(data: object) -> Replay:
    if not isinstance(data, dict):
        raise ReplayError("replay must be a mapping")
    try:
        model = ReplayFile.model_validate(data)
    except ValidationError as e:
        raise ReplayError(f"invalid replay: {e}") from e
    return Replay(
        seed=model.seed,
        moves=[Direction.from_str(m) if m is not None else None for m in model.moves],
    )


def load_replay(path: str | Path) -> Replay:
    """Read a replay from YAML or JSON (JSON is valid YAML)."""
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ReplayError(f"cannot read {p}: {e}") from e
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ReplayError(f"cannot parse {p}: {e}") from e
    return parse_replay(data)


def run_replay(replay: Replay) -> GameSnapshot:
    """Play ``replay`` from a fresh game and return the final snapshot.

    Each move entry is one tick; ``None`` keeps the current heading. Playback
    stops early when the game ends.
    """
    game = GameState.new(rng=random.Random(replay.seed))
    game.start()
    for move in replay.moves:
        if game.phase != Phase.RUNNING:
            break
        if move is not None:
            game.set_direction(move)
        game.tick()
    return game.snapshot()


def summarize(snap: GameSnapshot) -> dict[str, object]:
    return {
        "phase": snap.phase.value,
        "score": snap.score,
        "speed_ms": snap.speed_ms,
        "ticks": snap.ticks,
        "head": [snap.head.x, snap.head.y],
        "length": len(snap.snake),
        "outcome": snap.outcome.value if snap.outcome is not None else None,
    }
