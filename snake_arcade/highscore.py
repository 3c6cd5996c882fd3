from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Literal, Protocol, runtime_checkable

from pydantic import BaseModel, Field, ValidationError

from snake_arcade.errors import StorageUnavailableError

logger = logging.getLogger(__name__)

HIGH_SCORE_KEY = "snakeHighScore"

ObserveResult = Literal["updated", "unchanged"]


@runtime_checkable
class KeyValueStore(Protocol):
    """Durable string slots keyed by name."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryStore:
    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class PersistedSlots(BaseModel):
    schema_version: int = Field(default=1, ge=1)
    slots: dict[str, str] = Field(default_factory=dict)


def write_text_atomic(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(path.suffix + ".tmp")
    tmp.write_text(text, encoding="utf-8")
    tmp.replace(path)


class JsonFileStore:
    """Key-value slots kept in a single JSON file that outlives the process."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path).expanduser()

    def _load(self) -> PersistedSlots:
        if not self.path.exists():
            return PersistedSlots()
        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise StorageUnavailableError(f"cannot read {self.path}: {e}") from e
        try:
            return PersistedSlots.model_validate_json(raw)
        except ValidationError as e:
            raise StorageUnavailableError(f"corrupt store {self.path}: {e}") from e

    def get(self, key: str) -> str | None:
        return self._load().slots.get(key)

    def set(self, key: str, value: str) -> None:
        state = self._load()
        state.slots[key] = value
        try:
            write_text_atomic(self.path, json.dumps(state.model_dump(mode="json"), indent=2) + "\n")
        except OSError as e:
            raise StorageUnavailableError(f"cannot write {self.path}: {e}") from e


def _parse_score(raw: str | None) -> int:
    if raw is None:
        return 0
    try:
        value = int(str(raw).strip())
    except ValueError:
        return 0
    return max(0, value)


class HighScoreTracker:
    """Keeps the best score ever observed and mirrors it into a store.

    Storage failures never end a session: they are logged and the tracker
    carries on with the in-memory value. After a failed read nothing is
    written back for the rest of the run.
    """

    def __init__(self, store: KeyValueStore | None, *, key: str = HIGH_SCORE_KEY) -> None:
        self._store = store
        self._key = key
        self._high_score = 0
        if store is None:
            return
        try:
            self._high_score = _parse_score(store.get(key))
        except (StorageUnavailableError, OSError) as e:
            # The stored best is unknown, so writing could lower it.
            self._store = None
            logger.warning("high score storage unavailable, keeping scores in memory: %s", e)

    @property
    def high_score(self) -> int:
        return self._high_score

    def observe(self, score: int) -> ObserveResult:
        if score <= self._high_score:
            return "unchanged"
        self._high_score = int(score)
        if self._store is not None:
            try:
                self._store.set(self._key, str(self._high_score))
            except (StorageUnavailableError, OSError) as e:
                logger.warning("could not persist high score %d: %s", self._high_score, e)
        return "updated"
