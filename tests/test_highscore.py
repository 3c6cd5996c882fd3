from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from snake_arcade.errors import StorageUnavailableError
from snake_arcade.highscore import (
    HIGH_SCORE_KEY,
    HighScoreTracker,
    JsonFileStore,
    KeyValueStore,
    MemoryStore,
)


class BrokenStore:
    def get(self, key: str) -> str | None:
        raise StorageUnavailableError("storage disabled")

    def set(self, key: str, value: str) -> None:
        raise OSError("read-only")


class ReadOnlyStore(MemoryStore):
    def set(self, key: str, value: str) -> None:
        raise OSError("read-only")


class FlakyStore(MemoryStore):
    """Fails the first read, then behaves."""

    def __init__(self, initial: dict[str, str]) -> None:
        super().__init__(initial)
        self._failed = False

    def get(self, key: str) -> str | None:
        if not self._failed:
            self._failed = True
            raise StorageUnavailableError("not ready")
        return super().get(key)


def test_starts_at_zero_without_prior_value() -> None:
    tracker = HighScoreTracker(MemoryStore())
    assert tracker.high_score == 0


def test_observe_keeps_maximum_and_persists() -> None:
    store = MemoryStore()
    tracker = HighScoreTracker(store)

    assert tracker.observe(30) == "updated"
    assert tracker.observe(30) == "unchanged"
    assert tracker.observe(10) == "unchanged"
    assert tracker.high_score == 30
    assert store.get(HIGH_SCORE_KEY) == "30"

    assert tracker.observe(120) == "updated"
    assert store.get(HIGH_SCORE_KEY) == "120"


def test_high_score_never_decreases() -> None:
    tracker = HighScoreTracker(MemoryStore())
    best = 0
    for score in [0, 50, 20, 70, 70, 10, 0, 200, 190]:
        tracker.observe(score)
        best = max(best, score)
        assert tracker.high_score == best


@pytest.mark.parametrize("raw", ["abc", "-40", "", "  "])
def test_unusable_stored_values_read_as_zero(raw: str) -> None:
    tracker = HighScoreTracker(MemoryStore({HIGH_SCORE_KEY: raw}))
    assert tracker.high_score == 0


def test_reads_previous_value() -> None:
    tracker = HighScoreTracker(MemoryStore({HIGH_SCORE_KEY: "90"}))
    assert tracker.high_score == 90
    assert tracker.observe(80) == "unchanged"


def test_read_failure_is_a_warning(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="snake_arcade.highscore"):
        tracker = HighScoreTracker(BrokenStore())
        assert tracker.high_score == 0
        assert tracker.observe(40) == "updated"
    assert tracker.high_score == 40
    assert len([r for r in caplog.records if r.levelno == logging.WARNING]) == 1


def test_write_failure_is_a_warning(caplog: pytest.LogCaptureFixture) -> None:
    store = ReadOnlyStore({HIGH_SCORE_KEY: "20"})
    with caplog.at_level(logging.WARNING, logger="snake_arcade.highscore"):
        tracker = HighScoreTracker(store)
        assert tracker.observe(40) == "updated"
    assert tracker.high_score == 40
    assert store.get(HIGH_SCORE_KEY) == "20"
    assert len([r for r in caplog.records if r.levelno == logging.WARNING]) == 1


def test_failed_read_never_overwrites_stored_best() -> None:
    store = FlakyStore({HIGH_SCORE_KEY: "500"})
    tracker = HighScoreTracker(store)
    assert tracker.high_score == 0

    assert tracker.observe(40) == "updated"
    assert tracker.observe(90) == "updated"
    assert tracker.high_score == 90
    assert store.get(HIGH_SCORE_KEY) == "500"
    assert HighScoreTracker(store).high_score == 500


def test_tracker_without_store_is_in_memory() -> None:
    tracker = HighScoreTracker(None)
    assert tracker.observe(10) == "updated"
    assert tracker.high_score == 10


def test_stores_satisfy_protocol(tmp_path: Path) -> None:
    assert isinstance(MemoryStore(), KeyValueStore)
    assert isinstance(JsonFileStore(tmp_path / "hs.json"), KeyValueStore)


def test_json_file_store_survives_restarts(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "highscore.json"
    HighScoreTracker(JsonFileStore(path)).observe(70)

    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["slots"][HIGH_SCORE_KEY] == "70"

    reloaded = HighScoreTracker(JsonFileStore(path))
    assert reloaded.high_score == 70


def test_json_file_store_keeps_other_slots(tmp_path: Path) -> None:
    store = JsonFileStore(tmp_path / "slots.json")
    store.set("a", "1")
    store.set("b", "2")
    assert store.get("a") == "1"
    assert store.get("missing") is None


def test_corrupt_file_raises_storage_error(tmp_path: Path) -> None:
    path = tmp_path / "hs.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(StorageUnavailableError):
        JsonFileStore(path).get(HIGH_SCORE_KEY)


def test_unwritable_location_raises_storage_error(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    store = JsonFileStore(blocker / "hs.json")
    with pytest.raises(StorageUnavailableError):
        store.set(HIGH_SCORE_KEY, "10")
