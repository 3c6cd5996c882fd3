from __future__ import annotations

import random
import sys
from pathlib import Path

import pytest

from tests.helpers import FakeScheduler


def pytest_configure() -> None:
    project_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(project_root))


@pytest.fixture()
def scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture()
def rng() -> random.Random:
    return random.Random(1234)
