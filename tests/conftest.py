from __future__ import annotations

import os
from pathlib import Path

import pytest

from game_events import DiscreteSet, EventRegistry, TimeRange


@pytest.fixture(scope="session", autouse=True)
def _load_dotenv_for_tests() -> None:
    """Load repo .env for local runs so GAME_EVENTS_* settings apply to tests.

    In CI, `.env` is not loaded unless explicitly opted in with
    GAME_EVENTS_LOAD_DOTENV_FOR_TESTS=1.
    """

    if os.environ.get("CI") and os.environ.get("GAME_EVENTS_LOAD_DOTENV_FOR_TESTS") != "1":
        return

    env_path = Path(__file__).resolve().parents[1] / ".env"
    if env_path.exists():
        from dotenv import load_dotenv

        load_dotenv(dotenv_path=env_path, override=False)


@pytest.fixture()
def registry() -> EventRegistry:
    return EventRegistry()


@pytest.fixture()
def timeline(registry: EventRegistry) -> EventRegistry:
    """Registry holding an instant at 0, a range [2, 10) and the set {11, 15, 20}."""

    registry.register(kind="A", condition=0)
    registry.register(kind="B", condition=TimeRange(x=2, y=10))
    registry.register(kind="C", condition=DiscreteSet(values=(11, 15, 20)))
    return registry
