"""Shared pytest fixtures."""

import pytest

from lstracker.modules.tracker import StateStore, Tracker, TrackerState
from lstracker.modules.tracker.internal import MemoryStorage


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def store(storage: MemoryStorage) -> StateStore:
    return StateStore(storage)


@pytest.fixture
def tracker(store: StateStore) -> Tracker:
    """Tracker starting from an empty aggregate (not the starter data)."""
    return Tracker(store, TrackerState())
