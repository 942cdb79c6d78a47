# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from pomoday.cli.bootstrap import create_initial_state
from pomoday.core.state import AppState

from .fakes import FakeClock, MemoryStateStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the stores.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="pomoday-test",
        log_level="DEBUG",
        data_dir=tmp_path,
        store_backend="json",
        state_path=tmp_path / "state.json",
        state_db_path=tmp_path / "state.sqlite3",
        store_key="pomoday",
        live_ticker=False,
        tick_seconds=0.1,
        clear_screen=False,
    )


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def store() -> MemoryStateStore:
    return MemoryStateStore()


@pytest.fixture()
def state(settings: SimpleNamespace, store: MemoryStateStore, clock: FakeClock) -> AppState:
    """AppState wired with an in-memory store and the fake clock."""
    return create_initial_state(settings, store=store, clock=clock)
