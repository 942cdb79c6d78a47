# src/pomoday/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local data directory exists,
- wires the configured state store and clock into AppState,
- loads the saved board (or falls back to the default board).
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.models import BoardState, default_state
from ..core.ports import Clock, StateStore, system_clock
from ..core.state import AppState
from ..storage import open_store

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.state_path.parent.mkdir(parents=True, exist_ok=True)
    settings.state_db_path.parent.mkdir(parents=True, exist_ok=True)


def load_board(store: StateStore) -> BoardState:
    """Saved board, or the default board when nothing usable is stored."""
    try:
        board = store.load()
    except Exception:
        logger.exception("Failed to load saved state; starting with an empty board.")
        return default_state()
    if board is None:
        return default_state()
    return board


def save_board(state: AppState) -> bool:
    """Persist the current board. Returns False (and logs) on failure."""
    try:
        state.store.save(state.snapshot())
        return True
    except Exception:
        logger.exception("Failed to save state.")
        return False


def create_initial_state(
    settings=None,
    *,
    store: StateStore | None = None,
    clock: Clock | None = None,
) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings/store/clock injectable makes the app easier to test and avoids hidden
    global config reads. If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    if store is None:
        _ensure_local_dirs(settings)
        store = open_store(settings)

    state = AppState(
        settings=settings,
        store=store,
        clock=clock or system_clock,
    )
    state.board = load_board(store)
    return state
