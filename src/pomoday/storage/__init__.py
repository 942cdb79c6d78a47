"""
State storage.

Components:
- codec.py: BoardState <-> JSON-compatible blob
- json_store.py: whole-board JSON file
- sqlite_store.py: SQLite key-value table holding the same blob
- errors.py: StoreError
"""

from __future__ import annotations

from ..core.ports import StateStore
from .errors import StoreError
from .json_store import JsonStateStore
from .sqlite_store import SqliteStateStore


def open_store(settings) -> StateStore:
    backend = str(getattr(settings, "store_backend", "json")).lower()
    if backend == "json":
        return JsonStateStore(settings.state_path)
    if backend == "sqlite":
        return SqliteStateStore(settings.state_db_path, key=getattr(settings, "store_key", "pomoday"))
    raise StoreError(f"Unknown store backend: {backend!r} (expected 'json' or 'sqlite')")


__all__ = ["JsonStateStore", "SqliteStateStore", "StoreError", "open_store"]
