# src/pomoday/storage/sqlite_store.py

from __future__ import annotations

import contextlib
import json
import logging
import sqlite3
import time
from pathlib import Path

from ..core.models import BoardState
from .codec import decode_state, encode_state
from .errors import StoreError

logger = logging.getLogger(__name__)


class SqliteStateStore:
    """
    SQLite key-value store holding the board as one JSON blob under `key`.

    The schema is a single table:
    - kv(key TEXT PRIMARY KEY, value TEXT NOT NULL, updated_at REAL NOT NULL)

    Several boards can share one database file under different keys.

    Thread-safety:
    - each method opens its own SQLite connection
    """

    def __init__(self, db_path: str | Path = "state.sqlite3", key: str = "pomoday") -> None:
        self._db_path = Path(db_path)
        self._key = key
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_schema()
        logger.info("SqliteStateStore ready db=%s key=%s", self._db_path, self._key)

    @property
    def key(self) -> str:
        return self._key

    # ---- low-level helpers ----

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        conn.row_factory = sqlite3.Row
        self._configure_conn(conn)
        return conn

    @staticmethod
    def _configure_conn(conn: sqlite3.Connection) -> None:
        with contextlib.suppress(sqlite3.Error):
            conn.execute("PRAGMA journal_mode=WAL")

    def _ensure_schema(self) -> None:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS kv (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at REAL NOT NULL
                )
                """
            )
            conn.commit()
        finally:
            conn.close()

    # ---- public API ----

    def load(self) -> BoardState | None:
        conn = self._get_conn()
        try:
            row = conn.execute("SELECT value FROM kv WHERE key = ?", (self._key,)).fetchone()
        finally:
            conn.close()

        if row is None:
            logger.info("No saved state under key=%s", self._key)
            return None

        try:
            state = decode_state(json.loads(row["value"]))
        except ValueError as e:
            raise StoreError(f"Corrupt state under key={self._key}: {e}") from e
        logger.info("Loaded %d tasks from %s key=%s", len(state.tasks), self._db_path, self._key)
        return state

    def save(self, state: BoardState) -> None:
        value = json.dumps(encode_state(state), ensure_ascii=False)
        conn = self._get_conn()
        try:
            conn.execute(
                """
                INSERT INTO kv(key, value, updated_at) VALUES (?, ?, ?)
                ON CONFLICT(key) DO UPDATE SET value = excluded.value, updated_at = excluded.updated_at
                """,
                (self._key, value, time.time()),
            )
            conn.commit()
        finally:
            conn.close()
        logger.debug("Saved %d tasks key=%s", len(state.tasks), self._key)

