# src/pomoday/storage/json_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from pathlib import Path

from ..core.models import BoardState
from .codec import decode_state, encode_state
from .errors import StoreError

logger = logging.getLogger(__name__)


class JsonStateStore:
    """
    Whole-board JSON file.

    - load() returns None when the file does not exist yet
    - corrupt files raise StoreError; the caller decides the fallback
    - save() writes to a temp file and swaps it in with os.replace
    """

    def __init__(self, path: str | Path = "state.json") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> BoardState | None:
        if not self._path.exists():
            logger.info("No saved state at %s", self._path)
            return None
        try:
            state = decode_state(json.loads(self._path.read_text("utf-8")))
        except ValueError as e:
            raise StoreError(f"Corrupt state file {self._path}: {e}") from e
        logger.info("Loaded %d tasks from %s", len(state.tasks), self._path)
        return state

    def save(self, state: BoardState) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        tmp.write_text(json.dumps(encode_state(state), ensure_ascii=False, indent=2), "utf-8")
        os.replace(tmp, self._path)
        with contextlib.suppress(OSError):
            # Best-effort: keep the file private on disk.
            os.chmod(self._path, 0o600)
        logger.debug("Saved %d tasks to %s", len(state.tasks), self._path)
