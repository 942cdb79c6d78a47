# src/pomoday/core/state.py

from __future__ import annotations

import threading
from dataclasses import dataclass, field

from .models import BoardState, default_state
from .ports import Clock, StateStore, system_clock


@dataclass
class AppState:
    # Settings live on the state so connectors don't re-read config.
    settings: object

    store: StateStore
    clock: Clock = system_clock
    board: BoardState = field(default_factory=default_state)

    # Guards `board` between the console loop and the ticker thread.
    lock: threading.Lock = field(default_factory=threading.Lock)

    def now(self) -> int:
        return self.clock()

    def snapshot(self) -> BoardState:
        with self.lock:
            return self.board
