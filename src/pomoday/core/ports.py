# src/pomoday/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The reducer and views only see a clock callable; the console loop only sees a
StateStore. Concrete implementations live in storage/ and are swapped in tests.
"""

import time
from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .models import BoardState

Clock = Callable[[], int]
# Returns the current time in epoch milliseconds.


def system_clock() -> int:
    return int(time.time() * 1000)


class StateStore(Protocol):
    """Load/save the whole board as one blob. Last write wins."""

    def load(self) -> BoardState | None: ...
    def save(self, state: BoardState) -> None: ...
