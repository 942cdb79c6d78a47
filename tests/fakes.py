# tests/fakes.py

from __future__ import annotations

from dataclasses import dataclass, field

from pomoday.core.models import BoardState


class FakeClock:
    """
    Deterministic epoch-millisecond clock.

    - Starts at a fixed instant
    - Moves only when the test calls advance()
    """

    def __init__(self, start_ms: int = 1_700_000_000_000) -> None:
        self.now_ms = start_ms
        self.calls = 0

    def __call__(self) -> int:
        self.calls += 1
        return self.now_ms

    def advance(self, *, ms: int = 0, seconds: float = 0, hours: float = 0) -> int:
        self.now_ms += int(ms + seconds * 1000 + hours * 3_600_000)
        return self.now_ms


@dataclass(slots=True)
class MemoryStateStore:
    """
    In-memory StateStore used by console/bootstrap tests.
    """

    saved: list[BoardState] = field(default_factory=list)
    initial: BoardState | None = None
    fail_load: bool = False
    fail_save: bool = False

    def load(self) -> BoardState | None:
        if self.fail_load:
            raise ValueError("corrupt blob")
        return self.initial

    def save(self, state: BoardState) -> None:
        if self.fail_save:
            raise OSError("disk full")
        self.saved.append(state)
