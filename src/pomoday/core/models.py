# src/pomoday/core/models.py

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import StrEnum

DEFAULT_TAG = "@uncategorized"

# Numeric order used by the original browser storage blob.
_LEGACY_STATUS_ORDER = ("none", "done", "wip", "wait", "flag")


class TaskStatus(StrEnum):
    """
    Task status.

    New tasks start as WAIT. NONE only shows up in imported data.
    """

    NONE = "none"
    WAIT = "wait"
    WIP = "wip"
    DONE = "done"
    FLAG = "flag"

    @classmethod
    def from_raw(cls, raw: object) -> TaskStatus:
        if isinstance(raw, bool):
            return cls.NONE
        if isinstance(raw, int):
            if 0 <= raw < len(_LEGACY_STATUS_ORDER):
                return cls(_LEGACY_STATUS_ORDER[raw])
            return cls.NONE
        if not raw:
            return cls.NONE
        try:
            return cls(str(raw).strip().lower())
        except ValueError:
            return cls.NONE


@dataclass(frozen=True, slots=True)
class Worklog:
    start: int
    end: int | None = None

    @property
    def is_open(self) -> bool:
        return bool(self.start) and not self.end

    def duration_ms(self, now_ms: int) -> int:
        return (self.end or now_ms) - self.start


@dataclass(frozen=True, slots=True)
class Task:
    id: int
    tag: str
    title: str
    status: TaskStatus = TaskStatus.WAIT
    logs: tuple[Worklog, ...] = ()

    @property
    def last_log(self) -> Worklog | None:
        return self.logs[-1] if self.logs else None

    def with_log_closed(self, now_ms: int) -> Task:
        """Close the trailing open log, or stamp a zero-length log on a task without any."""
        last = self.last_log
        if last is None:
            return replace(self, logs=(Worklog(start=now_ms, end=now_ms),))
        if last.is_open:
            return replace(self, logs=self.logs[:-1] + (replace(last, end=now_ms),))
        return self


@dataclass(frozen=True, slots=True)
class BoardState:
    tasks: tuple[Task, ...] = field(default_factory=tuple)
    show_help: bool = True
    show_today: bool = False

    def find(self, task_id: int) -> Task | None:
        for t in self.tasks:
            if t.id == task_id:
                return t
        return None

    def next_id(self) -> int:
        return max((t.id for t in self.tasks), default=0) + 1


def default_state() -> BoardState:
    return BoardState(tasks=(), show_help=True, show_today=False)
