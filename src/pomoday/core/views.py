# src/pomoday/core/views.py

"""
Read-only projections over the task list.

Nothing here is stored: grouping, today's activity, elapsed time and the
summary line are recomputed from tasks + now every time they are shown.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .models import Task, TaskStatus

DAY_MS = 24 * 60 * 60 * 1000


@dataclass(frozen=True, slots=True)
class Activity:
    task_id: int
    title: str
    start: int
    end: int | None
    finished: bool


@dataclass(frozen=True, slots=True)
class Summary:
    done: int
    wip: int
    pending: int
    total: int

    @property
    def percent_done(self) -> int:
        if not self.total:
            return 0
        return int(self.done * 100 / self.total + 0.5)


def group_by_tag(tasks: Iterable[Task]) -> dict[str, list[Task]]:
    groups: dict[str, list[Task]] = {}
    for t in tasks:
        groups.setdefault(t.tag, []).append(t)
    return groups


def elapsed_seconds(task: Task, now_ms: int) -> float:
    """Total tracked time; an open log keeps counting up to now."""
    return sum(log.duration_ms(now_ms) for log in task.logs) / 1000


def is_within_day(a_ms: int, b_ms: int) -> bool:
    # A rolling 24h window, not a calendar day.
    return abs(a_ms - b_ms) <= DAY_MS


def today_activity(tasks: Iterable[Task], now_ms: int) -> list[Activity]:
    out: list[Activity] = []
    for t in tasks:
        last_index = len(t.logs) - 1
        for i, log in enumerate(t.logs):
            if not log.start or not is_within_day(now_ms, log.start):
                continue
            out.append(
                Activity(
                    task_id=t.id,
                    title=t.title,
                    start=log.start,
                    end=log.end or None,
                    finished=bool(log.end) and i == last_index and t.status == TaskStatus.DONE,
                )
            )
    out.sort(key=lambda a: a.start)
    return out


def total_activity_seconds(activities: Iterable[Activity], now_ms: int) -> float:
    return sum((a.end or now_ms) - a.start for a in activities) / 1000


def summarize(tasks: Iterable[Task]) -> Summary:
    done = wip = pending = total = 0
    for t in tasks:
        total += 1
        if t.status == TaskStatus.DONE:
            done += 1
        elif t.status == TaskStatus.WIP:
            wip += 1
        elif t.status == TaskStatus.WAIT:
            pending += 1
    return Summary(done=done, wip=wip, pending=pending, total=total)
