# src/pomoday/storage/codec.py

"""
Board <-> plain dict blob.

The blob keeps the layout of the original browser storage so an exported
`pomoday` localStorage value can be dropped in as state.json:

    {"tasks": [{"id": 1, "tag": "@work", "title": "...", "status": "wip",
                "logs": [{"start": 1700000000000, "end": 0}]}],
     "showHelp": true, "showToday": false}

Open logs are written with end=0. Numeric statuses from the original enum are
accepted on read.
"""

from __future__ import annotations

import logging
from typing import Any

from ..core.models import DEFAULT_TAG, BoardState, Task, TaskStatus, Worklog

logger = logging.getLogger(__name__)


def _bool_or(raw: Any, default: bool) -> bool:
    return raw if isinstance(raw, bool) else default


def _int_or_none(raw: Any) -> int | None:
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float) and raw.is_integer():
        return int(raw)
    return None


def encode_state(state: BoardState) -> dict[str, Any]:
    return {
        "tasks": [
            {
                "id": t.id,
                "tag": t.tag,
                "title": t.title,
                "status": t.status.value,
                "logs": [{"start": log.start, "end": log.end or 0} for log in t.logs],
            }
            for t in state.tasks
        ],
        "showHelp": state.show_help,
        "showToday": state.show_today,
    }


def _decode_logs(raw: Any) -> tuple[Worklog, ...]:
    if not isinstance(raw, list):
        return ()
    logs: list[Worklog] = []
    for item in raw:
        if not isinstance(item, dict):
            continue
        start = _int_or_none(item.get("start"))
        if start is None:
            continue
        end = _int_or_none(item.get("end"))
        logs.append(Worklog(start=start, end=end or None))
    return tuple(logs)


def _decode_task(raw: Any) -> Task | None:
    if not isinstance(raw, dict):
        return None
    task_id = _int_or_none(raw.get("id"))
    title = raw.get("title")
    if task_id is None or task_id < 0 or not isinstance(title, str):
        return None
    tag = raw.get("tag")
    return Task(
        id=task_id,
        tag=tag if isinstance(tag, str) and tag else DEFAULT_TAG,
        title=title,
        status=TaskStatus.from_raw(raw.get("status")),
        logs=_decode_logs(raw.get("logs")),
    )


def decode_state(raw: Any) -> BoardState:
    """Build a BoardState from a decoded JSON blob. Raises ValueError on a non-object blob."""
    if not isinstance(raw, dict):
        raise ValueError(f"state blob must be an object, got {type(raw).__name__}")

    raw_tasks = raw.get("tasks")
    if not isinstance(raw_tasks, list):
        raw_tasks = []

    tasks: list[Task] = []
    seen: set[int] = set()
    for item in raw_tasks:
        task = _decode_task(item)
        if task is None or task.id in seen:
            logger.warning("Skipping malformed task entry: %r", item)
            continue
        seen.add(task.id)
        tasks.append(task)

    return BoardState(
        tasks=tuple(tasks),
        show_help=_bool_or(raw.get("showHelp"), True),
        show_today=_bool_or(raw.get("showToday"), False),
    )
