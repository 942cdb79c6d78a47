# src/pomoday/connectors/render.py

"""
Plain-text rendering for the console connector.

The core only hands over statuses and titles; glyphs, counters and panel
layout are decided here.
"""

from __future__ import annotations

from datetime import datetime

from ..core.models import BoardState, Task, TaskStatus
from ..core.views import (
    elapsed_seconds,
    group_by_tag,
    summarize,
    today_activity,
    total_activity_seconds,
)

STATUS_GLYPHS: dict[TaskStatus, str] = {
    TaskStatus.DONE: "✔",
    TaskStatus.WIP: "*",
    TaskStatus.WAIT: "□",
    TaskStatus.FLAG: "■",
}

HELP_TEXT = """\
Type a command, starting with:
  t or task     Add a new task
  b or begin    Start working on a task
  c or check    Check to mark a task as done
  d or delete   Delete a task
  e or edit     Edit a task title
  mv or move    Move a task to another tag
  fl or flag    Toggle a flag
  st or stop    Stop working on a task
  today         Show today activities

Example:
  t @work This is a new task
  task @longer-tag This is another task
  b 10  or  begin 12
  c 7   or  check 9
  d 3   or  delete 3
  e 1 this is a new task description
  mv 2 @new-tag  or  move 2 @uncategorized
  fl 2  or  flag 2
  st 1  or  stop 1

Other commands:
  close-help    Close this help text
  help          Show this help text
  /exit         Quit"""


def _pad(n: int) -> str:
    return f"{n:02d}"


def _split(seconds: float) -> tuple[int, int, int, int]:
    total = max(0, int(seconds))
    days, remain = divmod(total, 86400)
    hrs, remain = divmod(remain, 3600)
    mins, secs = divmod(remain, 60)
    return days, hrs, mins, secs


def format_counter(seconds: float) -> str:
    """Clock style: '05:07', '01:02:03', '2 days 00:10'."""
    days, hrs, mins, secs = _split(seconds)
    out = f"{_pad(hrs)}:" if hrs > 0 else ""
    out += f"{_pad(mins)}:{_pad(secs)}"
    if days > 0:
        out = f"{days} days {out}"
    return out


def format_log_duration(seconds: float) -> str:
    """Verbose style: '02 hrs 05 min 09 sec'. Zero units are skipped, seconds always shown."""
    days, hrs, mins, secs = _split(seconds)
    parts: list[str] = []
    if days > 0:
        parts.append(f"{days} days")
    if hrs > 0:
        parts.append(f"{_pad(hrs)} hrs")
    if mins > 0:
        parts.append(f"{_pad(mins)} min")
    parts.append(f"{_pad(secs)} sec")
    return " ".join(parts)


def render_task(task: Task, now_ms: int) -> str:
    glyph = STATUS_GLYPHS.get(task.status, "")
    head = f"{task.id:>4}. "
    line = f"{head}{glyph} {task.title}" if glyph else f"{head}{task.title}"

    counter = elapsed_seconds(task, now_ms)
    if task.status in (TaskStatus.WIP, TaskStatus.DONE) or int(counter) > 0:
        line += f"  {format_counter(counter)}"
    return line


def render_board(state: BoardState, now_ms: int) -> str:
    lines: list[str] = []
    for tag, tasks in group_by_tag(state.tasks).items():
        lines.append(tag)
        lines.extend(render_task(t, now_ms) for t in tasks)
        lines.append("")

    s = summarize(state.tasks)
    lines.append(f"{s.percent_done}% of all tasks complete.")
    lines.append(f"{s.done} done · {s.wip} in-progress · {s.pending} waiting")
    return "\n".join(lines)


def _local_time(ms: int) -> str:
    return datetime.fromtimestamp(ms / 1000).strftime("%H:%M:%S")


def render_today(state: BoardState, now_ms: int) -> str:
    activities = today_activity(state.tasks, now_ms)
    lines = ["Today Activities", ""]
    for i, a in enumerate(activities, start=1):
        lines.append(f"{i:>3}. {a.title}")
        span = "ON GOING" if a.end is None else format_log_duration((a.end - a.start) / 1000)
        detail = f"     {_local_time(a.start)} - {span}"
        if a.finished:
            detail += " - FINISHED"
        lines.append(detail)
    lines.append("")
    lines.append(f"Total time spent: {format_log_duration(total_activity_seconds(activities, now_ms))}")
    return "\n".join(lines)


def render_help() -> str:
    return HELP_TEXT


def render_screen(state: BoardState, now_ms: int) -> str:
    """Board first, then the side panels the flags ask for."""
    rule = "-" * 40
    blocks = [render_board(state, now_ms)]
    if state.show_today:
        blocks.append(render_today(state, now_ms))
    if state.show_help:
        blocks.append(render_help())
    return f"\n{rule}\n".join(blocks)
