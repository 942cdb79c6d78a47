# src/pomoday/core/reducer.py

"""
Task reducer: (state, command, now) -> next state.

Rules:
- a command whose target id does not exist returns the input state object
- no-op transitions (begin on WIP, stop on non-WIP, empty text) return the input object
- unknown command kinds are ignored
- the reducer never raises for user input; bad commands are silent no-ops
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import replace

from .models import DEFAULT_TAG, BoardState, Task, TaskStatus, Worklog
from .parser import Command, CommandKind, parse_command
from .ports import Clock

logger = logging.getLogger(__name__)

Handler = Callable[[BoardState, Command, Clock], BoardState]


def _replace_task(state: BoardState, updated: Task) -> BoardState:
    tasks = tuple(updated if t.id == updated.id else t for t in state.tasks)
    return replace(state, tasks=tasks)


def _with_target(
    state: BoardState, cmd: Command, change: Callable[[Task], Task]
) -> BoardState:
    if cmd.id is None:
        return state
    task = state.find(cmd.id)
    if task is None:
        logger.debug("%s: no task with id=%s", cmd.kind, cmd.id)
        return state
    updated = change(task)
    if updated is task:
        return state
    if updated.status != task.status:
        logger.debug("Task %s: %s -> %s", task.id, task.status, updated.status)
    return _replace_task(state, updated)


def _on_task(state: BoardState, cmd: Command, now: Clock) -> BoardState:
    title = (cmd.text or "").strip()
    if not title:
        return state
    task = Task(
        id=state.next_id(),
        tag=cmd.tag or DEFAULT_TAG,
        title=title,
        status=TaskStatus.WAIT,
        logs=(),
    )
    logger.debug("Task %s created tag=%s", task.id, task.tag)
    return replace(state, tasks=state.tasks + (task,))


def _on_edit(state: BoardState, cmd: Command, now: Clock) -> BoardState:
    title = (cmd.text or "").strip()
    if not title:
        return state
    return _with_target(state, cmd, lambda t: replace(t, title=title))


def _on_move(state: BoardState, cmd: Command, now: Clock) -> BoardState:
    if not cmd.tag:
        return state
    return _with_target(state, cmd, lambda t: replace(t, tag=cmd.tag))


def _on_begin(state: BoardState, cmd: Command, now: Clock) -> BoardState:
    def begin(t: Task) -> Task:
        if t.status == TaskStatus.WIP:
            return t
        return replace(t, status=TaskStatus.WIP, logs=t.logs + (Worklog(start=now()),))

    return _with_target(state, cmd, begin)


def _on_check(state: BoardState, cmd: Command, now: Clock) -> BoardState:
    def check(t: Task) -> Task:
        if t.status == TaskStatus.DONE:
            return replace(t, status=TaskStatus.WAIT)
        return replace(t, status=TaskStatus.DONE).with_log_closed(now())

    return _with_target(state, cmd, check)


def _on_flag(state: BoardState, cmd: Command, now: Clock) -> BoardState:
    def flag(t: Task) -> Task:
        status = TaskStatus.WAIT if t.status == TaskStatus.FLAG else TaskStatus.FLAG
        return replace(t, status=status).with_log_closed(now())

    return _with_target(state, cmd, flag)


def _on_stop(state: BoardState, cmd: Command, now: Clock) -> BoardState:
    def stop(t: Task) -> Task:
        if t.status != TaskStatus.WIP:
            return t
        return replace(t, status=TaskStatus.WAIT).with_log_closed(now())

    return _with_target(state, cmd, stop)


def _on_delete(state: BoardState, cmd: Command, now: Clock) -> BoardState:
    if cmd.id is None or state.find(cmd.id) is None:
        return state
    logger.debug("Task %s deleted", cmd.id)
    return replace(state, tasks=tuple(t for t in state.tasks if t.id != cmd.id))


def _on_help(state: BoardState, cmd: Command, now: Clock) -> BoardState:
    return replace(state, show_help=True)


def _on_close_help(state: BoardState, cmd: Command, now: Clock) -> BoardState:
    return replace(state, show_help=False)


def _on_today(state: BoardState, cmd: Command, now: Clock) -> BoardState:
    return replace(state, show_today=not state.show_today)


_HANDLERS: dict[str, Handler] = {
    CommandKind.TASK: _on_task,
    CommandKind.EDIT: _on_edit,
    CommandKind.MOVE: _on_move,
    CommandKind.BEGIN: _on_begin,
    CommandKind.CHECK: _on_check,
    CommandKind.FLAG: _on_flag,
    CommandKind.STOP: _on_stop,
    CommandKind.DELETE: _on_delete,
    CommandKind.HELP: _on_help,
    CommandKind.CLOSE_HELP: _on_close_help,
    CommandKind.TODAY: _on_today,
}


def apply_command(state: BoardState, command: Command, now: Clock) -> BoardState:
    """Apply one parsed command to `state`."""
    handler = _HANDLERS.get(str(getattr(command, "kind", "")))
    if handler is None:
        logger.debug("Ignoring unknown command kind: %r", getattr(command, "kind", None))
        return state
    return handler(state, command, now)


def apply_input(state: BoardState, line: str, now: Clock) -> BoardState:
    """Parse `line` and apply it; unparseable input leaves the state untouched."""
    cmd = parse_command(line)
    if cmd is None:
        return state
    return apply_command(state, cmd, now)
