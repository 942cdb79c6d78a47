# src/pomoday/core/ticker.py

from __future__ import annotations

"""
Live elapsed ticker.

A small polling loop that, every interval:
- takes a snapshot of the board,
- recomputes elapsed seconds for WIP tasks,
- hands the mapping to a callback.

It never touches stored worklogs. With no WIP task it does nothing that tick.
What the callback shows (terminal title, status line) belongs to the connector.
"""

import asyncio
import logging
from collections.abc import Callable

from .models import BoardState, TaskStatus
from .ports import Clock
from .views import elapsed_seconds

logger = logging.getLogger(__name__)

TickCallback = Callable[[dict[int, float]], None]


def live_elapsed(state: BoardState, now_ms: int) -> dict[int, float]:
    """Elapsed seconds per WIP task id."""
    return {
        t.id: elapsed_seconds(t, now_ms)
        for t in state.tasks
        if t.status == TaskStatus.WIP
    }


async def run_elapsed_ticker(
        get_state: Callable[[], BoardState],
        clock: Clock,
        on_tick: TickCallback,
        *,
        interval_seconds: float = 1.0,
) -> None:
    """
    Every interval_seconds:
    - read the current board through get_state()
    - compute live_elapsed(...)
    - call on_tick(mapping) if at least one task is WIP

    A failing callback is logged and the loop keeps going.
    To stop the ticker, cancel the coroutine/task.
    """
    sleep_s = max(0.1, float(interval_seconds))

    while True:
        try:
            elapsed = live_elapsed(get_state(), clock())
        except Exception:
            logger.exception("live_elapsed failed")
            elapsed = {}

        if elapsed:
            try:
                on_tick(elapsed)
            except Exception:
                logger.exception("tick callback failed")

        await asyncio.sleep(sleep_s)
