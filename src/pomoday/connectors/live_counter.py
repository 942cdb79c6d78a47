# src/pomoday/connectors/live_counter.py

from __future__ import annotations

import asyncio
import contextlib
import logging
import sys
import threading
from dataclasses import dataclass
from typing import TextIO

from ..core.state import AppState
from ..core.ticker import TickCallback, run_elapsed_ticker
from .render import format_counter

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class TickerBackgroundRunner:
    thread: threading.Thread
    loop: asyncio.AbstractEventLoop
    task: asyncio.Task[None]

    def stop(self) -> None:
        try:
            self.loop.call_soon_threadsafe(self.task.cancel)
        except RuntimeError:
            logger.debug("Ticker loop already closed.", exc_info=True)

    def join(self, timeout: float | None = None) -> None:
        self.thread.join(timeout=timeout)


def title_writer(app_name: str, stream: TextIO | None = None) -> TickCallback:
    """
    Tick callback that shows the live counters in the terminal title bar.

    The title is the only place we can draw without disturbing the input() prompt.
    """
    out = stream or sys.stdout

    def on_tick(elapsed: dict[int, float]) -> None:
        counters = "  ".join(f"#{tid} {format_counter(sec)}" for tid, sec in sorted(elapsed.items()))
        out.write(f"\033]0;{app_name} · {counters}\007")
        out.flush()

    return on_tick


def start_ticker_in_background(
    state: AppState,
    on_tick: TickCallback,
    *,
    interval_seconds: float = 1.0,
) -> TickerBackgroundRunner | None:
    """
    Run the elapsed ticker on its own event loop in a daemon thread.

    Why a thread:
    - console REPL is blocking (input()).
    - the ticker is an asyncio loop and wants its own event loop.
    """
    ready = threading.Event()
    holder: dict[str, object] = {}

    def runner() -> None:
        loop = asyncio.new_event_loop()
        asyncio.set_event_loop(loop)
        task = loop.create_task(
            run_elapsed_ticker(
                state.snapshot,
                state.clock,
                on_tick,
                interval_seconds=interval_seconds,
            )
        )

        holder["loop"] = loop
        holder["task"] = task
        ready.set()

        try:
            with contextlib.suppress(asyncio.CancelledError):
                loop.run_until_complete(task)
        finally:
            with contextlib.suppress(RuntimeError):
                loop.close()

    t = threading.Thread(target=runner, name="pomoday-ticker", daemon=True)
    t.start()

    ready.wait(timeout=5.0)
    loop = holder.get("loop")
    task = holder.get("task")

    if not isinstance(loop, asyncio.AbstractEventLoop) or not isinstance(task, asyncio.Task):
        logger.error("Ticker thread did not initialize properly.")
        return None

    logger.info("Ticker background thread started (interval=%.2fs).", interval_seconds)
    return TickerBackgroundRunner(thread=t, loop=loop, task=task)
