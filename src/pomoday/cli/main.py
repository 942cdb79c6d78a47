# src/pomoday/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs:
- the live elapsed ticker in a background thread (optional, TTY only),
- the console REPL in the main thread.
"""

from __future__ import annotations

import logging
import signal
import sys

from ..cli.bootstrap import create_initial_state, save_board
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..connectors.live_counter import TickerBackgroundRunner, start_ticker_in_background, title_writer
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def _handle_sigterm(signum, _frame) -> None:
    logger.info("Signal %s received, shutting down...", signum)
    # Unwind through run_console_loop's KeyboardInterrupt path.
    raise KeyboardInterrupt


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)

    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    state = create_initial_state(settings=settings)

    try:
        signal.signal(signal.SIGTERM, _handle_sigterm)
    except (ValueError, OSError, AttributeError):
        # Not available on every platform / outside the main thread.
        logger.debug("SIGTERM handler not installed.", exc_info=True)

    ticker: TickerBackgroundRunner | None = None
    if settings.live_ticker and sys.stdout.isatty():
        ticker = start_ticker_in_background(
            state,
            title_writer(settings.app_name),
            interval_seconds=settings.tick_seconds,
        )

    try:
        run_console_loop(state)
    finally:
        if ticker is not None:
            ticker.stop()
            ticker.join(timeout=5.0)

        save_board(state)
        logger.info("Bye.")


if __name__ == "__main__":
    main()
