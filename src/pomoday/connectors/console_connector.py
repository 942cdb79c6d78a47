# src/pomoday/connectors/console_connector.py

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import save_board
from ..core.parser import parse_command
from ..core.reducer import apply_command
from ..core.state import AppState
from .render import render_screen

logger = logging.getLogger(__name__)

EXIT_WORDS = ("/exit", "/quit")


def _clear_screen() -> None:
    """Best-effort: only clear when attached to a terminal."""
    try:
        if sys.stdout.isatty():
            sys.stdout.write("\033[H\033[2J")
            sys.stdout.flush()
    except (OSError, ValueError):
        pass


def submit_line(state: AppState, line: str) -> bool:
    """
    Parse + apply one input line and persist the result.

    Returns True when the board changed. Unrecognised input is ignored.
    """
    cmd = parse_command(line)
    if cmd is None:
        logger.debug("Unrecognised input: %r", line)
        return False

    with state.lock:
        before = state.board
        after = apply_command(before, cmd, state.clock)
        state.board = after

    if after is before:
        return False

    logger.debug("Applied %s id=%s", cmd.kind, cmd.id)
    save_board(state)
    return True


def redraw(state: AppState) -> None:
    if getattr(state.settings, "clear_screen", True):
        _clear_screen()
    print(render_screen(state.snapshot(), state.now()))


def run_console_loop(state: AppState) -> None:
    logger.info("Console connector started.")
    redraw(state)

    while True:
        try:
            user_input = input("\n> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            redraw(state)
            continue

        if user_input.lower() in EXIT_WORDS:
            logger.info("Console exit command received.")
            break

        try:
            submit_line(state, user_input)
        except Exception:
            logger.exception("Command handling crashed.")

        redraw(state)

    logger.info("Console connector finished.")
