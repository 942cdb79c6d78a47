# src/pomoday/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Loggers that fire once per tick.
_CHATTY = ("pomoday.core.ticker", "pomoday.connectors.live_counter")


class _ConsoleNoiseFilter(logging.Filter):
    """Own logs pass; ticker logs need WARNING; everything else (py.warnings included) needs ERROR."""

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name
        if name.startswith(_CHATTY):
            return record.levelno >= logging.WARNING
        if name.startswith("pomoday."):
            return True
        return record.levelno >= logging.ERROR


def _console_handler(level: int, fmt: logging.Formatter) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(fmt)
    handler.addFilter(_ConsoleNoiseFilter())
    return handler


def _file_handler(path: Path, level: int, fmt: logging.Formatter) -> logging.Handler:
    handler = logging.FileHandler(str(path), encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(fmt)
    return handler


def setup_logging(
    *,
    log_dir: str | Path = ".local/pomoday",
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Replace the root handlers with a filtered stderr handler and `<log_dir>/pomoday.log`.

    The console stays at WARNING by default so log lines don't tear the board redraw.
    Returns the log file path.
    """
    log_file = Path(log_dir) / "pomoday.log"
    log_file.parent.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    root.addHandler(_console_handler(console_level, fmt))
    root.addHandler(_file_handler(log_file, file_level, fmt))
    logging.captureWarnings(True)

    return log_file
