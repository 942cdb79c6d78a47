# src/pomoday/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Every value has a default, so a bare `pomoday` run works out of the box.
- Bad values fall back to defaults instead of crashing at import time.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "POMODAY"

STORE_BACKENDS = ("json", "sqlite")


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Storage ----
    data_dir: Path
    store_backend: str
    state_path: Path
    state_db_path: Path
    store_key: str

    # ---- Console ----
    live_ticker: bool
    tick_seconds: float
    clear_screen: bool

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "pomoday").strip() or "pomoday"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/pomoday"))

        store_backend = _env(_k("STORE"), "json").strip().lower()
        if store_backend not in STORE_BACKENDS:
            store_backend = "json"

        state_path = _env_path(_k("STATE_PATH"), data_dir / "state.json")
        state_db_path = _env_path(_k("STATE_DB_PATH"), data_dir / "state.sqlite3")
        store_key = _env(_k("STORE_KEY"), "pomoday").strip() or "pomoday"

        live_ticker = _env_bool(_k("LIVE_TICKER"), True)
        tick_seconds = max(0.1, _env_float(_k("TICK_SECONDS"), 1.0))
        clear_screen = _env_bool(_k("CLEAR_SCREEN"), True)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            store_backend=store_backend,
            state_path=state_path,
            state_db_path=state_db_path,
            store_key=store_key,
            live_ticker=live_ticker,
            tick_seconds=tick_seconds,
            clear_screen=clear_screen,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
