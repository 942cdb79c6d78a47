# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "POMODAY_APP_NAME": "App display name, also used in the terminal title (default: pomoday).",
    "POMODAY_LOG_LEVEL": "Console logging level (default: INFO). The log file always gets DEBUG.",
    # Storage
    "POMODAY_DATA_DIR": "Local data directory for state and logs (default: .local/pomoday).",
    "POMODAY_STORE": "State backend: json | sqlite (default: json).",
    "POMODAY_STATE_PATH": "JSON state file (default: <data_dir>/state.json).",
    "POMODAY_STATE_DB_PATH": "SQLite state database (default: <data_dir>/state.sqlite3).",
    "POMODAY_STORE_KEY": "Key of the board blob inside the SQLite store (default: pomoday).",
    # Console
    "POMODAY_LIVE_TICKER": "Show live WIP counters in the terminal title (true/false, default: true).",
    "POMODAY_TICK_SECONDS": "Live counter refresh interval in seconds (default: 1.0, min 0.1).",
    "POMODAY_CLEAR_SCREEN": "Clear the terminal before each redraw (true/false, default: true).",
}
