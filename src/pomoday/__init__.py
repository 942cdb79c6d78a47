"""Plain-text task tracker driven by one-line commands."""

__version__ = "0.1.0"
