# src/pomoday/storage/errors.py

from __future__ import annotations


class StoreError(RuntimeError):
    """Unknown backend, or a saved blob that cannot be decoded."""
