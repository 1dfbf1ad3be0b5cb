"""Runtime layer: persisted preferences and the interactive browser."""

from __future__ import annotations

from .browser import apply_key, apply_keys, run_browser

__all__ = ["apply_key", "apply_keys", "run_browser"]
