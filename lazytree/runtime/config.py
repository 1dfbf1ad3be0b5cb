"""Persisted browsing preferences.

The config file holds one JSON object with the walk's ``show_hidden`` flag
and the ``theme`` name. Reading never fails: a missing or malformed file,
or a value of the wrong type, yields the default for that key. Unknown keys
are kept when saving so other tools can share the file.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from ..ui_theme import DEFAULT_THEME, normalize_theme_name

logger = logging.getLogger(__name__)

APP_NAME = "lazytree"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


@dataclass(frozen=True)
class Preferences:
    show_hidden: bool = False
    theme: str = DEFAULT_THEME.name


def _read_config() -> dict[str, object]:
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        logger.debug("Ignoring config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def load_preferences() -> Preferences:
    """Return the saved preferences, with defaults for anything unusable.

    Theme names are matched case-insensitively against the known themes;
    an unknown name falls back to the default theme.
    """
    data = _read_config()
    show_hidden = data.get("show_hidden")
    theme = data.get("theme")
    return Preferences(
        show_hidden=show_hidden if isinstance(show_hidden, bool) else False,
        theme=normalize_theme_name(theme if isinstance(theme, str) else None),
    )


def save_preferences(preferences: Preferences) -> bool:
    """Write ``preferences`` into the config file.

    Returns whether the write succeeded; failures are logged, not raised,
    so browsing still works with a read-only config directory.
    """
    data = _read_config()
    data["show_hidden"] = bool(preferences.show_hidden)
    data["theme"] = normalize_theme_name(preferences.theme)
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        logger.warning("Could not save preferences to %s: %s", CONFIG_PATH, exc)
        return False
    return True


__all__ = [
    "CONFIG_PATH",
    "Preferences",
    "load_preferences",
    "save_preferences",
]
