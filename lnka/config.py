"""Persistent JSON preferences.

Stores the default list height and whether changes are confirmed before
they are applied. The file is only read; all access is defensive so a
malformed or missing config falls back to built-in defaults.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .selection import DEFAULT_MAX_VISIBLE_ITEMS

APP_NAME = "lnka"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


@dataclass(frozen=True)
class Preferences:
    """Config values after validation."""

    max_visible_items: int = DEFAULT_MAX_VISIBLE_ITEMS
    confirm_changes: bool = True


def load_config(path: Path | None = None) -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    config_path = CONFIG_PATH if path is None else path
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def _coerce_positive_int(value: object, default: int) -> int:
    """Booleans and non-integers are invalid; so are values below one."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        return default
    return value


def load_preferences(path: Path | None = None) -> Preferences:
    """Return validated preferences, using defaults for anything invalid."""
    data = load_config(path)
    confirm = data.get("confirm_changes")
    return Preferences(
        max_visible_items=_coerce_positive_int(data.get("max_visible_items"), DEFAULT_MAX_VISIBLE_ITEMS),
        confirm_changes=confirm if isinstance(confirm, bool) else True,
    )
