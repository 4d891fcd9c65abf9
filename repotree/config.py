"""Persistent JSON config helpers.

Stores default depth, exclude globs, gitignore and color preferences.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "repotree"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def _coerce_nonnegative_int(value: object) -> int:
    """Booleans and non-integers are treated as invalid and coerced to ``0``."""
    if isinstance(value, bool) or not isinstance(value, int):
        return 0
    return max(0, value)


def _settings(data: dict[str, object] | None) -> dict[str, object]:
    return load_config() if data is None else data


def load_max_depth(data: dict[str, object] | None = None) -> int:
    """Return default max depth; ``0`` means unlimited.

    Pass ``data`` from :func:`load_config` to avoid re-reading the file.
    """
    return _coerce_nonnegative_int(_settings(data).get("max_depth", 0))


def load_exclude_globs(data: dict[str, object] | None = None) -> tuple[str, ...]:
    """Return default exclude globs, dropping non-string or empty items."""
    value = _settings(data).get("exclude")
    if not isinstance(value, list):
        return ()
    return tuple(item for item in value if isinstance(item, str) and item)


def _load_bool(key: str, data: dict[str, object] | None) -> bool:
    value = _settings(data).get(key)
    return value if isinstance(value, bool) else False


def load_use_gitignore(data: dict[str, object] | None = None) -> bool:
    return _load_bool("gitignore", data)


def load_no_color(data: dict[str, object] | None = None) -> bool:
    return _load_bool("no_color", data)


def load_theme_name(data: dict[str, object] | None = None) -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    value = _settings(data).get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None
