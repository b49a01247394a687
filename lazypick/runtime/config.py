"""Persistent JSON config helpers.

Stores the preferred UI theme and the list viewport height.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "lazypick"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
MIN_VIEWPORT_ROWS = 1
MAX_VIEWPORT_ROWS = 50

logger = logging.getLogger(__name__)


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.debug("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem/serialization errors are logged and otherwise ignored so a
    read-only config directory never breaks the picker.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except (OSError, TypeError, ValueError) as exc:
        logger.warning("could not save config %s: %s", CONFIG_PATH, exc)


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def save_theme_name(theme_name: str) -> None:
    """Persist selected UI theme name."""
    stripped = str(theme_name).strip()
    if not stripped:
        return
    config = load_config()
    config["theme"] = stripped
    save_config(config)


def _coerce_viewport_rows(value: object) -> int | None:
    # Booleans are ints in Python; reject them explicitly.
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    if not MIN_VIEWPORT_ROWS <= value <= MAX_VIEWPORT_ROWS:
        return None
    return value


def load_viewport_rows() -> int | None:
    """Load the persisted list height, ``None`` when unset or out of range."""
    return _coerce_viewport_rows(load_config().get("viewport_rows"))


def save_viewport_rows(rows: int) -> None:
    """Persist list height; values outside the accepted range are ignored."""
    coerced = _coerce_viewport_rows(rows)
    if coerced is None:
        return
    config = load_config()
    config["viewport_rows"] = coerced
    save_config(config)
