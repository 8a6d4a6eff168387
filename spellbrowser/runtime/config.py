"""User preferences read from ``config.json`` in the platform config dir.

The file is optional and never written by the browser. Each setting has its
own loader that returns ``None`` for anything missing or out of range, so a
bad value only disables that one preference.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

logger = logging.getLogger(__name__)

APP_NAME = "spellbrowser"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH


def load_config() -> dict[str, object]:
    """Return the decoded config object, or ``{}`` when there is none to use."""
    try:
        text = CONFIG_PATH.read_text(encoding="utf-8")
    except FileNotFoundError:
        return {}
    except OSError as exc:
        logger.warning("cannot read config %s: %s", CONFIG_PATH, exc)
        return {}
    try:
        data = json.loads(text)
    except ValueError as exc:
        logger.warning("ignoring malformed config %s: %s", CONFIG_PATH, exc)
        return {}
    if not isinstance(data, dict):
        logger.warning("ignoring config %s: top level is not an object", CONFIG_PATH)
        return {}
    return data


def _text_setting(key: str) -> str | None:
    value = load_config().get(key)
    if not isinstance(value, str):
        return None
    return value.strip() or None


def load_theme_name() -> str | None:
    return _text_setting("theme")


def load_catalog_path() -> Path | None:
    """Configured catalog file; ``~`` expands and relative paths sit next to the config."""
    value = _text_setting("catalog_path")
    if value is None:
        return None
    path = Path(value).expanduser()
    return path if path.is_absolute() else CONFIG_PATH.parent / path


def load_list_pane_percent() -> float | None:
    """List pane share of the screen width, accepted only strictly between 0 and 100."""
    value = load_config().get("list_pane_percent")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value) if 0 < value < 100 else None
