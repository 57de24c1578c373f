"""Persistent JSON config helpers.

Stores interaction defaults: double-click timing, whether default behaviors
broadcast events, and whether any-motion mouse reporting is requested.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "tuipointer"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

DEFAULT_DOUBLE_CLICK_SECONDS = 0.0
MAX_DOUBLE_CLICK_SECONDS = 5.0

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
    except (OSError, ValueError):
        logger.debug("config_load_failed path=%s", CONFIG_PATH, exc_info=True)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem errors are logged and otherwise ignored so an unwritable
    config directory never breaks interaction handling.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError:
        logger.debug("config_save_failed path=%s", CONFIG_PATH, exc_info=True)


def load_double_click_seconds() -> float:
    """Return the double-click window in seconds.

    Only numbers in ``[0, MAX_DOUBLE_CLICK_SECONDS]`` are accepted; ``0``
    disables double-click detection.
    """
    value = load_config().get("double_click_seconds")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return DEFAULT_DOUBLE_CLICK_SECONDS
    if value < 0 or value > MAX_DOUBLE_CLICK_SECONDS:
        return DEFAULT_DOUBLE_CLICK_SECONDS
    return float(value)


def save_double_click_seconds(seconds: float) -> None:
    clamped = max(0.0, min(MAX_DOUBLE_CLICK_SECONDS, float(seconds)))
    config = load_config()
    config["double_click_seconds"] = round(clamped, 3)
    save_config(config)


def load_emit_messages() -> bool:
    """Return whether newly built behaviors broadcast events by default.

    Only explicit boolean values are accepted; anything else means ``False``.
    """
    value = load_config().get("emit_messages")
    return value if isinstance(value, bool) else False


def save_emit_messages(emit_messages: bool) -> None:
    config = load_config()
    config["emit_messages"] = bool(emit_messages)
    save_config(config)


def load_motion_reporting() -> bool:
    """Return whether any-motion reporting (needed for hover) is requested."""
    value = load_config().get("motion_reporting")
    return value if isinstance(value, bool) else True
