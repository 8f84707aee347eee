"""Read-only JSON config helpers.

Supplies default filter, order, and buffer-closing preference.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import re
from pathlib import Path

from platformdirs import user_config_dir

from .ordering import DEFAULT_PREDICATE_NAME, PREDICATES

APP_NAME = "dircycle"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


def load_config() -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def load_filter_pattern() -> str | None:
    """Return the configured file-name regex, or ``None`` when unset/invalid."""
    value = load_config().get("filter")
    if not isinstance(value, str) or not value:
        return None
    try:
        re.compile(value)
    except re.error:
        return None
    return value


def load_order_name() -> str:
    """Return the configured predicate name, falling back to ``"older"``."""
    value = load_config().get("order")
    if not isinstance(value, str):
        return DEFAULT_PREDICATE_NAME
    name = value.strip().lower()
    return name if name in PREDICATES else DEFAULT_PREDICATE_NAME


def load_close_previous() -> bool:
    """Return whether unmodified previous buffers are closed while cycling.

    Only explicit boolean values are accepted; anything else means ``True``.
    """
    value = load_config().get("close_previous")
    return value if isinstance(value, bool) else True
