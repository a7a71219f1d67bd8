"""Persistent JSON config helpers.

Reads listing defaults: theme name, icon display, size format, grouping,
and stat worker count. All access is defensive: malformed or missing config
falls back safely and command-line flags always win.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .listing_model.types import GROUPING_POLICIES
from .ui_theme import available_theme_names

APP_NAME = "lazyls"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
LEGACY_CONFIG_PATH = Path.home() / ".config" / "lazyls.json"
CONFIG_PATH = DEFAULT_CONFIG_PATH


def _load_config_path() -> Path:
    """Return preferred config path, falling back to legacy location when needed."""
    if CONFIG_PATH.exists():
        return CONFIG_PATH
    if CONFIG_PATH == DEFAULT_CONFIG_PATH and LEGACY_CONFIG_PATH.exists():
        return LEGACY_CONFIG_PATH
    return CONFIG_PATH


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(_load_config_path().read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


@dataclass(frozen=True)
class ListingDefaults:
    """Config-backed defaults applied before command-line flags."""

    theme: str | None = None
    icons: bool = True
    human_readable: bool = True
    grouping: str = "mixed"
    workers: int = 1


def _bool_value(data: dict[str, object], key: str, default: bool) -> bool:
    """Only explicit booleans are accepted; other types keep ``default``."""
    value = data.get(key)
    return value if isinstance(value, bool) else default


def load_listing_defaults() -> ListingDefaults:
    """Return validated listing defaults from the config file."""
    data = load_config()

    theme = data.get("theme")
    if not isinstance(theme, str) or theme.strip().lower() not in available_theme_names():
        theme = None

    grouping = data.get("group")
    if not isinstance(grouping, str) or grouping not in GROUPING_POLICIES:
        grouping = "mixed"

    workers = data.get("workers")
    if isinstance(workers, bool) or not isinstance(workers, int) or workers < 1:
        workers = 1

    return ListingDefaults(
        theme=theme,
        icons=_bool_value(data, "icons", True),
        human_readable=_bool_value(data, "human_readable", True),
        grouping=grouping,
        workers=workers,
    )


__all__ = [
    "CONFIG_PATH",
    "DEFAULT_CONFIG_PATH",
    "LEGACY_CONFIG_PATH",
    "load_config",
    "ListingDefaults",
    "load_listing_defaults",
]
