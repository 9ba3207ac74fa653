"""Persistent JSON config helpers.

Stores default sort preferences applied when no sort flag is given.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

from .flags import DirOrderFlag, Flags, SortFlag, SortOrder

APP_NAME = "lazyls"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
SORTING_KEY = "sorting"


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Any filesystem/serialization error is ignored to keep listing behavior
    non-fatal when config cannot be written.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except Exception:
        pass


def _sorting_section() -> dict[str, object]:
    section = load_config().get(SORTING_KEY)
    return section if isinstance(section, dict) else {}


def _parse_or_none(enum_type, value: object):
    """Parse a persisted enum word; non-strings and unknown words yield ``None``."""
    if not isinstance(value, str):
        return None
    try:
        return enum_type.from_arg(value)
    except ValueError:
        return None


def load_sort_flags() -> Flags:
    """Return persisted sort defaults, using ``Flags`` defaults for bad or missing keys."""
    section = _sorting_section()
    defaults = Flags()

    directory_order = _parse_or_none(DirOrderFlag, section.get("dir-grouping"))
    sort_by = _parse_or_none(SortFlag, section.get("column"))
    reverse = section.get("reverse")
    sort_order = SortOrder.from_reverse(reverse) if isinstance(reverse, bool) else defaults.sort_order

    return Flags(
        directory_order=directory_order or defaults.directory_order,
        sort_by=sort_by or defaults.sort_by,
        sort_order=sort_order,
    )


def save_sort_flags(flags: Flags) -> None:
    """Persist ``flags`` as the default sort preferences, keeping other keys."""
    config = load_config()
    config[SORTING_KEY] = {
        "column": flags.sort_by.value,
        "reverse": flags.sort_order is SortOrder.REVERSE,
        "dir-grouping": flags.directory_order.value,
    }
    save_config(config)


__all__ = [
    "CONFIG_PATH",
    "load_config",
    "save_config",
    "load_sort_flags",
    "save_sort_flags",
]
