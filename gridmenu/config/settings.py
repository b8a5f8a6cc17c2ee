"""Settings storage for menu defaults."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping


SETTINGS_PATH = Path(
    os.environ.get(
        "GRIDMENU_SETTINGS_PATH",
        Path.home() / ".config" / "gridmenu" / "settings.json",
    )
)

# Default values - use these constants instead of hardcoding values elsewhere
DEFAULT_MAX_COLUMNS = 1
DEFAULT_CELL_WIDTH = 0
DEFAULT_COLUMN_SEPARATOR = "|"
DEFAULT_ROW_SEPARATOR = "-"
DEFAULT_EXIT_KEY = 0x1B
DEFAULT_DIRECTIONAL_KEYS = ["a", "w", "d", "s"]
DEFAULT_PAGE_TITLE_FORMAT = "==== {text} ===="
DEFAULT_END_MESSAGE = "Press the exit key to return..."

DEFAULT_SETTINGS: dict[str, Any] = {
    "max_columns": DEFAULT_MAX_COLUMNS,
    "cell_width": DEFAULT_CELL_WIDTH,
    "alignment": "left",
    "column_separator": DEFAULT_COLUMN_SEPARATOR,
    "row_separator": DEFAULT_ROW_SEPARATOR,
    "show_index": False,
    "auto_width": True,
    "confirm_key": None,
    "exit_key": DEFAULT_EXIT_KEY,
    "directional_keys": DEFAULT_DIRECTIONAL_KEYS,
    "show_page_title": False,
    "page_title_format": DEFAULT_PAGE_TITLE_FORMAT,
    "wait_for_acknowledgement": False,
    "end_message": DEFAULT_END_MESSAGE,
}


# Hand-edited files often spell booleans as strings.
_FALSE_WORDS = frozenset({"", "0", "false", "no", "off"})


@dataclass
class SettingsStore:
    values: dict[str, Any] = field(default_factory=dict)

    def reset(self, overrides: Mapping[str, Any] | None = None) -> None:
        """Replace the values with DEFAULT_SETTINGS plus ``overrides``."""
        self.values = {**DEFAULT_SETTINGS, **(overrides or {})}


settings_store = SettingsStore()


def _to_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() not in _FALSE_WORDS
    return bool(value)


def _read_overrides(path: Path) -> dict[str, Any]:
    """The JSON object stored at ``path``; empty when missing or unusable."""
    if not path.is_file():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def load_settings() -> None:
    settings_store.reset(_read_overrides(SETTINGS_PATH))


def save_settings() -> None:
    SETTINGS_PATH.parent.mkdir(parents=True, exist_ok=True)
    payload = json.dumps(settings_store.values, indent=2, sort_keys=True)
    SETTINGS_PATH.write_text(payload + "\n", encoding="utf-8")


def get_setting(key: str, default: Any | None = None) -> Any:
    return settings_store.values.get(key, default)


def set_setting(key: str, value: Any, *, persist: bool = True) -> None:
    """Change one value; written to SETTINGS_PATH unless ``persist`` is off."""
    settings_store.values[key] = value
    if persist:
        save_settings()


def get_bool(key: str, default: bool = False) -> bool:
    return _to_bool(get_setting(key, default))


def set_bool(key: str, value: Any, *, persist: bool = True) -> None:
    set_setting(key, _to_bool(value), persist=persist)


def get_int(key: str, default: int = 0) -> int:
    try:
        return int(get_setting(key, default))
    except (TypeError, ValueError):
        return default


load_settings()
