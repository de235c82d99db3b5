"""JSON-based UI preferences for the IFC calendar window."""

import json
import logging
import os

log = logging.getLogger(__name__)

SETTINGS_ENV = "IFC_CALENDAR_SETTINGS"
_SETTINGS_PATH = os.path.join(os.path.expanduser("~"), ".ifc-calendar-settings.json")

_DEFAULTS = {
    "dark_mode": False,
    "window_width": None,
    "window_height": None,
    "show_gregorian": True,
}


def settings_path(path: str | None = None) -> str:
    """Resolve the settings file: explicit path, then env var, then ~."""
    if path:
        return path
    return os.environ.get(SETTINGS_ENV) or _SETTINGS_PATH


def load_settings(path: str | None = None) -> dict:
    """Load settings from disk, returning defaults for missing keys."""
    settings = dict(_DEFAULTS)
    path = settings_path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            stored = json.load(f)
    except FileNotFoundError:
        return settings
    except (json.JSONDecodeError, OSError) as exc:
        log.warning("Ignoring unreadable settings file %s: %s", path, exc)
        return settings

    if not isinstance(stored, dict):
        log.warning("Ignoring settings file %s: expected a JSON object", path)
        return settings
    for key in ("dark_mode", "show_gregorian"):
        if key in stored and isinstance(stored[key], bool):
            settings[key] = stored[key]
    for key in ("window_width", "window_height"):
        # bool is an int subclass; reject it explicitly
        if key in stored and isinstance(stored[key], int) and not isinstance(stored[key], bool):
            settings[key] = stored[key]
    return settings


def save_settings(settings: dict, path: str | None = None) -> None:
    """Persist settings to disk."""
    path = settings_path(path)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(settings, f, indent=2)
    log.debug("Saved settings to %s", path)
