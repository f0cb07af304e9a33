"""Configuration loader for IdleNudge.

Handles loading, saving, and default creation of config.json, and turns
the raw dictionary into a typed ReminderConfig.
Resolves platform-appropriate data directories:
  - macOS:   ~/Library/Application Support/IdleNudge
  - Windows: %APPDATA%/IdleNudge
  - Other:   ~/.idlenudge
"""

import json
import logging
import math
import os
import sys
from pathlib import Path
from typing import Any

from idlenudge.core.models import (
    DEFAULT_APPEND_TEXT,
    DEFAULT_COOLDOWN_MS,
    DEFAULT_TOAST_MESSAGE,
    IDLE_EVENT_TYPE,
    ReminderConfig,
    ReminderMode,
    ToastVariant,
)

logger = logging.getLogger(__name__)

HOST_KINDS = ("console", "tray")


def get_data_directory() -> Path:
    """Return the per-user directory holding IdleNudge's config.json."""
    home = Path.home()
    if sys.platform == "win32":
        appdata = os.environ.get("APPDATA")
        roaming = Path(appdata) if appdata else home / "AppData" / "Roaming"
        return roaming / "IdleNudge"
    if sys.platform == "darwin":
        return home / "Library" / "Application Support" / "IdleNudge"
    return home / ".idlenudge"


def get_default_config() -> dict[str, Any]:
    """Return the default configuration dictionary."""
    return {
        "mode": ReminderMode.TOAST.value,
        "cooldown_ms": DEFAULT_COOLDOWN_MS,
        "event_type": IDLE_EVENT_TYPE,
        "toast_message": DEFAULT_TOAST_MESSAGE,
        "toast_variant": ToastVariant.INFO.value,
        "append_text": DEFAULT_APPEND_TEXT,
        "host": "console",
    }


def get_default_config_path() -> Path:
    """Return the default path for config.json."""
    return get_data_directory() / "config.json"


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Read config.json and layer it over the defaults.

    A missing file is created with the defaults.  An unreadable file, or
    one whose top level is not an object, is logged and ignored.  Keys
    absent from the file keep their default values.
    """
    config_path = Path(path) if path is not None else get_default_config_path()
    config = get_default_config()

    if not config_path.exists():
        logger.info("No config at %s; writing defaults.", config_path)
        save_config(config, config_path)
        return config

    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError) as exc:
        logger.error("Cannot read config %s (%s); using defaults.", config_path, exc)
        return config
    if not isinstance(data, dict):
        logger.error("Config %s is not a JSON object; using defaults.", config_path)
        return config

    config.update(data)
    return config


def save_config(config: dict[str, Any], path: str | Path | None = None) -> None:
    """Write *config* as indented JSON, creating parent directories."""
    config_path = Path(path) if path is not None else get_default_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    text = json.dumps(config, indent=2, ensure_ascii=False)
    config_path.write_text(text + "\n", encoding="utf-8")


def _text_setting(raw: dict[str, Any], key: str, default: str) -> str:
    """Return ``raw[key]`` if it is a string, else *default* (with a warning)."""
    value = raw.get(key, default)
    if not isinstance(value, str):
        logger.warning("Invalid %s %r; falling back to the default.", key, value)
        return default
    return value


def _valid_cooldown(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value >= 0


def parse_reminder_config(raw: dict[str, Any]) -> ReminderConfig:
    """Convert a raw config dictionary into a ReminderConfig.

    Missing keys take their defaults.  Invalid values are logged and
    replaced by the default rather than rejected.
    """
    defaults = ReminderConfig()

    mode = defaults.mode
    raw_mode = raw.get("mode", mode.value)
    try:
        mode = ReminderMode(raw_mode)
    except ValueError:
        logger.warning("Unknown reminder mode %r; falling back to %r.", raw_mode, mode.value)

    variant = defaults.toast_variant
    raw_variant = raw.get("toast_variant", variant.value)
    try:
        variant = ToastVariant(raw_variant)
    except ValueError:
        logger.warning("Unknown toast variant %r; falling back to %r.", raw_variant, variant.value)

    cooldown = raw.get("cooldown_ms", defaults.cooldown_ms)
    if not _valid_cooldown(cooldown):
        logger.warning(
            "Invalid cooldown_ms %r; falling back to %s.", cooldown, defaults.cooldown_ms
        )
        cooldown = defaults.cooldown_ms

    host = raw.get("host", defaults.host)
    if host not in HOST_KINDS:
        logger.warning("Unknown host %r; falling back to %r.", host, defaults.host)
        host = defaults.host

    event_type = _text_setting(raw, "event_type", defaults.event_type)
    if not event_type:
        logger.warning("Empty event_type; falling back to %r.", defaults.event_type)
        event_type = defaults.event_type

    return ReminderConfig(
        mode=mode,
        cooldown_ms=cooldown,
        event_type=event_type,
        toast_message=_text_setting(raw, "toast_message", defaults.toast_message),
        toast_variant=variant,
        append_text=_text_setting(raw, "append_text", defaults.append_text),
        host=host,
    )
