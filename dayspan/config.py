"""Configuration file for dayspan.

The file lives at ``$XDG_CONFIG_HOME/dayspan/config.toml`` (``~/.config`` when
the variable is unset) and holds two keys, ``timezone`` and ``log_level``.
Every function takes an optional ``config_path``; None means that location.
"""

import os
import tomllib
from pathlib import Path
from typing import Any

import tomli_w

from dayspan.clock import DEFAULT_TIMEZONE, SystemClock, make_timezone
from dayspan.domain.errors import ConfigError

DEFAULT_LOG_LEVEL = "WARNING"

DEFAULTS: dict[str, Any] = {
    "timezone": DEFAULT_TIMEZONE,
    "log_level": DEFAULT_LOG_LEVEL,
}


def get_config_path() -> Path:
    base = os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config"
    return Path(base) / "dayspan" / "config.toml"


def create_default_config(config_path: Path | None = None) -> None:
    """Write the default settings, replacing any existing file."""
    path = config_path or get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    save_config(dict(DEFAULTS), path)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Read the config file.

    Raises:
        FileNotFoundError: If the file doesn't exist.
    """
    return tomllib.loads((config_path or get_config_path()).read_text(encoding="utf-8"))


def save_config(config: dict[str, Any], config_path: Path | None = None) -> None:
    """Write the config file, readable by the owner only."""
    path = config_path or get_config_path()
    path.write_bytes(tomli_w.dumps(config).encode())
    path.chmod(0o600)


def _setting(key: str, config_path: Path | None) -> str:
    try:
        config = load_config(config_path)
    except FileNotFoundError:
        config = {}
    return str(config.get(key, DEFAULTS[key]))


def get_timezone(config_path: Path | None = None) -> str:
    """Configured ambient timezone, UTC when unset."""
    return _setting("timezone", config_path)


def set_timezone(timezone: str, config_path: Path | None = None) -> None:
    """Store the ambient timezone, creating the config file if needed.

    Args:
        timezone: IANA name (e.g. "Europe/London") or a "+HH:MM" offset.
        config_path: Config file to update.

    Raises:
        ValueError: If the timezone is unknown. Nothing is written.
    """
    make_timezone(timezone)

    path = config_path or get_config_path()
    if not path.exists():
        create_default_config(path)

    config = load_config(path)
    config["timezone"] = timezone
    save_config(config, path)


def get_log_level(config_path: Path | None = None) -> str:
    return _setting("log_level", config_path).upper()


def clock_from_config(config_path: Path | None = None) -> SystemClock:
    """Build the wall clock for the configured timezone.

    Raises:
        ConfigError: If the configured timezone is unknown.
    """
    timezone = get_timezone(config_path)
    try:
        return SystemClock(timezone)
    except ValueError as e:
        raise ConfigError("timezone", timezone, str(e)) from e
