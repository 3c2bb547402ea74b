"""
Configuration for tagdown.

Tunable defaults for value coercion and path addressing. Loaded from:
1. Defaults (this file)
2. Config file ($XDG_CONFIG_HOME/tagdown/config.toml) if it exists
3. Environment variables (TAGDOWN_*) override file
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


@dataclass
class TagdownConfig:
    """Root config with all settings."""

    truthy_tokens: tuple[str, ...] = field(default=("true", "yes", "1"))
    ellipsis: str = "…"
    default_name: str = "unnamed"
    path_separator: str = "."


def get_config_path() -> Path:
    """Get config file path, respecting XDG."""
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "tagdown" / "config.toml"
    return Path.home() / ".config" / "tagdown" / "config.toml"


def load_config() -> TagdownConfig:
    """Load config from file if it exists, else return defaults."""
    config = TagdownConfig()
    path = get_config_path()

    if path.exists():
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
            config = _apply_toml(TagdownConfig(), data)
        except (OSError, tomllib.TOMLDecodeError, TypeError, ValueError) as exc:
            logger.warning("Ignoring unreadable config file %s: %s", path, exc)

    return _apply_env(config)


def _apply_toml(config: TagdownConfig, data: dict[str, Any]) -> TagdownConfig:
    """Apply the [tagdown] table of a toml document to config."""
    section = data.get("tagdown", data)
    if "truthy_tokens" in section:
        config.truthy_tokens = tuple(str(token) for token in section["truthy_tokens"])
    if "ellipsis" in section:
        config.ellipsis = str(section["ellipsis"])
    if "default_name" in section:
        config.default_name = str(section["default_name"])
    if "path_separator" in section:
        separator = str(section["path_separator"])
        if not separator:
            msg = "path_separator must not be empty"
            raise ValueError(msg)
        config.path_separator = separator
    return config


def _apply_env(config: TagdownConfig) -> TagdownConfig:
    """Apply environment variable overrides."""
    env_map: dict[str, str] = {
        "TAGDOWN_ELLIPSIS": "ellipsis",
        "TAGDOWN_DEFAULT_NAME": "default_name",
        "TAGDOWN_PATH_SEPARATOR": "path_separator",
    }

    for env_key, attr in env_map.items():
        val = os.environ.get(env_key)
        if val is None:
            continue
        if attr == "path_separator" and not val:
            logger.warning("Ignoring empty %s", env_key)
            continue
        setattr(config, attr, val)

    tokens = os.environ.get("TAGDOWN_TRUTHY_TOKENS")
    if tokens is not None:
        config.truthy_tokens = tuple(token.strip() for token in tokens.split(","))

    return config


# Module-level config instance, loaded on first use
_config: TagdownConfig | None = None


def get_config() -> TagdownConfig:
    """Get the global config instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Forget the cached config so the next access reloads it."""
    global _config
    _config = None
