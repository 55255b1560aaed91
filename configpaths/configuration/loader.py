"""Settings loading, merging, and caching."""

from __future__ import annotations

import copy
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

try:
    import tomllib  # Python 3.11+
except ImportError:  # pragma: no cover
    import tomli as tomllib

from configpaths.discovery import find_config_path
from configpaths.logging import debug
from configpaths.paths import absolute_directory

from .defaults import DEFAULT_SETTINGS_DICT, SETTINGS_ENV_VAR, SETTINGS_FILE_NAME
from .errors import ConfigurationError
from .schema import ConfigPathsSettings


@lru_cache(maxsize=1)
def locate_settings_file() -> Optional[Path]:
    """Locate the settings file: env override first, then the nearest ancestor."""
    env_override = os.environ.get(SETTINGS_ENV_VAR)
    if env_override:
        path = Path(env_override).expanduser()
        if not path.exists():
            raise ConfigurationError(
                f"{SETTINGS_ENV_VAR} points to missing file: {path}"
            )
        return path.resolve()

    candidate = find_config_path(absolute_directory(), [SETTINGS_FILE_NAME])
    if candidate is None:
        return None
    debug(f"settings for {candidate.describes_directory}")
    return Path(candidate.config_filename).resolve()


def load_toml(path: Path) -> Dict[str, Any]:
    """Load a TOML file with helpful error reporting."""
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Invalid TOML in {path}: {exc}") from exc
    except OSError as exc:  # pragma: no cover - file permission/path errors
        raise ConfigurationError(f"Cannot read settings file {path}: {exc}") from exc


def merge_configs(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Deep merge dictionaries, returning a new dict."""
    result: Dict[str, Any] = copy.deepcopy(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = copy.deepcopy(value)
    return result


def load_settings() -> ConfigPathsSettings:
    """Load and validate the effective settings."""
    settings_data = copy.deepcopy(DEFAULT_SETTINGS_DICT)
    if settings_path := locate_settings_file():
        debug(f"loading settings from {settings_path}")
        settings_data = merge_configs(settings_data, load_toml(settings_path))
    try:
        return ConfigPathsSettings.from_dict(settings_data)
    except ValueError as exc:
        raise ConfigurationError(f"Invalid settings: {exc}") from exc


_SETTINGS_INSTANCE: Optional[ConfigPathsSettings] = None


def get_settings() -> ConfigPathsSettings:
    """Get the cached settings object."""
    global _SETTINGS_INSTANCE
    if _SETTINGS_INSTANCE is None:
        _SETTINGS_INSTANCE = load_settings()
    return _SETTINGS_INSTANCE


def reload_settings() -> ConfigPathsSettings:
    """Force reload settings from disk."""
    global _SETTINGS_INSTANCE
    locate_settings_file.cache_clear()
    _SETTINGS_INSTANCE = load_settings()
    return _SETTINGS_INSTANCE


def clear_settings_cache() -> None:
    global _SETTINGS_INSTANCE
    locate_settings_file.cache_clear()
    _SETTINGS_INSTANCE = None
