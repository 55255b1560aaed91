"""Public interface for the configpaths settings system."""

from __future__ import annotations

from .errors import ConfigurationError
from .loader import (
    clear_settings_cache,
    get_settings,
    load_settings,
    locate_settings_file,
    merge_configs,
    reload_settings,
)

__all__ = [
    "ConfigurationError",
    "clear_settings_cache",
    "get_settings",
    "load_settings",
    "locate_settings_file",
    "merge_configs",
    "reload_settings",
]
