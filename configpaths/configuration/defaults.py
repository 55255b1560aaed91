"""Built-in default settings for configpaths."""

from __future__ import annotations

from configpaths.options import DEFAULT_CONFIG_DIRECTORY_NAME

SETTINGS_FILE_NAME = "configpaths.toml"
SETTINGS_ENV_VAR = "CONFIGPATHS_SETTINGS"

DEFAULT_SETTINGS_DICT = {
    "meta": {
        "version": "1.0",
    },
    "cli": {
        "config_directory_name": DEFAULT_CONFIG_DIRECTORY_NAME,
        "file_names": [],
        "path_flavor": "native",
        "debug": False,
    },
}
