from __future__ import annotations

from copy import deepcopy

import pytest
from pydantic import ValidationError

from configpaths.configuration import loader as loader_module
from configpaths.configuration.defaults import DEFAULT_SETTINGS_DICT, SETTINGS_ENV_VAR
from configpaths.configuration.errors import ConfigurationError
from configpaths.configuration.schema import CLIConfig, ConfigPathsSettings


def test_locate_returns_none_without_settings():
    assert loader_module.locate_settings_file() is None


def test_locate_prefers_nearest_ancestor(tmp_path, monkeypatch):
    project = tmp_path / "project"
    nested = project / "src"
    nested.mkdir(parents=True)
    (tmp_path / "configpaths.toml").write_text("", encoding="utf-8")
    settings = project / ".config" / "configpaths.toml"
    settings.parent.mkdir()
    settings.write_text("", encoding="utf-8")

    monkeypatch.chdir(nested)
    loader_module.locate_settings_file.cache_clear()

    assert loader_module.locate_settings_file() == settings.resolve()


def test_env_override_wins(tmp_path, monkeypatch):
    (tmp_path / "work" / "configpaths.toml").write_text("", encoding="utf-8")
    custom = tmp_path / "custom.toml"
    custom.write_text("", encoding="utf-8")
    monkeypatch.setenv(SETTINGS_ENV_VAR, str(custom))
    loader_module.locate_settings_file.cache_clear()

    assert loader_module.locate_settings_file() == custom.resolve()


def test_env_override_missing_file(tmp_path, monkeypatch):
    monkeypatch.setenv(SETTINGS_ENV_VAR, str(tmp_path / "missing.toml"))
    loader_module.locate_settings_file.cache_clear()

    with pytest.raises(ConfigurationError, match="missing file"):
        loader_module.locate_settings_file()


def test_load_settings_merges_file_over_defaults(tmp_path):
    (tmp_path / "work" / "configpaths.toml").write_text(
        '[cli]\nfile_names = [".toolrc", ".toolrc.toml"]\n', encoding="utf-8"
    )

    settings = loader_module.reload_settings()

    assert settings.cli.file_names == [".toolrc", ".toolrc.toml"]
    assert settings.cli.config_directory_name == ".config"
    assert settings.cli.path_flavor == "native"


def test_get_settings_is_cached(tmp_path):
    first = loader_module.get_settings()
    (tmp_path / "work" / "configpaths.toml").write_text(
        '[cli]\ndebug = true\n', encoding="utf-8"
    )

    assert loader_module.get_settings() is first
    assert loader_module.reload_settings().cli.debug is True


def test_invalid_toml_raises(tmp_path):
    (tmp_path / "work" / "configpaths.toml").write_text("[cli", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="Invalid TOML"):
        loader_module.load_settings()


def test_invalid_settings_raise_configuration_error(tmp_path):
    (tmp_path / "work" / "configpaths.toml").write_text(
        '[cli]\npath_flavor = "vms"\n', encoding="utf-8"
    )

    with pytest.raises(ConfigurationError, match="Invalid settings"):
        loader_module.load_settings()


def test_merge_configs_is_deep_and_copies():
    base = deepcopy(DEFAULT_SETTINGS_DICT)
    merged = loader_module.merge_configs(base, {"cli": {"debug": True}})

    assert merged["cli"]["debug"] is True
    assert merged["cli"]["config_directory_name"] == ".config"
    assert base["cli"]["debug"] is False


def test_cli_config_directory_name_validation():
    CLIConfig(config_directory_name=".mytool")

    with pytest.raises(ValidationError):
        CLIConfig(config_directory_name="")

    with pytest.raises(ValidationError):
        CLIConfig(config_directory_name="a/b")


def test_cli_config_rejects_empty_file_names():
    with pytest.raises(ValidationError):
        CLIConfig(file_names=[".toolrc", ""])


def test_defaults_round_trip_through_schema():
    settings = ConfigPathsSettings.from_dict(deepcopy(DEFAULT_SETTINGS_DICT))

    assert settings.to_dict() == DEFAULT_SETTINGS_DICT


def test_unknown_keys_rejected():
    with pytest.raises(ValidationError):
        ConfigPathsSettings.from_dict({"cli": {"colour": "red"}})


def test_undecodable_settings_file_raises(tmp_path):
    (tmp_path / "work" / "configpaths.toml").write_bytes(b"\xff")

    with pytest.raises(ConfigurationError, match="Invalid TOML"):
        loader_module.load_settings()
