from __future__ import annotations

import pytest
from typer.testing import CliRunner

from configpaths.configuration import clear_settings_cache
from configpaths.configuration.defaults import SETTINGS_ENV_VAR
from configpaths.logging import set_debug


@pytest.fixture(autouse=True)
def isolate_settings(tmp_path, monkeypatch):
    """Run each test from an empty working directory with no cached settings."""

    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.delenv(SETTINGS_ENV_VAR, raising=False)
    monkeypatch.chdir(workdir)

    clear_settings_cache()
    set_debug(False)
    yield
    clear_settings_cache()
    set_debug(False)


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()
