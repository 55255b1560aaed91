"""Enumerate config file candidates by walking up the directory tree."""

from __future__ import annotations

from functools import lru_cache
from importlib import metadata as importlib_metadata
from pathlib import Path
from typing import Any, Dict

try:  # Python 3.11+
    import tomllib  # type: ignore[attr-defined]
except ModuleNotFoundError:  # Python 3.10 fallback
    import tomli as tomllib  # type: ignore

from .candidates import (
    ConfigCandidate,
    all_config_paths,
    config_paths,
    get_described_directory,
)
from .options import (
    DEFAULT_CONFIG_DIRECTORY_NAME,
    FsCapability,
    Options,
    PathCapability,
    Stats,
)

PROJECT_NAME = "configpaths"
PYPROJECT_PATH = Path(__file__).resolve().parent.parent / "pyproject.toml"


def _load_pyproject_metadata() -> Dict[str, Any]:
    if not PYPROJECT_PATH.exists():
        return {}
    with PYPROJECT_PATH.open("rb") as fh:
        data = tomllib.load(fh)
    project_data = data.get("project", {})
    if isinstance(project_data, dict):
        return project_data
    return {}


@lru_cache(maxsize=1)
def _project_metadata() -> Dict[str, Any]:
    try:
        metadata = importlib_metadata.metadata(PROJECT_NAME)
        return {
            "name": metadata.get("Name"),
            "version": metadata.get("Version"),
            "description": metadata.get("Summary"),
        }
    except importlib_metadata.PackageNotFoundError:  # pragma: no cover - dev checkout
        return _load_pyproject_metadata()


_META = _project_metadata()
__version__ = _META.get("version", "0.0.0")
__description__ = _META.get(
    "description",
    "List the config file locations a tool should search, nearest directory first.",
)


def project_metadata() -> Dict[str, Any]:
    """Return cached project metadata sourced from package metadata or pyproject."""
    return dict(_META)


__all__ = [
    "DEFAULT_CONFIG_DIRECTORY_NAME",
    "ConfigCandidate",
    "FsCapability",
    "Options",
    "PathCapability",
    "Stats",
    "__description__",
    "__version__",
    "all_config_paths",
    "config_paths",
    "get_described_directory",
    "project_metadata",
]
