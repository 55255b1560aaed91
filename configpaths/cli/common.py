from __future__ import annotations

from dataclasses import asdict
from typing import Iterable, List, Optional

import typer

from configpaths import __version__, ui
from configpaths.candidates import ConfigCandidate
from configpaths.configuration import ConfigurationError, get_settings
from configpaths.configuration.schema import ConfigPathsSettings
from configpaths.logging import console, set_debug
from configpaths.options import Options
from configpaths.paths import NATIVE_PATH, absolute_directory, path_flavor

HELP_OPTION_NAMES = ["-h", "--help"]
COMMAND_CONTEXT = {"help_option_names": HELP_OPTION_NAMES}


def load_cli_settings() -> ConfigPathsSettings:
    """Load settings, reporting problems as a CLI error."""
    try:
        settings = get_settings()
    except ConfigurationError as exc:
        ui.error(str(exc))
        raise typer.Exit(code=1)
    if settings.cli.debug:
        set_debug(True)
    return settings


def build_options(
    settings: ConfigPathsSettings,
    config_dir_name: Optional[str],
    flavor: Optional[str],
) -> Options:
    """Combine command-line overrides with settings into per-call options."""
    try:
        path = path_flavor(flavor or settings.cli.path_flavor)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--flavor") from exc
    name = config_dir_name or settings.cli.config_directory_name
    return Options(path=path, config_directory_name=name)


def resolve_names(
    names: Optional[List[str]], settings: ConfigPathsSettings
) -> List[str]:
    resolved = list(names or settings.cli.file_names)
    if not resolved:
        raise typer.BadParameter(
            "Pass at least one config file name or set cli.file_names in configpaths.toml.",
            param_hint="NAMES",
        )
    return resolved


def resolve_directory(directory: Optional[str], options: Options) -> str:
    """Absolute starting directory; foreign path flavors are taken as given."""
    if directory is not None and options.path is not NATIVE_PATH:
        return directory
    return absolute_directory(directory)


def resolve_path(path: str, options: Options) -> str:
    """Absolute form of a native ``path``; foreign path flavors are taken as given."""
    if options.path is not NATIVE_PATH:
        return path
    return absolute_directory(path)


def print_candidates_json(candidates: Iterable[ConfigCandidate]) -> None:
    console.print_json(data=[asdict(candidate) for candidate in candidates])


def print_version() -> None:
    console.print(f"[bold]configpaths[/bold] [accent]v{__version__}[/]")
