"""Find command: report candidates that exist on disk."""

from __future__ import annotations

from typing import List, Optional

import typer

from configpaths import ui
from configpaths.discovery import existing_config_paths, find_config_path

from ..common import (
    COMMAND_CONTEXT,
    build_options,
    load_cli_settings,
    print_candidates_json,
    resolve_directory,
    resolve_names,
)
from ..type_defs import CommandMap


def register(app: typer.Typer) -> CommandMap:
    @app.command(context_settings=COMMAND_CONTEXT)
    def find(
        names: Optional[List[str]] = typer.Argument(
            None, help="Config file names in priority order (default: from settings)."
        ),
        directory: Optional[str] = typer.Option(
            None, "--dir", "-d", help="Starting directory (default: cwd)."
        ),
        config_dir_name: Optional[str] = typer.Option(
            None, "--config-dir-name", help="Name of the nested config directory."
        ),
        show_all: bool = typer.Option(
            False, "--all", "-a", help="Show every existing file, not just the nearest."
        ),
        as_json: bool = typer.Option(
            False, "--json", help="Emit JSON instead of paths."
        ),
    ) -> None:
        """Find existing config files, nearest first."""
        settings = load_cli_settings()
        options = build_options(settings, config_dir_name, "native")
        file_names = resolve_names(names, settings)
        start = resolve_directory(directory, options)

        if show_all:
            found = list(existing_config_paths(start, file_names, options))
        else:
            nearest = find_config_path(start, file_names, options)
            found = [nearest] if nearest is not None else []

        if not found:
            if as_json:
                print_candidates_json(found)
            else:
                ui.warn_panel(f"No config file found from {start}")
            raise typer.Exit(code=1)

        if as_json:
            print_candidates_json(found)
            return
        for candidate in found:
            ui.print_path(candidate.config_filename)

    return {"find": find}
