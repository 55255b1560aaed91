"""List command: every candidate location, nearest directory first."""

from __future__ import annotations

from typing import List, Optional

import typer

from configpaths import ui
from configpaths.candidates import all_config_paths
from configpaths.logging import debug

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
    @app.command(name="list", context_settings=COMMAND_CONTEXT)
    def list_(
        names: Optional[List[str]] = typer.Argument(
            None, help="Config file names in priority order (default: from settings)."
        ),
        directory: Optional[str] = typer.Option(
            None, "--dir", "-d", help="Starting directory (default: cwd)."
        ),
        config_dir_name: Optional[str] = typer.Option(
            None, "--config-dir-name", help="Name of the nested config directory."
        ),
        flavor: Optional[str] = typer.Option(
            None, "--flavor", help="Path semantics: native, posix or windows."
        ),
        as_json: bool = typer.Option(
            False, "--json", help="Emit JSON instead of a table."
        ),
    ) -> None:
        """List candidate config file locations for a directory."""
        settings = load_cli_settings()
        options = build_options(settings, config_dir_name, flavor)
        file_names = resolve_names(names, settings)
        start = resolve_directory(directory, options)
        debug(f"ascending from {start} looking for {', '.join(file_names)}")

        candidates = all_config_paths(start, file_names, options)
        if as_json:
            print_candidates_json(candidates)
            return
        ui.show_candidates(candidates, title=f"Config candidates for {start}")

    return {"list": list_}
