"""Describe command: map a config file back to the directory it configures."""

from __future__ import annotations

from typing import Optional

import typer

from configpaths import ui
from configpaths.candidates import get_described_directory

from ..common import COMMAND_CONTEXT, build_options, load_cli_settings, resolve_path
from ..type_defs import CommandMap


def register(app: typer.Typer) -> CommandMap:
    @app.command(context_settings=COMMAND_CONTEXT)
    def describe(
        config_file: str = typer.Argument(..., help="Path of a config file."),
        config_dir_name: Optional[str] = typer.Option(
            None, "--config-dir-name", help="Name of the nested config directory."
        ),
        flavor: Optional[str] = typer.Option(
            None, "--flavor", help="Path semantics: native, posix or windows."
        ),
    ) -> None:
        """Show the directory a config file describes."""
        settings = load_cli_settings()
        options = build_options(settings, config_dir_name, flavor)
        config_path = resolve_path(config_file, options)
        ui.print_path(get_described_directory(config_path, options))

    return {"describe": describe}
