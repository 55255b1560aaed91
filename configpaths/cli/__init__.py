"""Typer application for the configpaths command line."""

from __future__ import annotations

import typer

from configpaths import __description__
from configpaths.logging import set_debug

from .commands import register_commands
from .common import print_version
from .help import show_root_help

app = typer.Typer(
    help=__description__,
    context_settings={"help_option_names": []},
    rich_markup_mode="rich",
)

COMMANDS = register_commands(app)


@app.callback(invoke_without_command=True)
def _root_command(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "-v",
        "--version",
        help="Show CLI version and exit.",
        is_eager=True,
    ),
    help_: bool = typer.Option(
        False,
        "--help",
        "-h",
        help="Show this message and exit.",
        is_eager=True,
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Print trace output while resolving candidates.",
    ),
) -> None:
    if version:
        print_version()
        raise typer.Exit()
    if help_:
        show_root_help(ctx)
        raise typer.Exit()
    set_debug(debug)
    if ctx.invoked_subcommand is None:
        show_root_help(ctx)


def main() -> None:
    app()


__all__ = ["app", "main"]
