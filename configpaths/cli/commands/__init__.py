"""Command registration for the configpaths CLI."""

from __future__ import annotations

import typer

from . import describe, find, listing, version
from ..type_defs import CommandMap

COMMAND_MODULES = (listing, find, describe, version)


def register_commands(app: typer.Typer) -> CommandMap:
    """Attach every command to ``app`` and return them by name."""
    commands: CommandMap = {}
    for module in COMMAND_MODULES:
        commands.update(module.register(app))
    return commands
