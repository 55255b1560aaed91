"""Type definitions for the CLI module.

Aliases shared by command modules when they register with the root app.
"""

from __future__ import annotations

from typing import Dict

from typer.models import CommandFunctionType

# Maps command names to their handler functions for registration
CommandMap = Dict[str, CommandFunctionType]
