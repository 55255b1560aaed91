"""Help text rendering for the root command.

Commands and options are listed as Rich grids, followed by a short set of
usage examples.
"""

from __future__ import annotations

from typing import Iterable, Sequence

import click
import typer
from rich.table import Table

from configpaths import __description__, ui
from configpaths.logging import PALETTE, console

HELP_EXAMPLES = [
    ("configpaths list .mytoolrc", "Show every place .mytoolrc may live, nearest first."),
    ("configpaths find .mytoolrc --all", "Show the candidates that exist on disk."),
    ("configpaths describe ~/.config/.mytoolrc", "Show the directory a file configures."),
]


def show_root_help(ctx: typer.Context) -> None:
    console.print(__description__)
    console.print()
    console.print("[section]Usage[/section]")
    console.print("  configpaths [OPTIONS] COMMAND [ARGS]...\n")
    console.print("[section]Commands[/section]")
    console.print(build_command_table(ctx))
    console.print()
    console.print("[section]Options[/section]")
    console.print(build_option_table(ctx))
    console.print()
    console.print("[section]Examples[/section]")
    console.print(build_examples_table())


def build_help_table(
    rows: Iterable[tuple[str, ...]],
    *,
    column_styles: Sequence[dict[str, object]] | None = None,
) -> Table:
    table = ui.themed_grid(padding=(0, 3))
    styles = column_styles or (
        {"style": f"bold {PALETTE['green']}", "no_wrap": True},
        {"style": f"bold {PALETTE['purple']}", "no_wrap": True},
        {"style": PALETTE["fg"]},
    )
    for column in styles:
        table.add_column(**column)
    for row in rows:
        table.add_row(*row)
    return table


def build_command_table(ctx: typer.Context) -> Table:
    return build_help_table(command_help_rows(ctx))


def build_option_table(ctx: typer.Context) -> Table:
    return build_help_table(option_help_rows(ctx))


def build_examples_table() -> Table:
    column_styles = (
        {"style": f"bold {PALETTE['cyan']}", "no_wrap": True},
        {"style": PALETTE["fg"]},
    )
    return build_help_table(HELP_EXAMPLES, column_styles=column_styles)


def command_help_rows(ctx: typer.Context):
    command_group = ctx.command
    if command_group is None:
        return []
    rows = []
    for name in command_group.list_commands(ctx):
        command = command_group.get_command(ctx, name)
        if not command or command.hidden:
            continue
        description = (command.help or command.short_help or "").strip()
        rows.append((name, command_param_hint(command), description))
    return rows


def option_help_rows(ctx: typer.Context):
    rows = []
    if ctx.command is None:
        return rows
    for param in ctx.command.params:
        if not isinstance(param, click.Option):
            continue
        name = primary_long_option(param)
        short_text = format_short_options(param)
        description = (param.help or "").strip()
        rows.append((name, short_text, description))
    return rows


def command_param_hint(command: click.Command) -> str:
    arguments = [param for param in command.params if isinstance(param, click.Argument)]
    if arguments:
        return format_argument_hint(arguments[0])
    return ""


def format_argument_hint(param: click.Argument) -> str:
    name = param.metavar or param.human_readable_name or param.name or ""
    if not name:
        return ""
    normalized = name.replace("_", " ").strip()
    normalized = normalized.replace(" ", "-").upper()
    return f"<{normalized}>"


def primary_long_option(param: "click.Option") -> str:
    for opt in param.opts:
        if opt.startswith("--"):
            return opt
    return param.opts[0] if param.opts else ""


def format_short_options(param: "click.Option") -> str:
    seen: list[str] = []
    for opt in list(param.opts) + list(param.secondary_opts):
        if not opt.startswith("-") or opt.startswith("--"):
            continue
        if opt not in seen:
            seen.append(opt)
    return ", ".join(seen)
