"""UI utilities for rich console output."""

from __future__ import annotations

from typing import Iterable

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from configpaths.candidates import ConfigCandidate
from configpaths.logging import PALETTE, console


def themed_grid(**kwargs) -> Table:
    return Table.grid(**kwargs)


def show_candidates(candidates: Iterable[ConfigCandidate], *, title: str) -> None:
    """Display config candidates in a formatted table."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("#", justify="right", style=PALETTE["fg_muted"])
    table.add_column("Config file", style="path", overflow="fold")
    table.add_column("Describes", overflow="fold")
    for index, candidate in enumerate(candidates, start=1):
        table.add_row(
            str(index),
            escape(candidate.config_filename),
            escape(candidate.describes_directory),
        )
    console.print(table)


def print_path(path: str) -> None:
    """Print a bare path without wrapping or markup."""
    console.print(path, soft_wrap=True, markup=False, highlight=False)


def warn_panel(message: str) -> None:
    console.print(Panel.fit(f"[warn]{escape(message)}[/]", border_style="yellow"))


def error(message: str) -> None:
    console.print(f"[error]{escape(message)}[/]", soft_wrap=True)
