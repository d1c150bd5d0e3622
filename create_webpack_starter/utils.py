"""Shared utility functions for create-webpack-starter.

Provides async command execution with inherited terminal streams and the
Rich-based status output used by every stage of the scaffolding workflow.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()
error_console = Console(stderr=True)

# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


async def run_command(cmd: list[str], cwd: str | Path | None = None) -> int:
    """Run a command with the parent's stdin, stdout and stderr attached.

    Waits for as long as the child runs.

    Args:
        cmd: Program and arguments.
        cwd: Working directory for the child process.

    Returns:
        The child's exit code.

    Raises:
        OSError: If the program cannot be spawned.
    """
    process = await asyncio.create_subprocess_exec(
        *cmd,
        cwd=str(cwd) if cwd else None,
    )
    return await process.wait()


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_info(message: str) -> None:
    """Print a cyan status message."""
    console.print(f"[cyan]{escape(message)}[/cyan]")


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")


def print_error(message: str) -> None:
    """Print a red error message to standard error."""
    error_console.print(f"[bold red]{escape(message)}[/bold red]")


def print_summary_table(
    data: dict[str, str],
    title: str = "Summary",
    columns: tuple[str, str] = ("Item", "Value"),
) -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
        columns: Header labels for the two columns.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column(columns[0], style="dim", no_wrap=True)
    table.add_column(columns[1])

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()
