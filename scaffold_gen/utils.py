"""Shared utility functions for the workspace scaffolder.

Provides async command execution and Rich-based console reporting.  The
command runner is the only place the scaffolder talks to a child process.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from rich.console import Console
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


async def run_command(cmd: str, cwd: str | Path | None = None) -> int:
    """Run a shell command and wait for it to exit.

    The child inherits the parent's stdout/stderr and the current environment
    unmodified, so its output streams straight to the terminal.

    Args:
        cmd: Shell command string.
        cwd: Working directory for the child process.

    Returns:
        The process return code.
    """
    process = await asyncio.create_subprocess_shell(
        cmd,
        cwd=str(cwd) if cwd else None,
    )
    return await process.wait()


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_action(action: str, path: str | Path) -> None:
    """Print a single ``add``/``skip`` line for an emitted file."""
    color = "green" if action == "add" else "dim"
    console.print(f"[{color}]{action:>6}[/{color}] {path}")


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")
