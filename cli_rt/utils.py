"""Shared utility functions for cli-rt.

Provides async command execution, Rich-based console output and the spinner
used to report each scaffolding step.  Every module prints through the single
``console`` defined here so output stays consistent and easy to capture in
tests.
"""

from __future__ import annotations

import asyncio
import os
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


async def run_command(
    cmd: list[str],
    cwd: str | Path | None = None,
    timeout: float | None = None,
    env: dict[str, str] | None = None,
) -> tuple[int, str, str]:
    """Run a command asynchronously.

    Args:
        cmd: Program and arguments.
        cwd: Working directory for the child process.
        timeout: Maximum wall-clock seconds before the process is killed.
            ``None`` waits for as long as the process runs.
        env: Optional extra environment variables merged on top of ``os.environ``.

    Returns:
        A ``(returncode, stdout, stderr)`` tuple.

    Raises:
        FileNotFoundError: If the executable cannot be found.
    """
    merged_env: dict[str, str] | None = None
    if env:
        merged_env = {**os.environ, **env}

    process = await asyncio.create_subprocess_exec(
        *cmd,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
        cwd=str(cwd) if cwd else None,
        env=merged_env,
    )

    try:
        stdout_bytes, stderr_bytes = await asyncio.wait_for(
            process.communicate(), timeout=timeout
        )
    except asyncio.TimeoutError:
        process.kill()
        await process.wait()
        return (-1, "", f"Command timed out after {timeout}s: {' '.join(cmd)}")

    stdout_str = (stdout_bytes or b"").decode("utf-8", errors="replace").strip()
    stderr_str = (stderr_bytes or b"").decode("utf-8", errors="replace").strip()
    return (process.returncode or 0, stdout_str, stderr_str)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_title(title: str = "CLI - RT") -> None:
    """Print the start-up banner."""
    console.print(
        Panel(
            f"[bold cyan]{title}[/bold cyan]\nReact project templates",
            border_style="cyan",
            expand=False,
        )
    )


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


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold white on red] ERROR [/bold white on red] [red]{message}[/red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")


# ---------------------------------------------------------------------------
# Step spinner
# ---------------------------------------------------------------------------


class StepSpinner:
    """Handle yielded by :func:`step_spinner`.

    A step starts in the ``running`` state and ends in exactly one of
    ``success`` or ``failure``.  If the body finishes without reporting an
    outcome the step is marked successful with its original text.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self.state = "running"

    def success(self, text: str | None = None) -> None:
        self.state = "success"
        console.print(f"[bold green]✔[/bold green] {text or self.text}")

    def error(self, text: str | None = None) -> None:
        self.state = "failure"
        console.print(f"[bold red]✖[/bold red] {text or self.text}")


@contextmanager
def step_spinner(text: str) -> Iterator[StepSpinner]:
    """Show a spinner while a step runs, then print its terminal state.

    Usage::

        with step_spinner("Installing firebase...") as spinner:
            ...
            spinner.success("Successfully installed firebase")
    """
    spinner = StepSpinner(text)
    with console.status(text, spinner="dots"):
        yield spinner
    if spinner.state == "running":
        spinner.success()
