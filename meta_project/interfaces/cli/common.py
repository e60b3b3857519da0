"""Shared utilities for meta-project CLI commands.

This module provides common utilities used across CLI commands:
- Working directory resolution and logging setup
- Formatted output helpers (error, success, info, warning)
- Missing-project reporting
- Rendering of CommandResult values
"""

import json
import logging
import sys
from pathlib import Path
from typing import TextIO

import typer

from meta_project.application import CommandResult, Failure, Message, Payload, PlanResult
from meta_project.domain.workspace import PlanResponse

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

# Working-directory option, accepted globally and by each project command
# Usage: def my_command(ctx: typer.Context, cwd: Optional[str] = cwd_option) -> None:
cwd_option = typer.Option(
    None,
    "--cwd",
    "-C",
    help="Workspace root (default: current directory, or META_PROJECT_CWD)",
    envvar="META_PROJECT_CWD",
)


def resolve_cwd(ctx: typer.Context, explicit: str | None) -> str:
    """Return the workspace root as an absolute path string.

    A command's own ``--cwd`` wins over the global ``meta-project --cwd``.
    """
    chosen = explicit or (ctx.find_root().obj or {}).get("cwd")
    return str(Path(chosen).resolve()) if chosen else str(Path.cwd())


def configure_logging(verbose: bool, level: str = "WARNING") -> None:
    """Send log records to stderr; ``verbose`` forces DEBUG."""
    resolved = logging.DEBUG if verbose else getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(level=resolved, format=LOG_FORMAT, stream=sys.stderr)


def print_error(msg: str) -> None:
    """Print a formatted error message.

    Args:
        msg: Error message to display
    """
    typer.echo(typer.style(f"Error: {msg}", fg=typer.colors.RED), err=True)


def print_success(msg: str) -> None:
    """Print a formatted success message.

    Args:
        msg: Success message to display
    """
    typer.echo(typer.style(msg, fg=typer.colors.GREEN))


def print_info(msg: str) -> None:
    """Print a formatted info message.

    Args:
        msg: Info message to display
    """
    typer.echo(typer.style(msg, fg=typer.colors.BLUE))


def print_warning(msg: str) -> None:
    """Print a formatted warning message.

    Args:
        msg: Warning message to display
    """
    typer.echo(typer.style(f"Warning: {msg}", fg=typer.colors.YELLOW), err=True)


def print_missing_repo(name: str, url: str, target: Path, file: TextIO | None = None) -> None:
    """Print one missing project: name, remote and where it belongs.

    Styling is dropped when ``file`` is not a terminal.
    """
    label = typer.style(f"✗ {name}", fg=typer.colors.YELLOW, bold=True)
    typer.echo(f"{label} {url} -> {target}", file=file)


def emit_result(result: CommandResult, dry_run: bool = False) -> None:
    """Write a command result to the terminal.

    Failures go to stderr and exit with status 1. Plans are written as
    JSON for a runner, or as plain command lines with ``dry_run``.

    Raises:
        typer.Exit: On Failure.
    """
    if isinstance(result, Failure):
        print_error(result.error)
        raise typer.Exit(1)

    if isinstance(result, (Message, Payload)):
        for skipped in result.diagnostics:
            print_warning(f"skipped {skipped.project_path}: {skipped.reason}")

    if isinstance(result, Message):
        typer.echo(result.text)
    elif isinstance(result, Payload):
        typer.echo(json.dumps(result.data, indent=2))
    elif isinstance(result, PlanResult):
        if dry_run:
            mode = "parallel" if result.plan.parallel else "sequential"
            print_info(f"Would run {len(result.plan.commands)} command(s) ({mode}):")
            for command in result.plan.commands:
                typer.echo(f"  [{command.dir}] {command.cmd}")
        else:
            typer.echo(json.dumps(PlanResponse(plan=result.plan).to_wire(), indent=2))


__all__ = [
    "cwd_option",
    "resolve_cwd",
    "configure_logging",
    "print_error",
    "print_success",
    "print_info",
    "print_warning",
    "print_missing_repo",
    "emit_result",
]
