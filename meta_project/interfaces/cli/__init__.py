"""CLI interface for meta-project using Typer.

Usage:
    meta-project list           # Show the workspace tree
    meta-project check          # Report projects missing on disk
    meta-project sync           # Print a clone plan for missing projects

The CLI is structured as:
- app: Main Typer application
- commands/: Individual command groups (project, config)
- common.py: Shared utilities for CLI commands
- main.py: Entry point that runs the app
"""

from typing import Optional

import typer

from meta_project import __version__
from meta_project.global_config import get_global_config

# Import command groups
from meta_project.interfaces.cli.commands import config, project
from meta_project.interfaces.cli.common import configure_logging, cwd_option

app = typer.Typer(
    name="meta-project",
    help="Inspect and reconcile nested multi-repository workspaces",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"meta-project version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-V",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    cwd: Optional[str] = cwd_option,
) -> None:
    """meta-project - inspect and reconcile nested multi-repository workspaces.

    Reads the .meta manifest in the current directory (and, recursively,
    in nested workspaces) to list, check and plan clones of projects.
    """
    ctx.obj = {"cwd": cwd}
    configure_logging(verbose, get_global_config().log_level)


# =============================================================================
# Register Command Groups
# =============================================================================

app.add_typer(project.app, name="project")
app.add_typer(config.app, name="config")


# =============================================================================
# Top-Level Shortcuts for Common Commands
# =============================================================================


@app.command("list")
def list_projects(
    ctx: typer.Context,
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
    recursive: bool = typer.Option(
        False, "--recursive", "-r", help="Include nested meta repo children"
    ),
    depth: Optional[int] = typer.Option(None, "--depth", min=0, help="Maximum recursion depth"),
    cwd: Optional[str] = cwd_option,
) -> None:
    """List projects (shortcut for 'project list')."""
    project.list_projects(ctx, json_output=json_output, recursive=recursive, depth=depth, cwd=cwd)


@app.command("check")
def check(
    ctx: typer.Context,
    recursive: bool = typer.Option(False, "--recursive", "-r", help="Also check nested workspaces"),
    depth: Optional[int] = typer.Option(None, "--depth", min=0),
    cwd: Optional[str] = cwd_option,
) -> None:
    """Check for missing projects (shortcut for 'project check')."""
    project.check(ctx, recursive=recursive, depth=depth, cwd=cwd)


@app.command("sync")
def sync(
    ctx: typer.Context,
    recursive: bool = typer.Option(False, "--recursive", "-r", help="Also sync nested workspaces"),
    depth: Optional[int] = typer.Option(None, "--depth", min=0),
    parallel: Optional[bool] = typer.Option(
        None, "--parallel/--sequential", help="Let clones run concurrently"
    ),
    max_parallel: Optional[int] = typer.Option(None, "--max-parallel", min=1),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print commands instead of JSON"),
    cwd: Optional[str] = cwd_option,
) -> None:
    """Plan clones for missing projects (shortcut for 'project sync')."""
    project.sync(
        ctx,
        recursive=recursive,
        depth=depth,
        parallel=parallel,
        max_parallel=max_parallel,
        dry_run=dry_run,
        cwd=cwd,
    )


__all__ = ["app"]
