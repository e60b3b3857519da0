"""Project inspection CLI commands.

Commands for listing the workspace tree, checking which projects are
missing on disk, and planning clones for them.
"""

from typing import Optional

import typer

from meta_project.application import CommandRequest, ExecuteOptions, execute_command
from meta_project.interfaces.cli.common import (
    cwd_option,
    emit_result,
    print_missing_repo,
    resolve_cwd,
)

app = typer.Typer(help="Project inspection commands")


# =============================================================================
# Commands
# =============================================================================


@app.command("list")
def list_projects(
    ctx: typer.Context,
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
    recursive: bool = typer.Option(
        False, "--recursive", "-r", help="Include nested meta repo children"
    ),
    depth: Optional[int] = typer.Option(
        None, "--depth", min=0, help="Maximum recursion depth (default: unlimited)"
    ),
    cwd: Optional[str] = cwd_option,
) -> None:
    """List all projects defined in the manifest as a tree.

    Example:
        meta-project project list --recursive --depth 2
    """
    request = CommandRequest(
        command="project list",
        options=ExecuteOptions(json_output=json_output, recursive=recursive, depth=depth),
        cwd=resolve_cwd(ctx, cwd),
    )
    emit_result(execute_command(request))


@app.command("ls", hidden=True)
def ls(
    ctx: typer.Context,
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
    recursive: bool = typer.Option(False, "--recursive", "-r"),
    depth: Optional[int] = typer.Option(None, "--depth", min=0),
    cwd: Optional[str] = cwd_option,
) -> None:
    """Alias for 'project list'."""
    list_projects(ctx, json_output=json_output, recursive=recursive, depth=depth, cwd=cwd)


@app.command("check")
def check(
    ctx: typer.Context,
    recursive: bool = typer.Option(
        False, "--recursive", "-r", help="Also check nested workspaces"
    ),
    depth: Optional[int] = typer.Option(None, "--depth", min=0),
    cwd: Optional[str] = cwd_option,
) -> None:
    """Check if all projects in the manifest are cloned locally.

    Example:
        meta-project project check -r
    """
    request = CommandRequest(
        command="project check",
        options=ExecuteOptions(recursive=recursive, depth=depth),
        cwd=resolve_cwd(ctx, cwd),
    )
    emit_result(execute_command(request, on_missing=print_missing_repo))


@app.command("sync")
def sync(
    ctx: typer.Context,
    recursive: bool = typer.Option(
        False, "--recursive", "-r", help="Also sync nested workspaces"
    ),
    depth: Optional[int] = typer.Option(None, "--depth", min=0),
    parallel: Optional[bool] = typer.Option(
        None, "--parallel/--sequential", help="Let clones run concurrently"
    ),
    max_parallel: Optional[int] = typer.Option(
        None, "--max-parallel", min=1, help="Concurrency bound for --parallel"
    ),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print commands instead of JSON"),
    cwd: Optional[str] = cwd_option,
) -> None:
    """Plan clones for every missing project.

    Prints the execution plan as JSON for a command runner; nothing is
    cloned by this command.

    Example:
        meta-project project sync --dry-run
    """
    request = CommandRequest(
        command="project sync",
        options=ExecuteOptions(
            dry_run=dry_run,
            recursive=recursive,
            depth=depth,
            parallel=parallel,
            max_parallel=max_parallel,
        ),
        cwd=resolve_cwd(ctx, cwd),
    )
    emit_result(execute_command(request), dry_run=dry_run)


@app.command("update", hidden=True)
def update(
    ctx: typer.Context,
    recursive: bool = typer.Option(False, "--recursive", "-r"),
    depth: Optional[int] = typer.Option(None, "--depth", min=0),
    parallel: Optional[bool] = typer.Option(None, "--parallel/--sequential"),
    max_parallel: Optional[int] = typer.Option(None, "--max-parallel", min=1),
    dry_run: bool = typer.Option(False, "--dry-run"),
    cwd: Optional[str] = cwd_option,
) -> None:
    """Alias for 'project sync'."""
    sync(
        ctx,
        recursive=recursive,
        depth=depth,
        parallel=parallel,
        max_parallel=max_parallel,
        dry_run=dry_run,
        cwd=cwd,
    )
