"""Fetch plan construction.

Turns missing projects into clone commands for the external runner.
All functions are pure - no I/O, no side effects.
"""

import shlex
from pathlib import Path

from meta_project.domain.workspace.models import ExecutionPlan, MissingProject, PlannedCommand
from meta_project.global_config import DEFAULT_CLONE_COMMAND


def clone_command(
    url: str,
    target: Path,
    template: str = DEFAULT_CLONE_COMMAND,
) -> str:
    """Format a clone command with shell-quoted arguments."""
    return template.format(url=shlex.quote(url), target=shlex.quote(str(target)))


def build_plan(
    missing: list[MissingProject],
    base_dir: Path,
    parallel: bool = False,
    max_parallel: int | None = None,
    template: str = DEFAULT_CLONE_COMMAND,
) -> ExecutionPlan:
    """Build the clone plan for missing projects.

    Every command runs from the workspace root (``dir="."``) and names its
    destination explicitly, so the i-th missing project yields the i-th
    command.

    Args:
        missing: Missing projects in manifest order.
        base_dir: Workspace root the project paths are relative to.
        parallel: Let the runner execute commands concurrently.
        max_parallel: Concurrency bound, only kept for parallel plans.
        template: Clone command with ``{url}`` and ``{target}`` placeholders.

    Returns:
        ExecutionPlan. An empty input gives a plan whose ``is_empty`` is
        True; callers report "nothing to do" instead of running it.
    """
    commands = [
        PlannedCommand(
            dir=".",
            cmd=clone_command(item.repo, base_dir / item.path, template),
        )
        for item in missing
    ]
    return ExecutionPlan(
        commands=commands,
        parallel=parallel,
        max_parallel=max_parallel if parallel else None,
    )
