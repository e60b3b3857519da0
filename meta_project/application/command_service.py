"""Project command dispatch.

The single entry point behind both the CLI and the plugin transport. A
CommandRequest comes in; a CommandResult (message, structured payload,
execution plan or failure) goes out. Nothing here prints or exits.
"""

import difflib
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Union

from pydantic import BaseModel, Field

from meta_project.application.plan_service import build_plan
from meta_project.domain.shared.result import Err, Ok, Result
from meta_project.domain.workspace import (
    ExecutionPlan,
    ManifestError,
    ManifestSkipped,
    MissingProject,
    count_nodes,
    meta_paths,
    render_listing,
)
from meta_project.global_config import GlobalConfig, get_global_config
from meta_project.infrastructure.git import GitOperations
from meta_project.infrastructure.manifest import parse_manifest_at, walk_meta_tree
from meta_project.infrastructure.workspace import find_missing_recursive, reconcile

logger = logging.getLogger(__name__)

LIST_COMMANDS = ("project list", "project ls")
CHECK_COMMANDS = ("project check",)
SYNC_COMMANDS = ("project sync", "project update")
KNOWN_COMMANDS = LIST_COMMANDS + CHECK_COMMANDS + SYNC_COMMANDS

ALL_PRESENT = "All projects are cloned and present."
NOTHING_TO_DO = "All projects are cloned and present. Nothing to do."


# =============================================================================
# Request / Response
# =============================================================================


class ExecuteOptions(BaseModel):
    """Flags forwarded from the CLI or the plugin host."""

    dry_run: bool = False
    json_output: bool = False
    recursive: bool = False
    depth: Optional[int] = Field(default=None, ge=0)
    verbose: bool = False
    parallel: Optional[bool] = None
    max_parallel: Optional[int] = Field(default=None, ge=1)


class CommandRequest(BaseModel):
    """One command invocation.

    ``projects`` optionally carries project paths the host already
    discovered; check and sync then reconcile each of them as well.
    """

    command: str
    args: list[str] = Field(default_factory=list)
    options: ExecuteOptions = Field(default_factory=ExecuteOptions)
    cwd: str = ""
    projects: list[str] = Field(default_factory=list)


@dataclass(frozen=True)
class Message:
    """Plain text for the user."""

    text: str
    diagnostics: list[ManifestSkipped] = field(default_factory=list)


@dataclass(frozen=True)
class Payload:
    """Structured, JSON-serializable output."""

    data: dict[str, Any]
    diagnostics: list[ManifestSkipped] = field(default_factory=list)


@dataclass(frozen=True)
class PlanResult:
    """Commands for the external runner."""

    plan: ExecutionPlan


@dataclass(frozen=True)
class Failure:
    """The command could not be carried out."""

    error: str


CommandResult = Union[Message, Payload, PlanResult, Failure]  # noqa: UP007

RemoteUrlLookup = Callable[[Path], Optional[str]]
MissingReporter = Callable[[str, str, Path], None]


# =============================================================================
# Dispatch
# =============================================================================


def execute_command(
    request: CommandRequest,
    config: GlobalConfig | None = None,
    remote_url: RemoteUrlLookup | None = None,
    on_missing: MissingReporter | None = None,
) -> CommandResult:
    """Execute a project command.

    Args:
        request: Command, arguments, options and working directory.
        config: User defaults. Loaded from disk if not provided.
        remote_url: Looks up a directory's remote URL for the list header.
            Defaults to ``git config --get remote.origin.url``.
        on_missing: Called with (path, url, target) for every missing
            project reported by ``project check``.

    Returns:
        Message, Payload, PlanResult or Failure.
    """
    command = request.command.strip()
    if command not in KNOWN_COMMANDS:
        return Failure(_unrecognized(command))

    cwd = Path(request.cwd) if request.cwd else Path.cwd()
    options = request.options
    if "--json" in request.args and not options.json_output:
        options = options.model_copy(update={"json_output": True})

    if command in LIST_COMMANDS:
        return _list_projects(cwd, options, remote_url or GitOperations().get_remote_url)

    missing_result = _collect_missing(cwd, options, request.projects)
    if isinstance(missing_result, Err):
        return Failure(missing_result.error.message)
    missing = missing_result.value

    if command in CHECK_COMMANDS:
        return _check(cwd, missing, on_missing)
    return _sync(cwd, missing, options, config or get_global_config())


def _unrecognized(command: str) -> str:
    message = f"unrecognized command '{command}'"
    verb = command.removeprefix("project ").strip()
    verbs = [known.removeprefix("project ") for known in KNOWN_COMMANDS]
    candidates = difflib.get_close_matches(verb, verbs, n=1)
    if candidates:
        message += f" (did you mean 'project {candidates[0]}'?)"
    return message


def _list_projects(
    cwd: Path,
    options: ExecuteOptions,
    remote_url: RemoteUrlLookup,
) -> CommandResult:
    max_depth = options.depth if options.recursive else 0
    skipped: list[ManifestSkipped] = []

    tree = walk_meta_tree(cwd, max_depth, skipped)
    if isinstance(tree, Err):
        return Failure(tree.error.message)

    logger.info(f"Resolved {count_nodes(tree.value)} projects under {cwd}")
    rendered = render_listing(remote_url(cwd), tree.value, options.json_output)
    if isinstance(rendered, dict):
        return Payload(rendered, diagnostics=skipped)
    return Message(rendered, diagnostics=skipped)


def _collect_missing(
    cwd: Path,
    options: ExecuteOptions,
    provided_projects: list[str],
) -> Result[list[MissingProject], ManifestError]:
    root = parse_manifest_at(cwd)
    if isinstance(root, Err):
        return root

    if provided_projects:
        return Ok(find_missing_recursive(cwd, provided_projects))

    if options.recursive:
        tree = walk_meta_tree(cwd, options.depth)
        if isinstance(tree, Err):
            return tree
        nested = meta_paths(tree.value, options.depth)
        logger.debug(f"Reconciling {len(nested)} nested workspaces")
        return Ok(find_missing_recursive(cwd, nested))

    return Ok(reconcile(root.value, cwd).missing)


def _check(
    cwd: Path,
    missing: list[MissingProject],
    on_missing: MissingReporter | None,
) -> CommandResult:
    if not missing:
        return Message(ALL_PRESENT)

    if on_missing is not None:
        for item in missing:
            on_missing(item.path, item.repo, cwd / item.path)
    return Message(f"{len(missing)} project(s) missing")


def _sync(
    cwd: Path,
    missing: list[MissingProject],
    options: ExecuteOptions,
    config: GlobalConfig,
) -> CommandResult:
    if not missing:
        return Message(NOTHING_TO_DO)

    parallel = config.parallel if options.parallel is None else options.parallel
    plan = build_plan(
        missing,
        cwd,
        parallel=parallel,
        max_parallel=options.max_parallel or config.max_parallel,
        template=config.clone_command,
    )
    return PlanResult(plan)


def get_help_text() -> str:
    """Get help text for the plugin."""
    return """meta project - Project Management Plugin

Commands:
  meta project list    List all projects defined in .meta (alias: ls)
  meta project check   Check if all projects in .meta are cloned locally
  meta project sync    Clone any missing projects from .meta
  meta project update  Alias for 'project sync'

Options:
  --json               Output as JSON (list)
  --recursive, -r      Include nested meta repo children
  --depth N            Maximum recursion depth (default: unlimited)
  --parallel           Allow clones to run concurrently (sync)

This plugin helps manage multi-repository workspaces defined in .meta files.
"""
