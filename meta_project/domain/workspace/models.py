"""Workspace domain models.

Pure data structures describing what a manifest declares, how the declared
projects resolve into a tree, and the fetch plan derived from it. Uses
Pydantic for validation and serialization.
"""

import re
from dataclasses import dataclass, field
from pathlib import PurePosixPath, PureWindowsPath

from pydantic import BaseModel, Field, field_validator

_SEGMENT_SPLIT = re.compile(r"[\\/]")


def validate_project_path(value: str) -> str:
    """Validate a declared project path.

    The path is relative to the manifest's directory. Nested paths such as
    ``services/api`` are allowed; absolute paths and ``..`` segments are not.

    Args:
        value: Path as written in the manifest.

    Returns:
        The path with trailing separators removed.

    Raises:
        ValueError: If the path is empty or padded with whitespace, or if
            it escapes the parent directory.
    """
    if value != value.strip():
        raise ValueError(f"project path has surrounding whitespace: {value!r}")
    cleaned = value.rstrip("/\\")
    if not cleaned or cleaned == ".":
        raise ValueError("project path cannot be empty")
    if PurePosixPath(cleaned).is_absolute() or PureWindowsPath(cleaned).is_absolute():
        raise ValueError(f"project path must be relative: {value!r}")
    if cleaned.startswith("\\") or ".." in _SEGMENT_SPLIT.split(cleaned):
        raise ValueError(f"project path escapes its workspace: {value!r}")
    return cleaned


class ProjectRecord(BaseModel):
    """A project as declared in one manifest file.

    ``path`` is the key of the ``projects`` mapping and is unique within
    its manifest. ``repo`` is absent for projects that are not meant to be
    cloned.
    """

    path: str
    repo: str | None = None
    tags: list[str] = Field(default_factory=list)

    model_config = {"frozen": True}

    @field_validator("path")
    @classmethod
    def _check_path(cls, value: str) -> str:
        return validate_project_path(value)


class TreeNode(BaseModel):
    """A resolved node in the workspace tree.

    ``path`` is relative to the walk root. ``children`` is only populated
    for nested workspaces (``is_meta``) that were within the depth limit.
    """

    name: str
    path: str
    repo: str | None = None
    tags: list[str] = Field(default_factory=list)
    is_meta: bool = False
    children: list["TreeNode"] = Field(default_factory=list)

    model_config = {"frozen": True}

    @classmethod
    def from_record(
        cls,
        record: ProjectRecord,
        parent_path: str = "",
        is_meta: bool = False,
        children: list["TreeNode"] | None = None,
    ) -> "TreeNode":
        """Build a node for ``record`` declared by the manifest at ``parent_path``."""
        path = f"{parent_path}/{record.path}" if parent_path else record.path
        return cls(
            name=_SEGMENT_SPLIT.split(record.path)[-1],
            path=path,
            repo=record.repo,
            tags=list(record.tags),
            is_meta=is_meta,
            children=children or [],
        )


class MissingProject(BaseModel):
    """A declared project with a remote URL whose directory is absent."""

    path: str
    repo: str

    model_config = {"frozen": True}


@dataclass(frozen=True)
class Reconciliation:
    """Outcome of comparing declared projects against the filesystem.

    Attributes:
        present: Projects whose directory exists.
        missing: Absent projects that can be fetched.
        excluded: Absent projects without a remote URL.
    """

    present: list[ProjectRecord] = field(default_factory=list)
    missing: list[MissingProject] = field(default_factory=list)
    excluded: list[ProjectRecord] = field(default_factory=list)


class PlannedCommand(BaseModel):
    """One unit of work for the external command runner."""

    dir: str
    cmd: str
    env: dict[str, str] | None = None


class ExecutionPlan(BaseModel):
    """Ordered commands plus the parallelism policy for running them.

    Fetch plans are sequential unless the caller asks otherwise.
    """

    commands: list[PlannedCommand] = Field(default_factory=list)
    parallel: bool = False
    max_parallel: int | None = None

    @property
    def is_empty(self) -> bool:
        """True when there is nothing to do and the runner should not be invoked."""
        return not self.commands


class PlanResponse(BaseModel):
    """Wire wrapper: ``{"plan": {...}}``."""

    plan: ExecutionPlan

    def to_wire(self) -> dict:
        """Serialize with absent optional fields omitted."""
        return self.model_dump(exclude_none=True)
