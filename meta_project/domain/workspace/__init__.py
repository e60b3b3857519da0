"""Workspace domain - declared projects, resolved trees and fetch plans.

All exports are pure (no I/O, no side effects).

Key Types:
    ProjectRecord - A project as declared in one manifest
    TreeNode - A resolved node in the workspace tree
    MissingProject - Declared, absent, fetchable project
    Reconciliation - Present / missing / excluded partition
    PlannedCommand, ExecutionPlan, PlanResponse - Fetch plan
    ManifestError, ErrorKind - Manifest failures
    ManifestSkipped - Diagnostics event for dropped subtrees
"""

from .errors import ErrorKind, ManifestError
from .events import ManifestSkipped
from .models import (
    ExecutionPlan,
    MissingProject,
    PlannedCommand,
    PlanResponse,
    ProjectRecord,
    Reconciliation,
    TreeNode,
    validate_project_path,
)
from .rendering import render_listing, render_structured, render_text
from .traversal import count_nodes, fold_nodes, meta_paths

__all__ = [
    # Models
    "ProjectRecord",
    "TreeNode",
    "MissingProject",
    "Reconciliation",
    "PlannedCommand",
    "ExecutionPlan",
    "PlanResponse",
    "validate_project_path",
    # Errors and events
    "ErrorKind",
    "ManifestError",
    "ManifestSkipped",
    # Traversal
    "fold_nodes",
    "count_nodes",
    "meta_paths",
    # Rendering
    "render_text",
    "render_structured",
    "render_listing",
]
