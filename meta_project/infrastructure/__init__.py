"""Infrastructure layer for meta-project.

I/O lives here, wrapped with Result monads for explicit error handling.

Exports:
    Manifest:
        - find_manifest: Manifest discovery
        - parse_manifest / parse_manifest_at: Manifest parsing
        - walk_meta_tree: Recursive tree resolution

    Workspace:
        - reconcile: Present / missing classification
        - find_missing_recursive: Missing projects across nested workspaces

    Git:
        - GitOperations: Remote URL lookup
"""

from meta_project.infrastructure.git import GitOperations
from meta_project.infrastructure.manifest import (
    find_manifest,
    parse_manifest,
    parse_manifest_at,
    walk_meta_tree,
)
from meta_project.infrastructure.workspace import find_missing_recursive, reconcile

__all__ = [
    # Manifest
    "find_manifest",
    "parse_manifest",
    "parse_manifest_at",
    "walk_meta_tree",
    # Workspace
    "reconcile",
    "find_missing_recursive",
    # Git
    "GitOperations",
]
