"""Recursive workspace walker.

Starting from a root directory, parses its manifest and, for every declared
project that is itself a workspace, descends into it until the depth budget
runs out. A broken nested manifest never aborts the walk: that project keeps
``is_meta=True`` with no children and a ManifestSkipped event is recorded.
"""

import logging
from pathlib import Path

from meta_project.domain.shared.result import Err, Ok, Result
from meta_project.domain.workspace.errors import ManifestError
from meta_project.domain.workspace.events import ManifestSkipped
from meta_project.domain.workspace.models import ProjectRecord, TreeNode
from meta_project.infrastructure.manifest.locator import find_manifest
from meta_project.infrastructure.manifest.parser import parse_manifest, parse_manifest_at
from meta_project.infrastructure.manifest.storage import DocumentStorage

logger = logging.getLogger(__name__)


def walk_meta_tree(
    root_dir: Path,
    max_depth: int | None = None,
    skipped: list[ManifestSkipped] | None = None,
    storage: DocumentStorage | None = None,
) -> Result[list[TreeNode], ManifestError]:
    """Resolve the workspace tree rooted at ``root_dir``.

    Args:
        root_dir: Directory holding the root manifest.
        max_depth: How many levels of nested manifests to descend into.
            0 lists only the root manifest's projects; None is unbounded.
        skipped: When given, receives a ManifestSkipped event for every
            nested manifest that could not be read or parsed.
        storage: Document reader shared by the whole walk.

    Returns:
        Ok(list[TreeNode]) for the root's declared projects, or
        Err(ManifestError) when the root has no usable manifest.
    """
    storage = storage or DocumentStorage()
    root = parse_manifest_at(root_dir, storage)
    if isinstance(root, Err):
        return root
    return Ok(_build_nodes(root_dir, "", root.value, max_depth, skipped, storage))


def _build_nodes(
    directory: Path,
    parent_path: str,
    records: list[ProjectRecord],
    depth: int | None,
    skipped: list[ManifestSkipped] | None,
    storage: DocumentStorage,
) -> list[TreeNode]:
    nodes: list[TreeNode] = []
    for record in records:
        project_dir = directory / record.path
        location = find_manifest(project_dir)
        is_meta = location is not None
        children: list[TreeNode] = []

        if location is not None and (depth is None or depth > 0):
            node_path = f"{parent_path}/{record.path}" if parent_path else record.path
            parsed = parse_manifest(location, storage)
            if isinstance(parsed, Ok):
                logger.debug(f"Descending into {node_path} ({len(parsed.value)} projects)")
                next_depth = None if depth is None else depth - 1
                children = _build_nodes(
                    project_dir, node_path, parsed.value, next_depth, skipped, storage
                )
            else:
                logger.warning(f"Skipping nested workspace {node_path}: {parsed.error.cause}")
                if skipped is not None:
                    skipped.append(
                        ManifestSkipped(
                            project_path=node_path,
                            manifest=str(location.path),
                            reason=parsed.error.cause,
                        )
                    )

        nodes.append(TreeNode.from_record(record, parent_path, is_meta=is_meta, children=children))
    return nodes
