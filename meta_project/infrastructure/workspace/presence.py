"""Presence reconciliation.

Classifies declared projects by whether their directory exists. Only
existence is checked: a present directory is not verified to be a clone
of the declared remote.
"""

import logging
from pathlib import Path

from meta_project.domain.shared.result import Err
from meta_project.domain.workspace.models import MissingProject, ProjectRecord, Reconciliation
from meta_project.infrastructure.manifest.locator import find_manifest
from meta_project.infrastructure.manifest.parser import parse_manifest
from meta_project.infrastructure.manifest.storage import DocumentStorage

logger = logging.getLogger(__name__)


def reconcile(declared: list[ProjectRecord], base_dir: Path) -> Reconciliation:
    """Partition declared projects into present, missing and excluded.

    Args:
        declared: Records from one manifest, in manifest order.
        base_dir: Directory the record paths are relative to.

    Returns:
        Reconciliation whose three lists are disjoint and together hold
        every declared record. Absent projects without a remote URL are
        ``excluded``; they cannot be fetched.
    """
    present: list[ProjectRecord] = []
    missing: list[MissingProject] = []
    excluded: list[ProjectRecord] = []

    for record in declared:
        if (base_dir / record.path).is_dir():
            present.append(record)
        elif record.repo:
            missing.append(MissingProject(path=record.path, repo=record.repo))
        else:
            logger.debug(f"No remote for absent project '{record.path}', excluding")
            excluded.append(record)

    return Reconciliation(present=present, missing=missing, excluded=excluded)


def find_missing_recursive(
    base_dir: Path,
    project_paths: list[str],
    storage: DocumentStorage | None = None,
) -> list[MissingProject]:
    """Collect missing projects from the root and nested workspaces.

    The root manifest is reconciled first, then each directory in
    ``project_paths`` that has its own manifest. Nested results are
    prefixed with the project path so every entry is relative to
    ``base_dir``. Unreadable manifests contribute nothing.

    Args:
        base_dir: Workspace root.
        project_paths: Project directories relative to ``base_dir``.
        storage: Document reader shared across manifests.

    Returns:
        Missing projects, root first, then per project in the given order.
    """
    storage = storage or DocumentStorage()
    all_missing: list[MissingProject] = []

    for prefix in ["", *project_paths]:
        directory = base_dir / prefix if prefix else base_dir
        location = find_manifest(directory)
        if location is None:
            continue

        parsed = parse_manifest(location, storage)
        if isinstance(parsed, Err):
            logger.warning(f"Skipping {location.path}: {parsed.error.cause}")
            continue

        for item in reconcile(parsed.value, directory).missing:
            path = f"{prefix}/{item.path}" if prefix else item.path
            all_missing.append(MissingProject(path=path, repo=item.repo))

    return all_missing
