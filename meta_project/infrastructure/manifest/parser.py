"""Manifest parsing.

Turns a decoded manifest document into an ordered list of ProjectRecord.
The ``projects`` mapping is read in document order, so tree rendering and
fetch plans follow the order the projects were written in.

Accepted entry shapes::

    {"projects": {
        "api": "git@github.com:org/api.git",
        "docs": {"repo": "git@github.com:org/docs.git", "tags": ["web"]},
        "scratch": {"tags": ["local"]}
    }}
"""

import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from meta_project.domain.shared.result import Err, Ok, Result
from meta_project.domain.workspace.errors import ManifestError
from meta_project.domain.workspace.models import ProjectRecord
from meta_project.infrastructure.manifest.locator import ManifestLocation, find_manifest
from meta_project.infrastructure.manifest.storage import DocumentStorage

logger = logging.getLogger(__name__)


def parse_manifest(
    location: ManifestLocation,
    storage: DocumentStorage | None = None,
) -> Result[list[ProjectRecord], ManifestError]:
    """Parse one manifest file.

    Args:
        location: Manifest to read.
        storage: Document reader. Creates a new one if not provided.

    Returns:
        Ok(list[ProjectRecord]) in declaration order, or Err(ManifestError)
        when the file is unreadable, not valid syntax, or has no
        ``projects`` mapping.
    """
    storage = storage or DocumentStorage()
    loaded = storage.load(location.path, location.format)
    if isinstance(loaded, Err):
        return loaded
    return parse_projects(loaded.value, location.path)


def parse_projects(
    document: Any,
    source: Path | str = "<manifest>",
) -> Result[list[ProjectRecord], ManifestError]:
    """Extract project records from an already decoded document."""
    if not isinstance(document, dict):
        return Err(ManifestError.format(source, f"{source}: top level must be a mapping"))

    projects = document.get("projects")
    if projects is None:
        return Err(ManifestError.format(source, f"{source}: no 'projects' key"))
    if not isinstance(projects, dict):
        return Err(ManifestError.format(source, f"{source}: 'projects' must be a mapping"))

    records: list[ProjectRecord] = []
    seen: set[str] = set()
    for path, value in projects.items():
        record = _to_record(str(path), value, source)
        if record is None:
            continue
        if record.path in seen:
            logger.warning(f"Skipping '{path}' in {source}: duplicate of '{record.path}'")
            continue
        seen.add(record.path)
        records.append(record)
    return Ok(records)


def _to_record(path: str, value: Any, source: Path | str) -> ProjectRecord | None:
    if isinstance(value, str):
        repo: str | None = value
        tags: list[str] = []
    elif isinstance(value, dict):
        raw_repo = value.get("repo")
        repo = raw_repo if isinstance(raw_repo, str) else None
        raw_tags = value.get("tags")
        tags = [tag for tag in raw_tags if isinstance(tag, str)] if isinstance(raw_tags, list) else []
    else:
        logger.debug(f"Skipping '{path}' in {source}: unsupported entry {type(value).__name__}")
        return None

    try:
        return ProjectRecord(path=path, repo=repo, tags=tags)
    except ValidationError as e:
        logger.warning(f"Skipping '{path}' in {source}: {e.errors()[0]['msg']}")
        return None


def parse_manifest_at(
    directory: Path,
    storage: DocumentStorage | None = None,
) -> Result[list[ProjectRecord], ManifestError]:
    """Locate and parse the manifest in ``directory``.

    Returns:
        Err(ManifestError) of kind NOT_FOUND when the directory has no
        manifest, otherwise the result of parse_manifest.
    """
    location = find_manifest(directory)
    if location is None:
        return Err(ManifestError.not_found(directory))
    return parse_manifest(location, storage)
