"""Manifest infrastructure: locate, read, parse and walk manifests."""

from meta_project.infrastructure.manifest.locator import (
    MANIFEST_FILES,
    ManifestLocation,
    find_manifest,
)
from meta_project.infrastructure.manifest.parser import (
    parse_manifest,
    parse_manifest_at,
    parse_projects,
)
from meta_project.infrastructure.manifest.storage import DocumentStorage, ManifestFormat
from meta_project.infrastructure.manifest.walker import walk_meta_tree

__all__ = [
    "MANIFEST_FILES",
    "ManifestLocation",
    "ManifestFormat",
    "DocumentStorage",
    "find_manifest",
    "parse_manifest",
    "parse_manifest_at",
    "parse_projects",
    "walk_meta_tree",
]
