"""Manifest discovery.

A directory is a workspace when it holds one of the recognized manifest
files. The lookup table is checked in order; the first regular file wins.
"""

from dataclasses import dataclass
from pathlib import Path

from meta_project.infrastructure.manifest.storage import ManifestFormat

MANIFEST_FILES: tuple[tuple[str, ManifestFormat], ...] = (
    (".meta", ManifestFormat.JSON),
    (".meta.json", ManifestFormat.JSON),
    (".meta.yaml", ManifestFormat.YAML),
    (".meta.yml", ManifestFormat.YAML),
)


@dataclass(frozen=True)
class ManifestLocation:
    """Where a manifest lives and how to decode it.

    Attributes:
        path: Path to the manifest file.
        format: Document syntax.
    """

    path: Path
    format: ManifestFormat

    @property
    def directory(self) -> Path:
        return self.path.parent


def find_manifest(directory: Path) -> ManifestLocation | None:
    """Find the manifest in ``directory``.

    Args:
        directory: Directory to inspect.

    Returns:
        The first matching manifest in priority order, or None when the
        directory is not a workspace (not an error).
    """
    for filename, fmt in MANIFEST_FILES:
        candidate = directory / filename
        if candidate.is_file():
            return ManifestLocation(path=candidate, format=fmt)
    return None
