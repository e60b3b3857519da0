"""Workspace domain events."""

from meta_project.domain.shared.events import DomainEvent


class ManifestSkipped(DomainEvent):
    """A nested manifest was found but could not be read or parsed.

    The project stays in the tree as a workspace without children;
    this event records which subtree was dropped and why.
    """

    project_path: str
    manifest: str
    reason: str
