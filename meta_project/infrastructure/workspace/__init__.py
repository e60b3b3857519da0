"""Filesystem reconciliation for declared projects."""

from meta_project.infrastructure.workspace.presence import find_missing_recursive, reconcile

__all__ = ["reconcile", "find_missing_recursive"]
