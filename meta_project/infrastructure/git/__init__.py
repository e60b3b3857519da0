"""Git infrastructure.

Provides a wrapper around git queries with Result-based error handling.
"""

from meta_project.infrastructure.git.operations import GitOperations

__all__ = ["GitOperations"]
