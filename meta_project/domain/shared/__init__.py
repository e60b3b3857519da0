"""Shared domain utilities.

- Result monad for explicit error handling
- Base domain event

Example usage:
    >>> from meta_project.domain.shared import Ok, Err, Result
    >>>
    >>> def require_repo(url: str | None) -> Result[str, str]:
    ...     if not url:
    ...         return Err("Project has no remote URL")
    ...     return Ok(url)
"""

from meta_project.domain.shared.events import DomainEvent
from meta_project.domain.shared.result import Err, Ok, Result

__all__ = [
    # Result monad
    "Ok",
    "Err",
    "Result",
    # Domain events
    "DomainEvent",
]
