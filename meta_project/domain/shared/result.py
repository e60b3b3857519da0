"""Result monad for explicit error handling in domain operations.

Operations that can fail in an expected way (a manifest that does not exist,
a manifest that is not valid JSON) return ``Ok`` or ``Err`` instead of raising.
Callers branch with ``isinstance`` and decide how to surface the failure.

Example usage:
    >>> def read_depth(raw: str) -> Result[int, str]:
    ...     if not raw.isdigit():
    ...         return Err(f"Invalid depth: {raw}")
    ...     return Ok(int(raw))
    ...
    >>> result = read_depth("2")
    >>> if isinstance(result, Ok):
    ...     print(f"Depth: {result.value}")
    Depth: 2
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful result.

    Attributes:
        value: The success value of type T.
    """

    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failed result.

    Attributes:
        error: The error value of type E.
    """

    error: E


# Using Union here as TypeVar aliases don't work with | syntax at runtime
Result = Union[Ok[T], Err[E]]  # noqa: UP007
