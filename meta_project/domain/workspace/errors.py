"""Error values for manifest discovery and parsing.

These travel inside ``Err`` results; they are never raised.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorKind(str, Enum):
    """Category of a manifest failure."""

    NOT_FOUND = "not-found"
    IO = "io"
    FORMAT = "format"


@dataclass(frozen=True)
class ManifestError:
    """Why a manifest could not be used.

    Attributes:
        kind: Failure category.
        location: Directory or file the failure refers to.
        cause: Underlying reason (reader or decoder message).
    """

    kind: ErrorKind
    location: str
    cause: str = ""

    @classmethod
    def not_found(cls, directory: object) -> "ManifestError":
        return cls(ErrorKind.NOT_FOUND, str(directory))

    @classmethod
    def io(cls, path: object, cause: str) -> "ManifestError":
        return cls(ErrorKind.IO, str(path), cause)

    @classmethod
    def format(cls, path: object, cause: str) -> "ManifestError":
        return cls(ErrorKind.FORMAT, str(path), cause)

    @property
    def message(self) -> str:
        if self.kind is ErrorKind.NOT_FOUND:
            return f"no manifest found at {self.location}"
        return f"failed to parse manifest: {self.cause}"

    def __str__(self) -> str:
        return self.message
