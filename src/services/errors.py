"""Error kinds raised by the store services."""

from enum import Enum


class ErrorKind(str, Enum):
    """Closed set of failure kinds the route layer must handle."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INTERNAL = "internal"


class StoreError(Exception):
    """A store operation failed for a known reason."""

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __repr__(self) -> str:
        return f"StoreError({self.kind.value!r}, {self.message!r})"


def not_found(resource: str) -> StoreError:
    """Build the error for an unknown id."""
    return StoreError(ErrorKind.NOT_FOUND, f"{resource} not found")
