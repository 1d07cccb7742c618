"""
Application failure kinds.

A closed set of failure variants returned by use cases. Each kind
carries the message sent to clients; AppError may add a context
payload that is logged but never returned.
"""

from enum import Enum
from typing import Any


class ErrorKind(Enum):
    """Every failure a use case may signal."""

    INVALID_BODY = "invalid request body"
    MISSING_REQUIRED_FIELDS = "missing required fields"
    INVALID_IDENTIFIER_FORMAT = "invalid identifier format"
    NOT_FOUND = "resource not found"
    UNAUTHORIZED = "unauthorized access"
    INTERNAL_ERROR = "internal server error"

    @property
    def message(self) -> str:
        return self.value


class AppError(Exception):
    """A failure of one of the ErrorKind variants.

    Attributes:
        kind: The failure variant, used to select the HTTP status.
        context: Optional details for logs (ids, field names, causes).
    """

    def __init__(self, kind: ErrorKind, context: dict[str, Any] | None = None) -> None:
        self.kind = kind
        self.context = context or {}
        super().__init__(kind.message)

    @property
    def message(self) -> str:
        return self.kind.message

    def __repr__(self) -> str:
        return f"AppError({self.kind.name}, context={self.context!r})"
