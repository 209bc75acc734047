from __future__ import annotations

from .enums import ErrorKind


class DomainError(Exception):
    """Base exception for business rule violations."""

    kind: ErrorKind = ErrorKind.VALIDATION_FAILED

    def __init__(self, message: str = ""):
        super().__init__(message or self.kind.value)
        self.message = message


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    kind = ErrorKind.VALIDATION_FAILED


class AlreadyCheckedInError(DomainError):
    """Raised when a person already has an open session today."""

    kind = ErrorKind.ALREADY_CHECKED_IN


class NoOpenSessionError(DomainError):
    """Raised on check-out when there is no open session today."""

    kind = ErrorKind.NO_OPEN_SESSION


class NotFoundError(DomainError):
    """Raised when an entity id does not exist in the store."""

    kind = ErrorKind.NOT_FOUND
