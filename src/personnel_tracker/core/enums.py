from __future__ import annotations

from enum import Enum


class PersonnelStatus(str, Enum):
    """Employment status stored with each personnel entry."""

    ACTIVE = "active"
    INACTIVE = "inactive"


class ErrorKind(str, Enum):
    """Domain error kinds; the presentation layer maps these to messages."""

    VALIDATION_FAILED = "VALIDATION_FAILED"
    ALREADY_CHECKED_IN = "ALREADY_CHECKED_IN"
    NO_OPEN_SESSION = "NO_OPEN_SESSION"
    NOT_FOUND = "NOT_FOUND"
