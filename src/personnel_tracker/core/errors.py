"""
Maps domain errors to JSON responses.
"""
from __future__ import annotations

import logging

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from .enums import ErrorKind
from .exceptions import DomainError

logger = logging.getLogger(__name__)

STATUS_BY_KIND = {
    ErrorKind.VALIDATION_FAILED: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.ALREADY_CHECKED_IN: 409,
    ErrorKind.NO_OPEN_SESSION: 409,
}

MESSAGE_BY_KIND = {
    ErrorKind.ALREADY_CHECKED_IN: "This person has already checked in today",
    ErrorKind.NO_OPEN_SESSION: "No active check-in found for this person",
    ErrorKind.NOT_FOUND: "Record not found",
}


def error_response(exc: DomainError):
    # Validation messages are written for the user already; other kinds get fixed text.
    message = exc.message if exc.kind == ErrorKind.VALIDATION_FAILED else MESSAGE_BY_KIND.get(exc.kind, str(exc))
    return jsonify({"success": False, "error": exc.kind.value, "message": message}), STATUS_BY_KIND.get(exc.kind, 400)


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(exc: DomainError):
        logger.warning("%s: %s", exc.kind.value, exc)
        return error_response(exc)

    @app.errorhandler(Exception)
    def handle_unexpected(exc: Exception):
        if isinstance(exc, HTTPException):
            return exc
        logger.exception("Unhandled error")
        return jsonify({"success": False, "error": "INTERNAL_ERROR", "message": "Internal server error"}), 500
