"""Error taxonomy of the tracker and its mapping onto JSON responses.

Stores and permission helpers raise these exceptions; ``register_error_handlers``
turns them into ``{"error": ...}`` bodies with the matching status code.
Anything else is logged server-side and reported as a bare 500.
"""

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from extensions import db


class TrackerError(Exception):
    """Base class for errors that are safe to show to the caller."""

    status_code = 500
    message = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ValidationError(TrackerError):
    status_code = 400
    message = "Invalid request"


class InvalidId(ValidationError):
    message = "Invalid ID"


class Unauthorized(TrackerError):
    status_code = 401
    message = "Unauthorized"


class Forbidden(TrackerError):
    status_code = 403
    message = "Admin access required"


class NotFound(TrackerError):
    """Record is missing or belongs to another owner; the two look the same."""

    status_code = 404
    message = "Not found"


class AlreadyExists(TrackerError):
    status_code = 409
    message = "Already exists"


def error_response(message: str, status_code: int):
    return jsonify(error=message), status_code


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(TrackerError)
    def handle_tracker_error(exc: TrackerError):
        return error_response(exc.message, exc.status_code)

    @app.errorhandler(HTTPException)
    def handle_http_error(exc: HTTPException):
        return error_response(exc.description or exc.name, exc.code or 500)

    @app.errorhandler(Exception)
    def handle_unexpected(exc: Exception):
        app.logger.exception("Unhandled error on %s %s", request.method, request.path)
        db.session.rollback()
        return error_response("Internal server error", 500)
