import logging
from typing import Iterable, Optional
from flask import jsonify
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)

HTTP_ERROR_MESSAGES = {
    404: "Route not found",
    405: "Method not allowed",
    413: "Request entity too large",
    429: "Too many requests, please try again later.",
}


class ResumeApiError(Exception):
    """Base for failures an operation reports back to the caller."""

    status = 500

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_payload(self) -> dict:
        payload, _ = json_error(self.message, self.status, self.details)
        return payload


class ValidationError(ResumeApiError):
    status = 400

    def __init__(self, message: str, missing_fields: Iterable[str] = ()):
        super().__init__(message)
        self.missing_fields = list(missing_fields)


class NotFoundError(ResumeApiError):
    status = 404

    def __init__(self, message: str = "Resume not found"):
        super().__init__(message)


class PersistenceError(ResumeApiError):
    """A store call failed; `details` carries the driver's message."""

    status = 500


def json_error(message: str, status: int, details: Optional[str] = None):
    payload = {"error": message}
    if details is not None:
        payload["details"] = details
    return payload, status


def handle_api_error(e: ResumeApiError):
    return jsonify(e.to_payload()), e.status


def handle_http_exception(e: HTTPException):
    status = getattr(e, "code", None) or 500
    message = HTTP_ERROR_MESSAGES.get(status) or getattr(e, "description", None) or e.name
    payload, status_code = json_error(message, status)
    return jsonify(payload), status_code


def handle_generic_exception(e: Exception):
    logger.exception("Unhandled exception: %s", e)
    payload, status_code = json_error("Something went wrong!", 500)
    return jsonify(payload), status_code


def register_error_handlers(app):
    app.register_error_handler(ResumeApiError, handle_api_error)
    app.register_error_handler(HTTPException, handle_http_exception)
    app.register_error_handler(Exception, handle_generic_exception)
