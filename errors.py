"""API error taxonomy and the JSON handlers that render it.

Views and services raise these; ``register_error_handlers`` turns them into
``{"message": ..., "errors": [...]}`` responses. Only the public ``message``
crosses the process boundary, details stay in the server log.
"""

import logging
from typing import List, Optional

from flask import jsonify, request
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

from extensions import db

logger = logging.getLogger(__name__)


class ApiError(Exception):
    status_code = 500
    message = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)
        if message:
            self.message = message

    def to_dict(self) -> dict:
        return {"message": self.message}


class ValidationFailed(ApiError):
    """Request body failed schema validation; ``errors`` lists every violation."""

    status_code = 400
    message = "Invalid input"

    def __init__(self, errors: List[dict], message: Optional[str] = None):
        super().__init__(message)
        self.errors = errors

    def to_dict(self) -> dict:
        return {"message": self.message, "errors": self.errors}


class Conflict(ApiError):
    status_code = 400
    message = "Username already exists"


class SelfActionForbidden(ApiError):
    status_code = 400
    message = "You cannot perform this action on your own account"


class Unauthenticated(ApiError):
    status_code = 401
    message = "Not authenticated"


class Forbidden(ApiError):
    status_code = 403
    message = "Forbidden"


class NotFound(ApiError):
    status_code = 404
    message = "Not found"


class UpstreamFailure(ApiError):
    status_code = 500
    message = "The service is temporarily unavailable. Please try again later."


class AuthUnavailable(ApiError):
    status_code = 503
    message = "Authentication unavailable"


def _api_error(err: ApiError):
    return jsonify(err.to_dict()), err.status_code


def _storage_error(err: SQLAlchemyError):
    # IntegrityError included: constraint details never leave the process
    db.session.rollback()
    logger.exception("Storage failure on %s %s", request.method, request.path)
    return jsonify({"message": UpstreamFailure.message}), 500


def _http_error(err: HTTPException):
    if err.code is None or err.code < 400 or not request.path.startswith("/api"):
        return err
    return jsonify({"message": err.description or err.name}), err.code


def register_error_handlers(app) -> None:
    app.register_error_handler(ApiError, _api_error)
    app.register_error_handler(SQLAlchemyError, _storage_error)
    app.register_error_handler(HTTPException, _http_error)
