# fitrealm/errors.py
from flask import current_app, jsonify
from werkzeug.exceptions import HTTPException


class AppError(Exception):
    """Base for failures that map onto a client-visible HTTP status."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self):
        return {"message": self.message, "error": type(self).__name__}


class Unauthenticated(AppError):
    status_code = 401
    default_message = "Authentication required"


class NotFound(AppError):
    status_code = 404
    default_message = "Resource not found"


class InvalidRequest(AppError):
    status_code = 400
    default_message = "Invalid request"


class BusinessRuleViolation(AppError):
    status_code = 400
    default_message = "Request violates a game rule"


class InsufficientFunds(BusinessRuleViolation):
    default_message = "Insufficient coins"


class AlreadyClaimed(BusinessRuleViolation):
    default_message = "Daily reward already claimed today"


class QuestAlreadyCompleted(BusinessRuleViolation):
    default_message = "Quest already completed"


class InternalFailure(AppError):
    status_code = 500


def register_error_handlers(app):
    @app.errorhandler(AppError)
    def handle_app_error(exc: AppError):
        if exc.status_code >= 500:
            current_app.logger.error(f"{type(exc).__name__}: {exc.message}")
            return jsonify({"message": "Internal server error", "error": "InternalFailure"}), 500
        current_app.logger.info(f"{type(exc).__name__}: {exc.message}")
        return jsonify(exc.to_dict()), exc.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(exc: HTTPException):
        return jsonify({"message": exc.description, "error": exc.name}), exc.code

    @app.errorhandler(Exception)
    def handle_unexpected(exc: Exception):
        current_app.logger.exception(f"Unhandled error: {exc}")
        return jsonify({"message": "Internal server error", "error": "InternalFailure"}), 500
