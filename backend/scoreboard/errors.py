from flask import current_app, jsonify
from werkzeug.exceptions import HTTPException


class ApiError(Exception):
    """An error whose message is safe to show to the caller."""

    status_code = 500

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self):
        return {'message': self.message}


class InvalidInput(ApiError):
    status_code = 400


class Conflict(ApiError):
    # Reported with the same status as invalid input
    status_code = 400


class Unauthorized(ApiError):
    status_code = 401


class InternalError(ApiError):
    status_code = 500


class ValidationError(ValueError):
    """Raised by model validators when a value would break a stored invariant."""


def register_error_handlers(flask_app):
    from scoreboard import db

    @flask_app.errorhandler(ApiError)
    def handle_api_error(exc):
        return jsonify(exc.to_dict()), exc.status_code

    @flask_app.errorhandler(404)
    def handle_not_found(exc):
        return jsonify({'message': 'Resource not found'}), 404

    @flask_app.errorhandler(405)
    def handle_method_not_allowed(exc):
        return jsonify({'message': 'Method not allowed'}), 405

    @flask_app.errorhandler(Exception)
    def handle_unexpected(exc):
        if isinstance(exc, HTTPException):
            return jsonify({'message': exc.description}), exc.code
        db.session.rollback()
        current_app.logger.error(f"[error] unhandled exception: {exc}", exc_info=True)
        error = InternalError('Internal server error')
        return jsonify(error.to_dict()), error.status_code
