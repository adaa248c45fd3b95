"""Error types raised by the service layer and their JSON rendering."""
from flask import jsonify, request
from werkzeug.exceptions import HTTPException

from .extensions import db


class BudgeterError(Exception):
    status_code = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class NotFound(BudgeterError):
    """A referenced category, bill, transaction or payment does not exist."""

    status_code = 404


class ValidationError(BudgeterError):
    """A required field is missing or malformed."""

    status_code = 400


def register_error_handlers(app):
    @app.errorhandler(BudgeterError)
    def handle_budgeter_error(err):
        # Drop any partial changes made before validation failed.
        db.session.rollback()
        app.logger.info("%s %s rejected: %s", request.method, request.path, err.message)
        return jsonify({"error": err.message}), err.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(err):
        return jsonify({"error": err.description}), err.code

    @app.errorhandler(Exception)
    def handle_unexpected(err):
        db.session.rollback()
        app.logger.exception("Unhandled error on %s %s", request.method, request.path)
        return jsonify({"error": "Internal server error"}), 500

