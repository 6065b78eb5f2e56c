from flask import jsonify, current_app
from storefront.domain.exceptions import (
    LayoutImportError,
    PersistenceError,
    UnknownTemplateError,
)
from storefront.domain.invariants.exceptions import InvariantViolation


def _error_response(error, status_code):
    response = jsonify({
        "error": type(error).__name__,
        "message": str(error)
    })
    response.status_code = status_code
    return response


def register_error_handlers(app):
    @app.errorhandler(InvariantViolation)
    def handle_invariant_violation(error):
        return _error_response(error, 400)

    @app.errorhandler(LayoutImportError)
    def handle_import_error(error):
        return _error_response(error, 400)

    @app.errorhandler(UnknownTemplateError)
    def handle_unknown_template(error):
        return _error_response(error, 404)

    @app.errorhandler(PersistenceError)
    def handle_persistence_error(error):
        current_app.logger.error(f"Layout save failed: {error}")
        return _error_response(error, 503)
