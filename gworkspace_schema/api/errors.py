"""Error handlers for the application."""
from flask import jsonify
from werkzeug.exceptions import HTTPException

from ..core.exceptions import SchemaError, UnknownResourceTypeError


def register_error_handlers(app):
    """Register JSON error handlers with the Flask app."""

    @app.errorhandler(UnknownResourceTypeError)
    def unknown_resource_type(error):
        """Handle lookups of resource types that are not registered."""
        return jsonify({"error": "Not Found", "message": str(error)}), 404

    @app.errorhandler(SchemaError)
    def schema_error(error):
        """Handle schema errors that escaped a route (misconfigured declarations)."""
        app.logger.error("Schema error: %s", error, exc_info=True)
        return jsonify({"error": "Internal Server Error", "message": str(error)}), 500

    @app.errorhandler(400)
    def bad_request(error):
        """Handle 400 Bad Request errors."""
        return jsonify({"error": "Bad Request", "message": _description(error)}), 400

    @app.errorhandler(404)
    def not_found(error):
        """Handle 404 Not Found errors."""
        return jsonify({"error": "Not Found", "message": "Resource not found"}), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        """Handle 405 Method Not Allowed errors."""
        return jsonify({"error": "Method Not Allowed", "message": _description(error)}), 405

    @app.errorhandler(500)
    def internal_error(error):
        """Handle 500 Internal Server Error."""
        app.logger.error("Internal error: %s", error, exc_info=True)
        return jsonify({"error": "Internal Server Error", "message": "An unexpected error occurred"}), 500


def _description(error) -> str:
    if isinstance(error, HTTPException) and error.description:
        return str(error.description)
    return str(error)
