"""
Error handling and request logging middleware for the Flask application.
"""
import logging
from flask import request, g
from werkzeug.exceptions import HTTPException
from attendance_api.exceptions.base import AppError
from attendance_api.utils.response_utils import error_response, app_error_response, GENERIC_ERROR_MESSAGE
from attendance_api.utils.error_handling import correlation_context, new_correlation_id

logger = logging.getLogger(__name__)

def handle_errors(app):
    """Register error handlers with Flask app."""

    @app.before_request
    def setup_correlation_id():
        """Set up correlation ID for request tracking."""
        correlation_id = request.headers.get('X-Correlation-ID') or new_correlation_id()

        correlation_context.set_correlation_id(correlation_id)
        g.correlation_id = correlation_id

    @app.after_request
    def add_correlation_header(response):
        """Add correlation ID to response headers."""
        if hasattr(g, 'correlation_id'):
            response.headers['X-Correlation-ID'] = g.correlation_id
        return response

    @app.teardown_request
    def clear_correlation_id(exc):
        correlation_context.clear()

    @app.errorhandler(AppError)
    def handle_app_error(error):
        correlation_id = getattr(g, 'correlation_id', 'unknown')
        if error.status_code >= 500:
            logger.error(f"[{correlation_id}] Application error: {error.message} {error.details}")
        else:
            logger.warning(f"[{correlation_id}] {error.code}: {error.message}")
        return app_error_response(error)

    @app.errorhandler(404)
    def handle_not_found(error):
        correlation_id = getattr(g, 'correlation_id', 'unknown')
        logger.warning(f"[{correlation_id}] 404 error for {request.url}")
        return error_response("Resource not found", 404)

    @app.errorhandler(405)
    def handle_method_not_allowed(error):
        correlation_id = getattr(g, 'correlation_id', 'unknown')
        logger.warning(f"[{correlation_id}] 405 error for {request.method} {request.url}")
        return error_response("Method not allowed", 405)

    @app.errorhandler(500)
    def handle_internal_error(error):
        correlation_id = getattr(g, 'correlation_id', 'unknown')
        logger.error(f"[{correlation_id}] Internal server error: {str(error)}")
        return error_response(GENERIC_ERROR_MESSAGE, 500)

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        if isinstance(error, HTTPException):
            return error_response(error.description or error.name, error.code)
        correlation_id = getattr(g, 'correlation_id', 'unknown')
        logger.error(f"[{correlation_id}] Unexpected error: {str(error)}", exc_info=True)
        return error_response(GENERIC_ERROR_MESSAGE, 500)


def log_requests(app):
    """Add request logging middleware."""

    @app.before_request
    def log_request_info():
        correlation_id = getattr(g, 'correlation_id', 'unknown')
        logger.info(f"[{correlation_id}] {request.method} {request.url} - {request.remote_addr}")

    @app.after_request
    def log_response_info(response):
        correlation_id = getattr(g, 'correlation_id', 'unknown')
        logger.info(f"[{correlation_id}] Response: {response.status_code}")
        return response

