"""
Error handling helpers.
Provides request correlation IDs and database error translation.
"""
import logging
import threading
import uuid
from typing import Dict

from attendance_api.exceptions.base import DatabaseError

logger = logging.getLogger(__name__)

class CorrelationContext:
    """Thread-local correlation ID context."""

    def __init__(self):
        self._local = threading.local()

    def set_correlation_id(self, correlation_id: str):
        """Set correlation ID for current thread."""
        self._local.correlation_id = correlation_id

    def get_correlation_id(self) -> str:
        """Get correlation ID for current thread."""
        if not hasattr(self._local, 'correlation_id'):
            self._local.correlation_id = new_correlation_id()
        return self._local.correlation_id

    def clear(self):
        """Clear correlation ID."""
        if hasattr(self._local, 'correlation_id'):
            delattr(self._local, 'correlation_id')

def new_correlation_id() -> str:
    return str(uuid.uuid4())[:8]

# Global correlation context
correlation_context = CorrelationContext()

class ErrorHandler:
    """Centralized error handler with context."""

    @staticmethod
    def handle_database_error(e: Exception, operation: str, context: Dict = None) -> DatabaseError:
        """Log a store failure and wrap it in a DatabaseError.

        The raw error is kept on ``details`` for server-side diagnosis only.
        """
        correlation_id = correlation_context.get_correlation_id()
        context = context or {}

        error_msg = f"Database operation '{operation}' failed"
        logger.error(f"[{correlation_id}] {error_msg}: {e}, Context: {context}")

        details = {"operation": operation, "error": str(e), **context}
        if "timeout" in str(e).lower() or "connection" in str(e).lower():
            return DatabaseError("Database unavailable", details=details)
        return DatabaseError(error_msg, details=details)
