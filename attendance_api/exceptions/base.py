"""
Custom Exceptions for the Application.
"""

class AppError(Exception):
    """Base exception for all application errors."""
    def __init__(self, message: str, code: str = "INTERNAL_ERROR", status_code: int = 500, details: dict = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}

class ValidationError(AppError):
    """Raised when input validation fails (Pydantic or Business Rule)."""
    def __init__(self, message: str, details: dict = None):
        super().__init__(message, code="VALIDATION_ERROR", status_code=400, details=details)

class ConflictError(AppError):
    """Raised when a write would break a uniqueness rule."""
    def __init__(self, message: str, details: dict = None):
        super().__init__(message, code="CONFLICT", status_code=400, details=details)

class DatabaseError(AppError):
    """Raised when a database operation fails."""
    def __init__(self, message: str, details: dict = None):
        super().__init__(message, code="DATABASE_ERROR", status_code=500, details=details)
