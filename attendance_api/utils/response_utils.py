"""
Response utility functions for standardized API responses.
"""
from typing import Tuple, Dict, Any

GENERIC_ERROR_MESSAGE = "Server error"


def success_response(data: Any, status_code: int = 200) -> Tuple[Any, int]:
    """
    Standard Success Response. The payload is returned as-is.
    """
    return data, status_code


def message_response(message: str, status_code: int = 200, **extra: Any) -> Tuple[Dict[str, Any], int]:
    """
    Success Response carrying a human readable message plus extra fields.
    """
    response = {"message": message}
    response.update(extra)
    return response, status_code


def error_response(message: str, status_code: int = 500) -> Tuple[Dict[str, Any], int]:
    """
    Standard Error Response.
    """
    return {"message": message}, status_code


def app_error_response(error) -> Tuple[Dict[str, Any], int]:
    """
    Error Response for an AppError. Server-side failures keep their detail out
    of the payload.
    """
    if error.status_code >= 500:
        return error_response(GENERIC_ERROR_MESSAGE, error.status_code)
    return error_response(error.message, error.status_code)
