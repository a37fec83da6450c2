"""
API Response Utilities - Standardized error handling and responses
"""

from flask import jsonify
from functools import wraps
import logging

from exceptions import TagboardException

logger = logging.getLogger(__name__)


# API Error Codes
class ErrorCode:
    SUCCESS = "SUCCESS"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    INTERNAL_ERROR = "INTERNAL_ERROR"


def success_response(data=None, message=None, status_code=200):
    """
    Standard success response format for API endpoints
    """
    response = {"code": ErrorCode.SUCCESS, "success": True}

    if data is not None:
        response["data"] = data

    if message:
        response["message"] = message

    return jsonify(response), status_code


def error_response(
    error_code=ErrorCode.INTERNAL_ERROR,
    message=None,
    details=None,
    status_code=400,
    log_error=True,
):
    """
    Standard error response format for API endpoints
    """
    response = {"code": error_code, "success": False}

    if message:
        response["message"] = message

    if details:
        response["details"] = details

    if log_error and error_code == ErrorCode.INTERNAL_ERROR:
        logger.error(f"{error_code}: {message} | Details: {details}")

    return jsonify(response), status_code


def handle_api_errors(f):
    """
    Decorator to standardize error handling for API endpoints
    Automatically catches exceptions and returns consistent error responses
    """

    @wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except TagboardException as e:
            details = {"field": e.field} if getattr(e, "field", None) else None
            return error_response(e.code, message=e.message, details=details, status_code=e.status_code)
        except ValueError as e:
            return error_response(ErrorCode.VALIDATION_ERROR, message=str(e), status_code=400)
        except Exception as e:
            logger.error(f"Unhandled exception in {f.__name__}: {e}", exc_info=True)
            return error_response(
                ErrorCode.INTERNAL_ERROR,
                message="An unexpected error occurred",
                status_code=500,
            )

    return wrapper

