"""
Tagboard - Custom Exceptions and Exception Handlers
"""
import structlog
from flask import jsonify, render_template, request
from werkzeug.exceptions import HTTPException

logger = structlog.get_logger('exceptions')


class TagboardException(Exception):
    """Base exception for Tagboard"""
    status_code = 400

    def __init__(self, message: str, code: str = "TAGBOARD_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)

    def to_dict(self):
        return {
            'error': True,
            'code': self.code,
            'message': self.message
        }


class DatabaseException(TagboardException):
    """Database-related exceptions"""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message, code="DATABASE_ERROR")
        logger.error(f"Database error: {message}")


class ValidationException(TagboardException):
    """Validation-related exceptions"""
    status_code = 422

    def __init__(self, message: str, field: str = None):
        super().__init__(message, code="VALIDATION_ERROR")
        self.field = field
        logger.warning(f"Validation error: {message}")


class NotFoundException(TagboardException):
    """Lookup of a record that does not exist"""
    status_code = 404

    def __init__(self, message: str = "Resource not found"):
        super().__init__(message, code="NOT_FOUND")


class ArticleNotFoundException(NotFoundException):
    def __init__(self, article_id):
        super().__init__(f"Article {article_id} not found")
        self.article_id = article_id


class TagNotFoundException(NotFoundException):
    def __init__(self, name):
        super().__init__(f"No such tag: {name}")
        self.name = name
        logger.warning(f"Unknown tag requested: {name}")


def _wants_json():
    return request.path.startswith('/api') or request.accept_mimetypes.best == 'application/json'


def register_exception_handlers(app):
    """Register exception handlers with Flask app"""

    @app.errorhandler(HTTPException)
    def handle_http_exception(e):
        """Handle HTTP exceptions"""
        if _wants_json():
            return jsonify({
                'error': True,
                'code': e.name.upper().replace(' ', '_'),
                'message': e.description
            }), e.code
        return render_template('error.html', title=e.name, message=e.description), e.code

    @app.errorhandler(TagboardException)
    def handle_tagboard_exception(e):
        """Handle Tagboard custom exceptions"""
        if _wants_json():
            return jsonify(e.to_dict()), e.status_code
        return render_template('error.html', title=e.code.replace('_', ' ').title(), message=e.message), e.status_code

    @app.errorhandler(Exception)
    def handle_generic_exception(e):
        """Handle all other exceptions"""
        logger.error(f"Unhandled exception: {e}", exc_info=True)
        if _wants_json():
            return jsonify({
                'error': True,
                'code': 'INTERNAL_ERROR',
                'message': 'An unexpected error occurred'
            }), 500
        return render_template('error.html', title='Error', message='An unexpected error occurred'), 500
