"""
Error Handlers for LingoStack

Provides:
- Custom exception classes
- Consistent error response format
- Flask error handlers
"""

from flask import jsonify, render_template, request, current_app
from typing import Optional, Dict, Any


class LingoStackError(Exception):
    """Base exception class for LingoStack."""

    def __init__(
        self,
        message: str,
        code: str = 'UNKNOWN_ERROR',
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict:
        """Convert error to dictionary for JSON response."""
        return {
            'success': False,
            'message': self.message,
            'code': self.code,
            'details': self.details
        }


class NotFoundError(LingoStackError):
    """Resource not found."""

    def __init__(self, message: str = 'Resource not found', resource: str = None):
        super().__init__(
            message=message,
            code='NOT_FOUND',
            status_code=404,
            details={'resource': resource} if resource else None
        )


class ValidationError(LingoStackError):
    """Input validation failed."""

    def __init__(self, message: str = 'Validation failed', errors: Dict = None):
        super().__init__(
            message=message,
            code='VALIDATION_ERROR',
            status_code=400,
            details={'errors': errors} if errors else None
        )


class CategoryStorageError(LingoStackError):
    """The category folder could not be read."""

    def __init__(self, message: str = 'Error loading categories', folder: str = None):
        super().__init__(
            message=message,
            code='STORAGE_ERROR',
            status_code=500,
            details={'folder': folder} if folder else None
        )


def _wants_json() -> bool:
    return request.path.startswith('/api/')


def error_response(
    message: str,
    code: str = 'ERROR',
    status_code: int = 400,
    details: Dict = None
) -> tuple:
    """Create a standardized error response."""
    response = {
        'success': False,
        'message': message,
        'code': code
    }
    if details:
        response['details'] = details

    return jsonify(response), status_code


def success_response(data: Any = None, message: str = None) -> dict:
    """Create a standardized success response."""
    response = {'success': True}
    if data is not None:
        response['data'] = data
    if message:
        response['message'] = message
    return response


def register_error_handlers(app):
    """Register error handlers with Flask app."""

    @app.errorhandler(LingoStackError)
    def handle_lingostack_error(error):
        if error.status_code >= 500:
            current_app.logger.error(f"{error.code}: {error.message}")
        else:
            current_app.logger.warning(f"{error.code}: {error.message}")
        if _wants_json():
            return jsonify(error.to_dict()), error.status_code
        return render_template(
            'errors/error.html',
            status_code=error.status_code,
            message=error.message,
        ), error.status_code

    @app.errorhandler(404)
    def handle_not_found(error):
        if _wants_json():
            return error_response('Endpoint not found', 'NOT_FOUND', 404)
        return render_template(
            'errors/error.html',
            status_code=404,
            message=getattr(error, 'description', None) or 'Page not found',
        ), 404

    @app.errorhandler(500)
    def handle_internal_error(error):
        current_app.logger.exception('Internal server error')
        if _wants_json():
            return error_response('Internal server error', 'SERVER_ERROR', 500)
        return render_template(
            'errors/error.html',
            status_code=500,
            message='Internal server error',
        ), 500
