"""
Error Handlers for LinguaLog

Provides:
- Custom exception classes
- Consistent error response format
- Flask error handlers
"""

from flask import jsonify, request, current_app
from typing import Optional, Dict, Any
from werkzeug.exceptions import HTTPException

from .extensions import db


class LinguaLogError(Exception):
    """Base exception class for LinguaLog."""

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
        response = {
            'success': False,
            'error': self.message,
            'code': self.code,
        }
        if self.details:
            response['details'] = self.details
        return response


class ValidationError(LinguaLogError):
    """Input validation failed."""

    def __init__(self, message: str = 'Validation failed', errors: Dict = None):
        super().__init__(
            message=message,
            code='VALIDATION_ERROR',
            status_code=400,
            details={'errors': errors} if errors else None
        )


class AuthenticationError(LinguaLogError):
    """Bad credentials or token."""

    def __init__(self, message: str = 'Authentication failed'):
        super().__init__(
            message=message,
            code='UNAUTHENTICATED',
            status_code=401
        )


class AuthorizationError(LinguaLogError):
    """Access denied."""

    def __init__(self, message: str = 'Access denied'):
        super().__init__(
            message=message,
            code='UNAUTHORIZED',
            status_code=403
        )


class NotFoundError(LinguaLogError):
    """Resource not found."""

    def __init__(self, message: str = 'Resource not found', resource: str = None):
        super().__init__(
            message=message,
            code='NOT_FOUND',
            status_code=404,
            details={'resource': resource} if resource else None
        )


class ConflictError(LinguaLogError):
    """Resource already exists."""

    def __init__(self, message: str = 'Resource already exists', resource: str = None):
        super().__init__(
            message=message,
            code='CONFLICT',
            status_code=409,
            details={'resource': resource} if resource else None
        )


def error_response(
    message: str,
    code: str = 'ERROR',
    status_code: int = 400,
    details: Dict = None
) -> tuple:
    """Create a standardized error response."""
    response = {
        'success': False,
        'error': message,
        'code': code
    }
    if details:
        response['details'] = details

    return jsonify(response), status_code


def register_error_handlers(app):
    """Register error handlers with Flask app."""

    @app.errorhandler(LinguaLogError)
    def handle_lingualog_error(error):
        db.session.rollback()
        if error.status_code >= 500:
            current_app.logger.error(f"{error.code}: {error.message}")
        else:
            current_app.logger.info(f"{error.code}: {error.message}")
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        if not request.path.startswith('/api/'):
            return error
        codes = {404: 'NOT_FOUND', 405: 'METHOD_NOT_ALLOWED'}
        message = 'Endpoint not found' if error.code == 404 else error.description
        return error_response(message, codes.get(error.code, 'HTTP_ERROR'), error.code)

    @app.errorhandler(Exception)
    def handle_internal_error(error):
        db.session.rollback()
        current_app.logger.exception('Internal server error')
        return error_response(str(error) or 'Internal server error', 'SERVER_ERROR', 500)
