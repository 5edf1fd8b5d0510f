"""
Custom exception handling for the TeamShare backend.
"""
from rest_framework.views import exception_handler
from rest_framework.response import Response
from rest_framework import status
import logging

logger = logging.getLogger(__name__)


def custom_exception_handler(exc, context):
    """
    Custom exception handler for DRF.
    Provides consistent error response format.
    """
    # Service-layer errors carry their own status code
    if isinstance(exc, ServiceError):
        response = Response(status=exc.status_code)
    else:
        # Call REST framework's default exception handler first
        response = exception_handler(exc, context)

    if response is not None:
        # Customize the response data
        custom_data = {
            'success': False,
            'error': {
                'type': exc.__class__.__name__,
                'message': str(exc),
                'code': response.status_code,
            }
        }

        # Add field errors for validation
        if hasattr(exc, 'detail'):
            if isinstance(exc.detail, dict):
                custom_data['error']['details'] = exc.detail
            elif isinstance(exc.detail, list):
                custom_data['error']['details'] = exc.detail

        response.data = custom_data

        # Log errors
        if response.status_code >= 500:
            logger.error(f"Server error: {exc}", exc_info=True)
        elif response.status_code >= 400:
            logger.warning(f"Client error: {exc}")

    return response


class ServiceError(Exception):
    """Base exception for service-layer errors."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "An error occurred"

    def __init__(self, message=None, status_code=None):
        self.message = message or self.default_message
        if status_code:
            self.status_code = status_code
        super().__init__(self.message)


class NotFound(ServiceError):
    """A referenced entity does not exist."""
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Resource not found"


class AlreadyExists(ServiceError):
    """A unique key is already taken."""
    status_code = status.HTTP_409_CONFLICT
    default_message = "Resource already exists"


class InvalidInput(ServiceError):
    """Exception for validation errors."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid input"
