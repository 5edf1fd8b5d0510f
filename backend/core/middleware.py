"""
Custom middleware for the TeamShare backend.
"""
import time
import logging

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware:
    """
    Middleware for logging API requests.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        # Skip non-API requests
        if not request.path.startswith('/api/'):
            return self.get_response(request)

        start_time = time.time()
        user = getattr(request, 'user', None)

        logger.info(
            f"Request: {request.method} {request.path}",
            extra={
                'method': request.method,
                'path': request.path,
                'user': str(user.id) if user is not None and user.is_authenticated else 'anonymous',
            }
        )

        response = self.get_response(request)

        response_time_ms = int((time.time() - start_time) * 1000)
        logger.info(
            f"Response: {response.status_code} ({response_time_ms}ms)",
            extra={
                'status_code': response.status_code,
                'path': request.path,
                'response_time_ms': response_time_ms,
            }
        )

        return response
