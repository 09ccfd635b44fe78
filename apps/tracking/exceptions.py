"""
HTTP-level error handling for the tracking endpoint.

Every failure leaves the endpoint as ``{'error': <message>}``. DRF's own
exceptions are rewritten into that shape; anything DRF does not handle is
logged and answered with a generic 500.
"""
import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = 'Server error'


def _error_message(detail) -> str:
    """Flatten a DRF error detail (str, list or dict) into one message."""
    if isinstance(detail, dict):
        if not detail:
            return 'Invalid request'
        field, value = next(iter(detail.items()))
        message = _error_message(value)
        return message if field == 'non_field_errors' else f"{field}: {message}"
    if isinstance(detail, (list, tuple)):
        return _error_message(detail[0]) if detail else 'Invalid request'
    return str(detail)


def tracking_exception_handler(exc, context):
    """Exception handler for the tracking view."""
    response = exception_handler(exc, context)

    if response is None:
        view = context.get('view')
        logger.error(
            "Server error in %s",
            view.__class__.__name__ if view else 'tracking',
            exc_info=exc,
        )
        return Response(
            {'error': SERVER_ERROR_MESSAGE},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    response.data = {'error': _error_message(getattr(exc, 'detail', response.data))}
    return response
