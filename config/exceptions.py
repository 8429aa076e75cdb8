"""
Project-wide DRF exception handler.

Every error response leaves the API as ``{"error": "<message>"}``. DRF's own
field-level payloads are kept under ``details``. Storage failures
(``DatabaseError``) that escape a view are logged and reported as a generic
500 instead of a Django HTML error page. Model-level ``ValidationError``s
(malformed ids in query filters, for example) become a 400.
"""

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import DatabaseError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from config.middleware import get_request_logger

STORAGE_ERROR_MESSAGE = 'A storage error occurred. The operation was not completed.'


def _first_message(data):
    """Dig the first human readable message out of a DRF error payload."""
    if isinstance(data, dict):
        if 'detail' in data:
            return _first_message(data['detail'])
        for field, value in data.items():
            message = _first_message(value)
            if field == 'non_field_errors':
                return message
            return f"{field}: {message}"
        return 'Invalid request'
    if isinstance(data, (list, tuple)):
        return _first_message(data[0]) if data else 'Invalid request'
    return str(data)


def api_exception_handler(exc, context):
    request = context.get('request')

    if isinstance(exc, DatabaseError):
        get_request_logger(request).exception("Storage failure while handling request")
        return Response(
            {'error': STORAGE_ERROR_MESSAGE},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, DjangoValidationError):
        return Response({'error': '; '.join(exc.messages)}, status=status.HTTP_400_BAD_REQUEST)

    response = exception_handler(exc, context)
    if response is None:
        return None

    data = response.data
    if isinstance(data, dict) and 'error' in data:
        return response

    body = {'error': _first_message(data)}
    if isinstance(data, dict) and set(data) != {'detail'}:
        body['details'] = data
    elif isinstance(data, list):
        body['details'] = data
    response.data = body
    return response
