"""
Request logging and correlation middleware.

Every request gets a correlation ID (taken from the ``X-Correlation-ID``
header or freshly generated). The ID is echoed back in the response headers
and carried by ``request.logger``, a LoggerAdapter that views hand to the
service layer so all log lines of one request can be traced together.
"""

import logging
import time
import uuid

CORRELATION_HEADER = 'HTTP_X_CORRELATION_ID'
CORRELATION_RESPONSE_HEADER = 'X-Correlation-ID'

logger = logging.getLogger(__name__)


class CorrelationIdFilter(logging.Filter):
    """Guarantee every record has a ``correlation_id`` for the formatter."""

    def filter(self, record):
        if not hasattr(record, 'correlation_id'):
            record.correlation_id = '-'
        return True


class RequestLogger(logging.LoggerAdapter):
    """LoggerAdapter that stamps the request's correlation ID on each record."""

    def process(self, msg, kwargs):
        extra = kwargs.setdefault('extra', {})
        extra.setdefault('correlation_id', self.extra['correlation_id'])
        return msg, kwargs


def get_request_logger(request):
    """Return the logger attached to the request, or a plain one."""
    return getattr(request, 'logger', None) or RequestLogger(logger, {'correlation_id': '-'})


class RequestLoggingMiddleware:
    """Attach a correlation ID and request logger, log request start/finish."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        correlation_id = request.META.get(CORRELATION_HEADER) or str(uuid.uuid4())
        request.correlation_id = correlation_id
        request.logger = RequestLogger(logger, {'correlation_id': correlation_id})

        started = time.monotonic()
        request.logger.info("Incoming request: %s %s", request.method, request.get_full_path())

        response = self.get_response(request)

        duration_ms = (time.monotonic() - started) * 1000
        user = getattr(request, 'user', None)
        user_label = user.get_username() if user is not None and user.is_authenticated else 'anonymous'
        log_method = request.logger.warning if response.status_code >= 500 else request.logger.info
        log_method(
            "Request completed: %s %s -> %s in %.1fms (user=%s)",
            request.method,
            request.get_full_path(),
            response.status_code,
            duration_ms,
            user_label,
        )

        response[CORRELATION_RESPONSE_HEADER] = correlation_id
        return response
