import logging

from django.conf import settings
from django.db import DatabaseError, connection
from django.http import JsonResponse
from django.utils import timezone

logger = logging.getLogger(__name__)


def health_check(request):
    """Report service status and database connectivity."""
    payload = {
        'status': 'healthy',
        'timestamp': timezone.now().isoformat(),
        'version': settings.APP_VERSION,
    }

    try:
        with connection.cursor() as cursor:
            cursor.execute('SELECT 1')
    except DatabaseError as e:
        logger.error("Health check failed - database error: %s", e)
        payload.update(status='unhealthy', database='disconnected', error=str(e))
        return JsonResponse(payload, status=503)

    payload['database'] = 'connected'
    return JsonResponse(payload)


def error_404(request, exception):
    """Custom 404 handler."""
    return JsonResponse({
        'error': 'Not found',
        'status': 404
    }, status=404)


def error_500(request):
    """Custom 500 handler."""
    return JsonResponse({
        'error': 'Internal server error',
        'status': 500
    }, status=500)
