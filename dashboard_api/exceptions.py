"""DRF exception handler that keeps every error in the {'error': ...} shape."""

import logging
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


def api_exception_handler(exc, context):
    """Rewrite DRF's {'detail': ...} bodies as {'error': ...}.

    Validation errors keep their field messages under 'details'.
    """
    response = exception_handler(exc, context)
    if response is None:
        return None

    data = response.data
    if isinstance(data, dict) and 'detail' in data:
        body = {'error': str(data['detail'])}
    else:
        body = {'error': 'Invalid request', 'details': data}

    view = context.get('view')
    logger.warning(
        f"{view.__class__.__name__ if view else 'API'} returned {response.status_code}: {body['error']}"
    )
    response.data = body
    return response
