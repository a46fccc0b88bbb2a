"""Health check views."""

import logging
from django.contrib.auth import get_user_model
from django.db import connection, DatabaseError
from django.http import JsonResponse
from rest_framework import status
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import AllowAny

logger = logging.getLogger(__name__)


def health_check(request):
    """Health check endpoint for the hosting platform."""
    return JsonResponse({'status': 'healthy', 'service': 'stockkap-api'})


class DatabaseHealthView(APIView):
    """Database connectivity check with a user count."""

    permission_classes = [AllowAny]

    def get(self, request):
        try:
            with connection.cursor() as cursor:
                cursor.execute('SELECT 1')
            user_count = get_user_model().objects.count()
        except DatabaseError as e:
            logger.error(f"Database health check failed: {e}")
            return Response(
                {'status': 'error', 'error': 'Database connection failed', 'details': str(e)},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )

        return Response({
            'status': 'ok',
            'database': connection.vendor,
            'user_count': user_count,
        })
