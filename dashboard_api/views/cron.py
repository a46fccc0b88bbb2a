"""Scheduled job endpoints, called by the platform scheduler with a shared secret."""

import hmac
import logging
import time
from django.conf import settings
from rest_framework import status
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import AllowAny

from dashboard_api.services.snapshots import run_daily_snapshot

logger = logging.getLogger(__name__)


def has_cron_secret(request) -> bool:
    """True when the request carries 'Authorization: Bearer <CRON_SECRET>'.

    Always False while no secret is configured.
    """
    secret = getattr(settings, 'CRON_SECRET', '')
    if not secret:
        return False
    header = request.headers.get('Authorization', '')
    return hmac.compare_digest(header.encode(), f'Bearer {secret}'.encode())


class DailySnapshotView(APIView):
    """Snapshot every tracked symbol for every user tracking it."""

    authentication_classes = []
    permission_classes = [AllowAny]

    def get(self, request):
        if not has_cron_secret(request):
            logger.warning("DailySnapshotView.get rejected: bad or missing cron secret")
            return Response({'error': 'Unauthorized'}, status=status.HTTP_401_UNAUTHORIZED)

        start_time = time.time()
        logger.info("DailySnapshotView.get called")
        try:
            summary = run_daily_snapshot()
        except Exception as e:
            elapsed = time.time() - start_time
            logger.error(f"DailySnapshotView.get failed in {elapsed:.2f}s: {e}")
            return Response(
                {'error': 'Failed to run daily snapshot', 'details': str(e)},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )

        elapsed = time.time() - start_time
        logger.info(
            f"DailySnapshotView.get completed in {elapsed:.2f}s: "
            f"{summary['successful']}/{summary['total']} symbols, "
            f"{summary['saved']} saved, {summary['skipped']} skipped"
        )
        return Response(summary)
