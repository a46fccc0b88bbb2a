"""Per-user daily snapshot views."""

import logging
import time
from rest_framework import status
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated

from dashboard_api.services.snapshots import (
    save_user_snapshots,
    missing_snapshots,
    snapshot_on,
    snapshot_history,
)
from dashboard_api.views.stocks import parse_int

logger = logging.getLogger(__name__)


class SnapshotSyncView(APIView):
    """Manual sync of today's snapshots (POST) and a check for missing ones (GET)."""

    permission_classes = [IsAuthenticated]

    def get(self, request):
        symbols = [s for s in request.GET.get('symbols', '').split(',') if s.strip()]
        if not symbols:
            return Response({'error': 'Symbols required'}, status=status.HTTP_400_BAD_REQUEST)

        try:
            return Response(missing_snapshots(request.user, symbols))
        except Exception as e:
            logger.error(f"SnapshotSyncView.get failed: {e}")
            return Response({'error': 'Failed to check snapshots'}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    def post(self, request):
        start_time = time.time()
        logger.info("SnapshotSyncView.post called")

        symbols = request.data.get('symbols')
        if not symbols or not isinstance(symbols, list):
            return Response({'error': 'Symbols array required'}, status=status.HTTP_400_BAD_REQUEST)

        try:
            result = save_user_snapshots(request.user, symbols)
        except Exception as e:
            elapsed = time.time() - start_time
            logger.error(f"SnapshotSyncView.post failed in {elapsed:.2f}s: {e}")
            return Response({'error': 'Failed to save snapshots'}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        elapsed = time.time() - start_time
        logger.info(
            f"SnapshotSyncView.post completed in {elapsed:.2f}s: "
            f"{result['saved']} saved, {result['failed']} failed"
        )
        if not result['saved']:
            return Response(
                {'success': False, 'error': 'No valid stock data found', 'errors': result['errors']},
                status=status.HTTP_400_BAD_REQUEST
            )
        return Response({'success': True, **result})


class HistoricalSnapshotView(APIView):
    """The user's snapshot of a symbol from N days ago."""

    permission_classes = [IsAuthenticated]

    def get(self, request):
        symbol = request.GET.get('symbol', '').strip()
        if not symbol:
            return Response({'error': 'Symbol required'}, status=status.HTTP_400_BAD_REQUEST)

        days_ago = parse_int(request.GET.get('days_ago'), default=1)
        try:
            return Response(snapshot_on(request.user, symbol, days_ago))
        except Exception as e:
            logger.error(f"HistoricalSnapshotView.get failed: {e}")
            return Response(
                {'error': 'Failed to fetch historical data'},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )


class SnapshotHistoryView(APIView):
    """The user's snapshot series for one symbol, oldest first."""

    permission_classes = [IsAuthenticated]

    def get(self, request, symbol):
        days = parse_int(request.GET.get('days'), default=365, minimum=1)
        try:
            data = snapshot_history(request.user, symbol, days)
        except Exception as e:
            logger.error(f"SnapshotHistoryView.get failed: {e}")
            return Response(
                {'error': 'Failed to fetch historical data'},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )
        return Response({'symbol': symbol.upper(), 'days': days, 'count': len(data), 'data': data})
