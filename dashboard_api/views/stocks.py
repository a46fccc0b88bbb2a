"""Stock quote, search and price history views."""

import logging
import time
from rest_framework import status
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import AllowAny

from dashboard_api.services import get_market_data_client

logger = logging.getLogger(__name__)


def parse_int(value, default: int, minimum: int = 0) -> int:
    """Parse a query parameter, falling back to the default when invalid."""
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        return default
    return max(parsed, minimum)


class StockQuoteView(APIView):
    """Live quote for an NSE/BSE symbol.

    The symbol gets a .NS suffix unless it already has one; a not-found NSE
    symbol is retried once on BSE (.BO).
    """

    permission_classes = [AllowAny]

    def get(self, request, symbol):
        from src.data.market_data import MarketDataError, QuoteNotFoundError

        start_time = time.time()
        logger.info(f"StockQuoteView.get called for {symbol}")

        if not symbol.strip():
            return Response({'error': 'Symbol parameter is required'}, status=status.HTTP_400_BAD_REQUEST)

        try:
            MarketDataClient = get_market_data_client()
            quote = MarketDataClient().get_quote(symbol)
        except QuoteNotFoundError as e:
            logger.warning(f"StockQuoteView.get: {e}")
            return Response(
                {'error': f'Stock {symbol.upper()} not found on NSE or BSE'},
                status=status.HTTP_404_NOT_FOUND
            )
        except MarketDataError as e:
            elapsed = time.time() - start_time
            logger.error(f"StockQuoteView.get failed in {elapsed:.2f}s: {e}")
            return Response(
                {'error': 'Failed to fetch stock data', 'details': str(e)},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )

        elapsed = time.time() - start_time
        logger.info(f"StockQuoteView.get completed in {elapsed:.2f}s: {quote['symbol']} @ {quote['price']}")
        return Response(quote)


class StockSearchView(APIView):
    """Search the built-in list of popular NSE/BSE stocks."""

    permission_classes = [AllowAny]

    def get(self, request):
        from src.data.stock_universe import search_stocks

        query = request.GET.get('q', '')
        results = search_stocks(query)
        return Response({'query': query, 'results': results, 'count': len(results)})


class StockHistoryView(APIView):
    """Daily OHLCV history with change over the period."""

    permission_classes = [AllowAny]

    def get(self, request, symbol):
        from src.data.market_data import MarketDataError, history_to_records

        start_time = time.time()
        days = parse_int(request.GET.get('days'), default=30, minimum=1)
        logger.info(f"StockHistoryView.get called for {symbol} ({days} days)")

        try:
            MarketDataClient = get_market_data_client()
            df = MarketDataClient().get_daily_history(symbol, days=days)
        except MarketDataError as e:
            logger.error(f"StockHistoryView.get failed: {e}")
            return Response(
                {'error': 'Failed to fetch historical data', 'details': str(e)},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )

        if df is None:
            return Response(
                {'error': f'No historical data for {symbol.upper()}'},
                status=status.HTTP_404_NOT_FOUND
            )

        history = history_to_records(df)
        current_price = history[0]['close']
        oldest_price = history[-1]['close']
        change = current_price - oldest_price
        change_percent = change / oldest_price * 100 if oldest_price else 0

        elapsed = time.time() - start_time
        logger.info(f"StockHistoryView.get completed in {elapsed:.2f}s: {len(history)} bars")
        return Response({
            'symbol': symbol.upper(),
            'current_price': current_price,
            'oldest_price': oldest_price,
            'change': round(change, 2),
            'change_percent': round(change_percent, 2),
            'days': days,
            'data_points': len(history),
            'history': history,
        })
