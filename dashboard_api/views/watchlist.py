"""Watchlist views.

The CRUD, grouping and AI category endpoints work on the signed-in user's
default watchlist. The /symbols endpoints also serve anonymous visitors from
their session.
"""

import logging
import time
from decimal import Decimal, InvalidOperation
from django.db import transaction
from rest_framework import status
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import AllowAny, IsAuthenticated

from dashboard_api.models import WatchlistItem
from dashboard_api.services import get_stock_analyst
from dashboard_api.services.watchlist import (
    SESSION_KEY,
    get_default_watchlist,
    find_default_watchlist,
    get_watchlist_store,
    migrate_symbols,
    normalize_symbol,
    serialize_item,
)

logger = logging.getLogger(__name__)

PRICE_FIELDS = ('added_price', 'target_price', 'stop_loss')
TEXT_FIELDS = ('notes', 'category')
# DecimalField(max_digits=14, decimal_places=2)
MAX_PRICE = Decimal('10') ** 12


def parse_price(value):
    """None/blank stays None; anything else must be a finite number."""
    if value is None or value == '':
        return None
    try:
        price = Decimal(str(value))
        if price.is_finite() and abs(price) < MAX_PRICE:
            return price.quantize(Decimal('0.01'))
    except InvalidOperation:
        pass
    raise ValueError(f"Invalid price: {value}")


def item_fields(data):
    """Pick the editable item fields present in the request body."""
    fields = {}
    for name in PRICE_FIELDS:
        if name in data:
            fields[name] = parse_price(data.get(name))
    for name in TEXT_FIELDS:
        if name in data:
            fields[name] = data.get(name) or ''
    return fields


class WatchlistView(APIView):
    """The user's default watchlist: list, add, clear."""

    permission_classes = [IsAuthenticated]

    def get(self, request):
        start_time = time.time()
        logger.info("WatchlistView.get called")
        try:
            watchlist = get_default_watchlist(request.user)
            items = [serialize_item(item) for item in watchlist.items.all()]
        except Exception as e:
            elapsed = time.time() - start_time
            logger.error(f"WatchlistView.get failed in {elapsed:.2f}s: {e}")
            return Response({'error': 'Failed to fetch watchlist'}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        elapsed = time.time() - start_time
        logger.info(f"WatchlistView.get completed in {elapsed:.2f}s: {len(items)} items")
        return Response({
            'watchlist': {
                'id': watchlist.id,
                'name': watchlist.name,
                'items': items,
            }
        })

    def post(self, request):
        symbol = normalize_symbol(request.data.get('symbol'))
        if not symbol:
            return Response({'error': 'Symbol is required'}, status=status.HTTP_400_BAD_REQUEST)

        try:
            fields = item_fields(request.data)
        except ValueError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        try:
            watchlist = get_default_watchlist(request.user)
            if watchlist.items.filter(symbol=symbol).exists():
                return Response({'error': 'Stock already in watchlist'}, status=status.HTTP_409_CONFLICT)
            item = WatchlistItem.objects.create(watchlist=watchlist, symbol=symbol, **fields)
        except Exception as e:
            logger.error(f"WatchlistView.post failed for {symbol}: {e}")
            return Response({'error': 'Failed to add to watchlist'}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        logger.info(f"Added {symbol} to watchlist of {request.user.email}")
        return Response({'success': True, 'item': serialize_item(item)}, status=status.HTTP_201_CREATED)

    def delete(self, request):
        watchlist = find_default_watchlist(request.user)
        if watchlist is None:
            return Response({'error': 'Watchlist not found'}, status=status.HTTP_404_NOT_FOUND)

        deleted, _ = watchlist.items.all().delete()
        logger.info(f"Cleared {deleted} items from watchlist of {request.user.email}")
        return Response({'success': True, 'message': 'Watchlist cleared'})


class WatchlistItemView(APIView):
    """Update or remove one symbol on the default watchlist."""

    permission_classes = [IsAuthenticated]

    def patch(self, request, symbol):
        symbol = normalize_symbol(symbol)
        try:
            fields = item_fields(request.data)
        except ValueError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        watchlist = find_default_watchlist(request.user)
        item = watchlist.items.filter(symbol=symbol).first() if watchlist else None
        if item is None:
            return Response({'error': 'Stock not found in watchlist'}, status=status.HTTP_404_NOT_FOUND)

        for name, value in fields.items():
            setattr(item, name, value)
        item.save()
        return Response({
            'success': True,
            'message': f'{symbol} updated in watchlist',
            'item': serialize_item(item),
        })

    def delete(self, request, symbol):
        symbol = normalize_symbol(symbol)
        watchlist = find_default_watchlist(request.user)
        if watchlist is None:
            return Response({'error': 'Watchlist not found'}, status=status.HTTP_404_NOT_FOUND)
        deleted, _ = watchlist.items.filter(symbol=symbol).delete()
        if not deleted:
            return Response({'error': 'Stock not found in watchlist'}, status=status.HTTP_404_NOT_FOUND)
        return Response({'success': True, 'message': f'{symbol} removed from watchlist'})


class WatchlistMigrateView(APIView):
    """Copy an anonymous session watchlist into the signed-in user's watchlist."""

    permission_classes = [IsAuthenticated]

    def post(self, request):
        symbols = request.data.get('symbols')
        from_session = symbols is None
        if from_session:
            symbols = request.session.get(SESSION_KEY, [])
        if not isinstance(symbols, list):
            return Response({'error': 'Symbols array is required'}, status=status.HTTP_400_BAD_REQUEST)

        results = migrate_symbols(request.user, symbols)
        if SESSION_KEY in request.session:
            del request.session[SESSION_KEY]

        logger.info(
            f"Migrated {len(results)} symbols for {request.user.email} "
            f"({'session' if from_session else 'request body'})"
        )
        return Response({'success': True, 'message': 'Migration completed', 'results': results})


class WatchlistGroupsView(APIView):
    """Watchlist grouped by sector (GET) and sector auto-assignment (POST)."""

    permission_classes = [IsAuthenticated]

    def get(self, request):
        from src.data.stock_universe import get_category

        watchlist = find_default_watchlist(request.user)
        if watchlist is None:
            return Response({'grouped': {}, 'categories': [], 'total_stocks': 0})

        grouped = {}
        items = list(watchlist.items.all())
        for item in items:
            category = item.category or get_category(item.symbol)
            grouped.setdefault(category, []).append(serialize_item(item))

        return Response({
            'grouped': grouped,
            'categories': sorted(grouped),
            'total_stocks': len(items),
        })

    def post(self, request):
        from src.data.stock_universe import get_category

        watchlist = find_default_watchlist(request.user)
        if watchlist is None:
            return Response({'error': 'Watchlist not found'}, status=status.HTTP_404_NOT_FOUND)

        updated = 0
        with transaction.atomic():
            for item in watchlist.items.all():
                item.category = get_category(item.symbol)
                item.save(update_fields=['category', 'updated_at'])
                updated += 1

        return Response({'success': True, 'message': f'Categorized {updated} stocks', 'updated': updated})


class AnalyzeCategoryView(APIView):
    """AI narrative for one sector of the watchlist, using live quotes."""

    permission_classes = [IsAuthenticated]

    def post(self, request):
        from src.data.insights import build_stock_details
        from src.llm.llm_client import LLMError, LLMNotConfiguredError
        from dashboard_api.services.snapshots import fetch_quotes_concurrently

        start_time = time.time()
        category = request.data.get('category')
        stocks = request.data.get('stocks')
        if not category or not isinstance(stocks, list) or not stocks:
            return Response({'error': 'Category and stocks array required'}, status=status.HTTP_400_BAD_REQUEST)

        symbols = [normalize_symbol(stock.get('symbol') if isinstance(stock, dict) else stock) for stock in stocks]
        symbols = [symbol for symbol in symbols if symbol]
        logger.info(f"AnalyzeCategoryView.post called for {category}: {symbols}")

        try:
            analyst = get_stock_analyst()
        except LLMNotConfiguredError:
            return Response({'error': 'AI service not configured'}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        fetched = fetch_quotes_concurrently(symbols)
        stock_details = [
            build_stock_details(fetched[symbol]['quote'])
            for symbol in symbols if 'quote' in fetched.get(symbol, {})
        ]

        try:
            analysis = analyst.category_analysis(category, stock_details)
        except LLMError as e:
            elapsed = time.time() - start_time
            logger.error(f"AnalyzeCategoryView.post failed in {elapsed:.2f}s: {e}")
            return Response({'error': 'Failed to analyze category'}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        elapsed = time.time() - start_time
        logger.info(f"AnalyzeCategoryView.post completed in {elapsed:.2f}s: {len(stock_details)} stocks priced")
        return Response({
            'category': category,
            'stock_count': len(symbols),
            'analysis': analysis,
            'stocks': symbols,
            'stock_details': stock_details,
        })


class ChatCategoryView(APIView):
    """Follow-up questions about a sector analysis."""

    permission_classes = [IsAuthenticated]

    def post(self, request):
        from src.llm.llm_client import LLMError, LLMNotConfiguredError

        message = request.data.get('message')
        category = request.data.get('category')
        if not message or not category:
            return Response({'error': 'Message and category required'}, status=status.HTTP_400_BAD_REQUEST)

        try:
            response = get_stock_analyst().category_chat(
                message,
                category,
                analysis=request.data.get('analysis'),
                stocks=request.data.get('stocks'),
                stock_details=request.data.get('stock_details'),
                conversation_history=request.data.get('conversation_history'),
            )
        except LLMNotConfiguredError:
            return Response({'error': 'AI service not configured'}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
        except LLMError as e:
            logger.error(f"ChatCategoryView.post failed: {e}")
            return Response({'error': 'Failed to process chat message'}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response({'response': response, 'category': category})


class WatchlistSymbolsView(APIView):
    """Plain symbol list: session-backed when anonymous, database-backed when signed in."""

    permission_classes = [AllowAny]

    def _respond(self, store, symbols):
        return Response({'symbols': symbols, 'persistent': store.persistent})

    def get(self, request):
        store = get_watchlist_store(request)
        return self._respond(store, store.list())

    def post(self, request):
        symbol = normalize_symbol(request.data.get('symbol'))
        if not symbol:
            return Response({'error': 'Symbol is required'}, status=status.HTTP_400_BAD_REQUEST)
        store = get_watchlist_store(request)
        return self._respond(store, store.add(symbol))

    def delete(self, request, symbol=None):
        store = get_watchlist_store(request)
        if symbol is None:
            return self._respond(store, store.clear())
        return self._respond(store, store.remove(symbol))
