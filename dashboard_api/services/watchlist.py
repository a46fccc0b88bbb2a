"""Watchlist persistence.

Authenticated users keep their symbols in the database (default watchlist);
anonymous visitors keep a plain list in the Django session. Views pick the
store with get_watchlist_store().
"""

import logging
from typing import List, Dict, Any

from django.db import IntegrityError, transaction

from dashboard_api.models import Watchlist, WatchlistItem
from dashboard_api.models.watchlist import DEFAULT_WATCHLIST_NAME

logger = logging.getLogger(__name__)

SESSION_KEY = 'stockkap-watchlist'


def normalize_symbol(symbol) -> str:
    """Bare upper-case ticker; 'infy.ns' and 'INFY' are the same watchlist entry."""
    from src.data.market_data import strip_exchange_suffix
    return strip_exchange_suffix(str(symbol or ''))


def get_default_watchlist(user) -> Watchlist:
    """Return the user's default watchlist, creating it on first use."""
    watchlist, created = Watchlist.objects.get_or_create(
        user=user,
        is_default=True,
        defaults={'name': DEFAULT_WATCHLIST_NAME},
    )
    if created:
        logger.info(f"Created default watchlist for {user.email}")
    return watchlist


def find_default_watchlist(user):
    """Return the default watchlist or None without creating one."""
    return Watchlist.objects.filter(user=user, is_default=True).first()


def serialize_item(item: WatchlistItem) -> Dict[str, Any]:
    def as_float(value):
        return float(value) if value is not None else None

    return {
        'id': item.id,
        'symbol': item.symbol,
        'added_price': as_float(item.added_price),
        'target_price': as_float(item.target_price),
        'stop_loss': as_float(item.stop_loss),
        'notes': item.notes,
        'category': item.category,
        'created_at': item.created_at.isoformat(),
        'updated_at': item.updated_at.isoformat(),
    }


class DatabaseWatchlistStore:
    """Symbol list backed by the user's default watchlist."""

    persistent = True

    def __init__(self, user):
        self.user = user

    def list(self) -> List[str]:
        watchlist = find_default_watchlist(self.user)
        if watchlist is None:
            return []
        return list(watchlist.items.values_list('symbol', flat=True))

    def add(self, symbol: str) -> List[str]:
        symbol = normalize_symbol(symbol)
        watchlist = get_default_watchlist(self.user)
        WatchlistItem.objects.get_or_create(watchlist=watchlist, symbol=symbol)
        return self.list()

    def remove(self, symbol: str) -> List[str]:
        watchlist = find_default_watchlist(self.user)
        if watchlist is not None:
            watchlist.items.filter(symbol=normalize_symbol(symbol)).delete()
        return self.list()

    def clear(self) -> List[str]:
        watchlist = find_default_watchlist(self.user)
        if watchlist is not None:
            watchlist.items.all().delete()
        return []


class SessionWatchlistStore:
    """Symbol list kept in the anonymous visitor's session, newest first."""

    persistent = False

    def __init__(self, session):
        self.session = session

    def list(self) -> List[str]:
        return list(self.session.get(SESSION_KEY, []))

    def _save(self, symbols: List[str]) -> List[str]:
        self.session[SESSION_KEY] = symbols
        self.session.modified = True
        return symbols

    def add(self, symbol: str) -> List[str]:
        symbol = normalize_symbol(symbol)
        symbols = self.list()
        if symbol in symbols:
            return symbols
        return self._save([symbol] + symbols)

    def remove(self, symbol: str) -> List[str]:
        symbol = normalize_symbol(symbol)
        return self._save([s for s in self.list() if s != symbol])

    def clear(self) -> List[str]:
        return self._save([])


def get_watchlist_store(request):
    """Database store for signed-in users, session store otherwise."""
    if request.user and request.user.is_authenticated:
        return DatabaseWatchlistStore(request.user)
    return SessionWatchlistStore(request.session)


def migrate_symbols(user, symbols: List[str]) -> List[Dict[str, str]]:
    """Copy symbols into the user's default watchlist.

    Returns:
        One {'symbol', 'status'} entry per symbol, status being
        'added', 'already_exists' or 'error'
    """
    watchlist = get_default_watchlist(user)
    results = []

    for raw_symbol in symbols:
        symbol = normalize_symbol(raw_symbol)
        if not symbol:
            results.append({'symbol': str(raw_symbol), 'status': 'error'})
            continue

        if watchlist.items.filter(symbol=symbol).exists():
            results.append({'symbol': symbol, 'status': 'already_exists'})
            continue

        try:
            with transaction.atomic():
                WatchlistItem.objects.create(watchlist=watchlist, symbol=symbol)
            results.append({'symbol': symbol, 'status': 'added'})
        except IntegrityError as e:
            logger.error(f"Error migrating {symbol}: {e}")
            results.append({'symbol': symbol, 'status': 'error'})

    return results
