"""Daily stock snapshots: the scheduled job and the manual per-user sync."""

import logging
import concurrent.futures
from datetime import timedelta
from decimal import Decimal
from typing import Dict, Any, List, Optional

from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction
from django.utils import timezone

from dashboard_api.models import StockSnapshot, WatchlistItem
from dashboard_api.services import get_market_data_client

logger = logging.getLogger(__name__)
User = get_user_model()

RECENT_SNAPSHOTS_PER_USER = 50


def _decimal(value, places: int = 2) -> Optional[Decimal]:
    if value is None:
        return None
    return Decimal(str(round(float(value), places)))


def _int(value) -> Optional[int]:
    if value is None:
        return None
    return int(value)


def snapshot_fields(quote: Dict[str, Any]) -> Dict[str, Any]:
    """Map a quote dictionary to StockSnapshot column values."""
    return {
        'name': quote.get('name') or '',
        'price': _decimal(quote.get('price')),
        'change': _decimal(quote.get('change') or 0),
        'change_percent': _decimal(quote.get('change_percent') or 0),
        'volume': _int(quote.get('volume')),
        'market_cap': _int(quote.get('market_cap')),
        'pe_ratio': _decimal(quote.get('pe')),
    }


def collect_tracked_symbols() -> Dict[str, set]:
    """Map each tracked symbol to the ids of the users tracking it.

    A user tracks a symbol if it is on one of their watchlists or among
    their most recent snapshots.
    """
    tracked: Dict[str, set] = {}

    for user_id, symbol in WatchlistItem.objects.values_list('watchlist__user_id', 'symbol'):
        tracked.setdefault(symbol.upper(), set()).add(user_id)

    for user_id in User.objects.values_list('id', flat=True):
        recent = (
            StockSnapshot.objects.filter(user_id=user_id)
            .order_by('-created_at')
            .values_list('symbol', flat=True)[:RECENT_SNAPSHOTS_PER_USER]
        )
        for symbol in recent:
            tracked.setdefault(symbol.upper(), set()).add(user_id)

    return tracked


def fetch_quotes_concurrently(symbols: List[str], market_client=None,
                              max_workers: Optional[int] = None) -> Dict[str, Dict[str, Any]]:
    """Fetch quotes in a thread pool; each symbol succeeds or fails on its own.

    Returns:
        symbol -> {'quote': ...} on success or {'error': ...} on failure
    """
    from src.config import config

    if market_client is None:
        market_client = get_market_data_client()()
    max_workers = max_workers or config.market.snapshot_workers

    def fetch(symbol):
        try:
            return symbol, {'quote': market_client.get_quote(symbol)}
        except Exception as e:
            logger.error(f"Snapshot quote failed for {symbol}: {e}")
            return symbol, {'error': str(e)}

    if not symbols:
        return {}

    with concurrent.futures.ThreadPoolExecutor(max_workers=max_workers) as executor:
        return dict(executor.map(fetch, symbols))


def run_daily_snapshot(market_client=None, today=None) -> Dict[str, Any]:
    """Snapshot every tracked symbol for every user tracking it.

    Existing (user, symbol, today) rows are left alone and counted as skipped.
    """
    today = today or timezone.localdate()
    tracked = collect_tracked_symbols()
    symbols = sorted(tracked)
    logger.info(f"Daily snapshot for {today}: {len(symbols)} tracked symbols")

    fetched = fetch_quotes_concurrently(symbols, market_client=market_client)
    snapshot_time = timezone.now()

    results = []
    total_saved = 0
    total_skipped = 0

    for symbol in symbols:
        outcome = fetched.get(symbol, {'error': 'not fetched'})
        if 'error' in outcome:
            results.append({'symbol': symbol, 'success': False, 'error': outcome['error']})
            continue

        fields = snapshot_fields(outcome['quote'])
        saved = 0
        skipped = 0
        for user_id in sorted(tracked[symbol]):
            exists = StockSnapshot.objects.filter(
                user_id=user_id, symbol=symbol, snapshot_date=today
            ).exists()
            if exists:
                skipped += 1
                continue
            try:
                with transaction.atomic():
                    StockSnapshot.objects.create(
                        user_id=user_id,
                        symbol=symbol,
                        snapshot_date=today,
                        snapshot_time=snapshot_time,
                        **fields,
                    )
                saved += 1
            except IntegrityError:
                skipped += 1

        logger.info(f"Snapshot for {symbol}: {saved} saved, {skipped} skipped")
        total_saved += saved
        total_skipped += skipped
        results.append({'symbol': symbol, 'success': True, 'saved': saved, 'skipped': skipped})

    successful = sum(1 for result in results if result['success'])
    return {
        'timestamp': snapshot_time.isoformat(),
        'total': len(symbols),
        'successful': successful,
        'failed': len(symbols) - successful,
        'saved': total_saved,
        'skipped': total_skipped,
        'results': results,
    }


def save_user_snapshots(user, symbols: List[str], market_client=None) -> Dict[str, Any]:
    """Replace the user's snapshots for today with fresh quotes.

    Returns:
        {'saved': n, 'failed': n, 'errors': [...], 'snapshots': [...]}
    """
    if market_client is None:
        market_client = get_market_data_client()()

    today = timezone.localdate()
    now = timezone.now()
    symbols = [str(symbol).strip().upper() for symbol in symbols if str(symbol).strip()]

    rows = []
    errors = []
    for symbol in symbols:
        try:
            quote = market_client.get_quote(symbol)
        except Exception as e:
            logger.error(f"Manual snapshot quote failed for {symbol}: {e}")
            errors.append(symbol)
            continue
        rows.append(StockSnapshot(
            user=user,
            symbol=symbol,
            snapshot_date=today,
            snapshot_time=now,
            **snapshot_fields(quote),
        ))

    if rows:
        with transaction.atomic():
            StockSnapshot.objects.filter(
                user=user, snapshot_date=today, symbol__in=[row.symbol for row in rows]
            ).delete()
            StockSnapshot.objects.bulk_create(rows)

    return {
        'saved': len(rows),
        'failed': len(errors),
        'errors': errors,
        'snapshots': [row.to_dict() for row in rows],
    }


def missing_snapshots(user, symbols: List[str]) -> Dict[str, Any]:
    """Which of the symbols have no snapshot for today."""
    today = timezone.localdate()
    symbols = [str(symbol).strip().upper() for symbol in symbols if str(symbol).strip()]
    existing = set(
        StockSnapshot.objects.filter(user=user, snapshot_date=today, symbol__in=symbols)
        .values_list('symbol', flat=True)
    )
    missing = [symbol for symbol in symbols if symbol not in existing]
    return {
        'date': today.isoformat(),
        'total': len(symbols),
        'existing': len(existing),
        'missing': len(missing),
        'missing_symbols': missing,
        'needs_sync': bool(missing),
    }


def snapshot_on(user, symbol: str, days_ago: int = 1) -> Dict[str, Any]:
    """The user's snapshot of a symbol from N days ago, if any."""
    symbol = symbol.strip().upper()
    target_date = timezone.localdate() - timedelta(days=days_ago)
    snapshot = (
        StockSnapshot.objects.filter(user=user, symbol=symbol, snapshot_date=target_date)
        .order_by('-snapshot_time')
        .first()
    )
    if snapshot is None:
        return {'found': False, 'symbol': symbol, 'date': target_date.isoformat(), 'days_ago': days_ago}

    data = snapshot.to_dict()
    data.update({'found': True, 'date': data['snapshot_date'], 'days_ago': days_ago})
    return data


def snapshot_history(user, symbol: str, days: int = 365) -> List[Dict[str, Any]]:
    """The user's snapshots of a symbol over the last N days, oldest first."""
    start = timezone.localdate() - timedelta(days=days)
    snapshots = StockSnapshot.objects.filter(
        user=user, symbol=symbol.strip().upper(), snapshot_date__gte=start
    ).order_by('snapshot_date')
    return [snapshot.to_dict() for snapshot in snapshots]
