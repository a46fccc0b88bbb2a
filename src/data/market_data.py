"""Market data client for Indian equities (NSE/BSE) backed by Yahoo Finance."""

from typing import Dict, List, Optional, Any
from datetime import datetime, timedelta
import pandas as pd
import yfinance as yf
from loguru import logger

from src.config import config


class MarketDataError(Exception):
    """Raised when the quote provider fails for a reason other than not-found."""


class QuoteNotFoundError(MarketDataError):
    """Raised when the quote provider has no data for a symbol."""

    def __init__(self, symbol: str):
        super().__init__(f"Quote not found for {symbol}")
        self.symbol = symbol


_NOT_FOUND_MARKERS = ('404', 'not found', 'no data found', 'delisted')


def format_indian_symbol(symbol: str) -> str:
    """Upper-case a symbol and append the NSE suffix unless an exchange suffix is present.

    Examples:
        'reliance'    -> 'RELIANCE.NS'
        'TCS.BO'      -> 'TCS.BO'
    """
    upper_symbol = symbol.strip().upper()
    if upper_symbol.endswith(config.market.primary_suffix) or upper_symbol.endswith(config.market.alternate_suffix):
        return upper_symbol
    return f"{upper_symbol}{config.market.primary_suffix}"


def strip_exchange_suffix(symbol: str) -> str:
    """Return the bare ticker without .NS/.BO."""
    upper_symbol = symbol.strip().upper()
    for suffix in (config.market.primary_suffix, config.market.alternate_suffix):
        if upper_symbol.endswith(suffix):
            return upper_symbol[:-len(suffix)]
    return upper_symbol


def alternate_exchange_symbol(symbol: str) -> Optional[str]:
    """NSE symbols map to their BSE listing; anything else has no alternate."""
    if symbol.endswith(config.market.primary_suffix):
        return symbol[:-len(config.market.primary_suffix)] + config.market.alternate_suffix
    return None


def _exchange_label(info: Dict[str, Any], yahoo_symbol: str) -> str:
    full_name = info.get('fullExchangeName') or ''
    if 'NSE' in full_name:
        return 'NSE'
    if 'BSE' in full_name:
        return 'BSE'
    if full_name:
        return full_name
    return 'BSE' if yahoo_symbol.endswith(config.market.alternate_suffix) else 'NSE'


class MarketDataClient:
    """Client for fetching quotes and daily history from Yahoo Finance."""

    def get_quote(self, symbol: str) -> Dict[str, Any]:
        """Get a live quote, retrying once on the alternate exchange.

        Args:
            symbol: Ticker with or without exchange suffix (e.g. 'INFY')

        Returns:
            Quote dictionary

        Raises:
            QuoteNotFoundError: symbol unknown on both exchanges
            MarketDataError: provider failure
        """
        yahoo_symbol = format_indian_symbol(symbol)
        logger.info(f"Fetching quote for {yahoo_symbol}")

        try:
            return self._fetch_quote(yahoo_symbol)
        except QuoteNotFoundError:
            alternate = alternate_exchange_symbol(yahoo_symbol)
            if not alternate:
                raise
            logger.warning(f"{yahoo_symbol} not found, retrying on BSE as {alternate}")
            return self._fetch_quote(alternate)

    def _fetch_quote(self, yahoo_symbol: str) -> Dict[str, Any]:
        try:
            info = yf.Ticker(yahoo_symbol).info or {}
        except Exception as e:
            if any(marker in str(e).lower() for marker in _NOT_FOUND_MARKERS):
                raise QuoteNotFoundError(yahoo_symbol) from e
            raise MarketDataError(f"Quote provider failed for {yahoo_symbol}: {e}") from e

        price = info.get('regularMarketPrice')
        if price is None:
            price = info.get('currentPrice')
        if price is None:
            raise QuoteNotFoundError(yahoo_symbol)

        return self._format_quote(info, yahoo_symbol, price)

    def _format_quote(self, info: Dict[str, Any], yahoo_symbol: str, price: float) -> Dict[str, Any]:
        previous_close = info.get('regularMarketPreviousClose') or info.get('previousClose')
        change = info.get('regularMarketChange')
        if change is None and previous_close:
            change = price - previous_close
        change_percent = info.get('regularMarketChangePercent')
        if change_percent is None and previous_close and change is not None:
            change_percent = change / previous_close * 100

        return {
            'symbol': info.get('symbol') or yahoo_symbol,
            'name': info.get('longName') or info.get('shortName'),
            'price': price,
            'change': change,
            'change_percent': change_percent,
            'previous_close': previous_close,
            'open': info.get('regularMarketOpen') or info.get('open'),
            'day_high': info.get('regularMarketDayHigh') or info.get('dayHigh'),
            'day_low': info.get('regularMarketDayLow') or info.get('dayLow'),
            'volume': info.get('regularMarketVolume') or info.get('volume'),
            'market_cap': info.get('marketCap'),
            'pe': info.get('trailingPE'),
            'eps': info.get('trailingEps'),
            'dividend': info.get('dividendYield'),
            'beta': info.get('beta'),
            'price_to_book': info.get('priceToBook'),
            'fifty_two_week_high': info.get('fiftyTwoWeekHigh'),
            'fifty_two_week_low': info.get('fiftyTwoWeekLow'),
            'currency': info.get('currency') or config.market.currency,
            'exchange': _exchange_label(info, yahoo_symbol),
            'market_state': info.get('marketState'),
            'sector': info.get('sector'),
            'industry': info.get('industry'),
            'timestamp': datetime.now().isoformat(),
        }

    def get_daily_history(self, symbol: str, days: int = 30) -> Optional[pd.DataFrame]:
        """Get daily OHLCV bars for the last N days.

        Args:
            symbol: Ticker with or without exchange suffix
            days: Number of calendar days of history

        Returns:
            DataFrame with lowercase open/high/low/close/volume columns, or None
        """
        yahoo_symbol = format_indian_symbol(symbol)
        end = datetime.now()
        start = end - timedelta(days=days)

        try:
            df = yf.Ticker(yahoo_symbol).history(start=start, end=end, interval="1d")
        except Exception as e:
            raise MarketDataError(f"History request failed for {yahoo_symbol}: {e}") from e

        if df is None or df.empty:
            logger.warning(f"No history returned for {yahoo_symbol}")
            return None

        # Normalize column names to lowercase
        df.columns = [c.lower() for c in df.columns]
        logger.debug(f"Got {len(df)} bars from yfinance for {yahoo_symbol}")
        return df


def history_to_records(df: pd.DataFrame) -> List[Dict[str, Any]]:
    """Convert a daily-bar DataFrame to JSON-friendly records, newest first."""
    records = []
    for timestamp, row in df.sort_index(ascending=False).iterrows():
        records.append({
            'date': timestamp.isoformat(),
            'open': round(float(row['open']), 2),
            'high': round(float(row['high']), 2),
            'low': round(float(row['low']), 2),
            'close': round(float(row['close']), 2),
            'volume': int(row['volume']),
        })
    return records
