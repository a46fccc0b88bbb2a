"""Tests for the Yahoo Finance market data client."""

from unittest.mock import patch

import pandas as pd
import pytest

from src.data.market_data import (
    MarketDataClient,
    MarketDataError,
    QuoteNotFoundError,
    alternate_exchange_symbol,
    format_indian_symbol,
    history_to_records,
    strip_exchange_suffix,
)


class FakeTicker:
    """yfinance.Ticker stand-in driven by a symbol -> info (or exception) map."""

    def __init__(self, symbol, infos, history=None):
        self.symbol = symbol
        self._infos = infos
        self._history = history

    @property
    def info(self):
        value = self._infos.get(self.symbol, {})
        if isinstance(value, Exception):
            raise value
        return value

    def history(self, start=None, end=None, interval=None):
        return self._history


def patch_ticker(infos, history=None):
    calls = []

    def factory(symbol):
        calls.append(symbol)
        return FakeTicker(symbol, infos, history)

    return patch('src.data.market_data.yf.Ticker', side_effect=factory), calls


class TestSymbolFormatting:
    def test_appends_nse_suffix(self):
        assert format_indian_symbol('reliance') == 'RELIANCE.NS'

    def test_keeps_existing_suffix(self):
        assert format_indian_symbol('tcs.bo') == 'TCS.BO'
        assert format_indian_symbol(' infy.ns ') == 'INFY.NS'

    def test_strip_suffix(self):
        assert strip_exchange_suffix('HDFCBANK.NS') == 'HDFCBANK'
        assert strip_exchange_suffix('500180.BO') == '500180'
        assert strip_exchange_suffix('itc') == 'ITC'

    def test_alternate_exchange(self):
        assert alternate_exchange_symbol('SBIN.NS') == 'SBIN.BO'
        assert alternate_exchange_symbol('SBIN.BO') is None


class TestGetQuote:
    def test_formats_quote(self):
        infos = {
            'RELIANCE.NS': {
                'symbol': 'RELIANCE.NS',
                'longName': 'Reliance Industries Limited',
                'regularMarketPrice': 2950.5,
                'regularMarketPreviousClose': 2900.0,
                'regularMarketVolume': 1200000,
                'trailingPE': 28.3,
                'fullExchangeName': 'NSE',
            }
        }
        patcher, calls = patch_ticker(infos)
        with patcher:
            quote = MarketDataClient().get_quote('reliance')

        assert calls == ['RELIANCE.NS']
        assert quote['symbol'] == 'RELIANCE.NS'
        assert quote['name'] == 'Reliance Industries Limited'
        assert quote['price'] == 2950.5
        assert quote['change'] == pytest.approx(50.5)
        assert quote['change_percent'] == pytest.approx(50.5 / 2900.0 * 100)
        assert quote['volume'] == 1200000
        assert quote['pe'] == 28.3
        assert quote['exchange'] == 'NSE'
        assert quote['currency'] == 'INR'

    def test_falls_back_to_current_price(self):
        infos = {'TCS.NS': {'currentPrice': 3500.0}}
        patcher, _ = patch_ticker(infos)
        with patcher:
            quote = MarketDataClient().get_quote('TCS')
        assert quote['price'] == 3500.0

    def test_retries_on_bse_when_nse_not_found(self):
        infos = {
            'SUZLON.NS': {},
            'SUZLON.BO': {'regularMarketPrice': 52.1},
        }
        patcher, calls = patch_ticker(infos)
        with patcher:
            quote = MarketDataClient().get_quote('suzlon')

        assert calls == ['SUZLON.NS', 'SUZLON.BO']
        assert quote['symbol'] == 'SUZLON.BO'
        assert quote['exchange'] == 'BSE'

    def test_not_found_on_both_exchanges(self):
        infos = {
            'NOPE.NS': Exception('HTTP Error 404: Not Found'),
            'NOPE.BO': {},
        }
        patcher, calls = patch_ticker(infos)
        with patcher, pytest.raises(QuoteNotFoundError):
            MarketDataClient().get_quote('NOPE')
        assert calls == ['NOPE.NS', 'NOPE.BO']

    def test_bse_symbol_is_not_retried(self):
        patcher, calls = patch_ticker({'XYZ.BO': {}})
        with patcher, pytest.raises(QuoteNotFoundError):
            MarketDataClient().get_quote('XYZ.BO')
        assert calls == ['XYZ.BO']

    def test_provider_failure_is_not_retried(self):
        infos = {'INFY.NS': Exception('Connection reset by peer')}
        patcher, calls = patch_ticker(infos)
        with patcher, pytest.raises(MarketDataError) as excinfo:
            MarketDataClient().get_quote('INFY')

        assert not isinstance(excinfo.value, QuoteNotFoundError)
        assert calls == ['INFY.NS']


class TestHistory:
    def _frame(self):
        index = pd.to_datetime(['2026-10-14', '2026-10-15', '2026-10-16'])
        return pd.DataFrame({
            'Open': [100.0, 102.0, 104.0],
            'High': [103.0, 105.0, 107.0],
            'Low': [99.0, 101.0, 103.0],
            'Close': [102.0, 104.0, 106.0],
            'Volume': [1000, 2000, 3000],
        }, index=index)

    def test_daily_history_lowercases_columns(self):
        patcher, calls = patch_ticker({}, history=self._frame())
        with patcher:
            df = MarketDataClient().get_daily_history('wipro', days=5)

        assert calls == ['WIPRO.NS']
        assert list(df.columns) == ['open', 'high', 'low', 'close', 'volume']

    def test_empty_history_returns_none(self):
        patcher, _ = patch_ticker({}, history=pd.DataFrame())
        with patcher:
            assert MarketDataClient().get_daily_history('WIPRO') is None

    def test_records_are_newest_first(self):
        df = self._frame()
        df.columns = [c.lower() for c in df.columns]
        records = history_to_records(df)

        assert [r['close'] for r in records] == [106.0, 104.0, 102.0]
        assert records[0]['volume'] == 3000
        assert records[0]['date'].startswith('2026-10-16')
