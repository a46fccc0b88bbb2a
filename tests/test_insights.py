"""Tests for rule-based insights and sector detail summaries."""

import pytest

from src.data.insights import build_stock_details, generate_insights


def scored(score):
    return {'title': 't', 'sentiment': {'score': score, 'label': 'neutral', 'confidence': 0.5}}


def test_buy_on_momentum_with_reasonable_pe():
    insights = generate_insights({'price': 100.0, 'change_percent': 3.0, 'volume': 2_000_000, 'pe': 18}, [scored(0.5)])

    assert insights['recommendation'] == 'Buy'
    assert insights['confidence'] == pytest.approx(0.8)
    assert insights['target_price'] == pytest.approx(108.0)
    assert insights['average_sentiment'] == 0.5
    assert 'Sentiment: positive' in insights['key_insights']


def test_sell_on_drop():
    insights = generate_insights({'price': 200.0, 'change_percent': -6.0, 'volume': 100, 'pe': 20}, [])

    assert insights['recommendation'] == 'Sell'
    assert insights['confidence'] == pytest.approx(0.85)
    assert insights['target_price'] == pytest.approx(194.0)


def test_sell_on_expensive_pe():
    insights = generate_insights({'price': 50.0, 'change_percent': 1.0, 'volume': 0, 'pe': 55}, [])
    assert insights['recommendation'] == 'Sell'


def test_hold_with_missing_fields():
    insights = generate_insights({'price': 10.0, 'change_percent': None, 'volume': None, 'pe': None}, [])

    assert insights['recommendation'] == 'Hold'
    assert insights['confidence'] == pytest.approx(0.75)


def test_stock_details_ranges_and_risk():
    details = build_stock_details({
        'symbol': 'ADANIGREEN.NS',
        'price': 100.0,
        'change_percent': 1.234,
        'fifty_two_week_high': 102.0,
        'fifty_two_week_low': 50.0,
        'pe': 80.0,
        'beta': 1.8,
        'market_cap': 1_500_000_000_000,
        'volume': 10,
    })

    assert details['year_high'] == 102.0
    assert details['month_high'] == pytest.approx(110.0)
    assert details['change_percent'] == 1.23
    assert details['risk_score'] == 'High'
    assert 'Overvalued P/E' in details['risk_factors']
    assert 'Near 52-week high' in details['risk_factors']
    assert details['market_cap'] == '150000 Cr'


def test_stock_details_defaults():
    details = build_stock_details({'symbol': 'X.NS', 'price': 100.0})

    assert details['year_high'] == pytest.approx(120.0)
    assert details['year_low'] == pytest.approx(80.0)
    assert details['market_cap'] == 'N/A'
    assert details['risk_score'] == 'Medium'
