"""Rule-based stock insights and per-stock detail summaries.

Nothing here calls the AI service; the numbers are simple heuristics over a
quote dictionary produced by MarketDataClient.
"""

from typing import Dict, Any, List
from datetime import datetime

from .sentiment import SentimentAnalyzer

HIGH_VOLUME = 1_000_000
CRORE = 10_000_000


def _sentiment_word(avg_sentiment: float, neutral: str = 'neutral') -> str:
    if avg_sentiment > 0.1:
        return 'positive'
    if avg_sentiment < -0.1:
        return 'negative'
    return neutral


def generate_insights(quote: Dict[str, Any], articles: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Build a Buy/Hold/Sell view from momentum, valuation and news tone.

    Args:
        quote: Quote dictionary (price, change_percent, volume, pe)
        articles: News articles already carrying a 'sentiment' entry

    Returns:
        Insights dictionary
    """
    price = quote.get('price') or 0
    price_change = quote.get('change_percent') or 0
    volume = quote.get('volume') or 0
    pe = quote.get('pe') or 20

    recommendation = 'Hold'
    if price_change > 2 and pe < 25:
        recommendation = 'Buy'
    elif price_change < -3 or pe > 40:
        recommendation = 'Sell'

    confidence = 0.75
    if abs(price_change) > 5:
        confidence += 0.1
    if volume > HIGH_VOLUME:
        confidence += 0.05
    confidence = round(min(0.95, confidence), 2)

    target_price = price * (1 + (0.08 if price_change > 0 else -0.03))
    avg_sentiment = SentimentAnalyzer.average_score(articles)

    if pe < 20:
        valuation = 'undervalued'
    elif pe > 30:
        valuation = 'overvalued'
    else:
        valuation = 'fair'

    return {
        'recommendation': recommendation,
        'confidence': confidence,
        'target_price': round(target_price, 2),
        'key_insights': [
            f"Price momentum: {'positive' if price_change > 0 else 'negative'} ({abs(price_change):.1f}%)",
            f"Volume: {volume:,} - {'high' if volume > HIGH_VOLUME else 'moderate'} interest",
            f"P/E: {pe} - {valuation}",
            f"Sentiment: {_sentiment_word(avg_sentiment)}",
        ],
        'risks': [
            'Market volatility',
            'Regulatory changes',
            'Global economic uncertainty',
            'Currency fluctuation',
            'Competition pressures',
        ],
        'technical_analysis': (
            f"Price at ₹{price} shows {'bullish' if price_change > 0 else 'bearish'} momentum. "
            f"Support: ₹{price * 0.95:.2f}, Resistance: ₹{price * 1.05:.2f}."
        ),
        'news_impact': (
            f"Market sentiment is {_sentiment_word(avg_sentiment, neutral='mixed')} "
            "based on recent news and sector developments."
        ),
        'average_sentiment': round(avg_sentiment, 2),
        'last_updated': datetime.now().isoformat(),
    }


def build_stock_details(quote: Dict[str, Any]) -> Dict[str, Any]:
    """Summarise a quote for sector analysis: ranges, distance from extremes, risk flags.

    Month and three-month ranges are approximated from the current price and
    the 52-week range because only a live quote is available here.
    """
    current_price = quote.get('price') or 0
    year_high = quote.get('fifty_two_week_high') or current_price * 1.2
    year_low = quote.get('fifty_two_week_low') or current_price * 0.8
    three_month_high = year_high * 0.95
    three_month_low = year_low * 1.05
    month_high = current_price * 1.1
    month_low = current_price * 0.9

    distance_from_high = (year_high - current_price) / year_high * 100 if year_high else 0
    distance_from_low = (current_price - year_low) / year_low * 100 if year_low else 0
    volatility_range = (year_high - year_low) / year_low * 100 if year_low else 0

    pe = quote.get('pe') or 0
    beta = quote.get('beta') or 1

    risk_score = 'Medium'
    risk_factors = []
    if beta > 1.5:
        risk_score = 'High'
        risk_factors.append('High volatility (Beta > 1.5)')
    elif beta < 0.8:
        risk_factors.append('Low volatility')

    if pe > 40:
        risk_factors.append('Overvalued P/E')
    elif 0 < pe < 15:
        risk_factors.append('Undervalued P/E')

    if distance_from_high < 5:
        risk_factors.append('Near 52-week high')
    if distance_from_low < 10:
        risk_factors.append('Near 52-week low')

    market_cap = quote.get('market_cap')

    return {
        'symbol': quote.get('symbol'),
        'current_price': round(current_price, 2),
        'change_percent': round(quote.get('change_percent') or 0, 2),
        'month_high': round(month_high, 2),
        'month_low': round(month_low, 2),
        'three_month_high': round(three_month_high, 2),
        'three_month_low': round(three_month_low, 2),
        'year_high': round(year_high, 2),
        'year_low': round(year_low, 2),
        'distance_from_year_high': f"{distance_from_high:.2f}%",
        'distance_from_year_low': f"{distance_from_low:.2f}%",
        'volatility_range': f"{volatility_range:.2f}%",
        'pe': round(pe, 2),
        'beta': round(beta, 2),
        'market_cap': f"{market_cap / CRORE:.0f} Cr" if market_cap else 'N/A',
        'volume': quote.get('volume'),
        'risk_score': risk_score,
        'risk_factors': ', '.join(risk_factors) or 'Normal risk profile',
    }
