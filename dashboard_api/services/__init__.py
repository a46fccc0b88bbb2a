"""Dashboard services package.

This package provides lazy imports for the market data, news and AI clients
in the src/ directory, adapted for use with Django.

Imports are done lazily to avoid issues during collectstatic at build time.
"""

import logging

logger = logging.getLogger(__name__)


def get_market_data_client():
    """Lazily import MarketDataClient."""
    from src.data.market_data import MarketDataClient
    return MarketDataClient


def get_news_client():
    """Lazily import NewsClient."""
    from src.data.news import NewsClient
    return NewsClient


def get_sentiment_analyzer():
    """Lazily import SentimentAnalyzer."""
    from src.data.sentiment import SentimentAnalyzer
    return SentimentAnalyzer


def get_stock_analyst():
    """Lazily build a StockAnalyst backed by a configured Gemini client.

    Raises:
        LLMNotConfiguredError: no Gemini API key is set
    """
    from src.llm.analyst import StockAnalyst
    logger.debug("Creating StockAnalyst")
    return StockAnalyst()


__all__ = [
    'get_market_data_client',
    'get_news_client',
    'get_sentiment_analyzer',
    'get_stock_analyst',
]
