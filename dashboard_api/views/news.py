"""News and rule-based insight views."""

import logging
import time
from rest_framework import status
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import AllowAny

from dashboard_api.services import (
    get_market_data_client,
    get_news_client,
    get_sentiment_analyzer,
)

logger = logging.getLogger(__name__)


def scored_news(symbol):
    """Fetch articles for a symbol and attach keyword sentiment to each."""
    NewsClient = get_news_client()
    SentimentAnalyzer = get_sentiment_analyzer()
    articles = NewsClient().get_news(symbol)
    return SentimentAnalyzer().score_articles(articles)


class NewsView(APIView):
    """Recent articles for a stock, each with a sentiment score."""

    permission_classes = [AllowAny]

    def get(self, request, symbol):
        start_time = time.time()
        symbol = symbol.strip().upper()
        logger.info(f"NewsView.get called for {symbol}")

        try:
            articles = scored_news(symbol)
        except Exception as e:
            elapsed = time.time() - start_time
            logger.error(f"NewsView.get failed in {elapsed:.2f}s: {e}")
            return Response(
                {'error': 'Failed to fetch news', 'details': str(e)},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )

        elapsed = time.time() - start_time
        logger.info(f"NewsView.get completed in {elapsed:.2f}s: {len(articles)} articles")
        return Response({'symbol': symbol, 'articles': articles, 'count': len(articles)})


class InsightsView(APIView):
    """Buy/Hold/Sell view from price momentum, P/E and news tone (no AI call)."""

    permission_classes = [AllowAny]

    def get(self, request, symbol):
        from src.data.market_data import MarketDataError
        from src.data.insights import generate_insights

        start_time = time.time()
        symbol = symbol.strip().upper()
        logger.info(f"InsightsView.get called for {symbol}")

        try:
            MarketDataClient = get_market_data_client()
            quote = MarketDataClient().get_quote(symbol)
        except MarketDataError as e:
            logger.warning(f"InsightsView.get: no quote for {symbol}: {e}")
            return Response(
                {'error': 'Failed to fetch stock data for analysis'},
                status=status.HTTP_400_BAD_REQUEST
            )

        try:
            articles = scored_news(symbol)
            insights = generate_insights(quote, articles)
        except Exception as e:
            elapsed = time.time() - start_time
            logger.error(f"InsightsView.get failed in {elapsed:.2f}s: {e}")
            return Response(
                {'error': 'Failed to generate insights', 'details': str(e)},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )

        elapsed = time.time() - start_time
        logger.info(f"InsightsView.get completed in {elapsed:.2f}s: {insights['recommendation']}")
        return Response({'symbol': symbol, 'insights': insights})
