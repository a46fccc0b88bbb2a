"""Generative AI views backed by Google Gemini.

Each view validates its input, builds a prompt through StockAnalyst and
relays the model's reply. JSON replies that fail to parse come back as
{'raw_text': ...}.
"""

import logging
import math
import time
from django.utils import timezone
from rest_framework import status
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import AllowAny

from dashboard_api.services import get_stock_analyst

logger = logging.getLogger(__name__)


def bad_request(message):
    return Response({'error': message}, status=status.HTTP_400_BAD_REQUEST)


def all_objects(items):
    return all(isinstance(item, dict) for item in items)


def is_number(value):
    """Missing values pass; anything given must parse as a finite number."""
    if value is None or value == '':
        return True
    try:
        number = float(value)
    except (TypeError, ValueError):
        return False
    return math.isfinite(number)


class AIView(APIView):
    """Shared error handling for the AI endpoints."""

    permission_classes = [AllowAny]
    failure_message = 'Failed to get AI response'

    def call_analyst(self, action, respond):
        """Run action(analyst) and wrap the result with respond(result).

        Missing configuration and model failures both map to 500.
        """
        from src.llm.llm_client import LLMError, LLMNotConfiguredError

        name = self.__class__.__name__
        start_time = time.time()
        logger.info(f"{name}.post called")

        try:
            result = action(get_stock_analyst())
        except LLMNotConfiguredError:
            logger.error(f"{name}.post: Gemini API key is not configured")
            return Response(
                {'error': 'AI service not configured'},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )
        except LLMError as e:
            elapsed = time.time() - start_time
            logger.error(f"{name}.post failed in {elapsed:.2f}s: {e}")
            return Response(
                {'error': self.failure_message, 'details': str(e)},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )
        except Exception as e:
            elapsed = time.time() - start_time
            logger.error(f"{name}.post unexpected failure in {elapsed:.2f}s: {e}")
            return Response({'error': self.failure_message}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        elapsed = time.time() - start_time
        logger.info(f"{name}.post completed in {elapsed:.2f}s")
        return Response(respond(result))


class ChatView(AIView):
    """Free-form question about the market or a stock."""

    def post(self, request):
        message = request.data.get('message')
        if not message:
            return bad_request('Message is required')
        context = request.data.get('context')
        if context is not None and not (isinstance(context, list) and all_objects(context)):
            return bad_request('Context must be a list of messages')
        stock_data = request.data.get('stock_data')
        if stock_data is not None and not isinstance(stock_data, dict):
            return bad_request('Stock data must be an object')

        return self.call_analyst(
            lambda analyst: analyst.chat(
                message,
                context=context,
                stock_data=stock_data,
            ),
            lambda text: {'response': text, 'timestamp': timezone.now().isoformat()},
        )


class CompareView(AIView):
    """Side-by-side comparison of two or more stocks."""

    failure_message = 'Failed to compare stocks'

    def post(self, request):
        stocks = request.data.get('stocks')
        if not isinstance(stocks, list) or len(stocks) < 2:
            return bad_request('At least 2 stocks required for comparison')
        if not all_objects(stocks):
            return bad_request('Each stock must be an object with its quote data')

        return self.call_analyst(
            lambda analyst: analyst.compare(stocks),
            lambda comparison: {
                'comparison': comparison,
                'stocks': [stock.get('symbol') for stock in stocks if isinstance(stock, dict)],
                'timestamp': timezone.now().isoformat(),
            },
        )


class DeepAnalysisView(AIView):
    failure_message = 'Failed to generate analysis'

    def post(self, request):
        symbol = request.data.get('symbol')
        stock_data = request.data.get('stock_data')
        if not symbol or not isinstance(stock_data, dict) or not stock_data:
            return bad_request('Symbol and stock data required')

        return self.call_analyst(
            lambda analyst: analyst.deep_analysis(symbol, stock_data, request.data.get('news_data')),
            lambda analysis: {'symbol': symbol, 'analysis': analysis, 'timestamp': timezone.now().isoformat()},
        )


class PortfolioAdviceView(AIView):
    """Portfolio health, diversification and rebalancing advice."""

    failure_message = 'Failed to generate portfolio advice'

    def post(self, request):
        portfolio = request.data.get('portfolio')
        if not isinstance(portfolio, list) or not portfolio:
            return bad_request('Portfolio data required')
        if not all_objects(portfolio):
            return bad_request('Each holding must be an object with its quote data')
        for holding in portfolio:
            if not (is_number(holding.get('price')) and is_number(holding.get('quantity'))):
                return bad_request(f"Invalid price or quantity for {holding.get('symbol') or 'holding'}")

        def respond(advice):
            total_value = advice.pop('total_value')
            return {'advice': advice, 'total_value': total_value, 'timestamp': timezone.now().isoformat()}

        return self.call_analyst(
            lambda analyst: analyst.portfolio_advice(
                portfolio,
                risk_profile=request.data.get('risk_profile'),
                investment_goal=request.data.get('investment_goal'),
            ),
            respond,
        )


class RiskScoreView(AIView):
    failure_message = 'Failed to calculate risk score'

    def post(self, request):
        symbol = request.data.get('symbol')
        stock_data = request.data.get('stock_data')
        if not symbol or not isinstance(stock_data, dict) or not stock_data:
            return bad_request('Symbol and stock data required')

        return self.call_analyst(
            lambda analyst: analyst.risk_score(symbol, stock_data, request.data.get('news_data')),
            lambda risk: {'symbol': symbol, 'risk_analysis': risk, 'timestamp': timezone.now().isoformat()},
        )
