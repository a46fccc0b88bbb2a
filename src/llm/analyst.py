"""Stock analyst that turns dashboard requests into Gemini calls."""

from typing import Optional, Dict, Any, List
from loguru import logger

from .llm_client import LLMClient
from .prompts import (
    build_chat_prompt,
    build_compare_prompt,
    build_deep_analysis_prompt,
    build_portfolio_prompt,
    build_risk_prompt,
    build_category_analysis_prompt,
    build_category_chat_prompt,
)


def portfolio_value(portfolio: List[Dict[str, Any]]) -> float:
    """Sum of price x quantity; quantity defaults to 1."""
    total = 0.0
    for stock in portfolio:
        price = float(stock.get('price') or 0)
        quantity = float(stock.get('quantity') or 1)
        total += price * quantity
    return round(total, 2)


class StockAnalyst:
    """Builds prompts for each AI feature and relays the model's reply."""

    def __init__(self, llm_client: Optional[LLMClient] = None):
        self.llm_client = llm_client or LLMClient()

    def chat(self, message: str, context: Optional[List[Dict[str, Any]]] = None,
             stock_data: Optional[Dict[str, Any]] = None) -> str:
        logger.info("Gemini chat request")
        return self.llm_client.generate_text(build_chat_prompt(message, context, stock_data))

    def compare(self, stocks: List[Dict[str, Any]]) -> Dict[str, Any]:
        symbols = [stock.get('symbol') for stock in stocks]
        logger.info(f"Gemini comparison for {symbols}")
        return self.llm_client.generate_json(build_compare_prompt(stocks))

    def deep_analysis(self, symbol: str, stock_data: Dict[str, Any],
                      news_data: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        logger.info(f"Gemini deep analysis for {symbol}")
        return self.llm_client.generate_json(build_deep_analysis_prompt(symbol, stock_data, news_data))

    def portfolio_advice(self, portfolio: List[Dict[str, Any]], risk_profile: Optional[str] = None,
                         investment_goal: Optional[str] = None) -> Dict[str, Any]:
        """Ask for portfolio advice.

        Returns:
            Parsed advice with 'total_value' added
        """
        total_value = portfolio_value(portfolio)
        logger.info(f"Gemini portfolio advice for {len(portfolio)} holdings (₹{total_value:,.2f})")
        advice = self.llm_client.generate_json(
            build_portfolio_prompt(portfolio, total_value, risk_profile, investment_goal)
        )
        advice['total_value'] = total_value
        return advice

    def risk_score(self, symbol: str, stock_data: Dict[str, Any],
                   news_data: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        logger.info(f"Gemini risk score for {symbol}")
        return self.llm_client.generate_json(build_risk_prompt(symbol, stock_data, news_data))

    def category_analysis(self, category: str, stock_details: List[Dict[str, Any]]) -> str:
        logger.info(f"Gemini {category} sector analysis for {len(stock_details)} stocks")
        return self.llm_client.generate_text(build_category_analysis_prompt(category, stock_details))

    def category_chat(self, message: str, category: str, **context) -> str:
        logger.info(f"Gemini {category} category chat")
        return self.llm_client.generate_text(build_category_chat_prompt(message, category, **context))
