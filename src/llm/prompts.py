"""Prompt templates for the dashboard's AI features (Indian markets, NSE/BSE)."""

import json
from typing import Any, Dict, List, Optional

ANALYST_ROLE = (
    "You are an expert stock market analyst for Indian markets (NSE/BSE). "
    "You give clear, data-driven, actionable insights and always mention risks."
)

JSON_ONLY = "Respond with valid JSON only, no Markdown, matching this schema:"

DEEP_ANALYSIS_SCHEMA = {
    "overall_rating": "BUY/HOLD/SELL",
    "risk_score": "0-10",
    "technical_analysis": {
        "trend": "Bullish/Bearish/Neutral",
        "support": "price level",
        "resistance": "price level",
        "momentum": "description",
    },
    "fundamental_analysis": {
        "valuation": "Overvalued/Fair/Undervalued",
        "financial_health": "Strong/Moderate/Weak",
        "growth_potential": "High/Medium/Low",
    },
    "key_insights": ["insight"],
    "risk_factors": ["risk"],
    "opportunities": ["opportunity"],
    "price_targets": {"short_term": "1-3 months", "medium_term": "6-12 months"},
    "investment_strategy": "paragraph",
    "conclusion": "paragraph",
}

COMPARE_SCHEMA = {
    "summary": "2-3 sentences",
    "rankings": {"best_value": "symbol and why", "best_growth": "symbol and why", "lowest_risk": "symbol and why"},
    "comparison": [{"category": "Valuation/Growth Potential/Risk Level/Market Position", "analysis": "text", "winner": "symbol"}],
    "recommendations": {
        "aggressive_investor": "symbol and why",
        "moderate_investor": "symbol and why",
        "conservative_investor": "symbol and why",
    },
    "final_verdict": "paragraph",
}

PORTFOLIO_SCHEMA = {
    "portfolio_health": {"score": "0-10", "rating": "Excellent/Good/Fair/Poor", "summary": "text"},
    "diversification": {"score": "0-10", "analysis": "text", "suggestions": ["suggestion"]},
    "risk_assessment": {"overall_risk": "Low/Medium/High", "risk_factors": ["factor"], "hedging_strategies": ["strategy"]},
    "rebalancing": {
        "needed": "true/false",
        "recommendations": [{"action": "Reduce/Increase/Hold", "symbol": "symbol", "reason": "text", "target_allocation": "percent"}],
    },
    "add_to_watchlist": [{"symbol": "symbol", "reason": "text", "sector": "sector"}],
    "improvements": ["improvement"],
    "action_plan": "paragraph",
}

RISK_SCHEMA = {
    "overall_risk_score": "0-100 (0 = lowest risk)",
    "risk_level": "Very Low/Low/Moderate/High/Very High",
    "risk_breakdown": {
        name: {"score": "0-100", "assessment": "text"}
        for name in ("volatility_risk", "valuation_risk", "liquidity_risk", "market_risk", "sentiment_risk")
    },
    "key_risks": [{"type": "text", "severity": "Low/Medium/High", "description": "text", "mitigation": "text"}],
    "suitable_for": ["investor type"],
    "not_suitable_for": ["investor type"],
    "risk_mitigation_strategies": ["strategy"],
    "conclusion": "paragraph",
}


def _schema(schema: Dict[str, Any]) -> str:
    return f"{JSON_ONLY}\n{json.dumps(schema, indent=2)}"


def format_stock_data(stock: Dict[str, Any]) -> str:
    """Render the quote fields the prompts rely on."""
    lines = [
        f"Symbol: {stock.get('symbol')}",
        f"Price: ₹{stock.get('price')}",
        f"Change: {stock.get('change')} ({stock.get('change_percent')}%)",
        f"Day Range: ₹{stock.get('day_low')} - ₹{stock.get('day_high')}",
        f"52-Week Range: ₹{stock.get('fifty_two_week_low')} - ₹{stock.get('fifty_two_week_high')}",
        f"Volume: {stock.get('volume')}",
        f"Market Cap: ₹{stock.get('market_cap')}",
        f"P/E Ratio: {stock.get('pe')}",
        f"EPS: {stock.get('eps')}",
    ]
    if stock.get('sector'):
        lines.append(f"Sector: {stock['sector']}")
    return "\n".join(f"- {line}" for line in lines)


def _news_line(news_data: Optional[Dict[str, Any]]) -> str:
    if not news_data:
        return ""
    return f"\nRecent news sentiment: {news_data.get('sentiment')} ({news_data.get('score')}/10)\n"


def _history(messages: Optional[List[Dict[str, Any]]]) -> str:
    if not messages:
        return ""
    rendered = []
    for msg in messages:
        role = 'User' if msg.get('role') == 'user' else 'Assistant'
        rendered.append(f"{role}: {msg.get('content', '')}")
    return "\n".join(rendered)


def build_chat_prompt(message: str, context: Optional[List[Dict[str, Any]]] = None,
                      stock_data: Optional[Dict[str, Any]] = None) -> str:
    prompt = f"{ANALYST_ROLE}\n\nUser question: {message}\n"
    if stock_data:
        prompt += f"\nCurrent stock data:\n{format_stock_data(stock_data)}\n"
    if context:
        prompt += f"\nConversation so far:\n{_history(context)}\n"
    prompt += (
        "\nAnswer covering the data-driven view, risks, entry/exit levels if relevant, "
        "market sentiment and what to watch. Keep it under 300 words."
    )
    return prompt


def build_compare_prompt(stocks: List[Dict[str, Any]]) -> str:
    blocks = "\n\n".join(
        f"STOCK {index}: {stock.get('symbol')}\n{format_stock_data(stock)}"
        for index, stock in enumerate(stocks, start=1)
    )
    return (
        f"{ANALYST_ROLE}\n\nCompare these {len(stocks)} Indian stocks:\n\n{blocks}\n\n"
        f"{_schema(COMPARE_SCHEMA)}"
    )


def build_deep_analysis_prompt(symbol: str, stock_data: Dict[str, Any],
                               news_data: Optional[Dict[str, Any]] = None) -> str:
    return (
        f"{ANALYST_ROLE}\n\nGive a comprehensive investment analysis of {symbol}.\n\n"
        f"Current data:\n{format_stock_data(stock_data)}\n{_news_line(news_data)}\n"
        f"{_schema(DEEP_ANALYSIS_SCHEMA)}"
    )


def build_portfolio_prompt(portfolio: List[Dict[str, Any]], total_value: float,
                           risk_profile: Optional[str] = None,
                           investment_goal: Optional[str] = None) -> str:
    holdings = "\n".join(
        f"- {stock.get('symbol')}: ₹{stock.get('price')} ({stock.get('change_percent')}% change), "
        f"qty {stock.get('quantity') or 1}, market cap ₹{stock.get('market_cap')}, P/E {stock.get('pe')}"
        for stock in portfolio
    )
    return (
        f"You are a portfolio manager for Indian equities.\n\n"
        f"Portfolio (total value ₹{total_value:,.2f}):\n{holdings}\n\n"
        f"Investor profile:\n- Risk tolerance: {risk_profile or 'Moderate'}\n"
        f"- Investment goal: {investment_goal or 'Long-term wealth creation'}\n\n"
        f"{_schema(PORTFOLIO_SCHEMA)}"
    )


def build_risk_prompt(symbol: str, stock_data: Dict[str, Any],
                      news_data: Optional[Dict[str, Any]] = None) -> str:
    return (
        f"You are a risk analyst. Score the investment risk of {symbol} considering "
        f"Indian market volatility.\n\nStock data:\n{format_stock_data(stock_data)}\n"
        f"{_news_line(news_data)}\n{_schema(RISK_SCHEMA)}"
    )


def build_category_analysis_prompt(category: str, stock_details: List[Dict[str, Any]]) -> str:
    blocks = "\n".join(
        f"{s['symbol']}: ₹{s['current_price']} ({s['change_percent']}%), "
        f"1M ₹{s['month_low']}-₹{s['month_high']}, 3M ₹{s['three_month_low']}-₹{s['three_month_high']}, "
        f"52W ₹{s['year_low']}-₹{s['year_high']}, from 52W high {s['distance_from_year_high']}, "
        f"from 52W low {s['distance_from_year_low']}, P/E {s['pe']}, beta {s['beta']}, "
        f"market cap ₹{s['market_cap']}, risk {s['risk_score']} ({s['risk_factors']})"
        for s in stock_details
    )
    return (
        f"{ANALYST_ROLE}\n\nAnalyse this {category} sector watchlist:\n{blocks}\n\n"
        "Cover, with clear headings:\n"
        "1. Sector overview and momentum\n"
        "2. Top performers and best risk-reward\n"
        "3. Underperformers and risk alerts\n"
        "4. Entry/exit points per stock (buy below, sell above, stop loss)\n"
        "5. Portfolio action plan (BUY/HOLD/SELL per stock, rebalancing)\n"
        "6. Key levels and warning signs to monitor\n"
        "Use the numbers above and give specific price targets."
    )


def build_category_chat_prompt(message: str, category: str, analysis: Optional[str] = None,
                               stocks: Optional[List[str]] = None,
                               stock_details: Optional[List[Dict[str, Any]]] = None,
                               conversation_history: Optional[List[Dict[str, Any]]] = None) -> str:
    if stock_details:
        stock_context = "\n".join(
            f"{s.get('symbol')}: ₹{s.get('current_price')} ({s.get('change_percent')}%), "
            f"3M ₹{s.get('three_month_low')}-₹{s.get('three_month_high')}, "
            f"52W ₹{s.get('year_low')}-₹{s.get('year_high')}, P/E {s.get('pe')}, beta {s.get('beta')}, "
            f"risk {s.get('risk_score')} ({s.get('risk_factors')})"
            for s in stock_details
        )
    else:
        stock_context = f"Stocks: {', '.join(stocks or [])}"

    return (
        f"You are an investment advisor helping with a {category} portfolio.\n\n"
        f"Previous analysis:\n{analysis or 'None'}\n\n"
        f"Stock data:\n{stock_context}\n\n"
        f"Conversation history:\n{_history(conversation_history) or 'None'}\n\n"
        f"User question: {message}\n\n"
        "Answer from the analysis and data above, name symbols and price levels, "
        "use bullet points, and say so plainly if the data is insufficient."
    )
