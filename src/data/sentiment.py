"""Keyword-based sentiment scoring for news headlines.

This is a fixed word list, not a model: each positive keyword found in an
article's title/description adds 0.15 to its score and each negative keyword
subtracts 0.15. Scores are clamped to [-1, 1].
"""

from typing import Dict, Any, List

POSITIVE_KEYWORDS = [
    'surge', 'soar', 'rally', 'jump', 'gain', 'rise', 'boost', 'growth', 'profit',
    'beats', 'upgrade', 'bullish', 'strong', 'outperform', 'buy', 'positive',
    'record', 'high', 'optimistic', 'expansion', 'increase', 'success',
]

NEGATIVE_KEYWORDS = [
    'fall', 'drop', 'decline', 'plunge', 'crash', 'loss', 'miss', 'downgrade',
    'bearish', 'weak', 'underperform', 'sell', 'negative', 'risk', 'concern',
    'low', 'pessimistic', 'cut', 'decrease', 'failure', 'slump', 'tumble',
]

KEYWORD_WEIGHT = 0.15
LABEL_THRESHOLD = 0.2


class SentimentAnalyzer:
    """Score article text against the positive/negative keyword lists."""

    def __init__(self, positive_words: List[str] = None, negative_words: List[str] = None):
        self.positive_words = positive_words or POSITIVE_KEYWORDS
        self.negative_words = negative_words or NEGATIVE_KEYWORDS

    def score_text(self, text: str) -> Dict[str, Any]:
        """Score a piece of text.

        Args:
            text: Headline and/or description

        Returns:
            Dictionary with score (-1..1), label and confidence
        """
        text = (text or '').lower()
        score = 0.0
        matches = 0

        for word in self.positive_words:
            if word in text:
                score += KEYWORD_WEIGHT
                matches += 1

        for word in self.negative_words:
            if word in text:
                score -= KEYWORD_WEIGHT
                matches += 1

        score = max(-1.0, min(1.0, round(score, 2)))
        confidence = min(0.95, round(0.6 + matches * 0.1, 2)) if matches > 0 else 0.5

        if score > LABEL_THRESHOLD:
            label = 'positive'
        elif score < -LABEL_THRESHOLD:
            label = 'negative'
        else:
            label = 'neutral'

        return {'score': score, 'label': label, 'confidence': confidence}

    def score_articles(self, articles: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """Attach a 'sentiment' entry to each article."""
        scored = []
        for article in articles:
            text = f"{article.get('title') or ''} {article.get('description') or ''}"
            scored.append({**article, 'sentiment': self.score_text(text)})
        return scored

    @staticmethod
    def average_score(articles: List[Dict[str, Any]]) -> float:
        """Mean sentiment score over scored articles (0 when empty)."""
        if not articles:
            return 0.0
        total = sum((a.get('sentiment') or {}).get('score', 0) for a in articles)
        return total / len(articles)
