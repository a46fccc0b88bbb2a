"""News client for Indian market headlines.

Sources are tried in order:
1. NewsAPI (only when NEWS_API_KEY is set)
2. Google News RSS search
3. Static search links to Indian financial news sites
"""

from typing import Dict, Any, List, Optional
from datetime import datetime, timedelta, timezone
from email.utils import parsedate_to_datetime
from urllib.parse import quote_plus

import requests
from bs4 import BeautifulSoup
from loguru import logger

from src.config import config


FALLBACK_SOURCES = [
    {
        'title': "{symbol} Stock News - Economic Times",
        'description': "Latest market news, analysis and updates on {symbol} from Economic Times",
        'url': "https://economictimes.indiatimes.com/topic/{symbol_lower}",
        'source': "Economic Times",
    },
    {
        'title': "{symbol} Share Price & News - Moneycontrol",
        'description': "Track {symbol} stock price, news, financial results and market updates",
        'url': "https://www.moneycontrol.com/stocks/company_info/stock_news.php?sc_id={symbol}",
        'source': "Moneycontrol",
    },
    {
        'title': "{symbol} Latest News - NSE India",
        'description': "Official announcements and corporate updates for {symbol} on NSE",
        'url': "https://www.nseindia.com/get-quotes/equity?symbol={symbol}",
        'source': "NSE India",
    },
    {
        'title': "{symbol} Market Analysis - Business Standard",
        'description': "Expert analysis and market insights on {symbol} stock performance",
        'url': "https://www.business-standard.com/topic/{symbol_lower}",
        'source': "Business Standard",
    },
    {
        'title': "{symbol} Stock Updates - Mint",
        'description': "Real-time updates and news coverage on {symbol} from Mint",
        'url': "https://www.livemint.com/topic/{symbol_lower}",
        'source': "Mint",
    },
]


class NewsClient:
    """Fetch recent news articles for a stock symbol."""

    def __init__(self, api_key: Optional[str] = None):
        self.api_key = config.news.api_key if api_key is None else api_key
        self.timeout = config.news.timeout_seconds
        self.max_articles = config.news.max_articles

    def get_news(self, symbol: str) -> List[Dict[str, Any]]:
        """Get articles for a symbol, falling back through the sources.

        Args:
            symbol: Upper-case ticker (e.g. 'RELIANCE')

        Returns:
            List of article dictionaries (never empty)
        """
        if self.api_key:
            articles = self._fetch_newsapi(symbol)
            if articles:
                return articles

        articles = self._fetch_google_rss(symbol)
        if articles:
            return articles

        logger.info(f"No live news for {symbol}, returning search links")
        return self.fallback_links(symbol)

    def _fetch_newsapi(self, symbol: str) -> List[Dict[str, Any]]:
        params = {
            'q': f"{symbol} NSE BSE india stock",
            'language': 'en',
            'sortBy': 'publishedAt',
            'pageSize': self.max_articles,
            'apiKey': self.api_key,
        }
        try:
            response = requests.get(config.news.newsapi_url, params=params, timeout=self.timeout)
            if response.status_code != 200:
                logger.error(f"NewsAPI error: {response.status_code}")
                return []

            articles = []
            for article in response.json().get('articles', []):
                if not article.get('title') or not article.get('url'):
                    continue
                articles.append({
                    'title': article['title'],
                    'description': article.get('description') or f"Latest updates on {symbol}",
                    'url': article['url'],
                    'source': (article.get('source') or {}).get('name', 'NewsAPI'),
                    'published_at': article.get('publishedAt'),
                    'image_url': article.get('urlToImage'),
                })
            return articles
        except (requests.RequestException, ValueError) as e:
            logger.error(f"Error fetching NewsAPI articles for {symbol}: {e}")
            return []

    def _fetch_google_rss(self, symbol: str) -> List[Dict[str, Any]]:
        url = (
            f"{config.news.google_news_rss_url}?q={quote_plus(symbol + ' NSE BSE stock India')}"
            "&hl=en-IN&gl=IN&ceid=IN:en"
        )
        try:
            response = requests.get(url, headers={'User-Agent': 'Mozilla/5.0'}, timeout=self.timeout)
            if response.status_code != 200:
                logger.error(f"Google News RSS error: {response.status_code}")
                return []
            return self.parse_rss(response.text, symbol)[:self.max_articles]
        except requests.RequestException as e:
            logger.error(f"Error fetching Google News RSS for {symbol}: {e}")
            return []

    @staticmethod
    def parse_rss(rss_text: str, symbol: str) -> List[Dict[str, Any]]:
        """Parse RSS <item> entries into article dictionaries."""
        soup = BeautifulSoup(rss_text, 'xml')
        articles = []

        for item in soup.find_all('item'):
            title = item.find('title')
            link = item.find('link')
            pub_date = item.find('pubDate')
            source = item.find('source')

            published_at = datetime.now(timezone.utc).isoformat()
            if pub_date and pub_date.get_text(strip=True):
                try:
                    published_at = parsedate_to_datetime(pub_date.get_text(strip=True)).isoformat()
                except (TypeError, ValueError):
                    pass

            articles.append({
                'title': title.get_text(strip=True) if title else f"{symbol} Market Update",
                'description': f"Latest news and analysis on {symbol} from Indian markets",
                'url': link.get_text(strip=True) if link else f"https://www.google.com/search?q={symbol}+stock+news",
                'source': source.get_text(strip=True) if source else 'Google News',
                'published_at': published_at,
                'image_url': None,
            })

        return articles

    @staticmethod
    def fallback_links(symbol: str) -> List[Dict[str, Any]]:
        """Search links to real news sources, one hour apart."""
        now = datetime.now(timezone.utc)
        links = []
        for index, template in enumerate(FALLBACK_SOURCES):
            values = {'symbol': symbol, 'symbol_lower': symbol.lower()}
            links.append({
                'title': template['title'].format(**values),
                'description': template['description'].format(**values),
                'url': template['url'].format(**values),
                'source': template['source'],
                'published_at': (now - timedelta(hours=index)).isoformat(),
                'image_url': None,
            })
        return links
