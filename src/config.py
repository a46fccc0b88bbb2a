"""Configuration module for the dashboard's market, news and AI clients."""

import os
from pathlib import Path
from dotenv import load_dotenv
from pydantic import BaseModel

# Load environment variables
load_dotenv()

# Base paths
BASE_DIR = Path(__file__).parent.parent
LOGS_DIR = BASE_DIR / "logs"


class GeminiConfig(BaseModel):
    """Google Gemini API configuration."""
    api_key: str = os.getenv("GEMINI_API_KEY", "") or os.getenv("GOOGLE_API_KEY", "")
    model: str = os.getenv("GEMINI_MODEL", "models/gemini-2.5-flash")
    temperature: float = float(os.getenv("GEMINI_TEMPERATURE", "0.4"))


class NewsConfig(BaseModel):
    """News sources configuration."""
    api_key: str = os.getenv("NEWS_API_KEY", "")
    newsapi_url: str = "https://newsapi.org/v2/everything"
    google_news_rss_url: str = "https://news.google.com/rss/search"
    max_articles: int = 8
    timeout_seconds: int = 10


class MarketConfig(BaseModel):
    """Quote provider configuration for Indian exchanges."""
    primary_suffix: str = ".NS"    # NSE
    alternate_suffix: str = ".BO"  # BSE
    currency: str = "INR"
    snapshot_workers: int = int(os.getenv("SNAPSHOT_WORKERS", "5"))


class Config(BaseModel):
    """Main configuration."""
    gemini: GeminiConfig = GeminiConfig()
    news: NewsConfig = NewsConfig()
    market: MarketConfig = MarketConfig()

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Path = LOGS_DIR / "dashboard.log"


# Global config instance
config = Config()


def validate_config() -> list:
    """Return a list of missing settings; empty when everything is set."""
    errors = []

    if not config.gemini.api_key or config.gemini.api_key == "your_gemini_api_key_here":
        errors.append("GEMINI_API_KEY not set in .env")

    if not config.news.api_key:
        errors.append("NEWS_API_KEY not set in .env (falling back to Google News RSS)")

    return errors
