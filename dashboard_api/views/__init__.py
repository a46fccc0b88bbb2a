"""Dashboard API views package."""

from .auth import (
    RegisterView,
    LoginView,
    LogoutView,
    CurrentUserView,
)

from .stocks import StockQuoteView, StockSearchView, StockHistoryView
from .snapshots import SnapshotSyncView, HistoricalSnapshotView, SnapshotHistoryView
from .news import NewsView, InsightsView
from .ai import ChatView, CompareView, DeepAnalysisView, PortfolioAdviceView, RiskScoreView
from .watchlist import (
    WatchlistView,
    WatchlistItemView,
    WatchlistMigrateView,
    WatchlistGroupsView,
    AnalyzeCategoryView,
    ChatCategoryView,
    WatchlistSymbolsView,
)
from .cron import DailySnapshotView
from .health import DatabaseHealthView, health_check

__all__ = [
    # Auth views
    'RegisterView',
    'LoginView',
    'LogoutView',
    'CurrentUserView',
    # Market data views
    'StockQuoteView',
    'StockSearchView',
    'StockHistoryView',
    'SnapshotSyncView',
    'HistoricalSnapshotView',
    'SnapshotHistoryView',
    'NewsView',
    'InsightsView',
    # AI views
    'ChatView',
    'CompareView',
    'DeepAnalysisView',
    'PortfolioAdviceView',
    'RiskScoreView',
    # Watchlist views
    'WatchlistView',
    'WatchlistItemView',
    'WatchlistMigrateView',
    'WatchlistGroupsView',
    'AnalyzeCategoryView',
    'ChatCategoryView',
    'WatchlistSymbolsView',
    # Scheduler and health
    'DailySnapshotView',
    'DatabaseHealthView',
    'health_check',
]
