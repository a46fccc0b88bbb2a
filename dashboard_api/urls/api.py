"""API URL configuration for dashboard endpoints."""

from django.urls import path
from dashboard_api import views

urlpatterns = [
    # Stocks (specific routes before the <symbol> catch-all)
    path('stocks/search', views.StockSearchView.as_view(), name='api-stock-search'),
    path('stocks/historical', views.HistoricalSnapshotView.as_view(), name='api-stock-historical'),
    path('stocks/snapshot', views.SnapshotSyncView.as_view(), name='api-stock-snapshot'),
    path('stocks/history/<str:symbol>', views.StockHistoryView.as_view(), name='api-stock-history'),
    path('stocks/<str:symbol>', views.StockQuoteView.as_view(), name='api-stock-quote'),

    # Snapshots
    path('snapshots/save', views.SnapshotSyncView.as_view(), name='api-snapshots-save'),
    path('snapshots/<str:symbol>', views.SnapshotHistoryView.as_view(), name='api-snapshot-history'),

    # News and rule-based insights
    path('news/<str:symbol>', views.NewsView.as_view(), name='api-news'),
    path('insights/<str:symbol>', views.InsightsView.as_view(), name='api-insights'),

    # Generative AI
    path('ai/chat', views.ChatView.as_view(), name='api-ai-chat'),
    path('ai/compare', views.CompareView.as_view(), name='api-ai-compare'),
    path('ai/deep-analysis', views.DeepAnalysisView.as_view(), name='api-ai-deep-analysis'),
    path('ai/portfolio-advice', views.PortfolioAdviceView.as_view(), name='api-ai-portfolio-advice'),
    path('ai/risk-score', views.RiskScoreView.as_view(), name='api-ai-risk-score'),

    # Watchlist. Known limitation: lower-case paths such as watchlist/groups always
    # hit the fixed routes below, so an item named GROUPS (or MIGRATE, SYMBOLS, ...)
    # is only reachable through its upper-case path, watchlist/GROUPS.
    path('watchlist', views.WatchlistView.as_view(), name='api-watchlist'),
    path('watchlist/migrate', views.WatchlistMigrateView.as_view(), name='api-watchlist-migrate'),
    path('watchlist/groups', views.WatchlistGroupsView.as_view(), name='api-watchlist-groups'),
    path('watchlist/analyze-category', views.AnalyzeCategoryView.as_view(), name='api-watchlist-analyze-category'),
    path('watchlist/chat-category', views.ChatCategoryView.as_view(), name='api-watchlist-chat-category'),
    path('watchlist/symbols', views.WatchlistSymbolsView.as_view(), name='api-watchlist-symbols'),
    path('watchlist/symbols/<str:symbol>', views.WatchlistSymbolsView.as_view(), name='api-watchlist-symbol'),
    path('watchlist/<str:symbol>', views.WatchlistItemView.as_view(), name='api-watchlist-item'),

    # Daily snapshot (for the platform scheduler)
    path('cron/daily-snapshot', views.DailySnapshotView.as_view(), name='api-cron-daily-snapshot'),

    # Database connectivity
    path('health/db', views.DatabaseHealthView.as_view(), name='api-health-db'),
]
