"""Dashboard API models."""

from .user import User
from .watchlist import Watchlist, WatchlistItem
from .snapshot import StockSnapshot

__all__ = [
    'User',
    'Watchlist',
    'WatchlistItem',
    'StockSnapshot',
]
