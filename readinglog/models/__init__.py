"""
Data models for the reading log core.
"""

from .book import Book, MergePlan, GENRES, STATUSES, SPINE_PALETTE
from .export_row import GoodreadsRow
from .views import (
    LifetimeStats,
    GenreCount,
    AuthorCount,
    AnnualRecap,
    QuotePick,
    FavoritesView,
    GoalConfig,
    GoalProgress,
    ImportResult,
    Dashboard,
)

__all__ = [
    "Book",
    "MergePlan",
    "GENRES",
    "STATUSES",
    "SPINE_PALETTE",
    "GoodreadsRow",
    "LifetimeStats",
    "GenreCount",
    "AuthorCount",
    "AnnualRecap",
    "QuotePick",
    "FavoritesView",
    "GoalConfig",
    "GoalProgress",
    "ImportResult",
    "Dashboard",
]
