"""
Personal reading log: Goodreads import and reading analytics.

Primary interfaces:
- ReadingLog: Import, save and dashboard views for one session
- parse_table / RecordMapper / ImportMerger: The import pipeline
- CollectionStore: Storage contract and its implementations

Analytics interfaces:
- lifetime_stats, genre_breakdown, annual_recap, favorites
- goal_progress, GoalTracker
"""

from .errors import ReadingLogError, ParseError, BookValidationError, PersistenceError, ConfigError
from .models import Book, GoodreadsRow, GoalConfig, GoalProgress
from .pipeline import parse_table, RecordMapper, ImportMerger, DashboardExporter, create_dashboard_json
from .stores import CollectionStore, InMemoryCollectionStore, JSONFileCollectionStore, S3CollectionStore
from .analytics import lifetime_stats, genre_breakdown, annual_recap, favorites
from .goals import GoalTracker, GoalState, goal_progress, make_goal_config
from .config import Settings
from .integrated_pipeline import ReadingLog

__all__ = [
    # Primary interface
    "ReadingLog",
    "Book",
    "GoodreadsRow",
    "Settings",

    # Import pipeline
    "parse_table",
    "RecordMapper",
    "ImportMerger",
    "DashboardExporter",
    "create_dashboard_json",

    # Storage
    "CollectionStore",
    "InMemoryCollectionStore",
    "JSONFileCollectionStore",
    "S3CollectionStore",

    # Analytics
    "lifetime_stats",
    "genre_breakdown",
    "annual_recap",
    "favorites",
    "goal_progress",
    "GoalTracker",
    "GoalState",
    "GoalConfig",
    "GoalProgress",
    "make_goal_config",

    # Errors
    "ReadingLogError",
    "ParseError",
    "BookValidationError",
    "PersistenceError",
    "ConfigError",
]
