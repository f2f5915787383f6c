"""
Integrated reading log: Goodreads import -> Collection Store -> Dashboard views

Ties the components together for one session:
1. Parse and map an export into candidates
2. Merge candidates into the owner's collection
3. Compute every view from a fresh snapshot and feed the goal latch
"""

import logging
from datetime import date
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple

from .analytics import annual_recap, favorites, genre_breakdown, lifetime_stats
from .config import Settings
from .goals import GoalTracker, goal_progress
from .models.book import Book
from .models.views import Dashboard, GoalProgress, ImportResult
from .pipeline.mapper import RecordMapper
from .pipeline.merger import ImportMerger
from .stores.base import CollectionStore


class ReadingLog:
    """
    One user session over an injected Collection Store.

    Each (owner, year) gets its own goal tracker, kept until new_session(),
    so a goal is celebrated at most once per session.
    """

    def __init__(
        self,
        store: CollectionStore,
        settings: Optional[Settings] = None,
        mapper: Optional[RecordMapper] = None,
        rng=None,
        on_goal_reached: Optional[Callable[[GoalProgress], None]] = None,
    ):
        self.store = store
        self.settings = settings or Settings()
        self.mapper = mapper or RecordMapper()
        self.merger = ImportMerger(store, dedupe=self.settings.import_dedupe)
        self.rng = rng
        self.goals = self.settings.goal_config()
        self.on_goal_reached = on_goal_reached
        self.goal_trackers: Dict[Tuple[str, int], GoalTracker] = {}
        self.logger = logging.getLogger(self.__class__.__name__)

    def import_goodreads(self, owner: str, text: str) -> ImportResult:
        """Import a Goodreads export held in memory"""
        self.logger.info(f"Starting Goodreads import for {owner}")
        return self.merger.import_text(owner, text, mapper=self.mapper)

    def import_goodreads_file(self, owner: str, csv_path: str) -> ImportResult:
        """Read a Goodreads export from disk and import it"""
        text = Path(csv_path).read_text(encoding='utf-8-sig')
        return self.import_goodreads(owner, text)

    def save_book(self, owner: str, book: Book) -> Book:
        """Create or fully replace one book"""
        return self.store.upsert(owner, [book])[0]

    def snapshot(self, owner: str) -> List[Book]:
        return self.store.query_all(owner)

    def dashboard(self, owner: str, year: Optional[int] = None) -> Dashboard:
        """
        Compute every view for the owner from a single snapshot.

        Args:
            owner: Collection owner
            year: Recap and goal year (defaults to the current year)
        """
        year = year or date.today().year
        books = self.snapshot(owner)

        progress = goal_progress(books, year, self.goals)
        fired = self.goal_tracker(owner, year).observe(progress)

        return Dashboard(
            owner=owner,
            year=year,
            lifetime=lifetime_stats(
                books,
                recent_count=self.settings.recent_books_count,
                top_count=self.settings.top_rated_count,
            ),
            genres=tuple(genre_breakdown(books)),
            recap=annual_recap(books, year),
            favorites=favorites(books, rng=self.rng),
            goal_progress=progress,
            goal_reached_now=fired,
        )

    def goal_tracker(self, owner: str, year: int) -> GoalTracker:
        """Tracker for one owner's goal in one year, created on first use"""
        key = (owner, year)
        if key not in self.goal_trackers:
            self.goal_trackers[key] = GoalTracker(self.goals, on_goal_reached=self.on_goal_reached)
        return self.goal_trackers[key]

    def new_session(self) -> None:
        self.goal_trackers.clear()
