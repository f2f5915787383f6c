"""
Yearly reading goals: progress and the one-shot "goal reached" latch.
"""

import logging
from enum import Enum
from typing import Callable, Optional, Sequence

from .analytics import finished_in_year, total_pages
from .errors import ConfigError
from .models.book import Book
from .models.views import GoalConfig, GoalProgress

DEFAULT_BOOKS_TARGET = 24
DEFAULT_PAGES_TARGET = 7500

logger = logging.getLogger(__name__)


def make_goal_config(books_target: int, pages_target: int) -> GoalConfig:
    """Validated goal thresholds"""
    for name, value in (("books_target", books_target), ("pages_target", pages_target)):
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise ConfigError(f"{name} must be a positive integer, got {value!r}")
    return GoalConfig(books_target=books_target, pages_target=pages_target)


def goal_progress(books: Sequence[Book], year: int, goals: GoalConfig) -> GoalProgress:
    """Books and pages finished in the year, against the configured targets"""
    in_year = finished_in_year(books, year)
    return GoalProgress(
        year=year,
        books_read=len(in_year),
        pages_read=total_pages(in_year),
        books_target=goals.books_target,
        pages_target=goals.pages_target,
    )


class GoalState(Enum):
    UNARMED = "unarmed"
    ARMED = "armed"
    FIRED = "fired"


class GoalTracker:
    """
    Per-session latch that celebrates a reached goal at most once.

    UNARMED  -> ARMED  first progress below both targets
    UNARMED  -> FIRED  first progress already meets a target
    ARMED    -> FIRED  first progress that meets either target
    FIRED is terminal for the session. Nothing is persisted, so a new
    session (reset()) can fire again for a goal celebrated earlier.
    """

    def __init__(self, goals: GoalConfig, on_goal_reached: Optional[Callable[[GoalProgress], None]] = None):
        self.goals = goals
        self.on_goal_reached = on_goal_reached
        self.state = GoalState.UNARMED
        self.logger = logging.getLogger(self.__class__.__name__)

    @property
    def fired(self) -> bool:
        return self.state is GoalState.FIRED

    def observe(self, progress: GoalProgress) -> bool:
        """
        Feed freshly computed progress.

        Returns:
            True only on the call that fires the celebration
        """
        if self.state is GoalState.FIRED:
            return False

        if not progress.is_met:
            if self.state is GoalState.UNARMED:
                self.logger.debug("Goal tracker armed")
            self.state = GoalState.ARMED
            return False

        self.state = GoalState.FIRED
        self.logger.info(
            f"Reading goal reached for {progress.year}: "
            f"{progress.books_read}/{progress.books_target} books, "
            f"{progress.pages_read}/{progress.pages_target} pages"
        )
        if self.on_goal_reached:
            self.on_goal_reached(progress)
        return True

    def reset(self) -> None:
        """Start a new session"""
        self.state = GoalState.UNARMED
