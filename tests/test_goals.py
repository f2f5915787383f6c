"""Tests for goal progress and the goal-reached latch."""
from datetime import date

import pytest

from readinglog.errors import ConfigError
from readinglog.goals import GoalState, GoalTracker, goal_progress, make_goal_config
from readinglog.models.views import GoalProgress

from .conftest import make_book


def _progress(books_read, pages_read=0, books_target=2, pages_target=999999):
    return GoalProgress(
        year=2024,
        books_read=books_read,
        pages_read=pages_read,
        books_target=books_target,
        pages_target=pages_target,
    )


def test_fires_exactly_once():
    """Test 1 then 2 then 2 books fires only on the second update."""
    fired = []
    tracker = GoalTracker(make_goal_config(2, 999999), on_goal_reached=fired.append)

    results = [tracker.observe(_progress(1)), tracker.observe(_progress(2)), tracker.observe(_progress(2))]

    assert results == [False, True, False]
    assert len(fired) == 1
    assert fired[0].books_read == 2
    assert tracker.state is GoalState.FIRED


def test_starts_unarmed_and_arms_below_target():
    """Test the tracker arms on the first progress below both targets."""
    tracker = GoalTracker(make_goal_config(2, 999999))
    assert tracker.state is GoalState.UNARMED

    tracker.observe(_progress(0))

    assert tracker.state is GoalState.ARMED


def test_page_target_alone_fires():
    """Test meeting only the page target counts."""
    tracker = GoalTracker(make_goal_config(50, 1000))
    tracker.observe(_progress(1, pages_read=400, books_target=50, pages_target=1000))

    assert tracker.observe(_progress(3, pages_read=1200, books_target=50, pages_target=1000))


def test_fired_does_not_rearm_when_progress_drops():
    """Test the latch stays fired for the rest of the session."""
    tracker = GoalTracker(make_goal_config(2, 999999))
    tracker.observe(_progress(2))

    assert tracker.observe(_progress(0)) is False
    assert tracker.observe(_progress(5)) is False
    assert tracker.fired


def test_goal_already_met_on_first_observation_fires():
    """Test a session that opens with the goal met still celebrates once."""
    tracker = GoalTracker(make_goal_config(2, 999999))

    assert tracker.observe(_progress(3)) is True
    assert tracker.observe(_progress(3)) is False


def test_reset_starts_a_new_session():
    """Test reset() allows one more celebration."""
    tracker = GoalTracker(make_goal_config(2, 999999))
    tracker.observe(_progress(2))

    tracker.reset()

    assert tracker.state is GoalState.UNARMED
    assert tracker.observe(_progress(2)) is True


def test_goal_progress_counts_current_year_only(sample_collection):
    """Test progress uses finished books with an end date in the year."""
    progress = goal_progress(sample_collection, 2024, make_goal_config(24, 7500))

    assert progress.books_read == 3
    assert progress.pages_read == 1774
    assert progress.books_remaining == 21
    assert progress.pages_remaining == 7500 - 1774
    assert not progress.is_met


def test_goal_progress_reports_met():
    """Test reaching the book target marks progress as met."""
    books = [make_book("A", end_date=date(2024, 1, 1)), make_book("B", end_date=date(2024, 2, 1))]

    progress = goal_progress(books, 2024, make_goal_config(2, 999999))

    assert progress.is_met
    assert progress.books_remaining == 0


@pytest.mark.parametrize("books_target,pages_target", [(0, 100), (10, -1), (True, 100), ("5", 100)])
def test_goal_config_requires_positive_integers(books_target, pages_target):
    """Test invalid thresholds are rejected."""
    with pytest.raises(ConfigError):
        make_goal_config(books_target, pages_target)
